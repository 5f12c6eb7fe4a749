"""配置测试"""

import pytest

from qrlib.config.settings import GlobalSettings


class TestWebUIToggle:
    """WEBUI_ENABLED 只有字面量 false 才关闭"""

    def test_default_enabled(self, monkeypatch):
        monkeypatch.delenv("WEBUI_ENABLED", raising=False)
        assert GlobalSettings(_env_file=None).webui_enabled is True

    def test_literal_false_disables(self, monkeypatch):
        monkeypatch.setenv("WEBUI_ENABLED", "false")
        assert GlobalSettings(_env_file=None).webui_enabled is False

    @pytest.mark.parametrize("value", ["true", "0", "no", "FALSE", "False", "off", ""])
    def test_other_values_enable(self, monkeypatch, value):
        monkeypatch.setenv("WEBUI_ENABLED", value)
        assert GlobalSettings(_env_file=None).webui_enabled is True


class TestLoginConfig:
    """扫码登录配置"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOGIN__REQUEST_TIMEOUT", raising=False)
        settings = GlobalSettings(_env_file=None)
        assert settings.login.default_preset == "vip"
        assert settings.login.fallback_appid == "1108291530"
        assert settings.login.redacted_presets == ["farm"]
        assert settings.login.expose_upstream_errors is True

    def test_nested_env(self, monkeypatch):
        monkeypatch.setenv("LOGIN__REQUEST_TIMEOUT", "2.5")
        assert GlobalSettings(_env_file=None).login.request_timeout == 2.5
