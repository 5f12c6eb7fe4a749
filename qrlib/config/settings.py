# -*- coding: utf-8 -*-
"""
简化的配置管理模块
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def safe_print(message: str):
    """Windows safe print that handles emoji characters"""
    try:
        print(message, flush=True)
    except UnicodeEncodeError:
        safe_message = message.encode('ascii', 'ignore').decode('ascii')
        print(safe_message, flush=True)


# === 配置子类 ===

class AppConfig(BaseModel):
    name: str = 'qrlib-api'
    port: int = 3000
    debug: bool = False
    env: str = 'dev'
    version: str = '1.0.0'


class LoggerConfig(BaseModel):
    """日志配置"""
    level: str = 'INFO'
    log_file: Optional[str] = None
    enable_file: bool = False
    enable_console: bool = True
    max_file_size: str = '10 MB'
    retention_days: int = 7


class LoginConfig(BaseModel):
    """扫码登录配置"""
    default_preset: str = 'vip'
    fallback_appid: str = '1108291530'
    # 这些小程序预设的 AppID 不对外展示
    redacted_presets: List[str] = Field(default_factory=lambda: ['farm'])
    request_timeout: float = 10.0  # 上游单次调用超时(秒)
    expose_upstream_errors: bool = True
    qrcode_render_url: str = 'https://api.qrserver.com/v1/create-qr-code/?size=300x300&data='


class GlobalSettings(BaseSettings):
    """全局配置设置"""
    app: AppConfig = Field(default_factory=AppConfig)
    logger: LoggerConfig = Field(default_factory=LoggerConfig)
    login: LoginConfig = Field(default_factory=LoginConfig)

    webui_enabled: bool = True
    static_dir: str = 'public'

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )

    @field_validator("webui_enabled", mode="before")
    @classmethod
    def _parse_webui_enabled(cls, value: Any) -> bool:
        """只有字面量 "false" 才关闭 WebUI，其余取值一律视为开启"""
        if isinstance(value, bool):
            return value
        return str(value) != "false"


def load_config() -> GlobalSettings:
    """
    加载配置的入口函数

    Pydantic Settings 会自动：
    1. 从 .env 文件加载环境变量
    2. 使用 env_nested_delimiter='__' 处理嵌套配置

    环境变量命名规则示例：
    - APP__PORT=3000
    - WEBUI_ENABLED=false
    - LOGIN__REQUEST_TIMEOUT=5
    - LOGIN__EXPOSE_UPSTREAM_ERRORS=false
    """
    try:
        safe_print("🌍 使用 Pydantic Settings 加载配置（自动读取 .env）")
        settings = GlobalSettings()
        safe_print(
            f"✅ 配置加载成功: APP_ENV={settings.app.env}, APP_PORT={settings.app.port}, "
            f"WEBUI_ENABLED={settings.webui_enabled}"
        )
        return settings
    except Exception as e:
        safe_print(f"❌ 加载配置失败: {e}")
        return GlobalSettings()


# 全局配置实例
global_settings = load_config()
