"""
Pytest 配置文件 (conftest.py)

提供假的上游会话服务、核心服务实例与 ASGI 测试客户端。
"""

from collections.abc import AsyncGenerator
from typing import List, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from qrlib.config.settings import LoginConfig
from qrlib.core.login.models import (
    MiniProgramLoginCode,
    MiniProgramPollResult,
    QRCodeTicket,
    QRPollResult,
)
from qrlib.core.login.service import QRLoginService


class FakeQRSession:
    """记录调用次数的 ptlogin 会话服务"""

    PRESETS = {
        "vip": {"name": "QQ会员", "description": "QQ 会员中心扫码登录"},
        "qzone": {"name": "QQ空间", "description": "QQ 空间扫码登录"},
    }

    def __init__(self):
        self.ticket = QRCodeTicket(qrsig="qrsig-abc123", qrcode="data:image/png;base64,AAAA")
        self.poll_result = QRPollResult(ret="66", msg="二维码未失效。")
        self.error: Optional[Exception] = None
        self.create_calls: List[str] = []
        self.check_calls: List[Tuple[str, str]] = []

    async def request_qrcode(self, preset: str) -> QRCodeTicket:
        self.create_calls.append(preset)
        if self.error:
            raise self.error
        return self.ticket

    async def check_status(self, qrsig: str, preset: str) -> QRPollResult:
        self.check_calls.append((qrsig, preset))
        if self.error:
            raise self.error
        return self.poll_result


class FakeMiniProgramSession:
    """记录调用次数的小程序会话服务"""

    PRESETS = {
        "farm": {"name": "QQ农场", "description": "农场", "appid": "1112386029"},
        "miniapp": {"name": "QQ小程序", "description": "通用", "appid": "2000000001"},
        "bare": {"name": "无默认AppID", "description": "未配置 AppID"},
    }

    def __init__(self):
        self.login_code = MiniProgramLoginCode(
            code="mpcode123", url="https://h5.qzone.qq.com/qqq/code/mpcode123?_proxy=1&from=ide"
        )
        self.poll_result = MiniProgramPollResult(status="Wait")
        self.auth_code = "AUTH-CODE-1"
        self.error: Optional[Exception] = None
        self.auth_error: Optional[Exception] = None
        self.create_calls = 0
        self.query_calls: List[str] = []
        self.auth_calls: List[Tuple[str, str]] = []

    async def request_login_code(self) -> MiniProgramLoginCode:
        self.create_calls += 1
        if self.error:
            raise self.error
        return self.login_code

    async def query_status(self, code: str) -> MiniProgramPollResult:
        self.query_calls.append(code)
        if self.error:
            raise self.error
        return self.poll_result

    async def get_auth_code(self, ticket: str, appid: str) -> str:
        self.auth_calls.append((ticket, appid))
        if self.auth_error:
            raise self.auth_error
        return self.auth_code


def fake_get_uin(cookie: str) -> str:
    return "123456" if "uin=" in cookie else ""


@pytest.fixture
def qr_session() -> FakeQRSession:
    return FakeQRSession()


@pytest.fixture
def mp_session() -> FakeMiniProgramSession:
    return FakeMiniProgramSession()


@pytest.fixture
def login_config() -> LoginConfig:
    return LoginConfig(request_timeout=1.0)


@pytest.fixture
def service(qr_session, mp_session, login_config) -> QRLoginService:
    return QRLoginService(
        qr_session=qr_session,
        mp_session=mp_session,
        config=login_config,
        get_uin_func=fake_get_uin,
    )


@pytest.fixture
def api_app(service, monkeypatch):
    """纯 API 模式的 ASGI 应用，端点使用注入了假会话服务的核心服务"""
    from qrlib.api.endpoints.qr import qr_endpoint
    from qrlib.api_service import create_app

    monkeypatch.setattr(qr_endpoint, "service", service)
    return create_app(webui_enabled=False)


@pytest_asyncio.fixture
async def client(api_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=api_app),
        base_url="http://test",
    ) as test_client:
        yield test_client
