"""扫码登录 MCP 工具测试"""

import pytest
from fastmcp import Client

from qrlib.api.endpoints import main_app
from qrlib.api.endpoints.mcp import qr_login
from qrlib.core.login.models import MiniProgramPollResult


@pytest.fixture
def mcp_service(service, monkeypatch):
    monkeypatch.setattr(qr_login, "service", service)
    return service


class TestQRLoginTools:
    """通过内存传输调用 MCP 工具"""

    @pytest.mark.asyncio
    async def test_check_rejects_malformed_token(self, mcp_service, qr_session):
        async with Client(main_app) as client:
            result = await client.call_tool("qr_check", {"qrsig": "bad token"})
        assert result.structured_content == {"success": False, "message": "Invalid qrsig/code format"}
        assert qr_session.check_calls == []

    @pytest.mark.asyncio
    async def test_check_mini_program_ok(self, mcp_service, mp_session):
        mp_session.poll_result = MiniProgramPollResult(status="OK", ticket="T", uin="1")
        async with Client(main_app) as client:
            result = await client.call_tool("qr_check", {"qrsig": "mpcode123", "preset": "farm"})
        assert result.structured_content == {
            "success": True,
            "ret": "0",
            "msg": "登录成功",
            "code": "AUTH-CODE-1",
            "uin": "1",
            "ticket": "T",
        }

    @pytest.mark.asyncio
    async def test_create_upstream_failure(self, mcp_service, qr_session):
        qr_session.error = RuntimeError("ptlogin unavailable")
        async with Client(main_app) as client:
            result = await client.call_tool("qr_create", {"preset": "vip"})
        assert result.structured_content == {"success": False, "message": "ptlogin unavailable"}
