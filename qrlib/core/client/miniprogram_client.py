# -*- coding: utf-8 -*-
"""
小程序扫码登录会话

基于 q.qq.com 开发者工具登录接口：获取登录码、查询扫码状态、用 ticket 兑换授权 code
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from qrlib.core.login.exceptions import UpstreamError
from qrlib.core.login.models import MiniProgramLoginCode, MiniProgramPollResult, MiniProgramStatus
from qrlib.providers.logger import get_logger

MP_BASE_URL = "https://q.qq.com"
MP_SCAN_URL = "https://h5.qzone.qq.com/qqq/code/{code}?_proxy=1&from=ide"
CODE_USED = -10003


class MiniProgramLoginSession:
    """小程序登录会话服务"""

    PRESETS: Dict[str, Dict[str, str]] = {
        "farm": {
            "name": "QQ农场",
            "description": "QQ 农场小程序扫码登录",
            "appid": "1112386029",
        },
        "miniapp": {
            "name": "QQ小程序",
            "description": "通用 QQ 小程序扫码登录，可自定义 AppID",
            "appid": "1108291530",
        },
    }

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=MP_BASE_URL, timeout=self.timeout, transport=self.transport)

    @staticmethod
    def _json(response: httpx.Response) -> Dict[str, Any]:
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"小程序登录接口返回非 JSON: {response.text[:100]!r}") from exc
        if not isinstance(data, dict):
            raise UpstreamError("小程序登录接口返回格式错误")
        return data

    async def request_login_code(self) -> MiniProgramLoginCode:
        """获取登录码及扫码地址"""
        async with self._client() as client:
            data = self._json(await client.get("/ide/devtoolAuth/GetLoginCode"))

        code = (data.get("data") or {}).get("code")
        if data.get("code") != 0 or not code:
            raise UpstreamError(f"获取小程序登录码失败: {data.get('message') or data.get('code')}")
        return MiniProgramLoginCode(code=code, url=MP_SCAN_URL.format(code=code))

    async def query_status(self, code: str) -> MiniProgramPollResult:
        """查询扫码状态"""
        async with self._client() as client:
            data = self._json(await client.get(
                "/ide/devtoolAuth/syncScanSateGetTicket", params={"code": code}
            ))

        ret = data.get("code")
        payload = data.get("data") or {}
        if ret == 0:
            if payload.get("ok") != 1:
                return MiniProgramPollResult(status=MiniProgramStatus.WAIT.value)
            return MiniProgramPollResult(
                status=MiniProgramStatus.OK.value,
                ticket=str(payload.get("ticket") or ""),
                uin=str(payload.get("uin") or ""),
            )
        if ret == CODE_USED:
            return MiniProgramPollResult(status=MiniProgramStatus.USED.value)
        self.logger.warning(f"[小程序登录] 状态查询返回异常: {data}")
        return MiniProgramPollResult(status=MiniProgramStatus.ERROR.value)

    async def get_auth_code(self, ticket: str, appid: str) -> str:
        """用 ticket 兑换小程序授权 code"""
        async with self._client() as client:
            data = self._json(await client.post("/ide/login", json={"appid": appid, "ticket": ticket}))

        code = data.get("code")
        if not code or not isinstance(code, str):
            raise UpstreamError(f"获取授权 code 失败: {data.get('message') or data}")
        return code
