# -*- coding: utf-8 -*-
"""小程序扫码登录通道"""
from __future__ import annotations

from typing import Optional

from qrlib.api.scheme.request.qr_scheme import CreateQRResponse
from qrlib.core.login.composer import compose_mp_create_response
from qrlib.core.login.exceptions import UpstreamTimeoutError
from qrlib.core.login.models import LoginModality, NormalizedStatus, PollConfig
from qrlib.core.login.normalizer import MSG_TIMEOUT, errored_status, normalize_mini_program_status

from .base import LoginStrategy


class MiniProgramLoginStrategy(LoginStrategy):
    """小程序通道：登录码轮询，确认后用 ticket + AppID 兑换授权 code"""

    def __init__(self, session, render_url: str, timeout: Optional[float] = None):
        super().__init__(timeout=timeout)
        self.session = session
        self.render_url = render_url

    @property
    def modality(self) -> LoginModality:
        return LoginModality.MINI_PROGRAM

    async def create(self, preset: str) -> CreateQRResponse:
        login_code = await self.call_upstream("requestLoginCode", self.session.request_login_code())
        self.logger.info(f"预设 {preset} 登录码已生成")
        return compose_mp_create_response(login_code, self.render_url)

    async def poll(self, token: str, config: PollConfig) -> NormalizedStatus:
        try:
            result = await self.call_upstream("queryStatus", self.session.query_status(token))
        except UpstreamTimeoutError:
            return errored_status(MSG_TIMEOUT)

        status = normalize_mini_program_status(result)
        if status.is_success:
            # 兑换失败直接向上抛出，由接口层返回 500
            code = await self.call_upstream(
                "getAuthCode", self.session.get_auth_code(status.ticket, config.appid)
            )
            status = status.with_code(code)
        self.logger.debug(f"预设 {config.preset} 轮询结果 ret={status.ret}")
        return status
