# -*- coding: utf-8 -*-
"""ptlogin 二维码登录通道"""
from __future__ import annotations

from typing import Callable, Optional

from qrlib.api.scheme.request.qr_scheme import CreateQRResponse
from qrlib.core.client.cookie_utils import get_uin as default_get_uin
from qrlib.core.login.composer import compose_qr_create_response
from qrlib.core.login.exceptions import UpstreamTimeoutError
from qrlib.core.login.models import LoginModality, NormalizedStatus, PollConfig
from qrlib.core.login.normalizer import MSG_TIMEOUT, errored_status, normalize_qr_status

from .base import LoginStrategy


class QRLoginStrategy(LoginStrategy):
    """QR 通道：qrsig 轮询 ptlogin，成功后从 Cookie/跳转地址派生 uin 与 code"""

    def __init__(
        self,
        session,
        get_uin: Callable[[str], str] = default_get_uin,
        timeout: Optional[float] = None,
    ):
        super().__init__(timeout=timeout)
        self.session = session
        self.get_uin = get_uin

    @property
    def modality(self) -> LoginModality:
        return LoginModality.QR

    async def create(self, preset: str) -> CreateQRResponse:
        ticket = await self.call_upstream("requestQRCode", self.session.request_qrcode(preset))
        self.logger.info(f"预设 {preset} 二维码已生成")
        return compose_qr_create_response(ticket)

    async def poll(self, token: str, config: PollConfig) -> NormalizedStatus:
        try:
            result = await self.call_upstream("checkStatus", self.session.check_status(token, config.preset))
        except UpstreamTimeoutError:
            return errored_status(MSG_TIMEOUT)
        status = normalize_qr_status(result, self.get_uin)
        self.logger.debug(f"预设 {config.preset} 轮询结果 ret={status.ret}")
        return status
