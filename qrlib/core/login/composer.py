# -*- coding: utf-8 -*-
"""对外响应组装"""
from __future__ import annotations

from urllib.parse import quote

from qrlib.api.scheme.request.qr_scheme import CheckQRResponse, CreateQRResponse

from .models import MiniProgramLoginCode, NormalizedStatus, QRCodeTicket

# 与 encodeURIComponent 保持一致的保留字符
_URI_COMPONENT_SAFE = "-_.!~*'()"


def compose_check_response(status: NormalizedStatus) -> CheckQRResponse:
    """只输出派生字段，会话服务内部的 nickname/jumpUrl/cookie 不会出现在响应里"""
    return CheckQRResponse(
        success=True,
        ret=status.ret,
        msg=status.msg,
        code=status.code,
        uin=status.uin,
        ticket=status.ticket,
    )


def compose_qr_create_response(ticket: QRCodeTicket) -> CreateQRResponse:
    return CreateQRResponse(
        success=True,
        qrsig=ticket.qrsig,
        qrcode=ticket.qrcode,
        url=ticket.url,
        isMiniProgram=False,
    )


def compose_mp_create_response(login_code: MiniProgramLoginCode, render_url: str) -> CreateQRResponse:
    return CreateQRResponse(
        success=True,
        qrsig=login_code.code,
        qrcode=f"{render_url}{quote(login_code.url, safe=_URI_COMPONENT_SAFE)}",
        url=login_code.url,
        isMiniProgram=True,
    )
