# -*- coding: utf-8 -*-
"""
状态归一化

把两种登录通道各自的原始状态映射为统一的 NormalizedStatus，纯函数、无 I/O。
小程序登录成功后的授权码由小程序策略在兑换 ticket 后补充。
"""
from __future__ import annotations

from typing import Callable

import httpx

from qrlib.providers.logger import get_logger

from .models import (
    RET_INVALID,
    RET_PENDING,
    RET_SUCCESS,
    MiniProgramPollResult,
    MiniProgramStatus,
    NormalizedStatus,
    QRPollResult,
)

logger = get_logger()

MSG_PENDING = "等待扫码..."
MSG_INVALIDATED = "二维码已失效"
MSG_SUCCESS = "登录成功"
MSG_ERROR = "状态查询错误"
MSG_TIMEOUT = "状态查询超时"


def normalize_mini_program_status(result: MiniProgramPollResult) -> NormalizedStatus:
    try:
        status = MiniProgramStatus(result.status)
    except ValueError:
        # 未知状态按等待处理，绝不当作成功
        logger.warning(f"[状态归一化] 未识别的小程序状态: {result.status!r}，按等待扫码处理")
        return NormalizedStatus(ret=RET_PENDING, msg=MSG_PENDING)

    if status == MiniProgramStatus.WAIT:
        return NormalizedStatus(ret=RET_PENDING, msg=MSG_PENDING)
    if status == MiniProgramStatus.USED:
        return NormalizedStatus(ret=RET_INVALID, msg=MSG_INVALIDATED)
    if status == MiniProgramStatus.OK:
        return NormalizedStatus(
            ret=RET_SUCCESS,
            msg=MSG_SUCCESS,
            ticket=result.ticket or "",
            uin=result.uin or "",
        )
    return NormalizedStatus(ret=RET_INVALID, msg=MSG_ERROR)


def errored_status(msg: str = MSG_ERROR) -> NormalizedStatus:
    return NormalizedStatus(ret=RET_INVALID, msg=msg)


def extract_code_from_jump_url(jump_url: str) -> str:
    """从跳转地址的查询参数中取 code，地址非法时返回空串"""
    try:
        url = httpx.URL(jump_url)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        logger.debug(f"[状态归一化] 跳转地址解析失败: {exc}")
        return ""
    if not url.scheme or not url.host:
        logger.debug(f"[状态归一化] 跳转地址不是绝对地址: {jump_url!r}")
        return ""
    return url.params.get("code", "")


def normalize_qr_status(result: QRPollResult, get_uin: Callable[[str], str]) -> NormalizedStatus:
    ret = str(result.ret) if result.ret is not None else ""
    if not ret:
        logger.warning("[状态归一化] ptlogin 未返回状态码，按等待扫码处理")
        return NormalizedStatus(ret=RET_PENDING, msg=result.msg or MSG_PENDING)

    code = ""
    uin = ""
    if ret == RET_SUCCESS:
        if result.cookie:
            uin = get_uin(result.cookie) or ""
        if result.jump_url:
            code = extract_code_from_jump_url(result.jump_url)

    # QR 通道没有 ticket 概念
    return NormalizedStatus(ret=ret, msg=result.msg or "", code=code, uin=uin, ticket="")
