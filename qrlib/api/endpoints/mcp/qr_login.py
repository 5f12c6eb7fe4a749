# -*- coding: utf-8 -*-
"""扫码登录 MCP 工具注册，返回结构与 HTTP 接口一致"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from qrlib.api.endpoints import main_app
from qrlib.core.login import CredentialValidationError
from qrlib.core.login.service import login_service
from qrlib.providers.logger import get_logger

logger = get_logger()
service = login_service


def _failure(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


@main_app.tool(
    name="qr_presets",
    description="列出可用的扫码登录预设",
    tags={"qrlogin"},
)
async def qr_presets() -> List[Dict[str, Any]]:
    return [item.model_dump(exclude_none=True) for item in service.list_presets()]


@main_app.tool(
    name="qr_create",
    description="创建登录二维码（QR 预设）或小程序登录码（小程序预设）",
    tags={"qrlogin"},
)
async def qr_create(preset: str = "vip") -> Dict[str, Any]:
    try:
        result = await service.create(preset)
        return result.model_dump(exclude_none=True)
    except Exception as exc:
        logger.error(f"[qr_create] failed: {exc}")
        return _failure(service.public_error_message(exc))


@main_app.tool(
    name="qr_check",
    description="查询一次扫码登录状态，ret=0 成功、65 失效、66 等待",
    tags={"qrlogin"},
)
async def qr_check(qrsig: str, preset: str = "vip", appid: Optional[str] = None) -> Dict[str, Any]:
    try:
        result = await service.check(qrsig, preset, appid)
        return result.model_dump()
    except CredentialValidationError as exc:
        return _failure(exc.errmsg)
    except Exception as exc:
        logger.error(f"[qr_check] failed: {exc}")
        return _failure(service.public_error_message(exc))
