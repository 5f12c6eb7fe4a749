# -*- coding: utf-8 -*-
"""扫码登录端点 - 仅负责路由注册，将业务逻辑委托给核心扫码登录服务"""

from __future__ import annotations

from pydantic import ValidationError
from starlette.responses import JSONResponse

from qrlib.api.endpoints import main_app
from qrlib.api.scheme import error_codes
from qrlib.api.scheme.request.qr_scheme import CheckQRRequest, CreateQRRequest, ErrorResponse
from qrlib.core.login import CredentialValidationError
from qrlib.core.login.service import login_service
from qrlib.providers.logger import get_logger

logger = get_logger()
service = login_service


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content=ErrorResponse(message=message).model_dump(), status_code=status_code)


async def _read_payload(request) -> dict:
    try:
        payload = await request.json()
    except Exception:
        payload = {}
    return payload if isinstance(payload, dict) else {}


@main_app.custom_route("/api/presets", methods=["GET"])
async def qr_list_presets(request):
    presets = service.list_presets()
    return JSONResponse(content=[item.model_dump(exclude_none=True) for item in presets])


@main_app.custom_route("/api/qr/create", methods=["POST"])
async def qr_create(request):
    try:
        request_model = CreateQRRequest.model_validate(await _read_payload(request))
    except ValidationError as exc:
        # 创建接口不返回 400，无效预设按默认预设处理
        logger.warning(f"[扫码登录] 创建请求参数无效，使用默认预设: {exc.errors()}")
        request_model = CreateQRRequest()

    try:
        result = await service.create(request_model.preset)
        return JSONResponse(content=result.model_dump(exclude_none=True))
    except Exception as exc:
        logger.error(f"[扫码登录] 创建二维码失败: {exc}")
        return _error_response(service.public_error_message(exc), 500)


@main_app.custom_route("/api/qr/check", methods=["POST"])
async def qr_check(request):
    try:
        request_model = CheckQRRequest.model_validate(await _read_payload(request))
    except ValidationError:
        return _error_response(error_codes.PARAM_ERROR[1], 400)

    try:
        result = await service.check(request_model.qrsig, request_model.preset, request_model.appid)
        return JSONResponse(content=result.model_dump())
    except CredentialValidationError as exc:
        return _error_response(exc.errmsg, 400)
    except Exception as exc:
        logger.error(f"[扫码登录] 查询状态失败: {exc}")
        return _error_response(service.public_error_message(exc), 500)


async def api_root(request):
    """纯 API 模式下的根路径"""
    return JSONResponse(content={
        "success": True,
        "message": "QRLib API Server is running in Pure API Mode.",
        "documentation": "See API.md for usage.",
    })
