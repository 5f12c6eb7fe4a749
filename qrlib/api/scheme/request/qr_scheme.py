# -*- coding: utf-8 -*-
"""
扫码登录 API 请求/响应模型
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class CreateQRRequest(BaseModel):
    """创建二维码请求"""

    preset: Optional[str] = Field(None, description="预设编码，缺省使用默认预设")

    model_config = {"extra": "ignore"}


class CheckQRRequest(BaseModel):
    """轮询二维码状态请求，qrsig 的格式校验由核心服务负责"""

    qrsig: Any = Field(None, description="二维码 qrsig 或小程序登录码")
    preset: Optional[str] = Field(None, description="预设编码，缺省使用默认预设")
    appid: Optional[str] = Field(None, description="自定义小程序 AppID")

    model_config = {"extra": "ignore"}


class PresetInfo(BaseModel):
    key: str
    type: Literal["qr", "mp"]
    name: str
    description: str = ""
    defaultAppId: Optional[str] = None


class CreateQRResponse(BaseModel):
    success: bool = True
    qrsig: str
    qrcode: str
    url: Optional[str] = None
    isMiniProgram: bool


class CheckQRResponse(BaseModel):
    success: bool = True
    ret: str
    msg: str
    code: str = ""
    uin: str = ""
    ticket: str = ""


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
