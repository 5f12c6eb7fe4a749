# -*- coding: utf-8 -*-
"""
扫码登录核心模块

提供登录通道模型、异常定义；服务入口见 qrlib.core.login.service。
"""

from .exceptions import (
    CredentialValidationError,
    LoginServiceError,
    UpstreamError,
    UpstreamTimeoutError,
)
from .models import LoginModality, NormalizedStatus, Preset

__all__ = [
    "CredentialValidationError",
    "LoginServiceError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "LoginModality",
    "NormalizedStatus",
    "Preset",
]
