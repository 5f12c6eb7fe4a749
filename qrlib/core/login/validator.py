# -*- coding: utf-8 -*-
"""qrsig/code 格式校验"""
from __future__ import annotations

import re
from typing import Any

from qrlib.api.scheme import error_codes

from .exceptions import CredentialValidationError

# 令牌会被拼进上游请求的 URL/查询参数，只允许这些字符
POLL_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9+/=._-]+")


def validate_poll_token(token: Any) -> str:
    """校验客户端持有的轮询令牌，通过时原样返回"""
    if token is None or token == "":
        raise CredentialValidationError(error_codes.MISSING_QRSIG)
    if not isinstance(token, str) or not POLL_TOKEN_PATTERN.fullmatch(token):
        raise CredentialValidationError(error_codes.INVALID_QRSIG)
    return token
