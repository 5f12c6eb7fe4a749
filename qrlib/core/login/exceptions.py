# -*- coding: utf-8 -*-
"""扫码登录相关异常定义。"""

from typing import Tuple


class LoginServiceError(Exception):
    """登录服务异常"""


class CredentialValidationError(LoginServiceError):
    """客户端提交的 qrsig/code 缺失或格式非法，不会转发给上游。"""

    def __init__(self, err: Tuple[int, str]):
        self.errcode, self.errmsg = err
        super().__init__(self.errmsg)


class UpstreamError(LoginServiceError):
    """上游会话服务（ptlogin / 小程序）调用失败。"""


class UpstreamTimeoutError(UpstreamError):
    """上游调用超过截止时间。"""
