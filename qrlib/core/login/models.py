# -*- coding: utf-8 -*-
"""
扫码登录相关数据模型
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class LoginModality(str, Enum):
    """登录通道"""
    QR = "qr"              # ptlogin 二维码登录
    MINI_PROGRAM = "mp"    # 小程序扫码登录


class MiniProgramStatus(str, Enum):
    """小程序登录状态（上游原始取值）"""
    WAIT = "Wait"
    USED = "Used"
    OK = "OK"
    ERROR = "Error"


# ptlogin / 统一输出使用的返回码
RET_SUCCESS = "0"
RET_INVALID = "65"
RET_PENDING = "66"


@dataclass(frozen=True)
class Preset:
    """预设登录目标，进程启动时加载后只读"""

    key: str
    modality: LoginModality
    name: str
    description: str = ""
    appid: Optional[str] = None


@dataclass(frozen=True)
class PollConfig:
    """一次轮询所需的已解析参数"""

    preset: str
    modality: LoginModality
    appid: Optional[str] = None


@dataclass
class QRCodeTicket:
    """ptlogin 二维码创建结果"""

    qrsig: str
    qrcode: str
    url: Optional[str] = None


@dataclass
class MiniProgramLoginCode:
    """小程序登录码创建结果"""

    code: str
    url: str


@dataclass
class QRPollResult:
    """ptlogin 轮询原始结果，nickname/jump_url/cookie 仅供内部使用"""

    ret: str
    msg: str = ""
    nickname: str = ""
    jump_url: str = ""
    cookie: str = ""


@dataclass
class MiniProgramPollResult:
    """小程序轮询原始结果"""

    status: str
    ticket: str = ""
    uin: str = ""


@dataclass(frozen=True)
class NormalizedStatus:
    """统一的对外状态"""

    ret: str
    msg: str
    code: str = ""
    uin: str = ""
    ticket: str = ""

    @property
    def is_success(self) -> bool:
        return self.ret == RET_SUCCESS

    def with_code(self, code: str) -> "NormalizedStatus":
        return replace(self, code=code or "")
