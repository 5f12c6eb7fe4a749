# -*- coding: utf-8 -*-
"""
ptlogin 二维码登录会话

通过 ssl.ptlogin2.qq.com 获取二维码并轮询扫码状态
"""
from __future__ import annotations

import base64
import random
import re
import time
from typing import Dict, List, Optional

import httpx

from qrlib.core.login.exceptions import UpstreamError
from qrlib.core.login.models import QRCodeTicket, QRPollResult
from qrlib.providers.logger import get_logger

PTLOGIN_BASE_URL = "https://ssl.ptlogin2.qq.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

_CALLBACK_RE = re.compile(r"ptuiCB\((.*)\)", re.S)
_CALLBACK_ARG_RE = re.compile(r"'([^']*)'")


def hash33(qrsig: str) -> int:
    """ptqrtoken 计算"""
    e = 0
    for c in qrsig:
        e += (e << 5) + ord(c)
    return 2147483647 & e


def parse_ptui_callback(text: str) -> List[str]:
    """解析 ptuiCB('66','0','','0','二维码未失效。', '') 形式的回调参数"""
    match = _CALLBACK_RE.search(text or "")
    if not match:
        raise UpstreamError(f"无法解析 ptlogin 返回: {text[:100]!r}")
    return _CALLBACK_ARG_RE.findall(match.group(1))


class QRLoginSession:
    """ptlogin 二维码登录会话服务"""

    PRESETS: Dict[str, Dict[str, str]] = {
        "vip": {
            "name": "QQ会员",
            "description": "QQ 会员中心扫码登录",
            "appid": "8000201",
            "daid": "18",
            "u1": "https://vip.qq.com/loginsuccess.html",
        },
        "qzone": {
            "name": "QQ空间",
            "description": "QQ 空间扫码登录",
            "appid": "549000912",
            "daid": "5",
            "u1": "https://qzs.qzone.qq.com/qzone/v5/loginsucc.html?para=izone",
        },
        "qun": {
            "name": "QQ群",
            "description": "QQ 群管理扫码登录",
            "appid": "715030901",
            "daid": "73",
            "u1": "https://qun.qq.com/",
        },
    }

    def __init__(self, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=PTLOGIN_BASE_URL,
            timeout=self.timeout,
            transport=self.transport,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        )

    def _get_preset(self, preset: str) -> Dict[str, str]:
        config = self.PRESETS.get(preset)
        if not config:
            raise UpstreamError(f"未知的预设: {preset}")
        return config

    async def request_qrcode(self, preset: str) -> QRCodeTicket:
        """获取二维码图片与 qrsig"""
        config = self._get_preset(preset)
        params = {
            "appid": config["appid"],
            "e": "2",
            "l": "M",
            "s": "3",
            "d": "72",
            "v": "4",
            "t": str(random.random()),
            "daid": config["daid"],
            "pt_3rd_aid": "0",
        }
        async with self._client() as client:
            response = await client.get("/ptqrshow", params=params)
            response.raise_for_status()

        qrsig = response.cookies.get("qrsig")
        if not qrsig:
            raise UpstreamError("获取二维码失败：未返回 qrsig")
        image = base64.b64encode(response.content).decode("ascii")
        return QRCodeTicket(qrsig=qrsig, qrcode=f"data:image/png;base64,{image}")

    async def check_status(self, qrsig: str, preset: str) -> QRPollResult:
        """轮询扫码状态"""
        config = self._get_preset(preset)
        params = {
            "u1": config["u1"],
            "ptqrtoken": str(hash33(qrsig)),
            "ptredirect": "0",
            "h": "1",
            "t": "1",
            "g": "1",
            "from_ui": "1",
            "ptlang": "2052",
            "action": f"0-0-{int(time.time() * 1000)}",
            "js_type": "1",
            "pt_uistyle": "40",
            "aid": config["appid"],
            "daid": config["daid"],
        }
        async with self._client() as client:
            response = await client.get(
                "/ptqrlogin", params=params, headers={"Cookie": f"qrsig={qrsig}"}
            )
            response.raise_for_status()

        args = parse_ptui_callback(response.text)
        if not args:
            raise UpstreamError("ptlogin 返回缺少状态码")
        args += [""] * (6 - len(args))
        result = QRPollResult(ret=args[0], jump_url=args[2], msg=args[4], nickname=args[5])
        if result.ret == "0":
            result.cookie = "; ".join(f"{cookie.name}={cookie.value}" for cookie in response.cookies.jar)
            self.logger.info(f"[ptlogin] 预设 {preset} 扫码确认成功")
        return result
