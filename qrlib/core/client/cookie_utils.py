# -*- coding: utf-8 -*-
"""Cookie 解析工具"""
from __future__ import annotations

from typing import Dict

UIN_COOKIE_KEYS = ("uin", "p_uin")


def parse_cookie_str(cookie_str: str) -> Dict[str, str]:
    """把 "k1=v1; k2=v2" 形式的 Cookie 字符串解析为字典"""
    cookie_dict: Dict[str, str] = {}
    for item in (cookie_str or "").split(';'):
        if '=' in item:
            key, value = item.strip().split('=', 1)
            cookie_dict[key] = value
    return cookie_dict


def get_uin(cookie_str: str) -> str:
    """从 Cookie 中取 QQ 号，uin 形如 o0123456789，去掉前缀 o 和前导 0"""
    cookie_dict = parse_cookie_str(cookie_str)
    for key in UIN_COOKIE_KEYS:
        value = cookie_dict.get(key, "").strip()
        if not value:
            continue
        value = value.lstrip("oO").lstrip("0")
        if value.isdigit():
            return value
    return ""
