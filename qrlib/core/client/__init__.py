# -*- coding: utf-8 -*-
"""上游会话服务客户端"""

from .cookie_utils import get_uin
from .miniprogram_client import MiniProgramLoginSession
from .ptlogin_client import QRLoginSession

__all__ = ["MiniProgramLoginSession", "QRLoginSession", "get_uin"]
