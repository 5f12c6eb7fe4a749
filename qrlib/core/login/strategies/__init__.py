# -*- coding: utf-8 -*-
"""登录通道策略"""

from .base import LoginStrategy
from .mini_program import MiniProgramLoginStrategy
from .qr import QRLoginStrategy

__all__ = ["LoginStrategy", "MiniProgramLoginStrategy", "QRLoginStrategy"]
