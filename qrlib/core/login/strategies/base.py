# -*- coding: utf-8 -*-
"""
登录通道策略基类

每个通道实现相同的 create/poll 能力，服务层只在一处按 LoginModality 分发。
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, Optional, TypeVar

import httpx

from qrlib.api.scheme.request.qr_scheme import CreateQRResponse
from qrlib.core.login.exceptions import UpstreamTimeoutError
from qrlib.core.login.models import LoginModality, NormalizedStatus, PollConfig
from qrlib.providers.logger import get_logger

T = TypeVar("T")


class LoginStrategy(ABC):
    """登录通道策略抽象基类"""

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: 单次上游调用的截止时间（秒），None 表示不限制
        """
        self.timeout = timeout
        self.logger = get_logger(modality=self.modality.value)

    @property
    @abstractmethod
    def modality(self) -> LoginModality:
        """通道标识"""

    @abstractmethod
    async def create(self, preset: str) -> CreateQRResponse:
        """创建二维码 / 登录码"""

    @abstractmethod
    async def poll(self, token: str, config: PollConfig) -> NormalizedStatus:
        """查询一次登录状态并归一化"""

    async def call_upstream(self, action: str, awaitable: Awaitable[T]) -> T:
        """
        带截止时间调用上游，超时抛出 UpstreamTimeoutError

        会话服务的 httpx 客户端使用同一超时，两者谁先触发都按超时处理。
        """
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            self.logger.error(f"{action} 超时 ({self.timeout}s): {exc!r}")
            raise UpstreamTimeoutError(f"{action} 请求超时") from exc
