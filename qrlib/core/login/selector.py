# -*- coding: utf-8 -*-
"""根据预设选择登录通道"""
from __future__ import annotations

from typing import Optional

from .catalog import PresetCatalog
from .models import LoginModality, PollConfig


class StrategySelector:
    """
    登录通道选择器

    小程序目录里存在该预设即走小程序通道，否则一律按 QR 登录处理
    （QR 通道不做目录检查，未知预设交给 ptlogin 会话服务报错）。
    """

    def __init__(self, catalog: PresetCatalog, default_preset: str, fallback_appid: str):
        self.catalog = catalog
        self.default_preset = default_preset
        self.fallback_appid = fallback_appid

    def resolve_preset_key(self, preset: Optional[str]) -> str:
        return preset or self.default_preset

    def select(self, preset: Optional[str]) -> LoginModality:
        key = self.resolve_preset_key(preset)
        if self.catalog.get_mini_program(key) is not None:
            return LoginModality.MINI_PROGRAM
        return LoginModality.QR

    def resolve_appid(self, preset: Optional[str], override: Optional[str] = None) -> str:
        """AppID 优先级：客户端指定 > 预设默认 > 兜底 AppID"""
        if override:
            return override
        config = self.catalog.get_mini_program(self.resolve_preset_key(preset))
        if config is not None and config.appid:
            return config.appid
        return self.fallback_appid

    def build_poll_config(self, preset: Optional[str], appid: Optional[str] = None) -> PollConfig:
        key = self.resolve_preset_key(preset)
        modality = self.select(key)
        if modality == LoginModality.MINI_PROGRAM:
            return PollConfig(preset=key, modality=modality, appid=self.resolve_appid(key, appid))
        return PollConfig(preset=key, modality=modality)
