# -*- coding: utf-8 -*-
"""
预设目录

合并两个会话服务的静态预设，并生成对外展示的预设列表。
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from qrlib.api.scheme.request.qr_scheme import PresetInfo

from .models import LoginModality, Preset


class PresetCatalog:
    """只读的预设目录，QR 预设在前，小程序预设在后"""

    def __init__(self, presets: Iterable[Preset]):
        # 两个目录中同名的预设各自保留，通道选择只看小程序目录
        self._ordered = presets_in_order(presets)
        self._mini_program: Dict[str, Preset] = {
            p.key: p for p in self._ordered if p.modality == LoginModality.MINI_PROGRAM
        }

    @classmethod
    def from_catalogs(
        cls,
        qr_presets: Mapping[str, Mapping[str, str]],
        mp_presets: Mapping[str, Mapping[str, str]],
    ) -> "PresetCatalog":
        """由会话服务的 PRESETS 字典构建目录"""
        presets: List[Preset] = []
        for key, config in qr_presets.items():
            presets.append(Preset(
                key=key,
                modality=LoginModality.QR,
                name=config.get("name", key),
                description=config.get("description", ""),
            ))
        for key, config in mp_presets.items():
            presets.append(Preset(
                key=key,
                modality=LoginModality.MINI_PROGRAM,
                name=config.get("name", key),
                description=config.get("description", ""),
                appid=config.get("appid") or None,
            ))
        return cls(presets)

    def __iter__(self):
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def get_mini_program(self, key: Optional[str]) -> Optional[Preset]:
        if not key:
            return None
        return self._mini_program.get(key)


def presets_in_order(presets: Iterable[Preset]) -> List[Preset]:
    """QR 在前、小程序在后，同一通道内保持声明顺序"""
    presets = list(presets)
    return (
        [p for p in presets if p.modality == LoginModality.QR]
        + [p for p in presets if p.modality == LoginModality.MINI_PROGRAM]
    )


def project_presets(catalog: PresetCatalog, redacted_keys: Iterable[str] = ()) -> List[PresetInfo]:
    """生成 /api/presets 的返回列表，被标记的小程序预设不展示 AppID"""
    redacted = set(redacted_keys)
    result: List[PresetInfo] = []
    for preset in catalog:
        default_appid = None
        if preset.modality == LoginModality.MINI_PROGRAM and preset.key not in redacted:
            default_appid = preset.appid
        result.append(PresetInfo(
            key=preset.key,
            type=preset.modality.value,
            name=preset.name,
            description=preset.description,
            defaultAppId=default_appid,
        ))
    return result
