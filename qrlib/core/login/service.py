# -*- coding: utf-8 -*-
"""
扫码登录核心服务

请求处理顺序固定为：校验 → 选择通道 → 查询上游 →（兑换授权码）→ 归一化 → 组装响应。
服务本身无状态，只持有启动时加载的只读预设目录。
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from qrlib.api.scheme import error_codes
from qrlib.api.scheme.request.qr_scheme import CheckQRResponse, CreateQRResponse, PresetInfo
from qrlib.config.settings import LoginConfig, global_settings
from qrlib.core.client import MiniProgramLoginSession, QRLoginSession, get_uin
from qrlib.providers.logger import get_logger

from .catalog import PresetCatalog, project_presets
from .composer import compose_check_response
from .models import LoginModality
from .selector import StrategySelector
from .strategies import LoginStrategy, MiniProgramLoginStrategy, QRLoginStrategy
from .validator import validate_poll_token

logger = get_logger()


class QRLoginService:
    """统一的扫码登录服务"""

    def __init__(
        self,
        qr_session: Any = None,
        mp_session: Any = None,
        config: Optional[LoginConfig] = None,
        get_uin_func: Callable[[str], str] = get_uin,
    ):
        self.config = config or global_settings.login
        timeout = self.config.request_timeout
        self.qr_session = qr_session or QRLoginSession(timeout=timeout)
        self.mp_session = mp_session or MiniProgramLoginSession(timeout=timeout)

        self.catalog = PresetCatalog.from_catalogs(self.qr_session.PRESETS, self.mp_session.PRESETS)
        self.selector = StrategySelector(
            self.catalog,
            default_preset=self.config.default_preset,
            fallback_appid=self.config.fallback_appid,
        )
        self._strategies: Dict[LoginModality, LoginStrategy] = {
            LoginModality.QR: QRLoginStrategy(self.qr_session, get_uin=get_uin_func, timeout=timeout),
            LoginModality.MINI_PROGRAM: MiniProgramLoginStrategy(
                self.mp_session, render_url=self.config.qrcode_render_url, timeout=timeout
            ),
        }
        logger.info(f"[扫码登录] 预设目录加载完成，共 {len(self.catalog)} 个预设")

    def get_strategy(self, modality: LoginModality) -> LoginStrategy:
        return self._strategies[modality]

    def list_presets(self) -> List[PresetInfo]:
        """获取全部预设（敏感预设隐藏 AppID）"""
        return project_presets(self.catalog, self.config.redacted_presets)

    async def create(self, preset: Optional[str] = None) -> CreateQRResponse:
        """创建二维码或小程序登录码"""
        key = self.selector.resolve_preset_key(preset)
        strategy = self.get_strategy(self.selector.select(key))
        return await strategy.create(key)

    async def check(
        self,
        qrsig: Any,
        preset: Optional[str] = None,
        appid: Optional[str] = None,
    ) -> CheckQRResponse:
        """轮询一次登录状态，格式非法的 qrsig 不会发往上游"""
        token = validate_poll_token(qrsig)
        poll_config = self.selector.build_poll_config(preset, appid)
        status = await self.get_strategy(poll_config.modality).poll(token, poll_config)
        return compose_check_response(status)

    def public_error_message(self, exc: Exception) -> str:
        """上游异常返回给客户端的提示，可配置为不透出原始错误"""
        if self.config.expose_upstream_errors:
            return str(exc)
        return error_codes.SERVER_ERROR[1]


login_service = QRLoginService()
