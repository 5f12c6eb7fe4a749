# -*- coding: utf-8 -*-
"""API 服务模块 - 组装扫码登录路由、MCP 工具与静态页面。"""

from __future__ import annotations

from typing import Any, Optional

from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from qrlib.config.settings import global_settings
from qrlib.providers.logger import get_logger, init_logger
from qrlib.api.endpoints import main_app
from qrlib.api.endpoints.qr.qr_endpoint import api_root


def create_app(webui_enabled: Optional[bool] = None, static_dir: Optional[str] = None) -> Any:
    """创建 ASGI 应用，webui_enabled/static_dir 未指定时读取全局配置。"""

    init_logger(
        name=global_settings.app.name,
        level=global_settings.logger.level,
        log_file=global_settings.logger.log_file,
        enable_file=global_settings.logger.enable_file,
        enable_console=global_settings.logger.enable_console,
        max_file_size=global_settings.logger.max_file_size,
        retention_days=global_settings.logger.retention_days,
    )
    logger = get_logger()

    if webui_enabled is None:
        webui_enabled = global_settings.webui_enabled
    static_dir = static_dir or global_settings.static_dir

    asgi_app = main_app.http_app(path='/mcp/')

    if webui_enabled:
        # 放在最后，未匹配的路径才交给静态文件
        asgi_app.router.routes.append(
            Mount("/", app=StaticFiles(directory=static_dir, html=True, check_dir=False), name="webui")
        )
        logger.info(f"✅ WebUI 已启用，静态目录: {static_dir}")
    else:
        asgi_app.router.routes.append(Route("/", api_root, methods=["GET"]))
        logger.info("✅ WebUI 已关闭，运行于纯 API 模式")

    logger.info(f"✅ {global_settings.app.name} ASGI 应用创建完成")
    return asgi_app


# 创建应用并返回
main_asgi = create_app()
