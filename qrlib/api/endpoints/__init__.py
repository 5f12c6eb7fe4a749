from fastmcp import FastMCP
from qrlib.config.settings import global_settings

# 创建主应用
main_app = FastMCP(
    name=global_settings.app.name,
    version=global_settings.app.version,
)

# 注册路由与 MCP 工具
import qrlib.api.endpoints.qr.qr_endpoint
import qrlib.api.endpoints.mcp.qr_login

__all__ = ["main_app"]
