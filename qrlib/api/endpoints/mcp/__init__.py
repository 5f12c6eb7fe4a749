# -*- coding: utf-8 -*-
"""扫码登录 MCP 工具"""
