# -*- coding: utf-8 -*-
"""扫码登录 HTTP 端点"""
