# -*- coding: utf-8 -*-

SERVER_ERROR = (-1, '服务器错误')

# 扫码登录
MISSING_QRSIG = (40001, 'Missing qrsig/code')
INVALID_QRSIG = (40002, 'Invalid qrsig/code format')
PARAM_ERROR = (40000, '传入参数错误')
