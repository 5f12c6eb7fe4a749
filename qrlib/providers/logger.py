# -*- coding: utf-8 -*-
"""
日志模块

每条日志带上服务名与登录通道（qr / mp），通道由 get_logger(modality=...) 绑定，
未绑定时显示 "-"。
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | "
    "<yellow>{extra[modality]: <2}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class Logger:
    """扫码登录服务的 loguru 处理器配置"""

    def __init__(self,
                 name: str = "qrlib-api",
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 enable_file: bool = False,
                 enable_console: bool = True,
                 max_file_size: str = "10 MB",
                 retention_days: int = 7):
        """
        Args:
            name: 服务名，写入每条日志的 extra[app]
            level: 日志级别
            log_file: 日志文件路径
            enable_file: 是否启用文件日志
            enable_console: 是否启用控制台输出
            max_file_size: 单个日志文件最大大小
            retention_days: 日志保留天数
        """
        self.name = name
        self.level = level

        logger.remove()
        # 全局默认上下文，绑定的 modality 会覆盖
        logger.configure(extra={"app": name, "modality": "-"})

        if enable_console:
            logger.add(sys.stdout, format=LOG_FORMAT, level=level, colorize=True)

        if enable_file and log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_file,
                format=LOG_FORMAT,
                level=level,
                rotation=max_file_size,
                retention=f"{retention_days} days",
                compression="zip",
                encoding="utf-8"
            )


_logger_instance: Optional[Logger] = None


def init_logger(name: str = "qrlib-api",
                level: str = "INFO",
                log_file: Optional[str] = None,
                enable_file: bool = False,
                enable_console: bool = True,
                max_file_size: str = "10 MB",
                retention_days: int = 7) -> Logger:
    """按配置重新初始化全局日志处理器"""
    global _logger_instance
    _logger_instance = Logger(
        name=name,
        level=level,
        log_file=log_file,
        enable_file=enable_file,
        enable_console=enable_console,
        max_file_size=max_file_size,
        retention_days=retention_days
    )
    return _logger_instance


def get_logger(**context):
    """
    获取 loguru logger，未初始化时使用默认配置

    Args:
        context: 绑定到日志 extra 的字段，如 modality="qr"
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = Logger()
    if context:
        return logger.bind(**context)
    return logger
