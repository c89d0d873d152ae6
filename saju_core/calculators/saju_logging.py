#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱引擎共享日志工具

- saju_core 包日志器只挂一个 SafeStreamHandler，子模块通过 logging.getLogger(__name__) 继承
- 日志级别取自 AppConfig.log_level，可用 configure_logging() 调整
- safe_log() 在输出管道断开时静默（引擎被嵌入服务进程时客户端可能先断开）
"""

import logging
from typing import Optional

from saju_core.config.app_config import get_config

PACKAGE_LOGGER_NAME = "saju_core"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


class SafeStreamHandler(logging.StreamHandler):
    """输出失败（Broken pipe）时不向上抛出的 StreamHandler"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    配置包日志器（可重复调用，只挂一个 handler）

    Args:
        level: 日志级别名称，默认读取配置 LOG_LEVEL

    Returns:
        logging.Logger: saju_core 包日志器
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, SafeStreamHandler) for h in package_logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    level_name = (level or get_config().log_level).lower()
    package_logger.setLevel(_LEVELS.get(level_name, logging.INFO))
    return package_logger


logger = configure_logging()


def safe_log(level: str, message: str) -> None:
    """按级别名称输出日志，未知级别按 info 处理"""
    try:
        logger.log(_LEVELS.get(level, logging.INFO), message)
    except (BrokenPipeError, OSError):
        pass
