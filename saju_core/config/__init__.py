#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块
"""

from saju_core.config.app_config import (
    AppConfig,
    CalendarConfig,
    FortuneCycleConfig,
    get_config,
    reload_config,
)

__all__ = [
    'AppConfig',
    'CalendarConfig',
    'FortuneCycleConfig',
    'get_config',
    'reload_config',
]
