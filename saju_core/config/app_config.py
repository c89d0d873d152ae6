#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散

评分权重为固定常量，不在配置范围内。
"""

from dataclasses import dataclass, field
from typing import Optional

from saju_core.config.env_config import get_env_config, reload_env_config


@dataclass
class CalendarConfig:
    """历法配置（农历转换表覆盖范围）"""
    lunar_min_year: int = 1900
    lunar_max_year: int = 2100

    @classmethod
    def from_env(cls) -> 'CalendarConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        return cls(
            lunar_min_year=env_config.get_int_config('SAJU_LUNAR_MIN_YEAR', default=1900),
            lunar_max_year=env_config.get_int_config('SAJU_LUNAR_MAX_YEAR', default=2100),
        )


@dataclass
class FortuneCycleConfig:
    """大运配置"""
    count: int = 12
    first_age: int = 9

    MIN_COUNT = 8
    MAX_COUNT = 12

    def __post_init__(self):
        self.count = max(self.MIN_COUNT, min(self.MAX_COUNT, self.count))

    @classmethod
    def from_env(cls) -> 'FortuneCycleConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        return cls(
            count=env_config.get_int_config('SAJU_FORTUNE_CYCLE_COUNT', default=12),
            first_age=env_config.get_int_config('SAJU_FORTUNE_CYCLE_FIRST_AGE', default=9),
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'

    # 子配置
    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    fortune_cycle: FortuneCycleConfig = field(default_factory=FortuneCycleConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = get_env_config()
        debug = env_config.get_bool_config('SAJU_DEBUG', default=False)
        # 生产环境默认只输出 WARNING 及以上；SAJU_DEBUG 打开时强制 DEBUG
        default_level = 'WARNING' if env_config.is_production else 'INFO'
        log_level = 'DEBUG' if debug else env_config.get_config('LOG_LEVEL', default=default_level).upper()
        return cls(
            env=env_config.env,
            debug=debug,
            log_level=log_level,
            calendar=CalendarConfig.from_env(),
            fortune_cycle=FortuneCycleConfig.from_env(),
        )


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置（环境变量变更后调用）"""
    global _config
    reload_env_config()
    _config = AppConfig.from_env()
    return _config
