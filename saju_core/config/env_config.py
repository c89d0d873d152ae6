#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

提供统一的环境判断和配置读取接口，启动时加载当前目录下的 .env 文件
"""

import logging
import os
from typing import Literal, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# 环境类型定义
Environment = Literal["local", "staging", "production"]


class EnvConfig:
    """
    统一环境配置管理器

    环境变量优先级：SAJU_ENV > APP_ENV > 默认 local
    """

    def __init__(self, dotenv_path: Optional[str] = None):
        """初始化环境配置"""
        self._load_dotenv(dotenv_path)
        self._env: Environment = self._detect_environment()

    @staticmethod
    def _load_dotenv(dotenv_path: Optional[str]) -> None:
        env_path = dotenv_path or os.path.join(os.getcwd(), '.env')
        if os.path.exists(env_path):
            # 不覆盖已存在的环境变量
            load_dotenv(env_path, override=False)
            logger.debug(f"已加载环境变量文件: {env_path}")

    @staticmethod
    def _detect_environment() -> Environment:
        """检测当前环境"""
        env_value = os.getenv("SAJU_ENV", os.getenv("APP_ENV", "local")).lower()

        if env_value in ["staging", "stage"]:
            return "staging"
        if env_value in ["prod", "production"]:
            return "production"
        # 未知环境，默认为本地开发
        return "local"

    @property
    def env(self) -> Environment:
        """获取当前环境"""
        return self._env

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self._env == "production"

    def get_config(self, key: str, default: str = None) -> Optional[str]:
        """获取配置值（从环境变量）"""
        return os.getenv(key, default)

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        """
        获取布尔类型配置

        Args:
            key: 配置键
            default: 默认值

        Returns:
            布尔值
        """
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        """
        获取整数类型配置，无法解析时返回默认值

        Args:
            key: 配置键
            default: 默认值

        Returns:
            整数值
        """
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            logger.warning(f"环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
            return default


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reload_env_config() -> EnvConfig:
    """重新检测环境"""
    global _env_config
    _env_config = EnvConfig()
    return _env_config
