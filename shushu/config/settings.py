#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘引擎配置管理
所有可调参数统一从这里读取，避免配置分散
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class EngineSettings:
    """排盘引擎配置"""
    log_level: str = 'INFO'
    min_year: int = 1900
    max_year: int = 2100
    dayun_count: int = 10
    use_equation_of_time: bool = False
    default_timezone: str = 'Asia/Shanghai'

    @classmethod
    def from_env(cls) -> 'EngineSettings':
        """从环境变量创建配置"""
        return cls(
            log_level=os.getenv('SHUSHU_LOG_LEVEL', 'INFO').upper(),
            min_year=int(os.getenv('SHUSHU_MIN_YEAR', '1900')),
            max_year=int(os.getenv('SHUSHU_MAX_YEAR', '2100')),
            dayun_count=int(os.getenv('SHUSHU_DAYUN_COUNT', '10')),
            use_equation_of_time=_env_bool('SHUSHU_EQUATION_OF_TIME', False),
            default_timezone=os.getenv('SHUSHU_DEFAULT_TIMEZONE', 'Asia/Shanghai'),
        )


_settings: Optional[EngineSettings] = None
_dotenv_loaded = False


def get_settings() -> EngineSettings:
    """获取配置单例（首次调用时加载 .env）"""
    global _settings, _dotenv_loaded
    if _settings is None:
        if not _dotenv_loaded:
            load_dotenv(override=False)
            _dotenv_loaded = True
        _settings = EngineSettings.from_env()
    return _settings


def reset_settings() -> None:
    """清空配置单例，下次 get_settings() 重新读取环境变量"""
    global _settings
    _settings = None
