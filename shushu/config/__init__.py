#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块
"""

from .settings import EngineSettings, get_settings, reset_settings

__all__ = [
    'EngineSettings',
    'get_settings',
    'reset_settings',
]
