#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 每个测试前后重置引擎配置
- 常用排盘结果 fixtures
"""

import pytest

from shushu.calculators import calculate_bazi
from shushu.config import reset_settings

SETTING_VARS = (
    'SHUSHU_LOG_LEVEL',
    'SHUSHU_MIN_YEAR',
    'SHUSHU_MAX_YEAR',
    'SHUSHU_DAYUN_COUNT',
    'SHUSHU_EQUATION_OF_TIME',
    'SHUSHU_DEFAULT_TIMEZONE',
)


# ==================== 配置 Fixtures ====================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """清除 SHUSHU_* 环境变量并重置配置单例，测试之间互不影响"""
    for name in SETTING_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


# ==================== 排盘结果 Fixtures ====================

@pytest.fixture
def male_bazi():
    """1987-01-07 09:55 男：丙寅 辛丑 丙辰 癸巳"""
    return calculate_bazi({'year': 1987, 'month': 1, 'day': 7, 'hour': 9, 'minute': 55, 'gender': 'male'})


@pytest.fixture
def female_bazi():
    """2008-09-08 16:03 女：日柱 辛亥"""
    return calculate_bazi({'year': 2008, 'month': 9, 'day': 8, 'hour': 16, 'minute': 3, 'gender': 'female'})
