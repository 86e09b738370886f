#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
shushu - 术数排盘计算引擎

八字、紫微斗数、奇门遁甲、六爻、大六壬、梅花易数六种排盘，
以及每日运势、八字合婚、合作合盘与各术数的分析上下文提取。
"""

from shushu.calculators import (
    analyze_business_cooperation,
    analyze_marriage,
    calculate_bazi,
    calculate_daily_fortune,
    calculate_liuren,
    calculate_liuyao,
    calculate_meihua,
    calculate_qimen,
    calculate_ziwei,
    convert_calendar,
)
from shushu.analyzers import (
    extract_bazi_analysis_context,
    extract_liuren_analysis_context,
    extract_liuyao_analysis_context,
    extract_meihua_analysis_context,
    extract_qimen_analysis_context,
    extract_ziwei_analysis_context,
)
from shushu.errors import DateRangeError, InputValidationError, ShushuError

__version__ = '1.0.0'

__all__ = [
    'calculate_bazi',
    'calculate_ziwei',
    'calculate_qimen',
    'calculate_liuyao',
    'calculate_liuren',
    'calculate_meihua',
    'calculate_daily_fortune',
    'analyze_marriage',
    'analyze_business_cooperation',
    'convert_calendar',
    'extract_bazi_analysis_context',
    'extract_ziwei_analysis_context',
    'extract_qimen_analysis_context',
    'extract_liuyao_analysis_context',
    'extract_liuren_analysis_context',
    'extract_meihua_analysis_context',
    'ShushuError',
    'InputValidationError',
    'DateRangeError',
]
