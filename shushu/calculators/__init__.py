#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘计算器

每个术数一个模块，入口函数接受输入模型或等价字典，返回不可变的结果模型。
"""

from .lunar_converter import LunarConverter, convert_calendar
from .bazi_calculator import BaziCalculator, calculate_bazi
from .ziwei_calculator import ZiweiCalculator, calculate_ziwei
from .qimen_calculator import QimenCalculator, calculate_qimen
from .liuyao_calculator import LiuyaoCalculator, calculate_liuyao
from .liuren_calculator import LiurenCalculator, calculate_liuren
from .meihua_calculator import MeihuaCalculator, calculate_meihua
from .daily_fortune import calculate_daily_fortune
from .marriage import (
    BusinessCooperationAnalyzer,
    MarriageAnalyzer,
    analyze_business_cooperation,
    analyze_marriage,
)

__all__ = [
    'LunarConverter',
    'convert_calendar',
    'BaziCalculator',
    'calculate_bazi',
    'ZiweiCalculator',
    'calculate_ziwei',
    'QimenCalculator',
    'calculate_qimen',
    'LiuyaoCalculator',
    'calculate_liuyao',
    'LiurenCalculator',
    'calculate_liuren',
    'MeihuaCalculator',
    'calculate_meihua',
    'calculate_daily_fortune',
    'MarriageAnalyzer',
    'analyze_marriage',
    'BusinessCooperationAnalyzer',
    'analyze_business_cooperation',
]
