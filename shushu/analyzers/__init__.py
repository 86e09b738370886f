#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析上下文提取器

把排盘结果整理成纯文本摘要，供解读层（提示词等）直接使用。
"""

from .bazi_analyzer import BaziAnalyzer, extract_bazi_analysis_context
from .ziwei_analyzer import ZiweiAnalyzer, extract_ziwei_analysis_context
from .qimen_analyzer import QimenAnalyzer, extract_qimen_analysis_context
from .liuyao_analyzer import LiuyaoAnalyzer, extract_liuyao_analysis_context
from .liuren_analyzer import LiurenAnalyzer, extract_liuren_analysis_context
from .meihua_analyzer import MeihuaAnalyzer, extract_meihua_analysis_context

__all__ = [
    'BaziAnalyzer',
    'extract_bazi_analysis_context',
    'ZiweiAnalyzer',
    'extract_ziwei_analysis_context',
    'QimenAnalyzer',
    'extract_qimen_analysis_context',
    'LiuyaoAnalyzer',
    'extract_liuyao_analysis_context',
    'LiurenAnalyzer',
    'extract_liuren_analysis_context',
    'MeihuaAnalyzer',
    'extract_meihua_analysis_context',
]
