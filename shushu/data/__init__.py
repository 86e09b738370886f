#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
术数排盘静态数据表

纯数据模块，不含业务逻辑；所有表在导入时构建且只读。
"""

from .stems_branches import (
    STEMS,
    BRANCHES,
    ELEMENTS,
    STEM_ELEMENTS,
    STEM_YINYANG,
    BRANCH_ELEMENTS,
    BRANCH_YINYANG,
    HIDDEN_STEMS,
    HIDDEN_STEMS_WEIGHT,
    SIXTY_JIAZI,
    NAYIN,
    LIUHE,
    LIUCHONG,
    TIANGAN_WUHE,
    BRANCH_PRIMARY_STEM,
    stem_index,
    branch_index,
    nayin_element,
)
from .hexagrams import (
    TRIGRAMS,
    TRIGRAM_BY_NUMBER,
    LINES_TO_TRIGRAM,
    HEXAGRAMS,
    trigram_from_lines,
    lookup_hexagram,
)

__all__ = [
    'STEMS',
    'BRANCHES',
    'ELEMENTS',
    'STEM_ELEMENTS',
    'STEM_YINYANG',
    'BRANCH_ELEMENTS',
    'BRANCH_YINYANG',
    'HIDDEN_STEMS',
    'HIDDEN_STEMS_WEIGHT',
    'SIXTY_JIAZI',
    'NAYIN',
    'LIUHE',
    'LIUCHONG',
    'TIANGAN_WUHE',
    'BRANCH_PRIMARY_STEM',
    'stem_index',
    'branch_index',
    'nayin_element',
    'TRIGRAMS',
    'TRIGRAM_BY_NUMBER',
    'LINES_TO_TRIGRAM',
    'HEXAGRAMS',
    'trigram_from_lines',
    'lookup_hexagram',
]
