#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

提供天干十神与地支藏干十神的计算功能。
"""

from typing import List

from shushu.data.stems_branches import STEM_ELEMENTS, STEM_YINYANG, HIDDEN_STEMS

from .element_relations import element_distance

DAY_MASTER_LABEL = '日主'

# 五行距离 → (同阴阳, 异阴阳)
_TEN_GOD_BY_DISTANCE = (
    ('比肩', '劫财'),
    ('食神', '伤官'),
    ('偏财', '正财'),
    ('七杀', '正官'),
    ('偏印', '正印'),
)


def get_ten_god(day_stem: str, target_stem: str) -> str:
    """
    计算目标天干相对日干的十神

    与日干相同的天干记为比肩；日柱天干本身由调用方标记为“日主”。

    Args:
        day_stem: 日干
        target_stem: 目标天干

    Returns:
        str: 十神名称
    """
    distance = element_distance(STEM_ELEMENTS[day_stem], STEM_ELEMENTS[target_stem])
    same_polarity = STEM_YINYANG[day_stem] == STEM_YINYANG[target_stem]
    same, different = _TEN_GOD_BY_DISTANCE[distance]
    return same if same_polarity else different


def get_main_star(day_stem: str, target_stem: str, pillar_type: str) -> str:
    """
    计算天干主星（十神）

    Args:
        day_stem: 日干
        target_stem: 目标天干
        pillar_type: 柱类型（year/month/day/hour）
    """
    if pillar_type == 'day':
        return DAY_MASTER_LABEL
    return get_ten_god(day_stem, target_stem)


def get_branch_ten_gods(day_stem: str, branch: str) -> List[str]:
    """
    计算地支藏干的十神（副星），顺序同藏干（本气、中气、余气）

    Args:
        day_stem: 日干
        branch: 地支

    Returns:
        List[str]: 十神列表
    """
    return [get_ten_god(day_stem, hidden_stem) for hidden_stem in HIDDEN_STEMS[branch]]
