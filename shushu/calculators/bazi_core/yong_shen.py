#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
扶抑用神与月令格局

供八字分析、每日运势、合婚共用：
- 由命格字符串解析身强身弱与其依据
- 身强取泄耗（食伤为用、财为喜、印为忌），身弱取生扶（印为用、比劫为喜、财为忌）
- 月支本气十神定格局，比劫为建禄格，天干不见者加（不透）
"""

import re
from typing import NamedTuple, Tuple

from shushu.data.stems_branches import BRANCH_PRIMARY_STEM
from .element_relations import get_controlled_element, get_producing_element, get_producing_from_element
from .ten_gods import get_ten_god

STRONG = '身强'
WEAK = '身弱'

_FACTORS_PATTERN = re.compile(r'（(.+?)）')


class YongShen(NamedTuple):
    """用神、喜神、忌神（五行）"""
    yong: str
    xi: str
    ji: str


def parse_strength(mingge: str) -> Tuple[str, str]:
    """
    解析命格字符串

    Args:
        mingge: 如 "甲日主身强（得令、得地）"

    Returns:
        (身强/身弱, 括号内依据)
    """
    strength = STRONG if STRONG in mingge else WEAK
    match = _FACTORS_PATTERN.search(mingge)
    return strength, match.group(1) if match else ''


def determine_yong_shen(day_element: str, strength: str) -> YongShen:
    if strength == STRONG:
        return YongShen(
            yong=get_producing_element(day_element),
            xi=get_controlled_element(day_element),
            ji=get_producing_from_element(day_element),
        )
    return YongShen(
        yong=get_producing_from_element(day_element),
        xi=day_element,
        ji=get_controlled_element(day_element),
    )


def determine_ge_ju(day_master: str, month_branch: str, stems) -> str:
    """
    月令格局

    Args:
        day_master: 日干
        month_branch: 月支
        stems: 年、月、时 天干（时辰不详时不含时干）
    """
    primary_god = get_ten_god(day_master, BRANCH_PRIMARY_STEM[month_branch])
    transparent = any(get_ten_god(day_master, stem) == primary_god for stem in stems)
    name = '建禄格' if primary_god in ('比肩', '劫财') else f"{primary_god}格"
    return name if transparent else f"{name}（不透）"
