#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

提供五行生克关系的常量定义和计算函数，八字、六爻、六壬、梅花共用。
"""

from types import MappingProxyType
from typing import Literal

from shushu.data.stems_branches import ELEMENTS

# 五行关系类型
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me']

# 五行生克关系定义
ELEMENT_RELATIONS = MappingProxyType({
    '木': MappingProxyType({'produces': '火', 'controls': '土', 'produced_by': '水', 'controlled_by': '金'}),
    '火': MappingProxyType({'produces': '土', 'controls': '金', 'produced_by': '木', 'controlled_by': '水'}),
    '土': MappingProxyType({'produces': '金', 'controls': '水', 'produced_by': '火', 'controlled_by': '木'}),
    '金': MappingProxyType({'produces': '水', 'controls': '木', 'produced_by': '土', 'controlled_by': '火'}),
    '水': MappingProxyType({'produces': '木', 'controls': '火', 'produced_by': '金', 'controlled_by': '土'}),
})


def element_distance(day_element: str, target_element: str) -> int:
    """
    相生方向上的距离：(目标 − 日主 + 5) % 5

    0 同我，1 我生，2 我克，3 克我，4 生我
    """
    return (ELEMENTS.index(target_element) - ELEMENTS.index(day_element) + 5) % 5


_DISTANCE_RELATION = ('same', 'me_producing', 'me_controlling', 'controlling_me', 'producing_me')


def get_element_relation(day_element: str, target_element: str) -> RelationType:
    """
    判断五行生克关系

    Args:
        day_element: 主体五行（木/火/土/金/水）
        target_element: 目标五行

    Returns:
        RelationType: 关系类型
        - 'same': 同元素
        - 'me_producing': 我生
        - 'me_controlling': 我克
        - 'producing_me': 生我
        - 'controlling_me': 克我
    """
    return _DISTANCE_RELATION[element_distance(day_element, target_element)]


def produces(a: str, b: str) -> bool:
    """a 生 b"""
    return ELEMENT_RELATIONS[a]['produces'] == b


def controls(a: str, b: str) -> bool:
    """a 克 b"""
    return ELEMENT_RELATIONS[a]['controls'] == b


def get_producing_element(element: str) -> str:
    """获取被生的元素"""
    return ELEMENT_RELATIONS[element]['produces']


def get_controlled_element(element: str) -> str:
    """获取被克的元素"""
    return ELEMENT_RELATIONS[element]['controls']


def get_producing_from_element(element: str) -> str:
    """获取生我的元素"""
    return ELEMENT_RELATIONS[element]['produced_by']


def get_controlled_by_element(element: str) -> str:
    """获取克我的元素"""
    return ELEMENT_RELATIONS[element]['controlled_by']
