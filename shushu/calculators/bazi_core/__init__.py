#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

提供八字计算的核心功能：
- 五行关系计算
- 十神计算
- 扶抑用神与月令格局
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    element_distance,
    get_element_relation,
    produces,
    controls,
    get_producing_element,
    get_controlled_element,
    get_producing_from_element,
    get_controlled_by_element,
)
from .ten_gods import (
    DAY_MASTER_LABEL,
    get_ten_god,
    get_main_star,
    get_branch_ten_gods,
)
from .yong_shen import (
    STRONG,
    WEAK,
    YongShen,
    parse_strength,
    determine_yong_shen,
    determine_ge_ju,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'element_distance',
    'get_element_relation',
    'produces',
    'controls',
    'get_producing_element',
    'get_controlled_element',
    'get_producing_from_element',
    'get_controlled_by_element',
    'DAY_MASTER_LABEL',
    'get_ten_god',
    'get_main_star',
    'get_branch_ten_gods',
    'STRONG',
    'WEAK',
    'YongShen',
    'parse_strength',
    'determine_yong_shen',
    'determine_ge_ju',
]
