#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数安星数据表

地支一律以索引表示：0=子, 1=丑, ... 11=亥
"""

from types import MappingProxyType

PALACE_NAMES = (
    '命宫', '兄弟宫', '夫妻宫', '子女宫', '财帛宫', '疾厄宫',
    '迁移宫', '交友宫', '官禄宫', '田宅宫', '福德宫', '父母宫',
)

MAIN_STARS = (
    '紫微', '天机', '太阳', '武曲', '天同', '廉贞', '天府',
    '太阴', '贪狼', '巨门', '天相', '天梁', '七杀', '破军',
)

AUX_STARS = (
    '文昌', '文曲', '左辅', '右弼', '天魁', '天钺', '禄存',
    '擎羊', '陀罗', '火星', '铃星', '天马', '地空', '地劫',
)

# 五行局列顺序
JU_NUMBERS = (2, 3, 4, 5, 6)

# 紫微安星表：农历日 → [水二局, 木三局, 金四局, 土五局, 火六局]
ZIWEI_POSITION_TABLE = MappingProxyType({
    1: (1, 2, 3, 4, 5),
    2: (2, 2, 3, 4, 5),
    3: (2, 3, 4, 4, 5),
    4: (3, 3, 4, 5, 6),
    5: (3, 4, 4, 5, 6),
    6: (4, 4, 5, 5, 6),
    7: (4, 4, 5, 6, 7),
    8: (4, 5, 5, 6, 7),
    9: (5, 5, 6, 6, 7),
    10: (5, 5, 6, 7, 8),
    11: (5, 6, 6, 7, 8),
    12: (6, 6, 7, 7, 8),
    13: (6, 7, 7, 7, 8),
    14: (7, 7, 7, 8, 9),
    15: (7, 7, 8, 8, 9),
    16: (7, 8, 8, 9, 9),
    17: (8, 8, 8, 9, 10),
    18: (8, 8, 9, 9, 10),
    19: (8, 9, 9, 10, 10),
    20: (9, 9, 9, 10, 11),
    21: (9, 9, 10, 10, 11),
    22: (9, 10, 10, 11, 11),
    23: (10, 10, 11, 11, 11),
    24: (10, 11, 11, 11, 0),
    25: (11, 11, 11, 0, 0),
    26: (11, 11, 0, 0, 1),
    27: (11, 0, 0, 1, 1),
    28: (0, 0, 1, 1, 1),
    29: (0, 1, 1, 1, 2),
    30: (1, 1, 1, 2, 2),
})

# 紫微星系：自紫微逆数
ZIWEI_SERIES_OFFSETS = (
    ('天机', 1),
    ('太阳', 3),
    ('武曲', 4),
    ('天同', 5),
    ('廉贞', 8),
)

# 紫微所在 → 天府所在（寅申为轴对称）
TIANFU_FROM_ZIWEI = MappingProxyType({
    i: (4 - i) % 12 for i in range(12)
})

# 天府星系：自天府顺数
TIANFU_SERIES_OFFSETS = (
    ('太阴', 1),
    ('贪狼', 2),
    ('巨门', 3),
    ('天相', 4),
    ('天梁', 5),
    ('七杀', 6),
    ('破军', 10),
)

# 主星亮度：子 → 亥
STAR_BRIGHTNESS = MappingProxyType({
    '紫微': ('旺', '庙', '得', '利', '庙', '得', '庙', '庙', '得', '利', '庙', '得'),
    '天机': ('得', '庙', '利', '庙', '平', '利', '不', '庙', '利', '庙', '平', '利'),
    '太阳': ('陷', '不', '旺', '庙', '庙', '庙', '庙', '得', '利', '平', '陷', '陷'),
    '武曲': ('庙', '庙', '利', '陷', '旺', '得', '利', '庙', '利', '庙', '旺', '得'),
    '天同': ('庙', '不', '利', '平', '陷', '庙', '平', '不', '利', '平', '陷', '庙'),
    '廉贞': ('平', '庙', '庙', '利', '陷', '利', '陷', '庙', '庙', '利', '陷', '利'),
    '天府': ('庙', '庙', '得', '庙', '得', '庙', '旺', '得', '庙', '得', '庙', '旺'),
    '太阴': ('庙', '庙', '陷', '陷', '得', '利', '不', '陷', '平', '得', '庙', '庙'),
    '贪狼': ('旺', '庙', '庙', '庙', '利', '平', '旺', '庙', '庙', '庙', '利', '平'),
    '巨门': ('庙', '不', '庙', '旺', '利', '平', '庙', '不', '庙', '旺', '利', '平'),
    '天相': ('得', '庙', '庙', '得', '平', '利', '得', '庙', '庙', '得', '平', '利'),
    '天梁': ('庙', '庙', '庙', '旺', '得', '利', '庙', '庙', '陷', '得', '得', '得'),
    '七杀': ('庙', '旺', '庙', '得', '平', '利', '庙', '旺', '庙', '得', '平', '利'),
    '破军': ('旺', '得', '庙', '陷', '平', '庙', '旺', '得', '庙', '陷', '平', '庙'),
})

SI_HUA_NAMES = ('化禄', '化权', '化科', '化忌')

# 年干四化：[化禄, 化权, 化科, 化忌]，戊己辛壬化科从中州派
SI_HUA_TABLE = MappingProxyType({
    '甲': ('廉贞', '破军', '武曲', '太阳'),
    '乙': ('天机', '天梁', '紫微', '太阴'),
    '丙': ('天同', '天机', '天梁', '廉贞'),
    '丁': ('太阴', '天同', '天机', '巨门'),
    '戊': ('贪狼', '太阴', '天府', '天机'),
    '己': ('武曲', '贪狼', '天梁', '天同'),
    '庚': ('太阳', '武曲', '太阴', '天同'),
    '辛': ('巨门', '太阳', '天梁', '天机'),
    '壬': ('天梁', '紫微', '天府', '武曲'),
    '癸': ('破军', '巨门', '太阴', '贪狼'),
})

TIANKUI_TABLE = MappingProxyType({
    '甲': 1, '戊': 1, '庚': 1, '乙': 0, '己': 0,
    '丙': 11, '丁': 9, '壬': 3, '癸': 3, '辛': 6,
})

TIANYUE_TABLE = MappingProxyType({
    '甲': 7, '戊': 7, '庚': 7, '乙': 8, '己': 8,
    '丙': 3, '丁': 5, '壬': 5, '癸': 5, '辛': 2,
})

LUCUN_TABLE = MappingProxyType({
    '甲': 2, '乙': 3, '丙': 5, '丁': 6, '戊': 5,
    '己': 6, '庚': 8, '辛': 9, '壬': 11, '癸': 0,
})

# 年支三合局：寅午戌=0, 申子辰=1, 巳酉丑=2, 亥卯未=3
YEAR_BRANCH_GROUP = MappingProxyType({
    2: 0, 6: 0, 10: 0,
    8: 1, 0: 1, 4: 1,
    5: 2, 9: 2, 1: 2,
    11: 3, 3: 3, 7: 3,
})

HUOXING_BASE = (1, 2, 3, 9)
LINGXING_BASE = (3, 10, 10, 10)

# 年支 → 天马
TIANMA_TABLE = MappingProxyType({
    0: 2, 1: 11, 2: 8, 3: 5, 4: 2, 5: 11,
    6: 8, 7: 5, 8: 2, 9: 11, 10: 8, 11: 5,
})

# 五虎遁：年干 → 寅宫天干索引
MONTH_STEM_START = MappingProxyType({
    '甲': 2, '己': 2, '乙': 4, '庚': 4, '丙': 6,
    '辛': 6, '丁': 8, '壬': 8, '戊': 0, '癸': 0,
})

# 纳音五行 → 五行局
NAYIN_TO_JU = MappingProxyType({
    '水': ('水二局', 2),
    '木': ('木三局', 3),
    '金': ('金四局', 4),
    '土': ('土五局', 5),
    '火': ('火六局', 6),
})

# 年支 → 命主（寅戌禄存、卯酉文曲按传统列入）
MING_ZHU_TABLE = (
    '贪狼', '巨门', '禄存', '文曲', '廉贞', '武曲',
    '破军', '武曲', '廉贞', '文曲', '禄存', '巨门',
)

# 年支 → 身主
SHEN_ZHU_TABLE = (
    '天同', '天相', '天梁', '天同', '天机', '天梁',
    '天同', '天相', '天梁', '天同', '天机', '天梁',
)


def wen_chang_position(hour_index: int) -> int:
    """文昌：辰宫起子时逆行"""
    return (4 - hour_index) % 12


def wen_qu_position(hour_index: int) -> int:
    """文曲：辰宫起子时顺行"""
    return (4 + hour_index) % 12


def zuo_fu_position(lunar_month: int) -> int:
    return (4 + lunar_month - 1) % 12


def you_bi_position(lunar_month: int) -> int:
    return (10 - lunar_month + 1) % 12


def qing_yang_position(lucun: int) -> int:
    return (lucun + 1) % 12


def tuo_luo_position(lucun: int) -> int:
    return (lucun - 1) % 12


def huo_xing_position(year_branch_index: int, hour_index: int) -> int:
    return (HUOXING_BASE[YEAR_BRANCH_GROUP[year_branch_index]] + hour_index) % 12


def ling_xing_position(year_branch_index: int, hour_index: int) -> int:
    return (LINGXING_BASE[YEAR_BRANCH_GROUP[year_branch_index]] + hour_index) % 12


def di_kong_position(hour_index: int) -> int:
    """地空：亥宫起子时逆行"""
    return (11 - hour_index) % 12


def di_jie_position(hour_index: int) -> int:
    """地劫：亥宫起子时顺行"""
    return (11 + hour_index) % 12
