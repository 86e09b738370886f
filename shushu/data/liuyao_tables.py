#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
六爻纳甲数据表

- 纳甲天干、内外卦地支
- 八宫六十四卦（卦宫、世应）
- 六神起例
"""

from types import MappingProxyType
from typing import NamedTuple

from .hexagrams import TRIGRAMS

SIX_RELATIONS = ('父母', '兄弟', '子孙', '妻财', '官鬼')

# 乾纳甲壬，坤纳乙癸，震庚巽辛，坎戊离己，艮丙兑丁
NAJIA_STEMS = MappingProxyType({
    '乾': ('甲', '壬'),
    '坤': ('乙', '癸'),
    '震': ('庚', '庚'),
    '巽': ('辛', '辛'),
    '坎': ('戊', '戊'),
    '离': ('己', '己'),
    '艮': ('丙', '丙'),
    '兑': ('丁', '丁'),
})

# 内卦（初、二、三爻）
NAJIA_INNER = MappingProxyType({
    '乾': ('子', '寅', '辰'),
    '坤': ('未', '巳', '卯'),
    '震': ('子', '寅', '辰'),
    '巽': ('丑', '亥', '酉'),
    '坎': ('寅', '辰', '午'),
    '离': ('卯', '丑', '亥'),
    '艮': ('辰', '午', '申'),
    '兑': ('巳', '卯', '丑'),
})

# 外卦（四、五、上爻）
NAJIA_OUTER = MappingProxyType({
    '乾': ('午', '申', '戌'),
    '坤': ('丑', '亥', '酉'),
    '震': ('午', '申', '戌'),
    '巽': ('未', '巳', '卯'),
    '坎': ('申', '戌', '子'),
    '离': ('酉', '未', '巳'),
    '艮': ('戌', '子', '寅'),
    '兑': ('亥', '酉', '未'),
})


class PalaceEntry(NamedTuple):
    palace: str
    palace_element: str
    generation: int
    shi: int
    ying: int


# 世数 → (世, 应)：本宫、一世…五世、游魂、归魂
GENERATION_LABELS = ('本宫', '一世', '二世', '三世', '四世', '五世', '游魂', '归魂')
SHI_YING_BY_GENERATION = (
    (6, 3), (1, 4), (2, 5), (3, 6), (4, 1), (5, 2), (4, 1), (3, 6),
)

# 每宫八卦（上卦, 下卦），次序同 GENERATION_LABELS
_PALACE_ROWS = (
    ('乾', (('乾', '乾'), ('乾', '巽'), ('乾', '艮'), ('乾', '坤'),
            ('巽', '坤'), ('艮', '坤'), ('离', '坤'), ('离', '乾'))),
    ('兑', (('兑', '兑'), ('兑', '坎'), ('兑', '坤'), ('兑', '艮'),
            ('坎', '艮'), ('坤', '艮'), ('震', '艮'), ('震', '兑'))),
    ('离', (('离', '离'), ('离', '艮'), ('离', '巽'), ('离', '坎'),
            ('艮', '坎'), ('巽', '坎'), ('乾', '坎'), ('乾', '离'))),
    ('震', (('震', '震'), ('震', '坤'), ('震', '坎'), ('震', '巽'),
            ('坤', '巽'), ('坎', '巽'), ('兑', '巽'), ('兑', '震'))),
    ('巽', (('巽', '巽'), ('巽', '乾'), ('巽', '离'), ('巽', '震'),
            ('乾', '震'), ('离', '震'), ('艮', '震'), ('艮', '巽'))),
    ('坎', (('坎', '坎'), ('坎', '兑'), ('坎', '震'), ('坎', '离'),
            ('兑', '离'), ('震', '离'), ('坤', '离'), ('坤', '坎'))),
    ('艮', (('艮', '艮'), ('艮', '离'), ('艮', '乾'), ('艮', '兑'),
            ('离', '兑'), ('乾', '兑'), ('巽', '兑'), ('巽', '艮'))),
    ('坤', (('坤', '坤'), ('坤', '震'), ('坤', '兑'), ('坤', '乾'),
            ('震', '乾'), ('兑', '乾'), ('坎', '乾'), ('坎', '坤'))),
)

# (上卦, 下卦) → 卦宫信息
HEXAGRAM_PALACE_MAP = MappingProxyType({
    key: PalaceEntry(palace, TRIGRAMS[palace].wuxing, generation, *SHI_YING_BY_GENERATION[generation])
    for palace, keys in _PALACE_ROWS
    for generation, key in enumerate(keys)
})

assert len(HEXAGRAM_PALACE_MAP) == 64

SIX_SPIRITS = ('青龙', '朱雀', '勾陈', '螣蛇', '白虎', '玄武')

# 日干 → 初爻六神
SPIRIT_START = MappingProxyType({
    '甲': 0, '乙': 0,
    '丙': 1, '丁': 1,
    '戊': 2,
    '己': 3,
    '庚': 4, '辛': 4,
    '壬': 5, '癸': 5,
})
