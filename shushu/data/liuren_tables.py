#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大六壬数据表
"""

from types import MappingProxyType

# 日干寄宫
STEM_PALACE = MappingProxyType({
    '甲': '寅', '乙': '辰', '丙': '巳', '丁': '未', '戊': '巳',
    '己': '未', '庚': '申', '辛': '戌', '壬': '亥', '癸': '丑',
})

# 中气 → 月将
MONTH_JIANG_TABLE = MappingProxyType({
    '雨水': '亥', '春分': '戌', '谷雨': '酉', '小满': '申',
    '夏至': '未', '大暑': '午', '处暑': '巳', '秋分': '辰',
    '霜降': '卯', '小雪': '寅', '冬至': '丑', '大寒': '子',
})

JIANG_NAME = MappingProxyType({
    '子': '神后', '丑': '大吉', '寅': '功曹', '卯': '太冲',
    '辰': '天罡', '巳': '太乙', '午': '胜光', '未': '小吉',
    '申': '传送', '酉': '从魁', '戌': '河魁', '亥': '登明',
})

# 日干 → (昼贵, 夜贵)
GUIREN_TABLE = MappingProxyType({
    '甲': ('丑', '未'), '戊': ('丑', '未'), '庚': ('丑', '未'),
    '乙': ('子', '申'), '己': ('子', '申'),
    '丙': ('亥', '酉'), '丁': ('亥', '酉'),
    '壬': ('巳', '卯'), '癸': ('巳', '卯'),
    '辛': ('午', '寅'),
})

TWELVE_GENERALS = (
    '贵人', '螣蛇', '朱雀', '六合', '勾陈', '青龙',
    '天空', '白虎', '太常', '玄武', '太阴', '天后',
)

# 三刑
SANXING = MappingProxyType({
    '寅': '巳', '巳': '申', '申': '寅',
    '丑': '戌', '戌': '未', '未': '丑',
    '子': '卯', '卯': '子',
    '辰': '辰', '午': '午', '酉': '酉', '亥': '亥',
})

# 三合局 → 驿马
_YIMA_GROUPS = (
    (('申', '子', '辰'), '寅'),
    (('寅', '午', '戌'), '申'),
    (('亥', '卯', '未'), '巳'),
    (('巳', '酉', '丑'), '亥'),
)

YIMA = MappingProxyType({
    branch: yima for group, yima in _YIMA_GROUPS for branch in group
})


def get_yima(day_branch: str) -> str:
    return YIMA[day_branch]
