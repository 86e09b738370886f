#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据

所有表均为只读常量（tuple / MappingProxyType），模块加载时构建一次。
"""

from types import MappingProxyType

STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')
BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')
ELEMENTS = ('木', '火', '土', '金', '水')

STEM_ELEMENTS = MappingProxyType({
    '甲': '木', '乙': '木', '丙': '火', '丁': '火', '戊': '土',
    '己': '土', '庚': '金', '辛': '金', '壬': '水', '癸': '水',
})

STEM_YINYANG = MappingProxyType({
    '甲': '阳', '乙': '阴', '丙': '阳', '丁': '阴', '戊': '阳',
    '己': '阴', '庚': '阳', '辛': '阴', '壬': '阳', '癸': '阴',
})

BRANCH_ELEMENTS = MappingProxyType({
    '子': '水', '丑': '土', '寅': '木', '卯': '木', '辰': '土', '巳': '火',
    '午': '火', '未': '土', '申': '金', '酉': '金', '戌': '土', '亥': '水',
})

BRANCH_YINYANG = MappingProxyType({
    b: ('阳' if i % 2 == 0 else '阴') for i, b in enumerate(BRANCHES)
})

# 地支藏干（本气、中气、余气）
HIDDEN_STEMS = MappingProxyType({
    '子': ('癸',),
    '丑': ('己', '癸', '辛'),
    '寅': ('甲', '丙', '戊'),
    '卯': ('乙',),
    '辰': ('戊', '乙', '癸'),
    '巳': ('丙', '庚', '戊'),
    '午': ('丁', '己'),
    '未': ('己', '丁', '乙'),
    '申': ('庚', '壬', '戊'),
    '酉': ('辛',),
    '戌': ('戊', '辛', '丁'),
    '亥': ('壬', '甲'),
})

# 藏干力量：本气 1.0 / 中气 0.5 / 余气 0.3
HIDDEN_STEM_WEIGHTS = (1.0, 0.5, 0.3)

HIDDEN_STEMS_WEIGHT = MappingProxyType({
    branch: tuple(zip(stems, HIDDEN_STEM_WEIGHTS))
    for branch, stems in HIDDEN_STEMS.items()
})

# 六十甲子
SIXTY_JIAZI = tuple(STEMS[i % 10] + BRANCHES[i % 12] for i in range(60))

_NAYIN_NAMES = (
    '海中金', '炉中火', '大林木', '路旁土', '剑锋金',
    '山头火', '涧下水', '城头土', '白蜡金', '杨柳木',
    '泉中水', '屋上土', '霹雳火', '松柏木', '长流水',
    '沙中金', '山下火', '平地木', '壁上土', '金箔金',
    '覆灯火', '天河水', '大驿土', '钗钏金', '桑柘木',
    '大溪水', '沙中土', '天上火', '石榴木', '大海水',
)

# 纳音：每两个相邻干支共用一个纳音
NAYIN = MappingProxyType({
    gan_zhi: _NAYIN_NAMES[i // 2] for i, gan_zhi in enumerate(SIXTY_JIAZI)
})

LIUHE = MappingProxyType({
    '子': '丑', '丑': '子', '寅': '亥', '亥': '寅',
    '卯': '戌', '戌': '卯', '辰': '酉', '酉': '辰',
    '巳': '申', '申': '巳', '午': '未', '未': '午',
})

LIUCHONG = MappingProxyType({
    b: BRANCHES[(i + 6) % 12] for i, b in enumerate(BRANCHES)
})

# 天干五合
TIANGAN_WUHE = (
    ('甲', '己', '土'),
    ('乙', '庚', '金'),
    ('丙', '辛', '水'),
    ('丁', '壬', '木'),
    ('戊', '癸', '火'),
)

# 月支本气
BRANCH_PRIMARY_STEM = MappingProxyType({
    branch: stems[0] for branch, stems in HIDDEN_STEMS.items()
})


def stem_index(stem: str) -> int:
    return STEMS.index(stem)


def branch_index(branch: str) -> int:
    return BRANCHES.index(branch)


def nayin_element(nayin: str) -> str:
    """纳音五行取末字"""
    return nayin[-1]
