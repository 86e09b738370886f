#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
奇门遁甲数据表（时家转盘，拆补法定元）
"""

from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple


class PalaceMeta(NamedTuple):
    trigram: str
    direction: str
    default_star: str
    default_gate: Optional[str]
    branches: Tuple[str, ...]


CENTER_PALACE = 5
# 中五寄坤二
LODGE_PALACE = 2

PALACE_META = MappingProxyType({
    1: PalaceMeta('坎', '北', '天蓬', '休门', ('子',)),
    2: PalaceMeta('坤', '西南', '天芮', '死门', ('未', '申')),
    3: PalaceMeta('震', '东', '天冲', '伤门', ('卯',)),
    4: PalaceMeta('巽', '东南', '天辅', '杜门', ('辰', '巳')),
    5: PalaceMeta('中', '中', '天禽', None, ()),
    6: PalaceMeta('乾', '西北', '天心', '开门', ('戌', '亥')),
    7: PalaceMeta('兑', '西', '天柱', '惊门', ('酉',)),
    8: PalaceMeta('艮', '东北', '天任', '生门', ('丑', '寅')),
    9: PalaceMeta('离', '南', '天英', '景门', ('午',)),
})

# 外八宫顺时针 / 逆时针（不含中五）
CLOCKWISE = (1, 8, 3, 4, 9, 2, 7, 6)
COUNTERCLOCKWISE = (1, 6, 7, 2, 9, 4, 3, 8)

# 节气 → [上元, 中元, 下元] 局数
JIEQI_JU_TABLE = MappingProxyType({
    '冬至': (1, 7, 4), '小寒': (2, 8, 5), '大寒': (3, 9, 6),
    '立春': (8, 5, 2), '雨水': (9, 6, 3), '惊蛰': (1, 7, 4),
    '春分': (3, 9, 6), '清明': (4, 1, 7), '谷雨': (5, 2, 8),
    '立夏': (4, 1, 7), '小满': (5, 2, 8), '芒种': (6, 3, 9),
    '夏至': (9, 3, 6), '小暑': (8, 2, 5), '大暑': (7, 1, 4),
    '立秋': (2, 5, 8), '处暑': (1, 4, 7), '白露': (9, 3, 6),
    '秋分': (7, 1, 4), '寒露': (6, 9, 3), '霜降': (5, 8, 2),
    '立冬': (6, 9, 3), '小雪': (5, 8, 2), '大雪': (4, 7, 1),
})

YANG_DUN_JIEQI = frozenset((
    '冬至', '小寒', '大寒', '立春', '雨水', '惊蛰',
    '春分', '清明', '谷雨', '立夏', '小满', '芒种',
))

YUAN_NAMES = ('上元', '中元', '下元')

# 六甲旬首所遁之仪
JIA_HIDDEN_YI = MappingProxyType({
    '甲子': '戊', '甲戌': '己', '甲申': '庚',
    '甲午': '辛', '甲辰': '壬', '甲寅': '癸',
})

# 三奇六仪布局顺序
SANQI_LIUYI = ('戊', '己', '庚', '辛', '壬', '癸', '丁', '丙', '乙')

YANG_DEITIES = ('值符', '螣蛇', '太阴', '六合', '白虎', '玄武', '九地', '九天')
YIN_DEITIES = ('值符', '螣蛇', '太阴', '六合', '勾陈', '朱雀', '九地', '九天')

# 反吟对冲之仪
CHONG_STEMS = MappingProxyType({
    '戊': '壬', '壬': '戊', '己': '癸', '癸': '己',
    '庚': '丁', '丁': '庚', '辛': '丙', '丙': '辛',
})

# 南半球方位南北互换
SOUTHERN_DIRECTION_SWAP = MappingProxyType({
    '北': '南', '南': '北',
    '东北': '东南', '东南': '东北',
    '西北': '西南', '西南': '西北',
    '东': '东', '西': '西', '中': '中',
})
