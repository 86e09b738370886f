#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八卦与六十四卦数据

供梅花易数与六爻共用：
- 先天八卦数（乾1 兑2 离3 震4 巽5 坎6 艮7 坤8）
- 三爻卦象（初爻→上爻，True 为阳爻）
- 六十四卦卦名、文王卦序与卦辞
"""

from types import MappingProxyType
from typing import NamedTuple, Tuple


class TrigramInfo(NamedTuple):
    name: str
    number: int
    symbol: str
    wuxing: str
    image: str
    lines: Tuple[bool, bool, bool]


class HexagramInfo(NamedTuple):
    name: str
    king_wen_number: int
    upper: str
    lower: str
    gua_ci: str


_TRIGRAM_ROWS = (
    ('乾', 1, '☰', '金', '天', (True, True, True)),
    ('兑', 2, '☱', '金', '泽', (True, True, False)),
    ('离', 3, '☲', '火', '火', (True, False, True)),
    ('震', 4, '☳', '木', '雷', (True, False, False)),
    ('巽', 5, '☴', '木', '风', (False, True, True)),
    ('坎', 6, '☵', '水', '水', (False, True, False)),
    ('艮', 7, '☶', '土', '山', (False, False, True)),
    ('坤', 8, '☷', '土', '地', (False, False, False)),
)

TRIGRAMS = MappingProxyType({
    row[0]: TrigramInfo(*row) for row in _TRIGRAM_ROWS
})

# 先天数 → 卦名
TRIGRAM_BY_NUMBER = MappingProxyType({
    info.number: info.name for info in TRIGRAMS.values()
})

# 爻象 → 卦名
LINES_TO_TRIGRAM = MappingProxyType({
    info.lines: info.name for info in TRIGRAMS.values()
})

# (文王卦序, 上卦, 下卦, 卦名, 卦辞)
_HEXAGRAM_ROWS = (
    (1, '乾', '乾', '乾为天', '元亨利贞。'),
    (2, '坤', '坤', '坤为地', '元亨，利牝马之贞。君子有攸往，先迷后得主，利。西南得朋，东北丧朋。安贞吉。'),
    (3, '坎', '震', '水雷屯', '元亨利贞，勿用有攸往，利建侯。'),
    (4, '艮', '坎', '山水蒙', '亨。匪我求童蒙，童蒙求我。初筮告，再三渎，渎则不告。利贞。'),
    (5, '坎', '乾', '水天需', '有孚，光亨，贞吉。利涉大川。'),
    (6, '乾', '坎', '天水讼', '有孚，窒惕，中吉，终凶。利见大人，不利涉大川。'),
    (7, '坤', '坎', '地水师', '贞，丈人吉，无咎。'),
    (8, '坎', '坤', '水地比', '吉。原筮元永贞，无咎。不宁方来，后夫凶。'),
    (9, '巽', '乾', '风天小畜', '亨。密云不雨，自我西郊。'),
    (10, '乾', '兑', '天泽履', '履虎尾，不咥人，亨。'),
    (11, '坤', '乾', '地天泰', '小往大来，吉亨。'),
    (12, '乾', '坤', '天地否', '否之匪人，不利君子贞，大往小来。'),
    (13, '乾', '离', '天火同人', '同人于野，亨。利涉大川，利君子贞。'),
    (14, '离', '乾', '火天大有', '元亨。'),
    (15, '坤', '艮', '地山谦', '亨，君子有终。'),
    (16, '震', '坤', '雷地豫', '利建侯行师。'),
    (17, '兑', '震', '泽雷随', '元亨利贞，无咎。'),
    (18, '艮', '巽', '山风蛊', '元亨，利涉大川。先甲三日，后甲三日。'),
    (19, '坤', '兑', '地泽临', '元亨利贞。至于八月有凶。'),
    (20, '巽', '坤', '风地观', '盥而不荐，有孚颙若。'),
    (21, '离', '震', '火雷噬嗑', '亨。利用狱。'),
    (22, '艮', '离', '山火贲', '亨。小利有攸往。'),
    (23, '艮', '坤', '山地剥', '不利有攸往。'),
    (24, '坤', '震', '地雷复', '亨。出入无疾，朋来无咎。反复其道，七日来复，利有攸往。'),
    (25, '乾', '震', '天雷无妄', '元亨利贞。其匪正有眚，不利有攸往。'),
    (26, '艮', '乾', '山天大畜', '利贞，不家食吉，利涉大川。'),
    (27, '艮', '震', '山雷颐', '贞吉。观颐，自求口实。'),
    (28, '兑', '巽', '泽风大过', '栋桡，利有攸往，亨。'),
    (29, '坎', '坎', '坎为水', '习坎，有孚，维心亨，行有尚。'),
    (30, '离', '离', '离为火', '利贞，亨。畜牝牛，吉。'),
    (31, '兑', '艮', '泽山咸', '亨，利贞，取女吉。'),
    (32, '震', '巽', '雷风恒', '亨，无咎，利贞，利有攸往。'),
    (33, '乾', '艮', '天山遁', '亨，小利贞。'),
    (34, '震', '乾', '雷天大壮', '利贞。'),
    (35, '离', '坤', '火地晋', '康侯用锡马蕃庶，昼日三接。'),
    (36, '坤', '离', '地火明夷', '利艰贞。'),
    (37, '巽', '离', '风火家人', '利女贞。'),
    (38, '离', '兑', '火泽睽', '小事吉。'),
    (39, '坎', '艮', '水山蹇', '利西南，不利东北；利见大人，贞吉。'),
    (40, '震', '坎', '雷水解', '利西南，无所往，其来复吉。有攸往，夙吉。'),
    (41, '艮', '兑', '山泽损', '有孚，元吉，无咎，可贞，利有攸往。曷之用，二簋可用享。'),
    (42, '巽', '震', '风雷益', '利有攸往，利涉大川。'),
    (43, '兑', '乾', '泽天夬', '扬于王庭，孚号，有厉，告自邑，不利即戎，利有攸往。'),
    (44, '乾', '巽', '天风姤', '女壮，勿用取女。'),
    (45, '兑', '坤', '泽地萃', '亨。王假有庙，利见大人，亨，利贞。用大牲吉，利有攸往。'),
    (46, '坤', '巽', '地风升', '元亨，用见大人，勿恤，南征吉。'),
    (47, '兑', '坎', '泽水困', '亨，贞，大人吉，无咎，有言不信。'),
    (48, '坎', '巽', '水风井', '改邑不改井，无丧无得，往来井井。汔至亦未繘井，羸其瓶，凶。'),
    (49, '兑', '离', '泽火革', '己日乃孚，元亨利贞，悔亡。'),
    (50, '离', '巽', '火风鼎', '元吉，亨。'),
    (51, '震', '震', '震为雷', '亨。震来虩虩，笑言哑哑。震惊百里，不丧匕鬯。'),
    (52, '艮', '艮', '艮为山', '艮其背，不获其身，行其庭，不见其人，无咎。'),
    (53, '巽', '艮', '风山渐', '女归吉，利贞。'),
    (54, '震', '兑', '雷泽归妹', '征凶，无攸利。'),
    (55, '震', '离', '雷火丰', '亨，王假之，勿忧，宜日中。'),
    (56, '离', '艮', '火山旅', '小亨，旅贞吉。'),
    (57, '巽', '巽', '巽为风', '小亨，利有攸往，利见大人。'),
    (58, '兑', '兑', '兑为泽', '亨，利贞。'),
    (59, '巽', '坎', '风水涣', '亨。王假有庙，利涉大川，利贞。'),
    (60, '坎', '兑', '水泽节', '亨。苦节不可贞。'),
    (61, '巽', '兑', '风泽中孚', '豚鱼吉，利涉大川，利贞。'),
    (62, '震', '艮', '雷山小过', '亨，利贞，可小事，不可大事。飞鸟遗之音，不宜上宜下，大吉。'),
    (63, '坎', '离', '水火既济', '亨小，利贞，初吉终乱。'),
    (64, '离', '坎', '火水未济', '亨，小狐汔济，濡其尾，无攸利。'),
)

# (上卦, 下卦) → 卦信息
HEXAGRAMS = MappingProxyType({
    (upper, lower): HexagramInfo(name, number, upper, lower, gua_ci)
    for number, upper, lower, name, gua_ci in _HEXAGRAM_ROWS
})

assert len(HEXAGRAMS) == 64


def trigram_from_lines(lines) -> str:
    """三爻（初→上）求卦名"""
    return LINES_TO_TRIGRAM[tuple(bool(x) for x in lines)]


def lookup_hexagram(upper: str, lower: str) -> HexagramInfo:
    return HEXAGRAMS[(upper, lower)]
