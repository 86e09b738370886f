#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大六壬排盘计算器

日时干支 → 定月将 → 布天地盘 → 起四课 → 取三传 → 布天将 → 旬空
"""

from typing import Any, Dict, List, NamedTuple, Union

from lunar_python.util import LunarUtil

from shushu.calculators.bazi_core import controls, produces
from shushu.calculators.calc_logging import CalculationLog
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.liuren_tables import (
    GUIREN_TABLE,
    JIANG_NAME,
    MONTH_JIANG_TABLE,
    SANXING,
    STEM_PALACE,
    TWELVE_GENERALS,
    get_yima,
)
from shushu.data.stems_branches import BRANCH_ELEMENTS, BRANCHES, LIUCHONG, STEM_ELEMENTS
from shushu.models.liuren import (
    LiurenBoard,
    LiurenInput,
    LiurenLesson,
    LiurenPosition,
    LiurenResult,
    LiurenTransmission,
)


class KeEntry(NamedTuple):
    """四课中的一处克：use 为发用之支"""
    lesson_index: int
    top: str
    bottom: str
    top_controls: bool

    @property
    def use(self) -> str:
        return self.top if self.top_controls else self.bottom


def element_relation_text(top_element: str, bottom_element: str) -> str:
    if top_element == bottom_element:
        return '比和'
    if produces(top_element, bottom_element):
        return f"{top_element}生{bottom_element}"
    if produces(bottom_element, top_element):
        return f"{bottom_element}生{top_element}"
    if controls(top_element, bottom_element):
        return f"{top_element}克{bottom_element}"
    return f"{bottom_element}克{top_element}"


def build_heaven_plate(month_jiang: str, hour_branch: str) -> Dict[str, str]:
    """月将加时：地盘支 → 天盘支"""
    offset = (BRANCHES.index(hour_branch) - BRANCHES.index(month_jiang)) % 12
    return {earth: BRANCHES[(i - offset) % 12] for i, earth in enumerate(BRANCHES)}


def build_lessons(plate: Dict[str, str], day_stem: str, day_branch: str) -> List[LiurenLesson]:
    """四课：干上、干上之上、支上、支上之上"""
    bottoms = []
    stem_palace = STEM_PALACE[day_stem]
    bottoms.append(stem_palace)
    bottoms.append(plate[stem_palace])
    bottoms.append(day_branch)
    bottoms.append(plate[day_branch])

    lessons = []
    for bottom in bottoms:
        top = plate[bottom]
        top_element = BRANCH_ELEMENTS[top]
        bottom_element = BRANCH_ELEMENTS[bottom]
        lessons.append(LiurenLesson(
            top=top,
            bottom=bottom,
            top_element=top_element,
            bottom_element=bottom_element,
            relation=element_relation_text(top_element, bottom_element),
        ))
    return lessons


def find_ke_entries(lessons: List[LiurenLesson]) -> List[KeEntry]:
    entries = []
    for i, lesson in enumerate(lessons):
        if controls(lesson.top_element, lesson.bottom_element):
            entries.append(KeEntry(i, lesson.top, lesson.bottom, True))
        elif controls(lesson.bottom_element, lesson.top_element):
            entries.append(KeEntry(i, lesson.top, lesson.bottom, False))
    return entries


def she_hai_depth(plate: Dict[str, str], entry: KeEntry) -> int:
    """涉害：自课下之支顺行至发用之支，沿途天地盘相克的次数"""
    start = BRANCHES.index(entry.bottom)
    count = 0
    for step in range(12):
        earth = BRANCHES[(start + step) % 12]
        earth_element = BRANCH_ELEMENTS[earth]
        heaven_element = BRANCH_ELEMENTS[plate[earth]]
        if controls(heaven_element, earth_element) or controls(earth_element, heaven_element):
            count += 1
        if earth == entry.use:
            break
    return count


def select_initial(plate: Dict[str, str], lessons: List[LiurenLesson], day_stem: str, day_branch: str):
    """
    取初传，返回 (初传, 取传法)

    伏吟 → 返吟 → 贼克 → 比用 → 涉害 → 遥克 → 昴星
    """
    if all(heaven == earth for earth, heaven in plate.items()):
        for lesson in lessons:
            target = SANXING[lesson.top]
            if target != lesson.top:
                return target, '伏吟(刑)'
        if day_branch in LIUCHONG:
            return LIUCHONG[day_branch], '伏吟(冲)'
        return STEM_PALACE[day_stem], '伏吟(自身)'

    ke_entries = find_ke_entries(lessons)

    if all(LIUCHONG[earth] == heaven for earth, heaven in plate.items()):
        if ke_entries:
            return ke_entries[0].use, '返吟(驿马)'
        return get_yima(day_branch), '返吟(驿马)'

    if ke_entries:
        upper = [e for e in ke_entries if e.top_controls]
        lower = [e for e in ke_entries if not e.top_controls]
        candidates = upper or lower
        method = '贼克法(上克下)' if upper else '贼克法(下克上)'
        if len(candidates) == 1:
            return candidates[0].use, method

        # 比用：与日干五行相同者
        day_element = STEM_ELEMENTS[day_stem]
        matching = [e for e in candidates if BRANCH_ELEMENTS[e.use] == day_element]
        if len(matching) == 1:
            return matching[0].use, '比用法'
        if matching:
            candidates = matching

        best = max(candidates, key=lambda e: she_hai_depth(plate, e))
        return best.use, '涉害法'

    tops = [lesson.top for lesson in lessons]
    for i in range(4):
        for j in range(i + 1, 4):
            if controls(BRANCH_ELEMENTS[tops[i]], BRANCH_ELEMENTS[tops[j]]):
                return tops[i], '遥克法'
            if controls(BRANCH_ELEMENTS[tops[j]], BRANCH_ELEMENTS[tops[i]]):
                return tops[j], '遥克法'

    return plate[STEM_PALACE[day_stem]], '昴星法'


def place_generals(plate: Dict[str, str], day_stem: str, is_day: bool) -> Dict[str, str]:
    """
    布天将：贵人临天盘贵人支所在之位，昼顺夜逆
    返回 地盘支 → 天将
    """
    noble = GUIREN_TABLE[day_stem][0 if is_day else 1]
    noble_earth = next(earth for earth, heaven in plate.items() if heaven == noble)
    start = BRANCHES.index(noble_earth)
    step = 1 if is_day else -1
    return {
        BRANCHES[(start + step * i) % 12]: general
        for i, general in enumerate(TWELVE_GENERALS)
    }


class LiurenCalculator:
    """大六壬排盘计算器"""

    def __init__(self, data: LiurenInput):
        self.data = data
        self.log = CalculationLog('liuren')

    def calculate(self) -> LiurenResult:
        resolved = LunarConverter.resolve(self.data)
        day_gz = resolved.eight_char.getDay()
        hour_gz = resolved.eight_char.getTime()
        day_stem, day_branch = day_gz[0], day_gz[1]
        hour_branch = hour_gz[1]
        self.log.note('日时干支', f"日干支: {day_gz}, 时干支: {hour_gz}")

        # 月将以中气为界
        month_jiang = MONTH_JIANG_TABLE[resolved.lunar.getPrevQi(True).getName()]
        jiang_name = JIANG_NAME[month_jiang]
        self.log.note('定月将', f"月将: {month_jiang}({jiang_name})")

        plate = build_heaven_plate(month_jiang, hour_branch)
        self.log.note('布天地盘', f"月将{month_jiang}加时支{hour_branch}")

        lessons = build_lessons(plate, day_stem, day_branch)
        self.log.note('起四课', ', '.join(
            f"第{i + 1}课: {lesson.top}/{lesson.bottom}({lesson.relation})" for i, lesson in enumerate(lessons)
        ))

        initial, method = select_initial(plate, lessons, day_stem, day_branch)
        middle = plate[initial]
        final = plate[middle]
        self.log.note('取三传', f"{method}: 初传{initial}, 中传{middle}, 末传{final}")

        # 卯至酉为昼
        is_day = 3 <= BRANCHES.index(hour_branch) <= 9
        generals = place_generals(plate, day_stem, is_day)
        self.log.note('布天将', ' '.join(f"{earth}:{generals[earth]}" for earth in BRANCHES))
        general_of_heaven = {plate[earth]: generals[earth] for earth in BRANCHES}

        xun_kong = LunarUtil.getXunKong(day_gz)
        self.log.note('旬空', f"旬空: {xun_kong}")

        board = LiurenBoard(
            positions=[
                LiurenPosition(earth_branch=earth, heaven_branch=plate[earth], general=generals[earth])
                for earth in BRANCHES
            ],
            month_jiang=month_jiang,
            month_jiang_name=jiang_name,
            lessons=lessons,
            transmission=LiurenTransmission(
                initial=initial,
                middle=middle,
                final=final,
                method=method,
                initial_general=general_of_heaven.get(initial),
                middle_general=general_of_heaven.get(middle),
                final_general=general_of_heaven.get(final),
            ),
            xun_kong=xun_kong,
        )
        return LiurenResult(
            input=self.data,
            board=board,
            day_gan_zhi=day_gz,
            hour_gan_zhi=hour_gz,
            hour_branch=hour_branch,
            is_day=is_day,
            calculation_log=self.log.entries,
        )


def calculate_liuren(data: Union[LiurenInput, Dict[str, Any]]) -> LiurenResult:
    """
    大六壬排盘入口

    Args:
        data: LiurenInput 或等价字典

    Returns:
        LiurenResult: 天地盘、四课、三传、天将
    """
    if not isinstance(data, LiurenInput):
        data = LiurenInput.model_validate(data)
    return LiurenCalculator(data).calculate()
