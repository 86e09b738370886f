#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
梅花易数起卦计算器

数字起卦 / 时间起卦 → 上下卦 → 动爻 → 本卦、互卦、变卦 → 体用
"""

from typing import Any, Dict, NamedTuple, Sequence, Union

from shushu.calculators.bazi_core import controls, produces
from shushu.calculators.calc_logging import CalculationLog
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.hexagrams import TRIGRAM_BY_NUMBER, TRIGRAMS, lookup_hexagram, trigram_from_lines
from shushu.data.stems_branches import BRANCHES
from shushu.models.common import DateTimeInput
from shushu.models.meihua import Hexagram, MeihuaInput, MeihuaResult, TiYongAnalysis, Trigram

RELATION_ZH = {
    '生': '泄气，小凶',
    '克': '耗力，中平',
    '被生': '有利，吉',
    '被克': '不利，凶',
    '比和': '和谐，吉',
}


class CastNumbers(NamedTuple):
    """起卦用数：上卦数、下卦数、动爻"""
    upper: int
    lower: int
    changing_line: int


def ti_yong_relation(ti_element: str, yong_element: str) -> str:
    """以体为我论用：体生用为生，体克用为克，用生体为被生，用克体为被克"""
    if ti_element == yong_element:
        return '比和'
    if produces(ti_element, yong_element):
        return '生'
    if controls(ti_element, yong_element):
        return '克'
    if produces(yong_element, ti_element):
        return '被生'
    return '被克'


def build_trigram(name: str) -> Trigram:
    info = TRIGRAMS[name]
    return Trigram(
        name=info.name,
        number=info.number,
        symbol=info.symbol,
        wuxing=info.wuxing,
        image=info.image,
        lines=list(info.lines),
    )


def build_hexagram(upper: Trigram, lower: Trigram) -> Hexagram:
    info = lookup_hexagram(upper.name, lower.name)
    return Hexagram(
        name=info.name,
        upper=upper,
        lower=lower,
        lines=list(lower.lines) + list(upper.lines),
        king_wen_number=info.king_wen_number,
        gua_ci=info.gua_ci,
    )


def hexagram_from_lines(lines: Sequence[bool]) -> Hexagram:
    return build_hexagram(
        build_trigram(trigram_from_lines(lines[3:])),
        build_trigram(trigram_from_lines(lines[:3])),
    )


def mutual_hexagram(hexagram: Hexagram) -> Hexagram:
    """互卦：二三四爻为下互，三四五爻为上互"""
    lines = hexagram.lines
    return hexagram_from_lines(lines[1:4] + lines[2:5])


def changed_hexagram(hexagram: Hexagram, changing_line: int) -> Hexagram:
    lines = list(hexagram.lines)
    lines[changing_line - 1] = not lines[changing_line - 1]
    return hexagram_from_lines(lines)


def analyze_ti_yong(upper: Trigram, lower: Trigram, changing_line: int) -> TiYongAnalysis:
    """动爻所在为用，另一卦为体"""
    ti_position = 'upper' if changing_line <= 3 else 'lower'
    ti, yong = (upper, lower) if ti_position == 'upper' else (lower, upper)
    relation = ti_yong_relation(ti.wuxing, yong.wuxing)
    verdict = '体用比和' if relation == '比和' else f"体{relation}用"
    summary = f"体{ti.name}{ti.wuxing}，用{yong.name}{yong.wuxing}，{verdict}，{RELATION_ZH[relation]}"
    return TiYongAnalysis(ti=ti, yong=yong, ti_position=ti_position, relation=relation, summary=summary)


def _mod_or(value: int, base: int) -> int:
    return value % base or base


class MeihuaCalculator:
    """梅花易数起卦计算器"""

    def __init__(self, data: MeihuaInput):
        self.data = data
        self.log = CalculationLog('meihua')
        self.lunar_month = None

    def calculate(self) -> MeihuaResult:
        if self.data.method == 'time':
            numbers = self._time_numbers()
        else:
            numbers = self._number_numbers()

        upper = build_trigram(TRIGRAM_BY_NUMBER[numbers.upper])
        lower = build_trigram(TRIGRAM_BY_NUMBER[numbers.lower])
        line = numbers.changing_line
        self.log.note('卦象', f"上卦={upper.name}({upper.symbol}), 下卦={lower.name}({lower.symbol}), 动爻=第{line}爻")

        ben_gua = build_hexagram(upper, lower)
        hu_gua = mutual_hexagram(ben_gua)
        bian_gua = changed_hexagram(ben_gua, line)
        ti_yong = analyze_ti_yong(upper, lower, line)
        self.log.note('结果', f"本卦={ben_gua.name}, 互卦={hu_gua.name}, 变卦={bian_gua.name}, 体用={ti_yong.summary}")

        return MeihuaResult(
            input=self.data,
            ben_gua=ben_gua,
            hu_gua=hu_gua,
            bian_gua=bian_gua,
            changing_line=line,
            ti_yong=ti_yong,
            lunar_month=self.lunar_month,
            calculation_log=self.log.entries,
        )

    def _number_numbers(self) -> CastNumbers:
        u, l = self.data.upper_number, self.data.lower_number
        numbers = CastNumbers(_mod_or(u, 8), _mod_or(l, 8), _mod_or(u + l, 6))
        self.log.note('数字起卦', f"上卦数={u}%8={numbers.upper}, 下卦数={l}%8={numbers.lower}, "
                                f"动爻=({u}+{l})%6={numbers.changing_line}")
        return numbers

    def _time_numbers(self) -> CastNumbers:
        """年支数（子1…亥12，以立春为界）+ 农历月 + 农历日 为上卦，再加时支数为下卦"""
        data = self.data
        moment = DateTimeInput(
            year=data.year, month=data.month, day=data.day, hour=data.hour,
            calendar_type=data.calendar_type, is_leap_month=data.is_leap_month, timezone=data.timezone,
        )
        resolved = LunarConverter.resolve(moment)
        lunar = resolved.lunar

        year_branch = lunar.getYearZhiExact()
        year_number = BRANCHES.index(year_branch) + 1
        month = abs(lunar.getMonth())
        day = lunar.getDay()
        hour_number = LunarConverter.hour_branch_index(resolved.info.adjusted_datetime.hour) + 1
        self.lunar_month = month
        self.log.note('农历转换', f"年支={year_branch}({year_number}), 月={month}, 日={day}, 时辰={hour_number}")

        upper_sum = year_number + month + day
        lower_sum = upper_sum + hour_number
        numbers = CastNumbers(_mod_or(upper_sum, 8), _mod_or(lower_sum, 8), _mod_or(lower_sum, 6))
        self.log.note('起卦计算', f"上卦数=({year_number}+{month}+{day})%8={numbers.upper}, "
                                f"下卦数=({upper_sum}+{hour_number})%8={numbers.lower}, "
                                f"动爻={lower_sum}%6={numbers.changing_line}")
        return numbers


def calculate_meihua(data: Union[MeihuaInput, Dict[str, Any]]) -> MeihuaResult:
    """
    梅花易数起卦入口

    Args:
        data: MeihuaInput 或等价字典

    Returns:
        MeihuaResult: 本卦、互卦、变卦与体用
    """
    if not isinstance(data, MeihuaInput):
        data = MeihuaInput.model_validate(data)
    return MeihuaCalculator(data).calculate()
