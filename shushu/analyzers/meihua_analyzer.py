#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
梅花易数分析上下文提取器
"""

from typing import Optional

from shushu.models.analysis import MeihuaAnalysisContext
from shushu.models.meihua import Hexagram, MeihuaResult

SEASON_UNKNOWN = '时令不详（数字起卦）'


def season_of(lunar_month: Optional[int]) -> str:
    """农历一至三月春、四至六月夏、七至九月秋、十至十二月冬"""
    if lunar_month is None:
        return SEASON_UNKNOWN
    if 1 <= lunar_month <= 3:
        return '春季（木旺）'
    if 4 <= lunar_month <= 6:
        return '夏季（火旺）'
    if 7 <= lunar_month <= 9:
        return '秋季（金旺）'
    return '冬季（水旺）'


def hexagram_summary(hexagram: Hexagram) -> str:
    upper, lower = hexagram.upper, hexagram.lower
    return f"{hexagram.name}（上{upper.name}{upper.wuxing}下{lower.name}{lower.wuxing}）：{hexagram.gua_ci}"


def _trigram_pair(label: str, hexagram: Hexagram) -> str:
    upper, lower = hexagram.upper, hexagram.lower
    return f"{label}：上卦{upper.name}({upper.wuxing})，下卦{lower.name}({lower.wuxing})"


class MeihuaAnalyzer:
    """梅花易数分析上下文"""

    @staticmethod
    def extract(result: MeihuaResult) -> MeihuaAnalysisContext:
        return MeihuaAnalysisContext(
            question=result.input.question or '',
            method='时间起卦' if result.input.method == 'time' else '数字起卦',
            ben_gua_summary=hexagram_summary(result.ben_gua),
            hu_gua_summary=hexagram_summary(result.hu_gua),
            bian_gua_summary=hexagram_summary(result.bian_gua),
            changing_line_summary=f"第{result.changing_line}爻动，"
                                  f"{'上卦' if result.changing_line > 3 else '下卦'}为用",
            ti_yong_summary=result.ti_yong.summary,
            wuxing_analysis='；'.join((
                _trigram_pair('本卦', result.ben_gua),
                _trigram_pair('互卦', result.hu_gua),
                _trigram_pair('变卦', result.bian_gua),
            )),
            seasonal_context=season_of(result.lunar_month),
        )


def extract_meihua_analysis_context(result: MeihuaResult) -> MeihuaAnalysisContext:
    """梅花易数分析上下文入口"""
    return MeihuaAnalyzer.extract(result)
