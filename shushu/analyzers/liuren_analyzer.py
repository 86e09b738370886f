#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大六壬分析上下文提取器
"""

from typing import Optional

from shushu.models.analysis import LiurenAnalysisContext
from shushu.models.liuren import LiurenResult


def _with_general(branch: str, general: Optional[str]) -> str:
    return f"{branch}[{general}]" if general else branch


class LiurenAnalyzer:
    """大六壬分析上下文"""

    @staticmethod
    def extract(result: LiurenResult) -> LiurenAnalysisContext:
        board = result.board
        t = board.transmission
        return LiurenAnalysisContext(
            day_hour_info=f"日干支: {result.day_gan_zhi}, 时干支: {result.hour_gan_zhi}, {'昼' if result.is_day else '夜'}占",
            month_jiang=f"月将: {board.month_jiang}({board.month_jiang_name})",
            board_summary=', '.join(
                f"{p.earth_branch}上{_with_general(p.heaven_branch, p.general)}" for p in board.positions
            ),
            lessons_summary='\n'.join(
                f"第{i + 1}课: {lesson.top}({lesson.top_element})/{lesson.bottom}({lesson.bottom_element}) {lesson.relation}"
                for i, lesson in enumerate(board.lessons)
            ),
            transmission_info=', '.join((
                f"取传法: {t.method}",
                f"初传: {_with_general(t.initial, t.initial_general)}",
                f"中传: {_with_general(t.middle, t.middle_general)}",
                f"末传: {_with_general(t.final, t.final_general)}",
            )),
            xun_kong=f"旬空: {board.xun_kong}",
            question=result.input.question or '',
        )


def extract_liuren_analysis_context(result: LiurenResult) -> LiurenAnalysisContext:
    """大六壬分析上下文入口"""
    return LiurenAnalyzer.extract(result)
