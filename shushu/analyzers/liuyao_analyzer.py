#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
六爻分析上下文提取器
"""

from shushu.models.analysis import LiuyaoAnalysisContext
from shushu.models.liuyao import LiuyaoLine, LiuyaoResult

POSITION_NAMES = {1: '初', 2: '二', 3: '三', 4: '四', 5: '五', 6: '上'}


def format_line(line: LiuyaoLine) -> str:
    """如 青龙 | 妻财 | 甲子(水) | 阳 ○动 世 → 丑(土)父母"""
    moving = ' ○动' if line.is_moving else ''
    shi_ying = ' 世' if line.is_shi else (' 应' if line.is_ying else '')
    changed = ''
    if line.changed_branch:
        changed = f" → {line.changed_branch}({line.changed_element}){line.changed_relation}"
    return (f"{POSITION_NAMES[line.position]}爻 {line.spirit} | {line.relation} | "
            f"{line.stem}{line.branch}({line.element}) | {'阳' if line.is_yang else '阴'}{moving}{shi_ying}{changed}")


class LiuyaoAnalyzer:
    """六爻分析上下文"""

    @staticmethod
    def extract(result: LiuyaoResult) -> LiuyaoAnalysisContext:
        hexagram = result.original_hex
        changed = result.changed_hex
        hidden = '，'.join(
            f"{g.relation}({g.branch}·{g.element})伏于第{g.position}爻{g.flying_branch}{g.flying_relation}之下"
            for g in result.hidden_gods
        )
        return LiuyaoAnalysisContext(
            hexagram_info=f"{hexagram.name} ({hexagram.palace}宫·{hexagram.palace_element}·{hexagram.generation}) "
                          f"世{hexagram.shi_position}应{hexagram.ying_position}",
            day_month=f"日干支: {result.day_gan_zhi}, 月建: {result.month_branch}",
            xun_kong=f"旬空: {result.xun_kong}",
            lines_summary='\n'.join(format_line(line) for line in reversed(hexagram.lines)),
            moving_info=f"动爻: {','.join(str(p) for p in result.moving_lines)}爻" if result.moving_lines else '无动爻',
            changed_hexagram=f"变卦: {changed.name} ({changed.palace}宫)" if changed else '无变卦',
            hidden_gods=hidden or '六亲齐全，无伏神',
            question=result.input.question or '',
        )


def extract_liuyao_analysis_context(result: LiuyaoResult) -> LiuyaoAnalysisContext:
    """六爻分析上下文入口"""
    return LiuyaoAnalyzer.extract(result)
