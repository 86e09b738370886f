#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数分析上下文提取器
"""

import logging

from shushu.models.analysis import ZiweiAnalysisContext
from shushu.models.ziwei import ZiweiPalace, ZiweiResult, ZiweiStar

logger = logging.getLogger(__name__)

DECADE_SUMMARY_LIMIT = 8

# 命宫紫微与之同宫成格的主星
ZIWEI_PAIRS = (
    ('天府', '紫府同宫'),
    ('贪狼', '紫贪同宫'),
    ('天相', '紫相同宫'),
    ('七杀', '紫杀同宫'),
    ('破军', '紫破同宫'),
)

BRIGHT = ('庙', '旺')


def format_star(star: ZiweiStar) -> str:
    text = star.name
    if star.brightness:
        text += f"({star.brightness})"
    if star.si_hua:
        text += f"[{star.si_hua}]"
    return text


def format_palace(palace: ZiweiPalace) -> str:
    """如 命宫(丙寅)：主星 紫微(庙)、天府(庙)；辅星 文昌 [大运2-11]"""
    main = '、'.join(format_star(s) for s in palace.stars if s.type == 'main')
    aux = '、'.join(format_star(s) for s in palace.stars if s.type == 'aux')
    line = f"{palace.name}({palace.stem}{palace.branch})"
    if main:
        line += f"：主星 {main}"
    if aux:
        line += f"；辅星 {aux}"
    if palace.decade_luck_age:
        line += f" [大运{palace.decade_luck_age}]"
    return line


class ZiweiAnalyzer:
    """紫微斗数分析上下文"""

    @staticmethod
    def extract(result: ZiweiResult) -> ZiweiAnalysisContext:
        chart = result.chart
        info = result.lunar_info
        palaces = chart.palaces
        ming = next((p for p in palaces if p.name == '命宫'), None)
        shen = next((p for p in palaces if p.name == chart.shen_palace), None)

        si_hua = [
            f"{star.name}{star.si_hua}在{palace.name}"
            for palace in palaces for star in palace.stars if star.si_hua
        ]

        return ZiweiAnalysisContext(
            name=result.input.name or '未知',
            gender='男' if result.input.gender == 'male' else '女',
            lunar_birth=f"农历{info.year_stem}{info.year_branch}年{'闰' if info.is_leap else ''}"
                        f"{info.month}月{info.day}日 {info.hour_branch}时",
            ming_palace=format_palace(ming) if ming else '命宫信息缺失',
            shen_palace=f"身宫在{chart.shen_palace}：{format_palace(shen)}" if shen else f"身宫在{chart.shen_palace}",
            wuxing_ju=chart.wuxing_ju,
            palaces_summary='\n'.join(format_palace(p) for p in palaces),
            decade_luck_summary='；'.join(
                f"{luck.age_range}岁 {luck.stem}{luck.branch}({luck.palace_name})"
                for luck in result.decade_lucks[:DECADE_SUMMARY_LIMIT]
            ),
            si_hua_summary='，'.join(si_hua),
            key_patterns=ZiweiAnalyzer.key_patterns(result),
        )

    @staticmethod
    def key_patterns(result: ZiweiResult) -> str:
        palaces = result.chart.palaces
        ming = next((p for p in palaces if p.name == '命宫'), None)
        patterns = []

        if ming is not None:
            main = {s.name for s in ming.stars if s.type == 'main'}
            if '紫微' in main:
                patterns += [name for star, name in ZIWEI_PAIRS if star in main]

        stars = [star for palace in palaces for star in palace.stars]
        sun_bright = any(s.name == '太阳' and s.brightness in BRIGHT for s in stars)
        moon_bright = any(s.name == '太阴' and s.brightness in BRIGHT for s in stars)
        if sun_bright and moon_bright:
            patterns.append('日月并明')

        if ming is not None:
            for star in ming.stars:
                if star.si_hua in ('化禄', '化忌'):
                    patterns.append(f"命宫{star.name}{star.si_hua}")

        if patterns:
            logger.debug(f"紫微格局: {patterns}")
        return '；'.join(patterns) or '无显著格局特征'


def extract_ziwei_analysis_context(result: ZiweiResult) -> ZiweiAnalysisContext:
    """紫微斗数分析上下文入口"""
    return ZiweiAnalyzer.extract(result)
