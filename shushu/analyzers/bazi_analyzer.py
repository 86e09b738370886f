#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字分析上下文提取器

依《滴天髓》《渊海子平》的常规取法，从排盘结果提炼：
- 身强身弱及依据
- 扶抑用神（用神、喜神、忌神）
- 月令格局
- 五行、十神、神煞、大运摘要
"""

import logging
from collections import Counter
from typing import Dict, List

from shushu.calculators.bazi_core import (
    DAY_MASTER_LABEL,
    determine_ge_ju,
    determine_yong_shen,
    get_controlled_by_element,
    parse_strength,
)
from shushu.data.stems_branches import BRANCH_ELEMENTS, ELEMENTS, STEM_ELEMENTS
from shushu.models.analysis import BaziAnalysisContext
from shushu.models.bazi import BaziChart, BaziResult, ShenSha, YunInfo

logger = logging.getLogger(__name__)

PILLAR_LABELS = {'year': '年柱', 'month': '月柱', 'day': '日柱', 'hour': '时柱'}

# 大运摘要只列前八步
DAYUN_SUMMARY_LIMIT = 8


class BaziAnalyzer:
    """八字分析上下文"""

    @staticmethod
    def extract(result: BaziResult) -> BaziAnalysisContext:
        chart = result.chart
        day_element = STEM_ELEMENTS[chart.day_master]

        strength, factors = parse_strength(chart.mingge)
        yong_shen = determine_yong_shen(day_element, strength)

        stems = [pillar.stem_branch.stem for name, pillar in chart.four_pillars.items() if name != 'day']
        ge_ju = determine_ge_ju(chart.day_master, chart.four_pillars.month.stem_branch.branch, stems)

        context = BaziAnalysisContext(
            strength=strength,
            strength_factors=factors,
            yong_shen=yong_shen.yong,
            xi_shen=yong_shen.xi,
            ji_shen=yong_shen.ji,
            ge_ju=ge_ju,
            wuxing_summary=BaziAnalyzer.wuxing_summary(chart.wuxing_distribution),
            shishen_summary=BaziAnalyzer.shishen_summary(chart),
            shensha_summary=BaziAnalyzer.shensha_summary(chart.shensha),
            dayun_summary=BaziAnalyzer.dayun_summary(result.yun, yong_shen.yong, day_element),
            pillars_summary=' '.join(
                f"{PILLAR_LABELS[name]}{pillar.stem_branch.gan_zhi}" for name, pillar in chart.four_pillars.items()
            ),
            xun_kong=chart.four_pillars.day.xun_kong,
        )
        logger.debug(f"八字分析: {chart.mingge} 用{context.yong_shen} 喜{context.xi_shen} 忌{context.ji_shen} {ge_ju}")
        return context

    @staticmethod
    def wuxing_summary(distribution: Dict[str, int]) -> str:
        """如 木2 火4 土1 金1 水0，火旺水弱；并列时取先出现者"""
        counts = [(element, distribution.get(element, 0)) for element in ELEMENTS]
        strongest = max(counts, key=lambda item: item[1])[0]
        weakest = min(counts, key=lambda item: item[1])[0]
        return f"{' '.join(f'{e}{n}' for e, n in counts)}，{strongest}旺{weakest}弱"

    @staticmethod
    def shishen_summary(chart: BaziChart) -> str:
        shishen = chart.shishen
        parts = []
        for label, pillar in (('年干', shishen.year), ('月干', shishen.month), ('时干', shishen.hour)):
            if pillar is not None and pillar.stem != DAY_MASTER_LABEL:
                parts.append(f"{label}{pillar.stem}")

        names: List[str] = []
        for pillar in (shishen.year, shishen.month, shishen.day, shishen.hour):
            if pillar is None:
                continue
            if pillar.stem != DAY_MASTER_LABEL:
                names.append(pillar.stem)
            names.extend(pillar.branch)

        dominant = Counter(names).most_common(2)
        if dominant:
            parts.append(f"主要十神：{'、'.join(f'{name}({count})' for name, count in dominant)}")
        return '，'.join(parts)

    @staticmethod
    def shensha_summary(shensha: List[ShenSha]) -> str:
        if not shensha:
            return '无明显神煞'
        lucky = [s.name for s in shensha if s.is_auspicious]
        unlucky = [s.name for s in shensha if not s.is_auspicious]
        parts = []
        if lucky:
            parts.append(f"吉神：{'、'.join(lucky)}")
        if unlucky:
            parts.append(f"凶煞：{'、'.join(unlucky)}")
        return '；'.join(parts)

    @staticmethod
    def dayun_summary(yun: YunInfo, yong_element: str, day_element: str) -> str:
        """
        大运摘要

        干或支为用神五行标 ★；干或支为克身（官杀）五行标 ▽，两者兼有时以 ▽ 为准
        """
        if not yun.da_yun:
            return '大运信息不足'
        killer = get_controlled_by_element(day_element)
        parts = [f"{yun.start_age}岁起运"]
        for cycle in yun.da_yun[:DAYUN_SUMMARY_LIMIT]:
            sb = cycle.stem_branch
            elements = (STEM_ELEMENTS[sb.stem], BRANCH_ELEMENTS[sb.branch])
            label = ''
            if yong_element in elements:
                label = '★'
            if killer in elements:
                label = '▽'
            parts.append(f"{cycle.start_age}-{cycle.end_age}岁 {sb.gan_zhi}{label}")
        return '，'.join(parts)


def extract_bazi_analysis_context(result: BaziResult) -> BaziAnalysisContext:
    """八字分析上下文入口"""
    return BaziAnalyzer.extract(result)
