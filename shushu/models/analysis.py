#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析上下文模型 - 供提示词层使用的纯文本摘要
"""

from pydantic import Field

from .common import ResultModel


class BaziAnalysisContext(ResultModel):
    strength: str = Field(..., description="身强 / 身弱")
    strength_factors: str = Field(..., description="得令、得地、得助等")
    yong_shen: str = Field(..., description="用神")
    xi_shen: str = Field(..., description="喜神")
    ji_shen: str = Field(..., description="忌神")
    ge_ju: str = Field(..., description="格局")
    wuxing_summary: str
    shishen_summary: str
    shensha_summary: str
    dayun_summary: str
    pillars_summary: str = Field(..., description="四柱")
    xun_kong: str = Field(..., description="日柱旬空")


class ZiweiAnalysisContext(ResultModel):
    name: str
    gender: str
    lunar_birth: str
    ming_palace: str
    shen_palace: str
    wuxing_ju: str
    palaces_summary: str
    decade_luck_summary: str
    si_hua_summary: str
    key_patterns: str


class QimenAnalysisContext(ResultModel):
    dun_type: str
    ju_info: str
    day_hour: str
    zhi_fu: str
    zhi_shi: str
    xun_info: str
    palaces_summary: str
    patterns: str
    question: str


class LiuyaoAnalysisContext(ResultModel):
    hexagram_info: str
    day_month: str
    xun_kong: str
    lines_summary: str = Field(..., description="六爻，自上爻至初爻")
    moving_info: str
    changed_hexagram: str
    hidden_gods: str
    question: str


class LiurenAnalysisContext(ResultModel):
    day_hour_info: str
    month_jiang: str
    board_summary: str
    lessons_summary: str
    transmission_info: str
    xun_kong: str
    question: str


class MeihuaAnalysisContext(ResultModel):
    question: str
    method: str
    ben_gua_summary: str
    hu_gua_summary: str
    bian_gua_summary: str
    changing_line_summary: str
    ti_yong_summary: str
    wuxing_analysis: str
    seasonal_context: str
