#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数数据模型
"""

from typing import List, Literal, Optional

from pydantic import Field

from .common import DateTimeInput, LogEntry, ResultModel


class ZiweiInput(DateTimeInput):
    """紫微斗数出生信息"""
    gender: Literal['male', 'female'] = Field(..., description="性别：male(男) 或 female(女)")
    name: Optional[str] = Field(None, description="姓名（仅用于分析上下文）")


class ZiweiStar(ResultModel):
    """星曜"""
    name: str = Field(..., description="星名")
    type: Literal['main', 'aux'] = Field(..., description="main 主星，aux 辅星")
    brightness: Optional[str] = Field(None, description="亮度（庙旺得利平不陷），仅主星")
    si_hua: Optional[str] = Field(None, description="生年四化")


class ZiweiPalace(ResultModel):
    """宫位"""
    name: str = Field(..., description="宫名")
    stem: str = Field(..., description="宫干")
    branch: str = Field(..., description="宫支")
    stars: List[ZiweiStar] = Field(default_factory=list, description="星曜")
    decade_luck_age: Optional[str] = Field(None, description="大限年龄段，如 4-13")
    is_shen_palace: bool = Field(False, description="身宫所在")


class SiHuaEntry(ResultModel):
    star: str
    hua: str


class DecadeLuck(ResultModel):
    """大限"""
    age_range: str = Field(..., description="年龄段")
    start_age: int
    end_age: int
    palace_name: str = Field(..., description="大限所行宫位")
    stem: str
    branch: str
    si_hua: List[SiHuaEntry] = Field(default_factory=list, description="大限宫干四化")


class ZiweiChart(ResultModel):
    """命盘"""
    palaces: List[ZiweiPalace] = Field(..., description="十二宫，自命宫起")
    ming_palace: str = Field('命宫', description="命宫")
    ming_branch: str = Field(..., description="命宫地支")
    shen_palace: str = Field(..., description="身宫所在宫名")
    shen_branch: str = Field(..., description="身宫地支")
    ming_zhu: str = Field(..., description="命主")
    shen_zhu: str = Field(..., description="身主")
    wuxing_ju: str = Field(..., description="五行局")
    ju_number: int = Field(..., description="局数")


class ZiweiLunarInfo(ResultModel):
    """农历与干支信息"""
    year: int
    month: int
    day: int
    is_leap: bool
    year_stem: str
    year_branch: str
    month_stem: str
    month_branch: str
    day_stem: str
    day_branch: str
    hour_branch: str


class ZiweiResult(ResultModel):
    """紫微斗数排盘结果"""
    input: ZiweiInput
    chart: ZiweiChart
    decade_lucks: List[DecadeLuck]
    lunar_info: ZiweiLunarInfo
    calculation_log: List[LogEntry] = Field(default_factory=list)
