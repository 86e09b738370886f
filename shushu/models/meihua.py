#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
梅花易数数据模型
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, PositiveInt, field_validator, model_validator

from .common import CalendarType, LogEntry, ResultModel, check_timezone

TiYongRelation = Literal['生', '克', '被生', '被克', '比和']


class MeihuaInput(BaseModel):
    """梅花起卦信息：数字起卦或时间起卦"""
    method: Literal['number', 'time'] = Field(..., description="number 数字起卦，time 时间起卦")
    upper_number: Optional[PositiveInt] = Field(None, description="上卦数（数字起卦）")
    lower_number: Optional[PositiveInt] = Field(None, description="下卦数（数字起卦）")
    year: Optional[int] = Field(None, description="年（时间起卦）")
    month: Optional[int] = Field(None, ge=1, le=12)
    day: Optional[int] = Field(None, ge=1, le=31)
    hour: Optional[int] = Field(None, ge=0, le=23)
    calendar_type: CalendarType = Field('solar', description="时间起卦的历法")
    is_leap_month: bool = False
    timezone: Optional[str] = Field(None, description="起卦地时区（IANA 名称），为空视为北京时间")
    question: Optional[str] = Field(None, description="所问之事")

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v):
        return check_timezone(v)

    @model_validator(mode='after')
    def check_method_fields(self):
        if self.method == 'number':
            if self.upper_number is None or self.lower_number is None:
                raise ValueError('数字起卦必须提供 upper_number 与 lower_number')
        elif None in (self.year, self.month, self.day, self.hour):
            raise ValueError('时间起卦必须提供 year、month、day、hour')
        return self


class Trigram(ResultModel):
    """经卦"""
    name: str
    number: int = Field(..., description="先天数：乾1 兑2 离3 震4 巽5 坎6 艮7 坤8")
    symbol: str
    wuxing: str
    image: str = Field(..., description="天泽火雷风水山地")
    lines: List[bool] = Field(..., description="自下而上，True 为阳")


class Hexagram(ResultModel):
    """别卦"""
    name: str
    upper: Trigram
    lower: Trigram
    lines: List[bool] = Field(..., description="六爻，自初爻至上爻")
    king_wen_number: int = Field(..., ge=1, le=64, description="文王卦序")
    gua_ci: str = Field(..., description="卦辞")


class TiYongAnalysis(ResultModel):
    """体用"""
    ti: Trigram = Field(..., description="体卦（不含动爻）")
    yong: Trigram = Field(..., description="用卦（含动爻）")
    ti_position: Literal['upper', 'lower']
    relation: TiYongRelation
    summary: str


class MeihuaResult(ResultModel):
    """梅花易数起卦结果"""
    input: MeihuaInput
    ben_gua: Hexagram = Field(..., description="本卦")
    hu_gua: Hexagram = Field(..., description="互卦")
    bian_gua: Hexagram = Field(..., description="变卦")
    changing_line: int = Field(..., ge=1, le=6, description="动爻")
    ti_yong: TiYongAnalysis
    lunar_month: Optional[int] = Field(None, description="起卦农历月（时间起卦）")
    calculation_log: List[LogEntry] = Field(default_factory=list)
