#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共数据模型 - 干支、计算日志、历法转换结果、公共输入字段与校验
"""

from datetime import datetime
from typing import Any, Literal, Optional

import pytz
from pydantic import BaseModel, ConfigDict, Field, field_validator

Gender = Literal['male', 'female', 'unknown']
CalendarType = Literal['solar', 'lunar']
ZiHourMode = Literal['early', 'late']


def check_timezone(v: Optional[str]) -> Optional[str]:
    """IANA 时区名校验，供各输入模型的 timezone 字段共用"""
    if v is None:
        return v
    try:
        pytz.timezone(v)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f'未知时区: {v}')
    return v


class ResultModel(BaseModel):
    """排盘结果基类：一经生成不可修改"""
    model_config = ConfigDict(frozen=True)


class StemBranch(ResultModel):
    """干支"""
    stem: str = Field(..., description="天干")
    branch: str = Field(..., description="地支")
    gan_zhi: str = Field(..., description="干支全称，如 甲子")

    @classmethod
    def parse(cls, gan_zhi: str) -> 'StemBranch':
        return cls(stem=gan_zhi[0], branch=gan_zhi[1], gan_zhi=gan_zhi)


class CalculationStep(ResultModel):
    """八字计算步骤记录"""
    step: str = Field(..., description="步骤名")
    input: Any = Field(None, description="步骤输入")
    output: Any = Field(None, description="步骤输出")
    timestamp: int = Field(..., description="毫秒时间戳")


class LogEntry(ResultModel):
    """其余术数的计算步骤记录"""
    step: str = Field(..., description="步骤名")
    detail: str = Field(..., description="说明")


class LunarDate(ResultModel):
    """农历日期"""
    year: int = Field(..., description="农历年")
    month: int = Field(..., description="农历月（闰月为正数，见 is_leap）")
    day: int = Field(..., description="农历日")
    is_leap: bool = Field(False, description="是否闰月")
    month_name: str = Field("", description="月份中文名，如 闰四")
    day_name: str = Field("", description="日期中文名，如 初一")


class CalendarInfo(ResultModel):
    """历法转换结果"""
    solar_datetime: datetime = Field(..., description="输入对应的阳历时间（北京时间）")
    adjusted_datetime: datetime = Field(..., description="时区换算与真太阳时校正之后的时间")
    correction_minutes: int = Field(0, description="真太阳时校正分钟数")
    lunar: LunarDate = Field(..., description="农历日期")
    year: StemBranch = Field(..., description="年柱（以立春为界）")
    month: StemBranch = Field(..., description="月柱（以节为界）")
    day: StemBranch = Field(..., description="日柱（按子时流派）")
    hour: Optional[StemBranch] = Field(None, description="时柱，时辰不详时为 None")
    zi_hour_mode: ZiHourMode = Field('late', description="子时流派")
    jie_qi: str = Field(..., description="最近的节气")


class DateTimeInput(BaseModel):
    """公共时间输入字段"""
    year: int = Field(..., description="年（支持范围由配置决定，默认 1900-2100）", examples=[1990])
    month: int = Field(..., ge=1, le=12, description="月", examples=[5])
    day: int = Field(..., ge=1, le=31, description="日", examples=[15])
    hour: int = Field(0, ge=0, le=23, description="时（0-23）", examples=[14])
    minute: int = Field(0, ge=0, le=59, description="分", examples=[30])
    calendar_type: CalendarType = Field('solar', description="历法类型：solar(阳历) 或 lunar(农历)")
    is_leap_month: bool = Field(False, description="农历闰月（仅 calendar_type=lunar 时有效）")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="经度（真太阳时）", examples=[116.4])
    use_true_solar_time: bool = Field(False, description="是否使用真太阳时")
    zi_hour_mode: ZiHourMode = Field('late', description="子时流派：late(晚子时换日) 或 early(早子时不换日)")
    timezone: Optional[str] = Field(None, description="出生地时区（IANA 名称），为空视为北京时间", examples=["Asia/Tokyo"])

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v):
        """验证时区名称"""
        return check_timezone(v)
