#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法转换 - 所有排盘共用的时间入口

阳历/农历输入 → 时区换算 → 真太阳时校正 → 农历与四柱干支。
对 lunar_python 的依赖集中在这里，其余模块只消费转换结果。
"""

import math
from datetime import date, datetime, timedelta
from typing import Any, Dict, NamedTuple, Optional, Union

import pytz
from lunar_python import Lunar, Solar

from shushu.config import get_settings
from shushu.errors import DateRangeError, InputValidationError
from shushu.models.common import CalendarInfo, DateTimeInput, LunarDate, StemBranch

CHINA_TIMEZONE = 'Asia/Shanghai'
# 北京时间标准经线
CENTRAL_MERIDIAN = 120.0

# 子时流派 → EightChar 流派：1 为 23 点换日，2 为 23 点不换日
ZI_HOUR_SECT = {'late': 1, 'early': 2}


class ResolvedCalendar(NamedTuple):
    """转换结果及 lunar_python 原始对象，供各排盘模块继续取数"""
    info: CalendarInfo
    solar: Solar
    lunar: Lunar
    eight_char: Any


class LunarConverter:
    """历法转换工具类"""

    @staticmethod
    def validate_year(year: int) -> None:
        """年份超出支持范围时抛出 DateRangeError"""
        settings = get_settings()
        if year < settings.min_year or year > settings.max_year:
            raise DateRangeError(year, settings.min_year, settings.max_year)

    @staticmethod
    def hour_branch_index(hour: int) -> int:
        """
        小时 → 时辰地支索引（0=子 ... 11=亥）
        23 点与 0 点同属子时
        """
        if hour == 23:
            return 0
        return ((hour + 1) // 2) % 12

    @staticmethod
    def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False,
                       hour: int = 0, minute: int = 0) -> datetime:
        """
        农历 → 阳历

        闰月以负数月份传给 lunar_python；不存在的农历日期（含不存在的闰月）抛出 InputValidationError
        """
        lunar_month = -month if is_leap_month else month
        try:
            lunar = Lunar.fromYmdHms(year, lunar_month, day, hour, minute, 0)
            solar = lunar.getSolar()
            result = datetime(solar.getYear(), solar.getMonth(), solar.getDay(), hour, minute)
        except Exception as e:
            raise InputValidationError(f"农历转阳历失败: {e}", field='day') from e

        # 反查校验：部分越界日期会被库静默顺延
        check = Solar.fromYmdHms(result.year, result.month, result.day, hour, minute, 0).getLunar()
        if (check.getYear(), check.getMonth(), check.getDay()) != (year, lunar_month, day):
            leap = '闰' if is_leap_month else ''
            raise InputValidationError(f"农历日期不存在: {year}年{leap}{month}月{day}日", field='day')
        return result

    @staticmethod
    def civil_datetime(data: DateTimeInput) -> datetime:
        """输入的民用时间（阳历），农历输入先转换"""
        LunarConverter.validate_year(data.year)
        if data.calendar_type == 'lunar':
            return LunarConverter.lunar_to_solar(
                data.year, data.month, data.day, data.is_leap_month, data.hour, data.minute
            )
        try:
            return datetime(data.year, data.month, data.day, data.hour, data.minute)
        except ValueError as e:
            raise InputValidationError(f"阳历日期无效: {e}", field='day') from e

    @staticmethod
    def to_china_time(local_dt: datetime, timezone: Optional[str]) -> datetime:
        """
        出生地时间 → 北京时间（naive）

        Args:
            local_dt: 出生地钟表时间
            timezone: IANA 时区名；为空时使用配置的默认时区
        """
        tz_name = timezone or get_settings().default_timezone
        if tz_name == CHINA_TIMEZONE:
            return local_dt
        tz = pytz.timezone(tz_name)
        localized_dt = tz.localize(local_dt)
        return localized_dt.astimezone(pytz.timezone(CHINA_TIMEZONE)).replace(tzinfo=None)

    @staticmethod
    def equation_of_time(day_of_year: int) -> float:
        """均时差（分钟），近似公式，误差约一分钟"""
        b = 2 * math.pi * (day_of_year - 81) / 365
        return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)

    @staticmethod
    def true_solar_correction(dt: datetime, longitude: float) -> int:
        """
        真太阳时校正分钟数：(经度 − 120) × 4，开启配置时加均时差
        """
        minutes = (longitude - CENTRAL_MERIDIAN) * 4
        if get_settings().use_equation_of_time:
            minutes += LunarConverter.equation_of_time(dt.timetuple().tm_yday)
        return int(round(minutes))

    @staticmethod
    def lunar_date(lunar: Lunar) -> LunarDate:
        month = lunar.getMonth()
        return LunarDate(
            year=lunar.getYear(),
            month=abs(month),
            day=lunar.getDay(),
            is_leap=month < 0,
            month_name=lunar.getMonthInChinese(),
            day_name=lunar.getDayInChinese(),
        )

    @staticmethod
    def days_since(solar: Solar, jie_qi) -> int:
        """自节气交节日起的整天数"""
        term = jie_qi.getSolar()
        return (date(solar.getYear(), solar.getMonth(), solar.getDay())
                - date(term.getYear(), term.getMonth(), term.getDay())).days

    @staticmethod
    def resolve(data: DateTimeInput, hour_known: bool = True) -> ResolvedCalendar:
        """
        完整转换流程

        Args:
            data: 时间输入
            hour_known: False 时不输出时柱

        Returns:
            ResolvedCalendar
        """
        civil_dt = LunarConverter.civil_datetime(data)
        china_dt = LunarConverter.to_china_time(civil_dt, data.timezone)

        correction = 0
        if data.use_true_solar_time and data.longitude is not None:
            correction = LunarConverter.true_solar_correction(china_dt, data.longitude)
        adjusted = china_dt + timedelta(minutes=correction)

        solar = Solar.fromYmdHms(adjusted.year, adjusted.month, adjusted.day,
                                 adjusted.hour, adjusted.minute, 0)
        lunar = solar.getLunar()
        eight_char = lunar.getEightChar()
        eight_char.setSect(ZI_HOUR_SECT[data.zi_hour_mode])

        info = CalendarInfo(
            solar_datetime=china_dt,
            adjusted_datetime=adjusted,
            correction_minutes=correction,
            lunar=LunarConverter.lunar_date(lunar),
            year=StemBranch.parse(eight_char.getYear()),
            month=StemBranch.parse(eight_char.getMonth()),
            day=StemBranch.parse(eight_char.getDay()),
            hour=StemBranch.parse(eight_char.getTime()) if hour_known else None,
            zi_hour_mode=data.zi_hour_mode,
            jie_qi=lunar.getPrevJieQi(True).getName(),
        )
        return ResolvedCalendar(info, solar, lunar, eight_char)


def convert_calendar(data: Union[DateTimeInput, Dict[str, Any]], hour_known: bool = True) -> CalendarInfo:
    """
    历法转换入口

    Args:
        data: DateTimeInput 或等价字典
        hour_known: 时辰是否已知

    Returns:
        CalendarInfo: 农历、四柱干支、真太阳时校正信息
    """
    if not isinstance(data, DateTimeInput):
        data = DateTimeInput.model_validate(data)
    return LunarConverter.resolve(data, hour_known).info
