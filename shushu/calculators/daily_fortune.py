#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日运势

以已排好的八字为本，取目标日期的年月日三柱，
找出当前大运、流年，并给出当日日干十神、日支与命局日支的关系。
"""

from datetime import date
from typing import Any, Dict, Union

from lunar_python import Solar

from shushu.calculators.bazi_core import determine_yong_shen, get_ten_god, parse_strength
from shushu.calculators.calc_logging import safe_log
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.stems_branches import LIUCHONG, LIUHE, STEM_ELEMENTS
from shushu.models.bazi import BaziResult
from shushu.models.fortune import CurrentDaYun, CurrentLiuNian, DailyFortune


def branch_relation(today_branch: str, natal_branch: str) -> str:
    """当日日支与命局日支：伏吟 / 六合 / 六冲 / 平和"""
    if today_branch == natal_branch:
        return '伏吟'
    if LIUHE[today_branch] == natal_branch:
        return '六合'
    if LIUCHONG[today_branch] == natal_branch:
        return '六冲'
    return '平和'


def _as_date(target_date: Union[date, Dict[str, Any]]) -> date:
    if isinstance(target_date, date):
        return target_date
    return date(target_date['year'], target_date['month'], target_date['day'])


def calculate_daily_fortune(result: BaziResult, target_date: Union[date, Dict[str, Any]]) -> DailyFortune:
    """
    计算某日运势上下文

    Args:
        result: calculate_bazi 的结果
        target_date: 目标日期，date 或 {'year', 'month', 'day'}

    Returns:
        DailyFortune
    """
    target = _as_date(target_date)
    LunarConverter.validate_year(target.year)
    chart = result.chart

    lunar = Solar.fromYmd(target.year, target.month, target.day).getLunar()
    eight_char = lunar.getEightChar()
    today_day = eight_char.getDay()

    # 按输入年份计岁
    current_age = target.year - chart.input.year
    da_yun = next(
        (dy for dy in result.yun.da_yun if dy.start_age <= current_age <= dy.end_age),
        None,
    )
    liu_nian = next((ln for ln in result.liu_nian if ln.year == target.year), None)

    strength, _ = parse_strength(chart.mingge)
    yong_shen = determine_yong_shen(STEM_ELEMENTS[chart.day_master], strength)

    fortune = DailyFortune(
        target_date=target,
        day_master=chart.day_master,
        mingge=chart.mingge,
        yong_shen=yong_shen.yong,
        xi_shen=yong_shen.xi,
        ji_shen=yong_shen.ji,
        today_year=eight_char.getYear(),
        today_month=eight_char.getMonth(),
        today_day=today_day,
        current_age=current_age,
        current_da_yun=CurrentDaYun(
            gan_zhi=da_yun.stem_branch.gan_zhi,
            start_age=da_yun.start_age,
            end_age=da_yun.end_age,
        ) if da_yun else None,
        current_liu_nian=CurrentLiuNian(
            year=liu_nian.year,
            gan_zhi=liu_nian.stem_branch.gan_zhi,
        ) if liu_nian else None,
        day_gan_shishen=get_ten_god(chart.day_master, today_day[0]),
        day_zhi_relation=branch_relation(today_day[1], chart.four_pillars.day.stem_branch.branch),
        xun_kong=lunar.getDayXunKong(),
    )
    safe_log('debug', f"[daily] {target.isoformat()} {today_day}日 {fortune.day_gan_shishen} {fortune.day_zhi_relation}")
    return fortune
