#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""八字排盘单元测试"""

from datetime import date, timedelta

import pytest

from shushu.calculators import calculate_bazi, convert_calendar
from shushu.calculators.bazi_calculator import BaziCalculator
from shushu.calculators.bazi_core import (
    determine_ge_ju,
    determine_yong_shen,
    get_branch_ten_gods,
    get_main_star,
    get_ten_god,
    parse_strength,
)
from shushu.data.stems_branches import BRANCHES, STEMS
from shushu.errors import DateRangeError

CASES = [
    {"birth": {"year": 1987, "month": 1, "day": 7, "hour": 9, "minute": 55, "gender": "male"}, "expected_day": "丙辰"},
    {"birth": {"year": 1984, "month": 3, "day": 8, "hour": 9, "minute": 15, "gender": "male"}, "expected_day": "辛丑"},
    {"birth": {"year": 2008, "month": 9, "day": 8, "hour": 16, "minute": 3, "gender": "female"}, "expected_day": "辛亥"},
]

LOG_STEPS = [
    'validateInput', 'createSolar', 'getLunar', 'getEightChar', 'buildFourPillars',
    'computeWuXing', 'computeShiShen', 'crossVerifyShiShen', 'computeNaYin', 'extractShenSha',
    'determineMingGe', 'computePalaces', 'computeYun', 'computeLiuNian',
]


class TestFourPillars:
    """四柱"""

    @pytest.mark.parametrize("case", CASES, ids=[c["expected_day"] for c in CASES])
    def test_day_pillar(self, case):
        result = calculate_bazi(case["birth"])
        assert result.chart.four_pillars.day.stem_branch.gan_zhi == case["expected_day"]

    def test_four_pillars_complete(self, male_bazi):
        fp = male_bazi.chart.four_pillars
        assert [p.stem_branch.gan_zhi for _, p in fp.items()] == ['丙寅', '辛丑', '丙辰', '癸巳']
        assert male_bazi.chart.day_master == '丙'

    def test_year_month_by_jie(self):
        """1984-03-08 在惊蛰之后：甲子年 丁卯月"""
        fp = calculate_bazi(CASES[1]["birth"]).chart.four_pillars
        assert fp.year.stem_branch.gan_zhi == '甲子'
        assert fp.month.stem_branch.gan_zhi == '丁卯'

    def test_pillar_details(self, male_bazi):
        day = male_bazi.chart.four_pillars.day
        assert day.hidden_stems == ['戊', '乙', '癸']
        assert day.na_yin == '沙中土'
        assert (day.stem_wuxing, day.branch_wuxing, day.yin_yang) == ('火', '土', '阳')

    def test_wuxing_counts_every_char(self, male_bazi):
        distribution = male_bazi.chart.wuxing_distribution
        hidden = sum(len(p.hidden_stems) for _, p in male_bazi.chart.four_pillars.items())
        assert sum(distribution.values()) == 8 + hidden


class TestShiShen:
    """十神"""

    def test_day_stem_is_day_master(self, male_bazi):
        assert male_bazi.chart.shishen.day.stem == '日主'

    def test_pillar_stems(self, male_bazi):
        shishen = male_bazi.chart.shishen
        assert shishen.year.stem == '比肩'
        assert shishen.month.stem == '正财'
        assert shishen.hour.stem == '正官'

    def test_cross_verify_has_no_mismatch(self, male_bazi):
        step = next(s for s in male_bazi.chart.calculation_log if s.step == 'crossVerifyShiShen')
        assert step.output['mismatches'] == []
        assert step.output['matches'] == ['year', 'month', 'day', 'hour']

    def test_get_ten_god(self):
        assert get_ten_god('甲', '甲') == '比肩'
        assert get_ten_god('甲', '乙') == '劫财'
        assert get_ten_god('甲', '丙') == '食神'
        assert get_ten_god('甲', '己') == '正财'
        assert get_ten_god('甲', '庚') == '七杀'
        assert get_ten_god('甲', '癸') == '正印'

    def test_main_star_day(self):
        assert get_main_star('甲', '甲', 'day') == '日主'
        assert get_main_star('甲', '甲', 'year') == '比肩'

    def test_branch_ten_gods(self):
        assert get_branch_ten_gods('丙', '辰') == ['食神', '正印', '正官']


class TestHourUnknown:
    """时辰不详"""

    def test_hour_fields_are_none(self):
        result = calculate_bazi({**CASES[0]["birth"], "hour_unknown": True})
        chart = result.chart
        assert chart.four_pillars.hour is None
        assert chart.shishen.hour is None
        assert chart.nayin.hour is None
        assert chart.ming_gong is None
        assert chart.shen_gong is None
        assert chart.tai_yuan is not None
        assert len(chart.four_pillars.items()) == 3


class TestCalculationLog:
    """计算日志"""

    def test_step_order(self, male_bazi):
        assert [s.step for s in male_bazi.chart.calculation_log] == LOG_STEPS

    def test_timestamps(self, male_bazi):
        stamps = [s.timestamp for s in male_bazi.chart.calculation_log]
        assert all(t > 0 for t in stamps)
        assert stamps == sorted(stamps)


class TestYun:
    """起运与大运"""

    def test_direction_by_gender(self):
        """甲子年阳年：男顺女逆"""
        male = calculate_bazi(CASES[1]["birth"])
        female = calculate_bazi({**CASES[1]["birth"], "gender": "female"})
        assert male.yun.forward is True
        assert female.yun.forward is False

    def test_unknown_gender_as_male(self):
        male = calculate_bazi(CASES[1]["birth"])
        unknown = calculate_bazi({**CASES[1]["birth"], "gender": "unknown"})
        assert unknown.yun.forward == male.yun.forward
        assert unknown.yun.start_years == male.yun.start_years

    def test_da_yun_steps(self, male_bazi):
        da_yun = male_bazi.yun.da_yun
        assert da_yun
        for prev, cur in zip(da_yun, da_yun[1:]):
            assert cur.start_age - prev.start_age == 10
            assert cur.start_year - prev.start_year == 10

    def test_liu_nian_consecutive(self, male_bazi):
        years = [ln.year for ln in male_bazi.liu_nian]
        assert years[0] == 1987
        assert years == list(range(years[0], years[0] + len(years)))


class TestMingGe:
    """命格与用神"""

    def test_strength_label(self, male_bazi):
        strength, _ = parse_strength(male_bazi.chart.mingge)
        assert male_bazi.chart.mingge.startswith('丙日主')
        assert strength in ('身强', '身弱')

    def test_parse_strength(self):
        assert parse_strength('甲日主身强（得令、得地）') == ('身强', '得令、得地')
        assert parse_strength('乙日主身弱（不得令）') == ('身弱', '不得令')

    def test_yong_shen(self):
        assert determine_yong_shen('木', '身强') == ('火', '土', '水')
        assert determine_yong_shen('木', '身弱') == ('水', '木', '土')

    def test_ge_ju(self):
        assert determine_ge_ju('甲', '寅', ['丙', '戊']) == '建禄格（不透）'
        assert determine_ge_ju('甲', '酉', ['辛', '戊']) == '正官格'
        assert determine_ge_ju('甲', '酉', ['丙', '戊']) == '正官格（不透）'

    def test_mingge_is_static(self, male_bazi):
        chart = male_bazi.chart
        assert BaziCalculator.determine_mingge(chart.day_master, chart.four_pillars) == chart.mingge


class TestStemBranchParity:
    """干支阴阳同性：阳干配阳支，阴干配阴支"""

    @staticmethod
    def sample_dates(step_days=97):
        current, last = date(1900, 3, 1), date(2100, 12, 30)
        while current <= last:
            yield current
            current += timedelta(days=step_days)

    def test_every_pillar_1900_2100(self):
        checked = 0
        for i, d in enumerate(self.sample_dates()):
            info = convert_calendar({'year': d.year, 'month': d.month, 'day': d.day, 'hour': i % 23})
            for pillar in (info.year, info.month, info.day, info.hour):
                assert STEMS.index(pillar.stem) % 2 == BRANCHES.index(pillar.branch) % 2, (d, pillar.gan_zhi)
            checked += 1
        assert checked > 700

    def test_chart_pillars(self, male_bazi, female_bazi):
        for result in (male_bazi, female_bazi):
            for _, pillar in result.chart.four_pillars.items():
                sb = pillar.stem_branch
                assert STEMS.index(sb.stem) % 2 == BRANCHES.index(sb.branch) % 2


class TestTrueSolarTime:
    """真太阳时"""

    BIRTH = {"year": 1990, "month": 6, "day": 15, "hour": 9, "minute": 0, "gender": "male"}

    def test_western_longitude_moves_hour_pillar(self):
        """87.6°E 校正 (87.6-120)*4 ≈ -130 分钟，09:00 巳时 → 06:50 卯时"""
        plain = calculate_bazi(self.BIRTH)
        corrected = calculate_bazi({**self.BIRTH, "longitude": 87.6, "use_true_solar_time": True})
        assert plain.chart.four_pillars.hour.stem_branch.gan_zhi == '癸巳'
        assert corrected.chart.four_pillars.hour.stem_branch.gan_zhi == '辛卯'
        assert corrected.chart.four_pillars.day.stem_branch == plain.chart.four_pillars.day.stem_branch

    def test_longitude_without_flag(self):
        result = calculate_bazi({**self.BIRTH, "longitude": 87.6})
        assert result.chart.four_pillars.hour.stem_branch.gan_zhi == '癸巳'


class TestValidation:
    """输入校验"""

    def test_year_out_of_range(self):
        with pytest.raises(DateRangeError):
            calculate_bazi({"year": 1899, "month": 6, "day": 1})
