#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""紫微斗数排盘单元测试"""

import pytest
from pydantic import ValidationError

from shushu.calculators.ziwei_calculator import (
    calculate_ziwei,
    ming_palace_index,
    palace_stem,
    place_main_stars,
    shen_palace_index,
)
from shushu.data.ziwei_tables import PALACE_NAMES

BIRTH = {'year': 1990, 'month': 5, 'day': 15, 'hour': 14, 'minute': 30, 'gender': 'male'}


@pytest.fixture(scope="module")
def ziwei_result():
    return calculate_ziwei(BIRTH)


class TestPalacePosition:
    """安命身宫"""

    def test_ming_palace_index(self):
        # 正月子时命宫在寅
        assert ming_palace_index(1, 0) == 2
        assert ming_palace_index(3, 2) == 2

    def test_shen_palace_index(self):
        assert shen_palace_index(1, 0) == 2
        assert shen_palace_index(1, 6) == 8

    def test_palace_stem(self):
        # 甲己之年丙作首
        assert palace_stem(2, '甲') == '丙'
        assert palace_stem(3, '甲') == '丁'
        assert palace_stem(2, '己') == '丙'
        assert palace_stem(2, '戊') == '甲'


class TestMainStars:
    """安主星"""

    def test_ziwei_and_tianfu(self):
        star_map = place_main_stars(1, 2)
        assert '紫微' in star_map[1]
        assert '天府' in star_map[3]

    def test_fourteen_main_stars(self):
        star_map = place_main_stars(15, 4)
        assert sum(len(names) for names in star_map.values()) == 14


class TestChart:
    """完整命盘"""

    def test_twelve_palaces(self, ziwei_result):
        palaces = ziwei_result.chart.palaces
        assert len(palaces) == 12
        assert [p.name for p in palaces] == list(PALACE_NAMES)
        assert palaces[0].name == '命宫'
        assert palaces[0].branch == ziwei_result.chart.ming_branch
        assert len({p.branch for p in palaces}) == 12

    def test_star_counts(self, ziwei_result):
        stars = [s for p in ziwei_result.chart.palaces for s in p.stars]
        main = [s for s in stars if s.type == 'main']
        aux = [s for s in stars if s.type == 'aux']
        assert len(main) == 14
        assert len(aux) == 14
        assert all(s.brightness for s in main)
        assert all(s.brightness is None for s in aux)

    def test_si_hua(self, ziwei_result):
        marks = [s.si_hua for p in ziwei_result.chart.palaces for s in p.stars if s.si_hua]
        assert sorted(marks) == sorted(['化禄', '化权', '化科', '化忌'])

    def test_one_shen_palace(self, ziwei_result):
        chart = ziwei_result.chart
        shen = [p for p in chart.palaces if p.is_shen_palace]
        assert len(shen) == 1
        assert shen[0].name == chart.shen_palace
        assert shen[0].branch == chart.shen_branch

    def test_lunar_info(self, ziwei_result):
        info = ziwei_result.lunar_info
        assert (info.year_stem, info.year_branch) == ('庚', '午')
        assert info.hour_branch == '未'

    def test_log(self, ziwei_result):
        steps = [entry.step for entry in ziwei_result.calculation_log]
        assert steps[0] == '农历转换'
        assert '定五行局' in steps
        assert steps[-1] == '排大运'


class TestDecadeLuck:
    """大限"""

    def test_decade_lucks(self, ziwei_result):
        lucks = ziwei_result.decade_lucks
        ju = ziwei_result.chart.ju_number
        assert ju in (2, 3, 4, 5, 6)
        assert len(lucks) == 12
        assert lucks[0].start_age == ju
        assert lucks[0].palace_name == '命宫'
        assert lucks[0].age_range == f"{ju}-{ju + 9}"
        for i, luck in enumerate(lucks):
            assert luck.start_age == ju + 10 * i
            assert len(luck.si_hua) == 4

    def test_direction(self, ziwei_result):
        """庚年阳男顺行：第二限在兄弟宫的对侧（父母宫）"""
        assert ziwei_result.decade_lucks[1].palace_name == '父母宫'
        female = calculate_ziwei({**BIRTH, 'gender': 'female'})
        assert female.decade_lucks[1].palace_name == '兄弟宫'


class TestValidation:
    """输入校验"""

    def test_gender_required(self):
        with pytest.raises(ValidationError):
            calculate_ziwei({k: v for k, v in BIRTH.items() if k != 'gender'})
