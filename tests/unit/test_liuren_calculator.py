#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""大六壬排盘单元测试"""

import pytest

from shushu.calculators.liuren_calculator import (
    build_heaven_plate,
    build_lessons,
    calculate_liuren,
    element_relation_text,
    place_generals,
    select_initial,
)
from shushu.data.liuren_tables import GUIREN_TABLE, JIANG_NAME, STEM_PALACE
from shushu.data.stems_branches import BRANCHES, LIUCHONG

CAST_TIME = {'year': 2024, 'month': 3, 'day': 15, 'hour': 10}


@pytest.fixture(scope="module")
def liuren_result():
    return calculate_liuren(CAST_TIME)


class TestPlate:
    """天地盘"""

    def test_month_jiang_over_hour(self):
        plate = build_heaven_plate('亥', '寅')
        assert plate['寅'] == '亥'
        assert plate['卯'] == '子'
        assert sorted(plate.values()) == sorted(BRANCHES)

    def test_fu_yin_plate(self):
        plate = build_heaven_plate('子', '子')
        assert all(earth == heaven for earth, heaven in plate.items())

    def test_fan_yin_plate(self):
        plate = build_heaven_plate('亥', '巳')
        assert all(LIUCHONG[earth] == heaven for earth, heaven in plate.items())


class TestLessons:
    """四课与三传"""

    @pytest.mark.parametrize("top, bottom, expected", [
        ('木', '木', '比和'),
        ('水', '木', '水生木'),
        ('火', '木', '木生火'),
        ('木', '土', '木克土'),
        ('土', '木', '木克土'),
    ])
    def test_relation_text(self, top, bottom, expected):
        assert element_relation_text(top, bottom) == expected

    def test_lesson_chain(self):
        plate = build_heaven_plate('戌', '巳')
        lessons = build_lessons(plate, '甲', '子')
        assert lessons[0].bottom == STEM_PALACE['甲']
        assert lessons[1].bottom == lessons[0].top
        assert lessons[2].bottom == '子'
        assert lessons[3].bottom == lessons[2].top
        for lesson in lessons:
            assert lesson.top == plate[lesson.bottom]

    def test_fu_yin_uses_punishment(self):
        plate = build_heaven_plate('子', '子')
        lessons = build_lessons(plate, '甲', '子')
        assert select_initial(plate, lessons, '甲', '子') == ('巳', '伏吟(刑)')

    def test_fan_yin(self):
        plate = build_heaven_plate('亥', '巳')
        lessons = build_lessons(plate, '甲', '子')
        _, method = select_initial(plate, lessons, '甲', '子')
        assert method.startswith('返吟')


class TestGenerals:
    """天将"""

    @pytest.mark.parametrize("is_day", [True, False])
    def test_noble_position(self, is_day):
        plate = build_heaven_plate('戌', '巳')
        generals = place_generals(plate, '甲', is_day)
        noble = GUIREN_TABLE['甲'][0 if is_day else 1]
        noble_earth = next(earth for earth, heaven in plate.items() if heaven == noble)
        assert generals[noble_earth] == '贵人'
        assert len(set(generals.values())) == 12

    def test_direction(self):
        plate = build_heaven_plate('子', '子')
        day = place_generals(plate, '甲', True)
        night = place_generals(plate, '甲', False)
        # 甲日昼贵丑顺行，夜贵未逆行
        assert day['寅'] == '螣蛇'
        assert night['午'] == '螣蛇'


class TestBoard:
    """完整课盘"""

    def test_plate_follows_month_jiang(self, liuren_result):
        board = liuren_result.board
        assert liuren_result.hour_branch == '巳'
        assert board.heaven_above(liuren_result.hour_branch) == board.month_jiang
        assert board.month_jiang_name == JIANG_NAME[board.month_jiang]
        assert len(board.positions) == 12

    def test_transmission_chain(self, liuren_result):
        board = liuren_result.board
        trans = board.transmission
        assert trans.middle == board.heaven_above(trans.initial)
        assert trans.final == board.heaven_above(trans.middle)
        assert trans.method

    def test_day_time(self, liuren_result):
        assert liuren_result.is_day is True

    def test_xun_kong(self, liuren_result):
        assert len(liuren_result.board.xun_kong) == 2

    def test_log(self, liuren_result):
        steps = [e.step for e in liuren_result.calculation_log]
        assert steps == ['日时干支', '定月将', '布天地盘', '起四课', '取三传', '布天将', '旬空']
