#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""奇门遁甲排盘单元测试"""

import pytest

from shushu.calculators.qimen_calculator import (
    calculate_qimen,
    detect_patterns,
    effective_palace,
    layout_earth_plate,
    yuan_index,
)
from shushu.data.qimen_tables import CLOCKWISE

SUMMER = {'year': 2024, 'month': 7, 'day': 1, 'hour': 10}
WINTER = {'year': 2024, 'month': 1, 'day': 1, 'hour': 10}


class TestHelpers:
    """定局与布盘辅助函数"""

    def test_effective_palace(self):
        assert effective_palace(5) == 2
        assert effective_palace(7) == 7

    @pytest.mark.parametrize("days, expected", [(0, 0), (4, 0), (5, 1), (9, 1), (10, 2), (14, 2)])
    def test_yuan_index(self, days, expected):
        assert yuan_index(days) == expected

    def test_yang_dun_earth_plate(self):
        plate = layout_earth_plate(1, '阳遁')
        assert plate == {1: '戊', 2: '己', 3: '庚', 4: '辛', 5: '壬', 6: '癸', 7: '丁', 8: '丙', 9: '乙'}

    def test_yin_dun_earth_plate(self):
        plate = layout_earth_plate(9, '阴遁')
        assert plate[9] == '戊'
        assert plate[8] == '己'
        assert plate[1] == '乙'


class TestPatterns:
    """格局判断"""

    def test_tian_dun(self):
        assert detect_patterns('丙', '戊', '生门', None) == ['天遁']

    def test_shen_dun(self):
        assert detect_patterns('丙', '戊', '伤门', '九地') == ['神遁']

    def test_fu_yin(self):
        assert detect_patterns('戊', '戊', '休门', '值符') == ['伏吟']

    def test_geng_ren(self):
        assert detect_patterns('庚', '壬', None, None) == ['上格']
        assert detect_patterns('壬', '庚', None, None) == ['上格']

    def test_no_pattern(self):
        assert detect_patterns('乙', '戊', '休门', '六合') == []


class TestBoard:
    """完整盘面"""

    def test_dun_by_season(self):
        assert calculate_qimen(SUMMER).board.dun_type == '阴遁'
        assert calculate_qimen(WINTER).board.dun_type == '阳遁'

    def test_southern_hemisphere_flips_dun(self):
        north = calculate_qimen(SUMMER)
        south = calculate_qimen({**SUMMER, 'latitude': -33.9})
        assert south.is_southern_hemisphere is True
        assert south.board.dun_type == '阳遁'
        assert south.board.ju_number == north.board.ju_number
        assert south.board.palace(1).direction == north.board.palace(9).direction

    def test_nine_palaces(self):
        board = calculate_qimen(SUMMER).board
        assert [p.palace_number for p in board.palaces] == list(range(1, 10))
        assert sorted(p.earth_stem for p in board.palaces) == sorted('戊己庚辛壬癸丁丙乙')

    def test_center_palace(self):
        center = calculate_qimen(SUMMER).board.palace(5)
        assert center.star is None
        assert center.gate is None
        assert center.heaven_stem is None
        assert center.deity is None

    def test_outer_palaces_complete(self):
        board = calculate_qimen(SUMMER).board
        outer = [board.palace(p) for p in CLOCKWISE]
        assert len({p.star for p in outer}) == 8
        assert len({p.gate for p in outer}) == 8
        assert len({p.deity for p in outer}) == 8
        assert sum(1 for p in outer if p.lodged_heaven_stem) == 1

    def test_zhi_fu_follows_hour_stem(self):
        result = calculate_qimen(SUMMER)
        board = result.board
        hour_stem = result.hour_gan_zhi[0]
        target = board.xun_shou_yi if hour_stem == '甲' else hour_stem
        hour_palace = effective_palace(next(p.palace_number for p in board.palaces if p.earth_stem == target))
        assert board.palace(hour_palace).star == board.zhi_fu_star
        assert board.palace(hour_palace).deity == '值符'

    def test_xun_kong(self):
        board = calculate_qimen(SUMMER).board
        assert len(board.xun_kong) == 2
        assert board.xun_shou.startswith('甲')

    def test_log(self):
        steps = [e.step for e in calculate_qimen(SUMMER).calculation_log]
        assert steps == ['时间', '定局', '地盘', '旬首', '值符值使', '天盘', '门盘', '八神', '格局']
