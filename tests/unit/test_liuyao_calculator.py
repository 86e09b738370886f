#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""六爻纳甲排盘单元测试"""

import random

import pytest
from pydantic import ValidationError

from shushu.calculators.liuyao_calculator import calculate_liuyao, cast_lines, najia, six_relation
from shushu.data.liuyao_tables import SIX_SPIRITS, SPIRIT_START

CAST_TIME = {'year': 2024, 'month': 3, 'day': 15, 'hour': 10}


def manual(lines, **kwargs):
    return calculate_liuyao({**CAST_TIME, 'method': 'manual', 'lines': lines, **kwargs})


class TestNajia:
    """纳甲与六亲"""

    def test_qian_palace(self):
        assert najia('乾', '乾', '乾', 'palace') == [
            ('甲', '子'), ('甲', '寅'), ('甲', '辰'), ('壬', '午'), ('壬', '申'), ('壬', '戌'),
        ]

    def test_trigram_basis(self):
        result = najia('乾', '巽', '乾', 'trigram')
        assert [b for _, b in result] == ['丑', '亥', '酉', '午', '申', '戌']
        assert result[0][0] == '辛'

    def test_six_relation(self):
        assert six_relation('金', '金') == '兄弟'
        assert six_relation('金', '水') == '子孙'
        assert six_relation('金', '土') == '父母'
        assert six_relation('金', '木') == '妻财'
        assert six_relation('金', '火') == '官鬼'


class TestCasting:
    """起卦"""

    @pytest.mark.parametrize("method", ['coin', 'random'])
    def test_values_in_range(self, method):
        values = cast_lines(method, random.Random(7))
        assert len(values) == 6
        assert all(v in (6, 7, 8, 9) for v in values)

    def test_seeded_rng_is_deterministic(self):
        first = calculate_liuyao({**CAST_TIME, 'method': 'coin'}, rng=random.Random(42))
        second = calculate_liuyao({**CAST_TIME, 'method': 'coin'}, rng=random.Random(42))
        assert [l.value for l in first.original_hex.lines] == [l.value for l in second.original_hex.lines]

    def test_manual_requires_lines(self):
        with pytest.raises(ValidationError):
            calculate_liuyao({**CAST_TIME, 'method': 'manual'})

    def test_manual_rejects_bad_value(self):
        with pytest.raises(ValidationError):
            manual([7, 7, 7, 7, 7, 5])


class TestHexagram:
    """本卦、变卦、世应"""

    def test_qian_static(self):
        result = manual([7] * 6)
        hexagram = result.original_hex
        assert hexagram.name == '乾为天'
        assert hexagram.palace == '乾'
        assert hexagram.palace_element == '金'
        assert (hexagram.shi_position, hexagram.ying_position) == (6, 3)
        assert hexagram.lines[5].is_shi and hexagram.lines[2].is_ying
        assert result.changed_hex is None
        assert result.moving_lines == []
        assert result.hidden_gods == []

    def test_moving_line(self):
        result = manual([9, 7, 7, 7, 7, 7])
        assert result.moving_lines == [1]
        assert result.changed_hex.name == '天风姤'
        first = result.original_hex.lines[0]
        assert first.is_moving is True
        assert first.changed_branch is not None
        assert result.original_hex.lines[1].changed_branch is None

    def test_changed_line_trigram_basis(self):
        result = manual([9, 7, 7, 7, 7, 7], najia_basis='trigram')
        first = result.original_hex.lines[0]
        assert (first.branch, first.relation) == ('子', '子孙')
        assert (first.changed_branch, first.changed_relation) == ('丑', '父母')

    def test_gou_generation(self):
        hexagram = manual([8, 7, 7, 7, 7, 7]).original_hex
        assert hexagram.name == '天风姤'
        assert hexagram.palace == '乾'
        assert hexagram.generation == '一世'
        assert (hexagram.shi_position, hexagram.ying_position) == (1, 4)


class TestHiddenGods:
    """飞伏神"""

    def test_missing_wife_wealth(self):
        result = manual([8, 7, 7, 7, 7, 7], najia_basis='trigram')
        assert [l.relation for l in result.original_hex.lines] == ['父母', '子孙', '兄弟', '官鬼', '兄弟', '父母']
        assert len(result.hidden_gods) == 1
        god = result.hidden_gods[0]
        assert (god.relation, god.branch, god.position) == ('妻财', '寅', 2)
        assert (god.flying_branch, god.flying_relation) == ('亥', '子孙')


class TestSpirits:
    """六神"""

    def test_spirits_follow_day_stem(self):
        result = manual([7] * 6)
        start = SPIRIT_START[result.day_gan_zhi[0]]
        assert [l.spirit for l in result.original_hex.lines] == [SIX_SPIRITS[(start + i) % 6] for i in range(6)]

    def test_log(self):
        steps = [e.step for e in manual([7] * 6).calculation_log]
        assert steps == ['日月干支', '起卦', '定本卦', '定变卦', '定卦宫', '飞伏神']
