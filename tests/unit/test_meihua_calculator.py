#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""梅花易数起卦单元测试"""

import pytest
from pydantic import ValidationError

from shushu.calculators.meihua_calculator import (
    build_trigram,
    calculate_meihua,
    ti_yong_relation,
)
from shushu.errors import InputValidationError


class TestTiYong:
    """体用生克"""

    @pytest.mark.parametrize("ti, yong, expected", [
        ('木', '木', '比和'),
        ('木', '火', '生'),
        ('木', '土', '克'),
        ('木', '水', '被生'),
        ('木', '金', '被克'),
    ])
    def test_relation(self, ti, yong, expected):
        assert ti_yong_relation(ti, yong) == expected

    def test_build_trigram(self):
        trigram = build_trigram('兑')
        assert trigram.number == 2
        assert trigram.wuxing == '金'
        assert trigram.lines == [True, True, False]


class TestNumberMethod:
    """数字起卦"""

    def test_zhong_fu(self):
        result = calculate_meihua({'method': 'number', 'upper_number': 5, 'lower_number': 10})
        assert (result.ben_gua.upper.name, result.ben_gua.lower.name) == ('巽', '兑')
        assert result.changing_line == 3
        assert result.ben_gua.name == '风泽中孚'
        assert result.ben_gua.king_wen_number == 61
        assert result.hu_gua.name == '山雷颐'
        assert result.bian_gua.name == '风天小畜'
        assert result.ti_yong.ti_position == 'upper'
        assert result.ti_yong.relation == '被克'
        assert result.ti_yong.summary == '体巽木，用兑金，体被克用，不利，凶'
        assert result.lunar_month is None

    def test_remainder_zero(self):
        """余数为 0 时取 8 与 6"""
        result = calculate_meihua({'method': 'number', 'upper_number': 16, 'lower_number': 8})
        assert result.ben_gua.name == '坤为地'
        assert result.changing_line == 6
        assert result.ti_yong.ti_position == 'lower'
        assert result.ti_yong.relation == '比和'
        assert result.ti_yong.summary.endswith('体用比和，和谐，吉')
        assert result.bian_gua.name == '山地剥'
        assert result.hu_gua.name == '坤为地'

    def test_all_trigram_pairs(self):
        """上下卦数 1-8 两两组合，六十四卦各得其一"""
        king_wen, relations = set(), set()
        for upper in range(1, 9):
            for lower in range(1, 9):
                result = calculate_meihua({'method': 'number', 'upper_number': upper, 'lower_number': lower})
                ben_gua = result.ben_gua
                assert (ben_gua.upper.number, ben_gua.lower.number) == (upper, lower)
                assert ben_gua.name
                assert 1 <= ben_gua.king_wen_number <= 64
                assert result.ti_yong.relation in ('生', '克', '被生', '被克', '比和')
                king_wen.add(ben_gua.king_wen_number)
                relations.add(result.ti_yong.relation)
        assert len(king_wen) == 64
        assert relations == {'生', '克', '被生', '被克', '比和'}

    def test_log(self):
        result = calculate_meihua({'method': 'number', 'upper_number': 5, 'lower_number': 10})
        assert [e.step for e in result.calculation_log] == ['数字起卦', '卦象', '结果']

    def test_numbers_required(self):
        with pytest.raises(ValidationError):
            calculate_meihua({'method': 'number', 'upper_number': 5})

    def test_numbers_positive(self):
        with pytest.raises(ValidationError):
            calculate_meihua({'method': 'number', 'upper_number': 0, 'lower_number': 3})


class TestTimeMethod:
    """时间起卦"""

    def test_spring_festival(self):
        """甲辰年(辰5) 正月初一 午时(7)：上 7→艮，下 14→坎，动爻 2"""
        result = calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 12})
        assert result.ben_gua.name == '山水蒙'
        assert result.changing_line == 2
        assert result.lunar_month == 1
        assert [e.step for e in result.calculation_log] == ['农历转换', '起卦计算', '卦象', '结果']

    def test_lunar_input(self):
        solar = calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 12})
        lunar = calculate_meihua({
            'method': 'time', 'year': 2024, 'month': 1, 'day': 1, 'hour': 12, 'calendar_type': 'lunar',
        })
        assert lunar.ben_gua.name == solar.ben_gua.name
        assert lunar.changing_line == solar.changing_line

    def test_time_fields_required(self):
        with pytest.raises(ValidationError):
            calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10})

    def test_invalid_date(self):
        with pytest.raises(InputValidationError):
            calculate_meihua({'method': 'time', 'year': 2023, 'month': 2, 'day': 30, 'hour': 12})

    def test_timezone_to_beijing(self):
        """东京 13 时即北京 12 时，仍为午时起卦"""
        beijing = calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 12})
        tokyo = calculate_meihua({
            'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 13, 'timezone': 'Asia/Tokyo',
        })
        unzoned = calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 13})
        assert tokyo.ben_gua.name == beijing.ben_gua.name == '山水蒙'
        assert tokyo.changing_line == beijing.changing_line == 2
        assert unzoned.changing_line == 3

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError):
            calculate_meihua({'method': 'time', 'year': 2024, 'month': 2, 'day': 10, 'hour': 12,
                              'timezone': 'Mars/Olympus'})
