#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""静态数据表单元测试"""

import pytest

from shushu.data.hexagrams import HEXAGRAMS, TRIGRAM_BY_NUMBER, lookup_hexagram, trigram_from_lines
from shushu.data.liuyao_tables import HEXAGRAM_PALACE_MAP
from shushu.data.stems_branches import (
    BRANCH_PRIMARY_STEM,
    HIDDEN_STEMS,
    LIUCHONG,
    LIUHE,
    NAYIN,
    SIXTY_JIAZI,
    nayin_element,
)


class TestStemsBranches:
    """干支基础表"""

    def test_sixty_jiazi(self):
        assert len(SIXTY_JIAZI) == 60
        assert SIXTY_JIAZI[0] == '甲子'
        assert SIXTY_JIAZI[-1] == '癸亥'

    @pytest.mark.parametrize("gan_zhi, expected", [
        ('甲子', '海中金'),
        ('乙丑', '海中金'),
        ('丙寅', '炉中火'),
        ('壬戌', '大海水'),
        ('癸亥', '大海水'),
    ])
    def test_nayin(self, gan_zhi, expected):
        assert NAYIN[gan_zhi] == expected

    def test_nayin_element_takes_last_char(self):
        assert nayin_element('海中金') == '金'
        assert nayin_element('大林木') == '木'

    def test_liuhe_liuchong_symmetric(self):
        for branch, partner in LIUHE.items():
            assert LIUHE[partner] == branch
        for branch, partner in LIUCHONG.items():
            assert LIUCHONG[partner] == branch
        assert LIUCHONG['子'] == '午'
        assert LIUCHONG['巳'] == '亥'

    def test_primary_stem_is_first_hidden(self):
        assert BRANCH_PRIMARY_STEM['寅'] == '甲'
        assert BRANCH_PRIMARY_STEM['子'] == '癸'
        for branch, stems in HIDDEN_STEMS.items():
            assert BRANCH_PRIMARY_STEM[branch] == stems[0]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            NAYIN['甲子'] = '金'


class TestHexagrams:
    """八卦与六十四卦"""

    def test_sixty_four_hexagrams(self):
        assert len(HEXAGRAMS) == 64
        numbers = sorted(info.king_wen_number for info in HEXAGRAMS.values())
        assert numbers == list(range(1, 65))

    def test_trigram_numbers(self):
        assert [TRIGRAM_BY_NUMBER[n] for n in range(1, 9)] == ['乾', '兑', '离', '震', '巽', '坎', '艮', '坤']

    def test_trigram_from_lines(self):
        assert trigram_from_lines([True, True, True]) == '乾'
        assert trigram_from_lines([True, False, False]) == '震'
        assert trigram_from_lines([False, False, True]) == '艮'

    def test_lookup(self):
        info = lookup_hexagram('巽', '兑')
        assert info.name == '风泽中孚'
        assert info.king_wen_number == 61

    def test_every_hexagram_has_palace(self):
        assert set(HEXAGRAM_PALACE_MAP) == set(HEXAGRAMS)
