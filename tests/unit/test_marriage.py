#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""八字合婚与合作合盘单元测试"""

import pytest
from pydantic import ValidationError

from shushu.calculators import analyze_business_cooperation, analyze_marriage
from shushu.calculators.marriage import (
    BUSINESS_SCORING,
    DIMENSION_WEIGHTS,
    MARRIAGE_SCORING,
    clamp,
    day_master_score,
    stem_combination,
)


class TestHelpers:
    """辅助函数"""

    @pytest.mark.parametrize("a, b, expected", [
        ('甲', '己', '甲己合化土'),
        ('己', '甲', '甲己合化土'),
        ('丙', '辛', '丙辛合化水'),
        ('甲', '乙', None),
    ])
    def test_stem_combination(self, a, b, expected):
        assert stem_combination(a, b) == expected

    def test_clamp(self):
        assert clamp(110) == 100
        assert clamp(-3) == 0
        assert clamp(72.6) == 72

    def test_weights_sum(self):
        assert sum(DIMENSION_WEIGHTS.values()) == pytest.approx(1.0)


class TestDayMasterScore:
    """日主十神喜忌表"""

    @pytest.mark.parametrize("a, b, marriage, business", [
        ('甲', '辛', 80, 84),   # 正官 / 正财，两表皆喜
        ('甲', '丙', 60, 72),   # 食神 / 偏印，仅合作喜食神
        ('甲', '己', 110, 114),  # 甲己合 +30
        ('庚', '甲', 60, 60),   # 偏财喜、七杀忌，相抵
        ('甲', '甲', 55, 55),   # 同干 -5
    ])
    def test_tables(self, a, b, marriage, business):
        assert day_master_score(a, b, MARRIAGE_SCORING) == marriage
        assert day_master_score(a, b, BUSINESS_SCORING) == business

    def test_business_table_symmetric(self):
        assert BUSINESS_SCORING.favorable_first == BUSINESS_SCORING.favorable_second
        assert day_master_score('甲', '丙', BUSINESS_SCORING) == day_master_score('丙', '甲', BUSINESS_SCORING)


class TestMarriage:
    """合婚评分"""

    @pytest.fixture
    def compatibility(self, male_bazi, female_bazi):
        return analyze_marriage(male_bazi, female_bazi)

    def test_day_master_combination(self, compatibility):
        relation = compatibility.day_master_relation
        assert (relation.male_stem, relation.female_stem) == ('丙', '辛')
        assert relation.combination == '丙辛合化水'
        assert relation.shishen_male_to_female == '正财'
        assert relation.shishen_female_to_male == '正官'
        assert relation.score == 100

    def test_nayin(self, compatibility):
        nayin = compatibility.nayin_match
        assert nayin.male_na_yin == '沙中土'
        assert nayin.female_na_yin == '钗钏金'
        assert nayin.relation == '土生金'
        assert nayin.score == 85

    def test_branch_relations(self, compatibility):
        branches = compatibility.branch_relations
        assert '寅亥合' in branches.liu_he
        assert '巳亥冲' in branches.liu_chong
        assert len(branches.liu_he) == len(set(branches.liu_he))

    def test_overall_is_weighted(self, compatibility):
        scores = {name: getattr(compatibility, name).score for name in DIMENSION_WEIGHTS}
        expected = round(sum(scores[name] * weight for name, weight in DIMENSION_WEIGHTS.items()))
        assert compatibility.overall_score == clamp(expected)
        assert all(0 <= s <= 100 for s in scores.values())

    def test_deterministic(self, male_bazi, female_bazi):
        assert analyze_marriage(male_bazi, female_bazi) == analyze_marriage(male_bazi, female_bazi)


class TestBusinessCooperation:
    """合作合盘"""

    @pytest.fixture
    def compatibility(self, male_bazi, female_bazi):
        return analyze_business_cooperation(male_bazi, female_bazi)

    def test_day_master_combination(self, compatibility):
        relation = compatibility.day_master_relation
        assert (relation.person1_stem, relation.person2_stem) == ('丙', '辛')
        assert relation.combination == '丙辛合化水'
        assert relation.shishen_person1_to_person2 == '正财'
        assert relation.shishen_person2_to_person1 == '正官'
        assert relation.score == 100

    def test_nayin(self, compatibility):
        nayin = compatibility.nayin_match
        assert nayin.person1_na_yin == '沙中土'
        assert nayin.person2_na_yin == '钗钏金'
        assert nayin.relation == '土生金'
        assert nayin.score == 85

    def test_shared_dimensions_match_marriage(self, compatibility, male_bazi, female_bazi):
        """五行、地支与用神的计分与合婚一致，只有字段名不同"""
        marriage = analyze_marriage(male_bazi, female_bazi)
        assert compatibility.wuxing_balance == marriage.wuxing_balance
        assert compatibility.branch_relations == marriage.branch_relations
        assert compatibility.yong_shen_match.score == marriage.yong_shen_match.score
        assert compatibility.yong_shen_match.person1_yong_shen == marriage.yong_shen_match.male_yong_shen
        assert compatibility.yong_shen_match.person2_xi_shen == marriage.yong_shen_match.female_xi_shen

    def test_overall_is_weighted(self, compatibility):
        scores = {name: getattr(compatibility, name).score for name in DIMENSION_WEIGHTS}
        expected = round(sum(scores[name] * weight for name, weight in DIMENSION_WEIGHTS.items()))
        assert compatibility.overall_score == clamp(expected)
        assert all(0 <= s <= 100 for s in scores.values())

    def test_deterministic(self, male_bazi, female_bazi):
        assert analyze_business_cooperation(male_bazi, female_bazi) == \
            analyze_business_cooperation(male_bazi, female_bazi)

    def test_public_api(self):
        import shushu
        assert shushu.analyze_business_cooperation is analyze_business_cooperation
        assert 'analyze_business_cooperation' in shushu.__all__

    def test_result_is_frozen(self, compatibility):
        """字段不可重新赋值；列表与字典字段每次计算新建"""
        with pytest.raises(ValidationError):
            compatibility.overall_score = 0
        with pytest.raises(ValidationError):
            compatibility.branch_relations.liu_he = []
