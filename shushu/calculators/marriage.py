#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字合婚与合作合盘

五个维度分别打分（基准 60，限定 0-100），再按权重合成总分：
日主关系 25%、五行互补 20%、用神互补 25%、地支关系 15%、日柱纳音 15%

合婚与合作只在日主十神的取舍上不同：合婚按男女分列喜忌十神，每项 ±10；
合作双方共用一张喜忌表，每项 ±12。
"""

from typing import Dict, List, NamedTuple, Tuple

from shushu.calculators.bazi_core import (
    YongShen,
    controls,
    determine_yong_shen,
    get_ten_god,
    parse_strength,
    produces,
)
from shushu.calculators.calc_logging import safe_log
from shushu.data.stems_branches import ELEMENTS, LIUCHONG, LIUHE, STEM_ELEMENTS, TIANGAN_WUHE, nayin_element
from shushu.models.bazi import BaziResult
from shushu.models.fortune import (
    BranchRelations,
    BusinessCompatibility,
    BusinessDayMasterRelation,
    BusinessNayinMatch,
    BusinessYongShenMatch,
    DayMasterRelation,
    MarriageCompatibility,
    NayinMatch,
    WuxingBalance,
    YongShenMatch,
)

BASE_SCORE = 60

DIMENSION_WEIGHTS = {
    'day_master_relation': 0.25,
    'wuxing_balance': 0.20,
    'yong_shen_match': 0.25,
    'branch_relations': 0.15,
    'nayin_match': 0.15,
}

FAVORABLE_FOR_MALE = ('正财', '偏财', '正官', '正印')
FAVORABLE_FOR_FEMALE = ('正官', '正财', '正印', '食神')
UNFAVORABLE_SHISHEN = ('七杀', '劫财', '伤官')

FAVORABLE_FOR_BUSINESS = ('正财', '食神', '偏财', '正官')
UNFAVORABLE_FOR_BUSINESS = ('劫财', '伤官', '七杀')


class TenGodScoring(NamedTuple):
    """日主十神喜忌表：first/second 分别用于甲方看乙方、乙方看甲方"""
    favorable_first: Tuple[str, ...]
    favorable_second: Tuple[str, ...]
    unfavorable: Tuple[str, ...]
    step: int


MARRIAGE_SCORING = TenGodScoring(FAVORABLE_FOR_MALE, FAVORABLE_FOR_FEMALE, UNFAVORABLE_SHISHEN, 10)
BUSINESS_SCORING = TenGodScoring(FAVORABLE_FOR_BUSINESS, FAVORABLE_FOR_BUSINESS, UNFAVORABLE_FOR_BUSINESS, 12)


def clamp(value, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def stem_combination(stem_a: str, stem_b: str):
    """天干五合，如 甲己合化土；不合返回 None"""
    for a, b, element in TIANGAN_WUHE:
        if {stem_a, stem_b} == {a, b}:
            return f"{a}{b}合化{element}"
    return None


def day_master_score(stem_a: str, stem_b: str, scoring: TenGodScoring) -> int:
    """
    日主关系得分（未限定范围）

    天干五合 +30；互见十神按喜忌表加减 scoring.step；同干比肩 -5
    """
    a_to_b = get_ten_god(stem_a, stem_b)
    b_to_a = get_ten_god(stem_b, stem_a)
    score = BASE_SCORE
    if stem_combination(stem_a, stem_b):
        score += 30
    if a_to_b in scoring.favorable_first:
        score += scoring.step
    if a_to_b in scoring.unfavorable:
        score -= scoring.step
    if b_to_a in scoring.favorable_second:
        score += scoring.step
    if b_to_a in scoring.unfavorable:
        score -= scoring.step
    if stem_a == stem_b:
        score -= 5
    return score


def _yong_shen(result: BaziResult) -> YongShen:
    strength, _ = parse_strength(result.chart.mingge)
    return determine_yong_shen(STEM_ELEMENTS[result.chart.day_master], strength)


def _branches(result: BaziResult) -> List[str]:
    return [pillar.stem_branch.branch for _, pillar in result.chart.four_pillars.items()]


class MarriageAnalyzer:
    """
    八字合婚分析

    各维度先以 first/second 计算，最后按 ROLES 换成 male/female 字段名装入结果模型；
    子类替换 ROLES、MODELS 与默认喜忌表即得其它合盘。
    """

    ROLES = ('male', 'female')
    LOG_TAG = 'marriage'
    SCORING = MARRIAGE_SCORING
    MODELS = {
        'day_master_relation': DayMasterRelation,
        'wuxing_balance': WuxingBalance,
        'yong_shen_match': YongShenMatch,
        'branch_relations': BranchRelations,
        'nayin_match': NayinMatch,
    }
    RESULT_MODEL = MarriageCompatibility

    def __init__(self, first: BaziResult, second: BaziResult, scoring: TenGodScoring = None):
        self.first = first
        self.second = second
        self.scoring = scoring or self.SCORING

    def analyze(self):
        fields = {
            'day_master_relation': self._day_master_relation(),
            'wuxing_balance': self._wuxing_balance(),
            'yong_shen_match': self._yong_shen_match(),
            'branch_relations': self._branch_relations(),
            'nayin_match': self._nayin_match(),
        }
        dimensions = {name: self.MODELS[name](**self._rename(values)) for name, values in fields.items()}
        overall = round(sum(dimensions[name].score * weight for name, weight in DIMENSION_WEIGHTS.items()))
        safe_log('debug', f"[{self.LOG_TAG}] " + ' '.join(f"{name}={d.score}" for name, d in dimensions.items())
                 + f" overall={overall}")
        return self.RESULT_MODEL(overall_score=clamp(overall), **dimensions)

    def _rename(self, values: Dict) -> Dict:
        first, second = self.ROLES
        return {key.replace('first', first).replace('second', second): value for key, value in values.items()}

    def _day_master_relation(self) -> Dict:
        first_stem = self.first.chart.day_master
        second_stem = self.second.chart.day_master
        return {
            'first_stem': first_stem,
            'second_stem': second_stem,
            'combination': stem_combination(first_stem, second_stem),
            'shishen_first_to_second': get_ten_god(first_stem, second_stem),
            'shishen_second_to_first': get_ten_god(second_stem, first_stem),
            'score': clamp(day_master_score(first_stem, second_stem, self.scoring)),
        }

    def _wuxing_balance(self) -> Dict:
        """一方旺（≥3）一方弱（≤1）为互补；双方皆极旺（≥4）或皆无为冲突"""
        first = self.first.chart.wuxing_distribution
        second = self.second.chart.wuxing_distribution
        complementary, conflicting = [], []
        score = BASE_SCORE
        for element in ELEMENTS:
            a, b = first.get(element, 0), second.get(element, 0)
            if (a >= 3 and b <= 1) or (b >= 3 and a <= 1):
                complementary.append(element)
                score += 8
            if a >= 4 and b >= 4:
                conflicting.append(element)
                score -= 5
            if a == 0 and b == 0:
                conflicting.append(element)
                score -= 3
        return {'score': clamp(score), 'complementary': complementary, 'conflicting': conflicting}

    def _yong_shen_match(self) -> Dict:
        first_dist: Dict[str, int] = self.first.chart.wuxing_distribution
        second_dist: Dict[str, int] = self.second.chart.wuxing_distribution
        first_ys = _yong_shen(self.first)
        second_ys = _yong_shen(self.second)

        score = BASE_SCORE
        # 对方五行旺处正是己方所需
        if second_dist.get(first_ys.yong, 0) >= 3:
            score += 15
        if first_dist.get(second_ys.yong, 0) >= 3:
            score += 15
        if second_dist.get(first_ys.xi, 0) >= 3:
            score += 8
        if first_dist.get(second_ys.xi, 0) >= 3:
            score += 8
        if second_dist.get(first_ys.ji, 0) >= 4:
            score -= 10
        if first_dist.get(second_ys.ji, 0) >= 4:
            score -= 10
        if first_ys.yong == second_ys.yong:
            score += 5
        if first_ys.yong == second_ys.ji:
            score -= 8
        if second_ys.yong == first_ys.ji:
            score -= 8

        return {
            'score': clamp(score),
            'first_yong_shen': first_ys.yong,
            'second_yong_shen': second_ys.yong,
            'first_xi_shen': first_ys.xi,
            'second_xi_shen': second_ys.xi,
        }

    def _branch_relations(self) -> Dict:
        liu_he, liu_chong = [], []
        for a in _branches(self.first):
            for b in _branches(self.second):
                if LIUHE[a] == b and f"{a}{b}合" not in liu_he:
                    liu_he.append(f"{a}{b}合")
                if LIUCHONG[a] == b and f"{a}{b}冲" not in liu_chong:
                    liu_chong.append(f"{a}{b}冲")

        score = BASE_SCORE + len(liu_he) * 10 - len(liu_chong) * 12
        # 日支为夫妻宫，另行加减
        first_day = self.first.chart.four_pillars.day.stem_branch.branch
        second_day = self.second.chart.four_pillars.day.stem_branch.branch
        if LIUHE[first_day] == second_day:
            score += 10
        if LIUCHONG[first_day] == second_day:
            score -= 10
        return {'score': clamp(score), 'liu_he': liu_he, 'liu_chong': liu_chong}

    def _nayin_match(self) -> Dict:
        first_nayin = self.first.chart.nayin.day
        second_nayin = self.second.chart.nayin.day
        a, b = nayin_element(first_nayin), nayin_element(second_nayin)
        if a == b:
            relation, score = '比和', 70
        elif produces(a, b):
            relation, score = f"{a}生{b}", 85
        elif produces(b, a):
            relation, score = f"{b}生{a}", 80
        elif controls(a, b):
            relation, score = f"{a}克{b}", 40
        else:
            relation, score = f"{b}克{a}", 45
        return {'score': clamp(score), 'first_na_yin': first_nayin, 'second_na_yin': second_nayin,
                'relation': relation}


class BusinessCooperationAnalyzer(MarriageAnalyzer):
    """合作合盘：双方不分男女，日主十神按求财喜忌表评分"""

    ROLES = ('person1', 'person2')
    LOG_TAG = 'business'
    SCORING = BUSINESS_SCORING
    MODELS = {
        **MarriageAnalyzer.MODELS,
        'day_master_relation': BusinessDayMasterRelation,
        'yong_shen_match': BusinessYongShenMatch,
        'nayin_match': BusinessNayinMatch,
    }
    RESULT_MODEL = BusinessCompatibility


def analyze_marriage(male: BaziResult, female: BaziResult) -> MarriageCompatibility:
    """
    八字合婚入口

    Args:
        male: 男方 calculate_bazi 结果
        female: 女方 calculate_bazi 结果
    """
    return MarriageAnalyzer(male, female).analyze()


def analyze_business_cooperation(person1: BaziResult, person2: BaziResult) -> BusinessCompatibility:
    """合作合盘入口，参数为双方 calculate_bazi 结果"""
    return BusinessCooperationAnalyzer(person1, person2).analyze()
