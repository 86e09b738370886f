#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日运势、八字合婚与合作合盘数据模型
"""

from datetime import date
from typing import List, Optional

from pydantic import Field

from .common import ResultModel


class CurrentDaYun(ResultModel):
    gan_zhi: str
    start_age: int
    end_age: int


class CurrentLiuNian(ResultModel):
    year: int
    gan_zhi: str


class DailyFortune(ResultModel):
    """每日运势上下文"""
    target_date: date
    day_master: str
    mingge: str
    yong_shen: str = Field(..., description="用神")
    xi_shen: str = Field(..., description="喜神")
    ji_shen: str = Field(..., description="忌神")
    today_year: str = Field(..., description="当日年柱")
    today_month: str = Field(..., description="当日月柱")
    today_day: str = Field(..., description="当日日柱")
    current_age: int
    current_da_yun: Optional[CurrentDaYun] = None
    current_liu_nian: Optional[CurrentLiuNian] = None
    day_gan_shishen: str = Field(..., description="当日日干对日主的十神")
    day_zhi_relation: str = Field(..., description="当日日支与命局日支：伏吟/六合/六冲/平和")
    xun_kong: str = Field(..., description="当日旬空")


class DayMasterRelation(ResultModel):
    """日主关系（25%）"""
    male_stem: str
    female_stem: str
    combination: Optional[str] = Field(None, description="天干五合，如 甲己合化土")
    shishen_male_to_female: str
    shishen_female_to_male: str
    score: int = Field(..., ge=0, le=100)


class WuxingBalance(ResultModel):
    """五行互补（20%）"""
    score: int = Field(..., ge=0, le=100)
    complementary: List[str] = Field(default_factory=list)
    conflicting: List[str] = Field(default_factory=list)


class YongShenMatch(ResultModel):
    """用神互补（25%）"""
    score: int = Field(..., ge=0, le=100)
    male_yong_shen: str
    female_yong_shen: str
    male_xi_shen: str
    female_xi_shen: str


class BranchRelations(ResultModel):
    """地支六合六冲（15%）"""
    score: int = Field(..., ge=0, le=100)
    liu_he: List[str] = Field(default_factory=list)
    liu_chong: List[str] = Field(default_factory=list)


class NayinMatch(ResultModel):
    """日柱纳音（15%）"""
    score: int = Field(..., ge=0, le=100)
    male_na_yin: str
    female_na_yin: str
    relation: str


class MarriageCompatibility(ResultModel):
    """八字合婚"""
    overall_score: int = Field(..., ge=0, le=100)
    day_master_relation: DayMasterRelation
    wuxing_balance: WuxingBalance
    yong_shen_match: YongShenMatch
    branch_relations: BranchRelations
    nayin_match: NayinMatch


class BusinessDayMasterRelation(ResultModel):
    """合作日主关系（25%）"""
    person1_stem: str
    person2_stem: str
    combination: Optional[str] = Field(None, description="天干五合，如 甲己合化土")
    shishen_person1_to_person2: str
    shishen_person2_to_person1: str
    score: int = Field(..., ge=0, le=100)


class BusinessYongShenMatch(ResultModel):
    """合作用神互补（25%）"""
    score: int = Field(..., ge=0, le=100)
    person1_yong_shen: str
    person2_yong_shen: str
    person1_xi_shen: str
    person2_xi_shen: str


class BusinessNayinMatch(ResultModel):
    """合作日柱纳音（15%）"""
    score: int = Field(..., ge=0, le=100)
    person1_na_yin: str
    person2_na_yin: str
    relation: str


class BusinessCompatibility(ResultModel):
    """合作合盘，五行互补与地支关系沿用合婚模型"""
    overall_score: int = Field(..., ge=0, le=100)
    day_master_relation: BusinessDayMasterRelation
    wuxing_balance: WuxingBalance
    yong_shen_match: BusinessYongShenMatch
    branch_relations: BranchRelations
    nayin_match: BusinessNayinMatch
