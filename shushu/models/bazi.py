#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字排盘数据模型 - 四柱、十神、神煞、宫位、大运流年
时辰不详时，所有依赖时柱的字段为 None（不是空字符串或 0）
"""

from typing import Dict, List, Optional, Literal

from pydantic import Field

from .common import CalculationStep, DateTimeInput, Gender, ResultModel, StemBranch

PillarName = Literal['year', 'month', 'day', 'hour']


class BirthInput(DateTimeInput):
    """八字出生信息"""
    gender: Gender = Field('unknown', description="性别：male(男)、female(女)、unknown(不详，按男命起运)")
    hour_unknown: bool = Field(False, description="时辰不详，不排时柱")


class Pillar(ResultModel):
    """单柱信息"""
    stem_branch: StemBranch = Field(..., description="干支")
    hidden_stems: List[str] = Field(..., description="地支藏干（本气、中气、余气）")
    na_yin: str = Field(..., description="纳音")
    stem_wuxing: str = Field(..., description="天干五行")
    branch_wuxing: str = Field(..., description="地支五行")
    yin_yang: str = Field(..., description="天干阴阳")
    di_shi: str = Field(..., description="十二长生（地势）")
    xun: str = Field(..., description="所在旬")
    xun_kong: str = Field(..., description="旬空")


class FourPillars(ResultModel):
    """四柱"""
    year: Pillar = Field(..., description="年柱")
    month: Pillar = Field(..., description="月柱")
    day: Pillar = Field(..., description="日柱")
    hour: Optional[Pillar] = Field(None, description="时柱，时辰不详时为 None")

    def items(self):
        """按 年、月、日、时 顺序返回 (柱名, 柱)，跳过缺失的时柱"""
        pillars = (('year', self.year), ('month', self.month), ('day', self.day), ('hour', self.hour))
        return [(name, pillar) for name, pillar in pillars if pillar is not None]


class ShiShenPillar(ResultModel):
    """单柱十神"""
    stem: str = Field(..., description="天干十神（日柱天干为 日主）")
    branch: List[str] = Field(..., description="藏干十神")


class ShiShenAnalysis(ResultModel):
    """四柱十神"""
    year: ShiShenPillar
    month: ShiShenPillar
    day: ShiShenPillar
    hour: Optional[ShiShenPillar] = None


class ShenSha(ResultModel):
    """神煞"""
    name: str = Field(..., description="神煞名")
    pillar: PillarName = Field('day', description="所在柱")
    description: str = Field(..., description="吉神 或 凶煞")

    @property
    def is_auspicious(self) -> bool:
        return self.description == '吉神'


class PalaceInfo(ResultModel):
    """命宫、身宫、胎元、胎息"""
    gan_zhi: str = Field(..., description="干支")
    na_yin: str = Field(..., description="纳音")


class NaYinSet(ResultModel):
    """四柱纳音"""
    year: str
    month: str
    day: str
    hour: Optional[str] = None


class BaziChart(ResultModel):
    """八字命盘"""
    input: BirthInput = Field(..., description="排盘输入")
    four_pillars: FourPillars = Field(..., description="四柱")
    day_master: str = Field(..., description="日主（日柱天干）")
    wuxing_distribution: Dict[str, int] = Field(..., description="五行计数（天干、地支、藏干）")
    shishen: ShiShenAnalysis = Field(..., description="十神")
    shensha: List[ShenSha] = Field(default_factory=list, description="神煞")
    nayin: NaYinSet = Field(..., description="纳音")
    mingge: str = Field(..., description="命格（日主强弱）")
    ming_gong: Optional[PalaceInfo] = Field(None, description="命宫，时辰不详时为 None")
    shen_gong: Optional[PalaceInfo] = Field(None, description="身宫，时辰不详时为 None")
    tai_yuan: PalaceInfo = Field(..., description="胎元")
    tai_xi: PalaceInfo = Field(..., description="胎息")
    calculation_log: List[CalculationStep] = Field(default_factory=list, description="计算过程")


class DaYunCycle(ResultModel):
    """大运"""
    start_year: int = Field(..., description="起始年份")
    start_age: int = Field(..., description="起始年龄（虚岁）")
    end_year: int = Field(..., description="结束年份")
    end_age: int = Field(..., description="结束年龄")
    stem_branch: StemBranch = Field(..., description="大运干支")


class LiuNianFortune(ResultModel):
    """流年"""
    year: int
    age: int
    stem_branch: StemBranch


class YunInfo(ResultModel):
    """起运与大运"""
    gender: Gender
    start_age: int = Field(..., description="起运年龄")
    start_years: int = Field(..., description="出生后几年起运")
    start_months: int = Field(..., description="出生后几月起运")
    start_days: int = Field(..., description="出生后几天起运")
    forward: bool = Field(..., description="大运顺排")
    da_yun: List[DaYunCycle] = Field(default_factory=list, description="大运列表（不含起运前）")


class BaziResult(ResultModel):
    """八字排盘结果"""
    chart: BaziChart
    yun: YunInfo
    liu_nian: List[LiuNianFortune] = Field(default_factory=list, description="流年（出生至末步大运）")
