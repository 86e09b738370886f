#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
数据模型
"""

from .common import (
    ResultModel,
    StemBranch,
    CalculationStep,
    LogEntry,
    LunarDate,
    CalendarInfo,
    DateTimeInput,
)
from .bazi import (
    BirthInput,
    Pillar,
    FourPillars,
    ShiShenPillar,
    ShiShenAnalysis,
    ShenSha,
    PalaceInfo,
    NaYinSet,
    BaziChart,
    DaYunCycle,
    LiuNianFortune,
    YunInfo,
    BaziResult,
)
from .ziwei import (
    ZiweiInput,
    ZiweiStar,
    ZiweiPalace,
    SiHuaEntry,
    DecadeLuck,
    ZiweiChart,
    ZiweiLunarInfo,
    ZiweiResult,
)
from .qimen import QimenInput, QimenPalace, QimenBoard, QimenResult
from .liuyao import LiuyaoInput, LiuyaoLine, LiuyaoHexagram, HiddenGod, LiuyaoResult
from .liuren import (
    LiurenInput,
    LiurenPosition,
    LiurenLesson,
    LiurenTransmission,
    LiurenBoard,
    LiurenResult,
)
from .meihua import MeihuaInput, Trigram, Hexagram, TiYongAnalysis, MeihuaResult
from .fortune import (
    DailyFortune,
    CurrentDaYun,
    CurrentLiuNian,
    MarriageCompatibility,
    DayMasterRelation,
    WuxingBalance,
    YongShenMatch,
    BranchRelations,
    NayinMatch,
    BusinessCompatibility,
    BusinessDayMasterRelation,
    BusinessYongShenMatch,
    BusinessNayinMatch,
)
from .analysis import (
    BaziAnalysisContext,
    ZiweiAnalysisContext,
    QimenAnalysisContext,
    LiuyaoAnalysisContext,
    LiurenAnalysisContext,
    MeihuaAnalysisContext,
)

__all__ = [
    'ResultModel', 'StemBranch', 'CalculationStep', 'LogEntry', 'LunarDate', 'CalendarInfo', 'DateTimeInput',
    'BirthInput', 'Pillar', 'FourPillars', 'ShiShenPillar', 'ShiShenAnalysis', 'ShenSha', 'PalaceInfo',
    'NaYinSet', 'BaziChart', 'DaYunCycle', 'LiuNianFortune', 'YunInfo', 'BaziResult',
    'ZiweiInput', 'ZiweiStar', 'ZiweiPalace', 'SiHuaEntry', 'DecadeLuck', 'ZiweiChart', 'ZiweiLunarInfo',
    'ZiweiResult',
    'QimenInput', 'QimenPalace', 'QimenBoard', 'QimenResult',
    'LiuyaoInput', 'LiuyaoLine', 'LiuyaoHexagram', 'HiddenGod', 'LiuyaoResult',
    'LiurenInput', 'LiurenPosition', 'LiurenLesson', 'LiurenTransmission', 'LiurenBoard', 'LiurenResult',
    'MeihuaInput', 'Trigram', 'Hexagram', 'TiYongAnalysis', 'MeihuaResult',
    'DailyFortune', 'CurrentDaYun', 'CurrentLiuNian', 'MarriageCompatibility', 'DayMasterRelation',
    'WuxingBalance', 'YongShenMatch', 'BranchRelations', 'NayinMatch', 'BusinessCompatibility',
    'BusinessDayMasterRelation', 'BusinessYongShenMatch', 'BusinessNayinMatch',
    'BaziAnalysisContext', 'ZiweiAnalysisContext', 'QimenAnalysisContext', 'LiuyaoAnalysisContext',
    'LiurenAnalysisContext', 'MeihuaAnalysisContext',
]
