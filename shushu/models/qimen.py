#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
奇门遁甲数据模型
"""

from typing import List, Literal, Optional

from pydantic import Field

from .common import DateTimeInput, LogEntry, ResultModel

DunType = Literal['阳遁', '阴遁']


class QimenInput(DateTimeInput):
    """奇门起局时间"""
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="纬度，小于 0 为南半球（阴阳遁反转）")
    question: Optional[str] = Field(None, description="所问之事")


class QimenPalace(ResultModel):
    """九宫之一"""
    palace_number: int = Field(..., ge=1, le=9, description="洛书宫数")
    trigram: str = Field(..., description="卦")
    direction: str = Field(..., description="方位")
    earth_stem: str = Field(..., description="地盘干")
    heaven_stem: Optional[str] = Field(None, description="天盘干（中五宫无）")
    lodged_heaven_stem: Optional[str] = Field(None, description="随坤二宫同转的中五地盘干")
    star: Optional[str] = Field(None, description="九星（中五宫无）")
    gate: Optional[str] = Field(None, description="八门（中五宫无）")
    deity: Optional[str] = Field(None, description="八神（中五宫无）")
    is_empty: bool = Field(False, description="宫支落旬空")
    patterns: List[str] = Field(default_factory=list, description="格局")


class QimenBoard(ResultModel):
    """奇门盘"""
    palaces: List[QimenPalace] = Field(..., description="九宫，1-9 顺序")
    dun_type: DunType
    ju_number: int = Field(..., ge=1, le=9)
    yuan: str = Field(..., description="上元/中元/下元")
    jie_qi: str = Field(..., description="节气")
    zhi_fu_star: str = Field(..., description="值符星")
    zhi_shi_gate: str = Field(..., description="值使门")
    xun_shou: str = Field(..., description="旬首")
    xun_shou_yi: str = Field(..., description="旬首所遁之仪")
    xun_kong: str = Field(..., description="时旬空亡")

    def palace(self, number: int) -> QimenPalace:
        return self.palaces[number - 1]


class QimenResult(ResultModel):
    """奇门遁甲排盘结果"""
    input: QimenInput
    board: QimenBoard
    day_gan_zhi: str
    hour_gan_zhi: str
    is_southern_hemisphere: bool = False
    calculation_log: List[LogEntry] = Field(default_factory=list)
