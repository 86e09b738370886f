#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
六爻纳甲数据模型
爻位一律自下而上，1 为初爻，6 为上爻
"""

from typing import List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from .common import DateTimeInput, LogEntry, ResultModel

YAO_VALUES = (6, 7, 8, 9)


class LiuyaoInput(DateTimeInput):
    """六爻起卦信息"""
    method: Literal['manual', 'coin', 'random'] = Field('coin', description="起卦方式：manual 手动、coin 摇钱、random 随机")
    lines: Optional[List[int]] = Field(None, description="手动六爻值（初爻到上爻），6 老阴 7 少阳 8 少阴 9 老阳")
    najia_basis: Literal['palace', 'trigram'] = Field(
        'palace', description="纳甲依据：palace 按卦宫本卦，trigram 按本卦上下卦"
    )
    question: Optional[str] = Field(None, description="所问之事")

    @field_validator('lines')
    @classmethod
    def validate_lines(cls, v):
        """验证手动爻值"""
        if v is None:
            return v
        if len(v) != 6:
            raise ValueError('手动起卦必须提供六个爻值')
        for value in v:
            if value not in YAO_VALUES:
                raise ValueError(f'爻值必须为 6、7、8、9 之一: {value}')
        return v

    @model_validator(mode='after')
    def check_manual_lines(self):
        if self.method == 'manual' and self.lines is None:
            raise ValueError('手动起卦（method=manual）必须提供 lines')
        return self


class LiuyaoLine(ResultModel):
    """一爻"""
    position: int = Field(..., ge=1, le=6, description="爻位")
    value: int = Field(..., description="爻值 6/7/8/9")
    is_yang: bool
    is_moving: bool
    stem: str = Field(..., description="纳甲天干")
    branch: str = Field(..., description="纳甲地支")
    element: str = Field(..., description="地支五行")
    relation: str = Field(..., description="六亲")
    spirit: str = Field(..., description="六神")
    is_shi: bool = Field(False, description="世爻")
    is_ying: bool = Field(False, description="应爻")
    changed_branch: Optional[str] = Field(None, description="动爻所变之支")
    changed_element: Optional[str] = None
    changed_relation: Optional[str] = None


class LiuyaoHexagram(ResultModel):
    """一卦"""
    name: str
    palace: str = Field(..., description="卦宫")
    palace_element: str = Field(..., description="卦宫五行")
    generation: str = Field(..., description="本宫、一世…游魂、归魂")
    upper_trigram: str
    lower_trigram: str
    lines: List[LiuyaoLine] = Field(..., description="六爻，初爻在前")
    shi_position: int
    ying_position: int


class HiddenGod(ResultModel):
    """伏神"""
    position: int = Field(..., description="所伏爻位")
    stem: str
    branch: str
    element: str
    relation: str
    flying_branch: str = Field(..., description="飞神（本卦同位爻）地支")
    flying_relation: str = Field(..., description="飞神六亲")


class LiuyaoResult(ResultModel):
    """六爻排盘结果"""
    input: LiuyaoInput
    day_gan_zhi: str
    month_branch: str = Field(..., description="月建")
    original_hex: LiuyaoHexagram
    changed_hex: Optional[LiuyaoHexagram] = None
    moving_lines: List[int] = Field(default_factory=list)
    hidden_gods: List[HiddenGod] = Field(default_factory=list)
    xun_kong: str
    calculation_log: List[LogEntry] = Field(default_factory=list)
