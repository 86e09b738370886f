#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大六壬数据模型
"""

from typing import List, Optional

from pydantic import Field

from .common import DateTimeInput, LogEntry, ResultModel


class LiurenInput(DateTimeInput):
    """大六壬起课时间"""
    question: Optional[str] = Field(None, description="所问之事")


class LiurenPosition(ResultModel):
    """天地盘一位"""
    earth_branch: str = Field(..., description="地盘支（固定）")
    heaven_branch: str = Field(..., description="天盘支")
    general: Optional[str] = Field(None, description="天将")


class LiurenLesson(ResultModel):
    """一课"""
    top: str
    bottom: str
    top_element: str
    bottom_element: str
    relation: str = Field(..., description="比和 / X生Y / X克Y")


class LiurenTransmission(ResultModel):
    """三传"""
    initial: str
    middle: str
    final: str
    method: str = Field(..., description="取传法")
    initial_general: Optional[str] = None
    middle_general: Optional[str] = None
    final_general: Optional[str] = None


class LiurenBoard(ResultModel):
    """课盘"""
    positions: List[LiurenPosition] = Field(..., description="十二位，地盘子至亥")
    month_jiang: str = Field(..., description="月将地支")
    month_jiang_name: str = Field(..., description="月将名")
    lessons: List[LiurenLesson]
    transmission: LiurenTransmission
    xun_kong: str

    def heaven_above(self, earth_branch: str) -> str:
        for position in self.positions:
            if position.earth_branch == earth_branch:
                return position.heaven_branch
        raise KeyError(earth_branch)


class LiurenResult(ResultModel):
    """大六壬排盘结果"""
    input: LiurenInput
    board: LiurenBoard
    day_gan_zhi: str
    hour_gan_zhi: str
    hour_branch: str
    is_day: bool = Field(..., description="昼占")
    calculation_log: List[LogEntry] = Field(default_factory=list)
