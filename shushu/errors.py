#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘引擎异常定义

输入校验失败时立即抛出，不返回部分结果。
查表失败属于程序缺陷，直接以 KeyError 暴露，不在此处定义。
"""

from typing import Optional


class ShushuError(Exception):
    """
    排盘引擎异常基类

    与系统错误区分开来，调用方（HTTP 层等）可据 code / error_type 决定如何呈现。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "shushu_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class InputValidationError(ShushuError, ValueError):
    """输入参数校验错误"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        error_type = f"validation_error:{field}" if field else "validation_error"
        super().__init__(message, code=400, error_type=error_type)


class DateRangeError(InputValidationError):
    """年份超出历法支持范围"""
    def __init__(self, year: int, min_year: int = 1900, max_year: int = 2100):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        span = f"{min_year}-{max_year}"
        message = (
            f"出生年份超出支持范围（{span}）：{year} / "
            f"Birth year out of supported range ({span}): {year}"
        )
        super().__init__(message, field="year")
