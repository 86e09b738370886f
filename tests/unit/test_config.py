#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""引擎配置与异常单元测试"""

import pytest

from shushu.calculators import calculate_bazi
from shushu.config import EngineSettings, get_settings, reset_settings
from shushu.errors import DateRangeError, InputValidationError, ShushuError


class TestEngineSettings:
    """环境变量配置"""

    def test_defaults(self):
        settings = get_settings()
        assert settings == EngineSettings()
        assert (settings.min_year, settings.max_year) == (1900, 2100)
        assert settings.dayun_count == 10
        assert settings.use_equation_of_time is False
        assert settings.default_timezone == 'Asia/Shanghai'

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('SHUSHU_LOG_LEVEL', 'debug')
        monkeypatch.setenv('SHUSHU_MAX_YEAR', '2050')
        monkeypatch.setenv('SHUSHU_EQUATION_OF_TIME', 'yes')
        reset_settings()
        settings = get_settings()
        assert settings.log_level == 'DEBUG'
        assert settings.max_year == 2050
        assert settings.use_equation_of_time is True

    def test_year_bounds_follow_settings(self, monkeypatch):
        monkeypatch.setenv('SHUSHU_MAX_YEAR', '2000')
        reset_settings()
        with pytest.raises(DateRangeError) as exc_info:
            calculate_bazi({'year': 2024, 'month': 1, 'day': 1})
        assert '1900-2000' in exc_info.value.message

    def test_dayun_count(self, monkeypatch):
        monkeypatch.setenv('SHUSHU_DAYUN_COUNT', '5')
        reset_settings()
        result = calculate_bazi({'year': 1990, 'month': 6, 'day': 1, 'hour': 8, 'gender': 'male'})
        assert len(result.yun.da_yun) <= 5


class TestErrors:
    """异常层级"""

    def test_hierarchy(self):
        error = DateRangeError(1800)
        assert isinstance(error, InputValidationError)
        assert isinstance(error, ShushuError)
        assert isinstance(error, ValueError)
        assert error.field == 'year'
        assert error.code == 400

    def test_bilingual_message(self):
        error = DateRangeError(2200)
        assert str(error) == (
            "出生年份超出支持范围（1900-2100）：2200 / "
            "Birth year out of supported range (1900-2100): 2200"
        )

    def test_error_type(self):
        assert InputValidationError('bad', field='day').error_type == 'validation_error:day'
        assert InputValidationError('bad').error_type == 'validation_error'
