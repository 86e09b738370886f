#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘计算共享日志工具

- safe_log：安全的日志输出函数，捕获 Broken pipe 等异常
- CalculationLog：随结果返回的计算过程记录（可观测性轨迹），每一步同时以 DEBUG 级别输出
"""

import logging
import time
from typing import Any, List

from shushu.config import get_settings
from shushu.models.common import CalculationStep, LogEntry


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger("shushu.calculators")
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, get_settings().log_level, logging.INFO))


def safe_log(level, message):
    """
    安全的日志输出函数，捕获 Broken pipe 等异常
    调用方进程的标准输出被关闭时，日志不应中断排盘计算
    """
    try:
        if level == 'info':
            logger.info(message)
        elif level == 'warning':
            logger.warning(message)
        elif level == 'error':
            logger.error(message)
        elif level == 'debug':
            logger.debug(message)
        else:
            logger.info(message)
    except (BrokenPipeError, OSError):
        pass


def _plain(value: Any) -> Any:
    """模型转为普通字典，便于写入计算日志"""
    if hasattr(value, 'model_dump'):
        return value.model_dump()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


class CalculationLog:
    """
    计算过程记录

    八字使用 step()（带输入、输出与毫秒时间戳），其余术数使用 note()（步骤名 + 说明文字）。
    """

    def __init__(self, system: str):
        self.system = system
        self._steps: List[CalculationStep] = []
        self._entries: List[LogEntry] = []

    def step(self, name: str, input: Any = None, output: Any = None) -> None:
        entry = CalculationStep(
            step=name,
            input=_plain(input),
            output=_plain(output),
            timestamp=int(time.time() * 1000),
        )
        self._steps.append(entry)
        safe_log('debug', f"[{self.system}] {name}: {entry.output}")

    def note(self, name: str, detail: str) -> None:
        self._entries.append(LogEntry(step=name, detail=detail))
        safe_log('debug', f"[{self.system}] {name}: {detail}")

    @property
    def steps(self) -> List[CalculationStep]:
        return list(self._steps)

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)
