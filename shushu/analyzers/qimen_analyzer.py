#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
奇门遁甲分析上下文提取器
"""

from shushu.models.analysis import QimenAnalysisContext
from shushu.models.qimen import QimenPalace, QimenResult


def format_palace(palace: QimenPalace) -> str:
    """如 1宫(坎/北) 天盘丙/地盘戊 天蓬 生门 九地 [天遁、神遁]；中五宫只列地盘干"""
    head = f"{palace.palace_number}宫({palace.trigram}/{palace.direction})"
    if palace.heaven_stem is None:
        return f"{head} 地盘{palace.earth_stem}"
    plate = f"天盘{palace.heaven_stem}"
    if palace.lodged_heaven_stem:
        plate += f"(寄{palace.lodged_heaven_stem})"
    parts = [head, f"{plate}/地盘{palace.earth_stem}", palace.star, palace.gate, palace.deity]
    if palace.is_empty:
        parts.append('空')
    if palace.patterns:
        parts.append(f"[{'、'.join(palace.patterns)}]")
    return ' '.join(parts)


class QimenAnalyzer:
    """奇门遁甲分析上下文"""

    @staticmethod
    def extract(result: QimenResult) -> QimenAnalysisContext:
        board = result.board
        patterns = [f"{p.palace_number}宫{name}" for p in board.palaces for name in p.patterns]
        return QimenAnalysisContext(
            dun_type=f"{board.dun_type}{board.ju_number}局",
            ju_info=f"{board.jie_qi} {board.yuan} {board.dun_type}{board.ju_number}局",
            day_hour=f"{result.day_gan_zhi}日 {result.hour_gan_zhi}时",
            zhi_fu=board.zhi_fu_star,
            zhi_shi=board.zhi_shi_gate,
            xun_info=f"旬首{board.xun_shou}({board.xun_shou_yi}) 旬空{board.xun_kong}",
            palaces_summary='\n'.join(format_palace(p) for p in board.palaces),
            patterns='；'.join(patterns) or '无特殊格局',
            question=result.input.question or '',
        )


def extract_qimen_analysis_context(result: QimenResult) -> QimenAnalysisContext:
    """奇门遁甲分析上下文入口"""
    return QimenAnalyzer.extract(result)
