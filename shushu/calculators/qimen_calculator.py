#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
奇门遁甲排盘计算器（时家转盘，拆补法定元）

定局 → 地盘 → 旬首 → 值符值使 → 天盘 → 门盘 → 八神 → 格局
中五宫不参与转盘：其地盘干寄坤二宫，随坤二宫地盘干一同转动。
"""

from typing import Any, Dict, List, Optional, Union

from lunar_python.util import LunarUtil

from shushu.calculators.calc_logging import CalculationLog
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.qimen_tables import (
    CENTER_PALACE,
    CHONG_STEMS,
    CLOCKWISE,
    COUNTERCLOCKWISE,
    JIA_HIDDEN_YI,
    JIEQI_JU_TABLE,
    LODGE_PALACE,
    PALACE_META,
    SANQI_LIUYI,
    SOUTHERN_DIRECTION_SWAP,
    YANG_DEITIES,
    YANG_DUN_JIEQI,
    YIN_DEITIES,
    YUAN_NAMES,
)
from shushu.models.qimen import QimenBoard, QimenInput, QimenPalace, QimenResult


def effective_palace(palace: int) -> int:
    """中五寄坤二"""
    return LODGE_PALACE if palace == CENTER_PALACE else palace


def yuan_index(days_since_term: int) -> int:
    """拆补法：交节后 0-4 天上元，5-9 天中元，其后下元"""
    if days_since_term < 5:
        return 0
    if days_since_term < 10:
        return 1
    return 2


def layout_earth_plate(ju_number: int, dun_type: str) -> Dict[int, str]:
    """三奇六仪自局数宫起，阳遁顺布九宫，阴遁逆布"""
    plate = {}
    for i, stem in enumerate(SANQI_LIUYI):
        if dun_type == '阳遁':
            palace = (ju_number - 1 + i) % 9 + 1
        else:
            palace = (ju_number - 1 - i + 9) % 9 + 1
        plate[palace] = stem
    return plate


def find_stem_palace(earth_plate: Dict[int, str], stem: str) -> int:
    palace = next(p for p, s in earth_plate.items() if s == stem)
    return effective_palace(palace)


def rotate_outer(items: Dict[int, Any], offset: int) -> Dict[int, Any]:
    """外八宫沿顺时针方向整体转动 offset 格"""
    return {
        CLOCKWISE[(CLOCKWISE.index(palace) + offset) % 8]: item
        for palace, item in items.items()
        if palace != CENTER_PALACE
    }


def detect_patterns(heaven: str, earth: str, gate: Optional[str], deity: Optional[str]) -> List[str]:
    """天盘干加地盘干，结合门、神判断格局"""
    patterns = []
    if heaven == earth:
        patterns.append('伏吟')
    if CHONG_STEMS.get(heaven) == earth:
        patterns.append('反吟')
    if heaven == '丙' and earth == '戊' and gate == '生门':
        patterns.append('天遁')
    if heaven == '乙' and earth == '己' and gate == '开门':
        patterns.append('地遁')
    if heaven == '丁' and earth == '癸' and gate == '休门':
        patterns.append('人遁')
    if heaven == '丙' and earth == '戊' and deity == '九地':
        patterns.append('神遁')
    if heaven == '丁' and earth == '癸' and deity == '九天':
        patterns.append('鬼遁')
    if heaven == '庚' and earth == '庚':
        patterns.append('庚格')
    if {heaven, earth} == {'庚', '壬'}:
        patterns.append('上格')
    return patterns


class QimenCalculator:
    """奇门遁甲排盘计算器"""

    def __init__(self, data: QimenInput):
        self.data = data
        self.log = CalculationLog('qimen')

    def calculate(self) -> QimenResult:
        resolved = LunarConverter.resolve(self.data)
        day_gz = resolved.eight_char.getDay()
        hour_gz = resolved.eight_char.getTime()
        self.log.note('时间', f"{day_gz}日 {hour_gz}时")

        # 定局
        jie_qi = resolved.lunar.getPrevJieQi(True)
        term = jie_qi.getName()
        idx = yuan_index(LunarConverter.days_since(resolved.solar, jie_qi))
        dun_type = '阳遁' if term in YANG_DUN_JIEQI else '阴遁'
        southern = self.data.latitude is not None and self.data.latitude < 0
        if southern:
            dun_type = '阴遁' if dun_type == '阳遁' else '阳遁'
        ju_number = JIEQI_JU_TABLE[term][idx]
        yuan = YUAN_NAMES[idx]
        self.log.note('定局', f"{term} {yuan} {dun_type}{ju_number}局{' (南半球反转)' if southern else ''}")

        earth_plate = layout_earth_plate(ju_number, dun_type)
        self.log.note('地盘', ' '.join(f"{p}宫={earth_plate[p]}" for p in range(1, 10)))

        xun_shou = LunarUtil.getXun(hour_gz)
        xun_yi = JIA_HIDDEN_YI[xun_shou]
        xun_kong = LunarUtil.getXunKong(hour_gz)
        self.log.note('旬首', f"{xun_shou}({xun_yi}) 空亡:{xun_kong}")

        xun_yi_palace = find_stem_palace(earth_plate, xun_yi)
        zhi_fu_star = PALACE_META[xun_yi_palace].default_star
        zhi_shi_gate = PALACE_META[xun_yi_palace].default_gate
        self.log.note('值符值使', f"值符={zhi_fu_star}({xun_yi_palace}宫) 值使={zhi_shi_gate}")

        # 时干为甲时，用旬首所遁之仪
        hour_stem = hour_gz[0]
        hour_element = xun_yi if hour_stem == '甲' else hour_stem
        hour_palace = find_stem_palace(earth_plate, hour_element)
        offset = (CLOCKWISE.index(hour_palace) - CLOCKWISE.index(xun_yi_palace)) % 8

        stars = rotate_outer({p: PALACE_META[p].default_star for p in CLOCKWISE}, offset)
        self.log.note('天盘', f"{zhi_fu_star}→{hour_palace}宫({hour_element})")
        gates = rotate_outer({p: PALACE_META[p].default_gate for p in CLOCKWISE}, offset)
        self.log.note('门盘', f"{zhi_shi_gate}→{hour_palace}宫")
        heaven_plate = rotate_outer(earth_plate, offset)
        lodged_palace = CLOCKWISE[(CLOCKWISE.index(LODGE_PALACE) + offset) % 8]

        deities_seq = YANG_DEITIES if dun_type == '阳遁' else YIN_DEITIES
        order = CLOCKWISE if dun_type == '阳遁' else COUNTERCLOCKWISE
        start = order.index(hour_palace)
        deities = {order[(start + i) % 8]: deity for i, deity in enumerate(deities_seq)}
        self.log.note('八神', f"值符神在{hour_palace}宫 {'顺' if dun_type == '阳遁' else '逆'}布")

        palaces = []
        all_patterns = []
        for p in range(1, 10):
            meta = PALACE_META[p]
            direction = SOUTHERN_DIRECTION_SWAP[meta.direction] if southern else meta.direction
            is_empty = any(branch in xun_kong for branch in meta.branches)
            if p == CENTER_PALACE:
                palaces.append(QimenPalace(
                    palace_number=p,
                    trigram=meta.trigram,
                    direction=direction,
                    earth_stem=earth_plate[p],
                    is_empty=is_empty,
                ))
                continue
            patterns = detect_patterns(heaven_plate[p], earth_plate[p], gates[p], deities[p])
            all_patterns += [f"{p}宫{name}" for name in patterns]
            palaces.append(QimenPalace(
                palace_number=p,
                trigram=meta.trigram,
                direction=direction,
                earth_stem=earth_plate[p],
                heaven_stem=heaven_plate[p],
                lodged_heaven_stem=earth_plate[CENTER_PALACE] if p == lodged_palace else None,
                star=stars[p],
                gate=gates[p],
                deity=deities[p],
                is_empty=is_empty,
                patterns=patterns,
            ))
        self.log.note('格局', '、'.join(all_patterns) or '无特殊格局')

        board = QimenBoard(
            palaces=palaces,
            dun_type=dun_type,
            ju_number=ju_number,
            yuan=yuan,
            jie_qi=term,
            zhi_fu_star=zhi_fu_star,
            zhi_shi_gate=zhi_shi_gate,
            xun_shou=xun_shou,
            xun_shou_yi=xun_yi,
            xun_kong=xun_kong,
        )
        return QimenResult(
            input=self.data,
            board=board,
            day_gan_zhi=day_gz,
            hour_gan_zhi=hour_gz,
            is_southern_hemisphere=southern,
            calculation_log=self.log.entries,
        )


def calculate_qimen(data: Union[QimenInput, Dict[str, Any]]) -> QimenResult:
    """
    奇门遁甲排盘入口

    Args:
        data: QimenInput 或等价字典

    Returns:
        QimenResult: 九宫盘面与计算过程
    """
    if not isinstance(data, QimenInput):
        data = QimenInput.model_validate(data)
    return QimenCalculator(data).calculate()
