#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数排盘计算器

农历转换 → 安命宫 → 安身宫 → 定五行局 → 安主星 → 安辅星 → 定四化 → 定亮度 → 排大限
宫位地支一律以索引计算（0=子），输出时再转为地支字符。
"""

from typing import Any, Dict, List, Union

from shushu.calculators.calc_logging import CalculationLog
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.stems_branches import BRANCHES, NAYIN, STEMS, nayin_element
from shushu.data.ziwei_tables import (
    JU_NUMBERS,
    LUCUN_TABLE,
    MING_ZHU_TABLE,
    MONTH_STEM_START,
    NAYIN_TO_JU,
    PALACE_NAMES,
    SHEN_ZHU_TABLE,
    SI_HUA_NAMES,
    SI_HUA_TABLE,
    STAR_BRIGHTNESS,
    TIANFU_FROM_ZIWEI,
    TIANFU_SERIES_OFFSETS,
    TIANKUI_TABLE,
    TIANMA_TABLE,
    TIANYUE_TABLE,
    ZIWEI_POSITION_TABLE,
    ZIWEI_SERIES_OFFSETS,
    di_jie_position,
    di_kong_position,
    huo_xing_position,
    ling_xing_position,
    qing_yang_position,
    tuo_luo_position,
    wen_chang_position,
    wen_qu_position,
    you_bi_position,
    zuo_fu_position,
)
from shushu.models.ziwei import (
    DecadeLuck,
    SiHuaEntry,
    ZiweiChart,
    ZiweiInput,
    ZiweiLunarInfo,
    ZiweiPalace,
    ZiweiResult,
    ZiweiStar,
)


def palace_stem(branch_idx: int, year_stem: str) -> str:
    """五虎遁：由年干定寅宫天干，顺推各宫"""
    return STEMS[(MONTH_STEM_START[year_stem] + (branch_idx - 2) % 12) % 10]


def ming_palace_index(lunar_month: int, hour_idx: int) -> int:
    """寅宫起正月顺数至生月，再逆数至生时"""
    return (2 + lunar_month - 1 - hour_idx) % 12


def shen_palace_index(lunar_month: int, hour_idx: int) -> int:
    """寅宫起正月顺数至生月，再顺数至生时"""
    return (2 + lunar_month - 1 + hour_idx) % 12


def wuxing_ju(ming_idx: int, year_stem: str):
    """命宫干支纳音五行定局，返回 (局名, 局数)"""
    gan_zhi = palace_stem(ming_idx, year_stem) + BRANCHES[ming_idx]
    return NAYIN_TO_JU[nayin_element(NAYIN[gan_zhi])]


def place_main_stars(lunar_day: int, ju_number: int) -> Dict[int, List[str]]:
    """
    安十四主星

    紫微由生日与局数查表，紫微星系逆行，天府与紫微寅申对称，天府星系顺行
    """
    ziwei = ZIWEI_POSITION_TABLE[min(lunar_day, 30)][JU_NUMBERS.index(ju_number)]
    placements = [(ziwei, '紫微')]
    placements += [((ziwei - offset) % 12, star) for star, offset in ZIWEI_SERIES_OFFSETS]
    tianfu = TIANFU_FROM_ZIWEI[ziwei]
    placements.append((tianfu, '天府'))
    placements += [((tianfu + offset) % 12, star) for star, offset in TIANFU_SERIES_OFFSETS]

    star_map: Dict[int, List[str]] = {}
    for pos, star in placements:
        star_map.setdefault(pos, []).append(star)
    return star_map


def place_aux_stars(year_stem: str, year_branch_idx: int, lunar_month: int, hour_idx: int) -> Dict[int, List[str]]:
    """安十四辅星"""
    lucun = LUCUN_TABLE[year_stem]
    placements = (
        (wen_chang_position(hour_idx), '文昌'),
        (wen_qu_position(hour_idx), '文曲'),
        (zuo_fu_position(lunar_month), '左辅'),
        (you_bi_position(lunar_month), '右弼'),
        (TIANKUI_TABLE[year_stem], '天魁'),
        (TIANYUE_TABLE[year_stem], '天钺'),
        (lucun, '禄存'),
        (qing_yang_position(lucun), '擎羊'),
        (tuo_luo_position(lucun), '陀罗'),
        (huo_xing_position(year_branch_idx, hour_idx), '火星'),
        (ling_xing_position(year_branch_idx, hour_idx), '铃星'),
        (TIANMA_TABLE[year_branch_idx], '天马'),
        (di_kong_position(hour_idx), '地空'),
        (di_jie_position(hour_idx), '地劫'),
    )
    star_map: Dict[int, List[str]] = {}
    for pos, star in placements:
        star_map.setdefault(pos, []).append(star)
    return star_map


def si_hua_entries(stem: str) -> List[SiHuaEntry]:
    return [SiHuaEntry(star=star, hua=hua) for star, hua in zip(SI_HUA_TABLE[stem], SI_HUA_NAMES)]


class ZiweiCalculator:
    """紫微斗数排盘计算器"""

    def __init__(self, data: ZiweiInput):
        self.data = data
        self.log = CalculationLog('ziwei')

    def calculate(self) -> ZiweiResult:
        lunar_info = self._lunar_info()
        year_stem = lunar_info.year_stem
        year_branch_idx = BRANCHES.index(lunar_info.year_branch)
        hour_idx = BRANCHES.index(lunar_info.hour_branch)
        month = lunar_info.month
        self.log.note('农历转换', f"{year_stem}{lunar_info.year_branch}年 农历{month}月{lunar_info.day}日 "
                                f"{lunar_info.hour_branch}时")

        ming_idx = ming_palace_index(month, hour_idx)
        self.log.note('安命宫', f"命宫在{BRANCHES[ming_idx]}")
        shen_idx = shen_palace_index(month, hour_idx)
        self.log.note('安身宫', f"身宫在{BRANCHES[shen_idx]}")

        ju_name, ju_number = wuxing_ju(ming_idx, year_stem)
        self.log.note('定五行局', ju_name)

        # 十二宫名自命宫起逆布
        name_by_branch = {(ming_idx - i) % 12: name for i, name in enumerate(PALACE_NAMES)}

        stars: Dict[int, List[Dict[str, Any]]] = {b: [] for b in range(12)}
        main_stars = place_main_stars(lunar_info.day, ju_number)
        for pos, names in main_stars.items():
            stars[pos] += [{'name': name, 'type': 'main'} for name in names]
        ziwei_pos = next(pos for pos, names in main_stars.items() if '紫微' in names)
        self.log.note('安主星', f"紫微在{BRANCHES[ziwei_pos]}，共安14主星")

        aux_stars = place_aux_stars(year_stem, year_branch_idx, month, hour_idx)
        for pos, names in aux_stars.items():
            stars[pos] += [{'name': name, 'type': 'aux'} for name in names]
        self.log.note('安辅星', '、'.join(name for pos in sorted(aux_stars) for name in aux_stars[pos]))

        palace_order = [(ming_idx - i) % 12 for i in range(12)]
        self._apply_si_hua(year_stem, stars, palace_order)
        hua = SI_HUA_TABLE[year_stem]
        self.log.note('定四化', f"{year_stem}干：{hua[0]}化禄 {hua[1]}化权 {hua[2]}化科 {hua[3]}化忌")

        for pos, palace_stars in stars.items():
            for star in palace_stars:
                if star['type'] == 'main':
                    star['brightness'] = STAR_BRIGHTNESS[star['name']][pos]
        self.log.note('定亮度', '14主星亮度已标注')

        decade_lucks = self._decade_lucks(ming_idx, ju_number, year_stem, name_by_branch)
        self.log.note('排大运', f"{ju_number}岁起运，{decade_lucks[0].age_range} → {decade_lucks[-1].age_range}")
        age_by_branch = {BRANCHES.index(luck.branch): luck.age_range for luck in decade_lucks}

        palaces = [
            ZiweiPalace(
                name=name_by_branch[b],
                stem=palace_stem(b, year_stem),
                branch=BRANCHES[b],
                stars=[ZiweiStar(**star) for star in stars[b]],
                decade_luck_age=age_by_branch.get(b),
                is_shen_palace=(b == shen_idx),
            )
            for b in palace_order
        ]
        chart = ZiweiChart(
            palaces=palaces,
            ming_branch=BRANCHES[ming_idx],
            shen_palace=name_by_branch[shen_idx],
            shen_branch=BRANCHES[shen_idx],
            ming_zhu=MING_ZHU_TABLE[year_branch_idx],
            shen_zhu=SHEN_ZHU_TABLE[year_branch_idx],
            wuxing_ju=ju_name,
            ju_number=ju_number,
        )
        return ZiweiResult(
            input=self.data,
            chart=chart,
            decade_lucks=decade_lucks,
            lunar_info=lunar_info,
            calculation_log=self.log.entries,
        )

    def _lunar_info(self) -> ZiweiLunarInfo:
        """年干支以立春为界，月日取农历；时辰取真太阳时校正后的小时"""
        resolved = LunarConverter.resolve(self.data)
        lunar = resolved.lunar
        year_gz = lunar.getYearInGanZhiExact()
        month_gz = lunar.getMonthInGanZhiExact()
        day_gz = lunar.getDayInGanZhiExact()
        hour_idx = LunarConverter.hour_branch_index(resolved.info.adjusted_datetime.hour)
        return ZiweiLunarInfo(
            year=resolved.info.lunar.year,
            month=resolved.info.lunar.month,
            day=resolved.info.lunar.day,
            is_leap=resolved.info.lunar.is_leap,
            year_stem=year_gz[0],
            year_branch=year_gz[1],
            month_stem=month_gz[0],
            month_branch=month_gz[1],
            day_stem=day_gz[0],
            day_branch=day_gz[1],
            hour_branch=BRANCHES[hour_idx],
        )

    @staticmethod
    def _apply_si_hua(year_stem: str, stars: Dict[int, List[Dict[str, Any]]], palace_order: List[int]) -> None:
        """生年四化：每一化标注在第一颗同名且未标注的星上"""
        for star_name, hua in zip(SI_HUA_TABLE[year_stem], SI_HUA_NAMES):
            target = next(
                (star for b in palace_order for star in stars[b]
                 if star['name'] == star_name and 'si_hua' not in star),
                None,
            )
            if target is not None:
                target['si_hua'] = hua

    def _decade_lucks(self, ming_idx: int, ju_number: int, year_stem: str,
                      name_by_branch: Dict[int, str]) -> List[DecadeLuck]:
        """
        大限：起于命宫，局数起运，每限十年
        阳男阴女顺行，阴男阳女逆行
        """
        yang_year = STEMS.index(year_stem) % 2 == 0
        forward = yang_year == (self.data.gender == 'male')
        direction = 1 if forward else -1

        lucks = []
        for i in range(12):
            b = (ming_idx + direction * i) % 12
            start_age = ju_number + i * 10
            stem = palace_stem(b, year_stem)
            lucks.append(DecadeLuck(
                age_range=f"{start_age}-{start_age + 9}",
                start_age=start_age,
                end_age=start_age + 9,
                palace_name=name_by_branch[b],
                stem=stem,
                branch=BRANCHES[b],
                si_hua=si_hua_entries(stem),
            ))
        return lucks


def calculate_ziwei(data: Union[ZiweiInput, Dict[str, Any]]) -> ZiweiResult:
    """
    紫微斗数排盘入口

    Args:
        data: ZiweiInput 或等价字典

    Returns:
        ZiweiResult: 十二宫、大限、农历信息与计算过程
    """
    if not isinstance(data, ZiweiInput):
        data = ZiweiInput.model_validate(data)
    return ZiweiCalculator(data).calculate()
