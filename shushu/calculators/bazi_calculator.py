#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字排盘计算器

依次完成：校验 → 阳历 → 农历 → 八字 → 四柱 → 五行 → 十神 → 十神交叉校验
→ 纳音 → 神煞 → 命格 → 宫位 → 起运大运 → 流年，每一步写入计算日志。
"""

from typing import Any, Dict, List, Optional, Union

from shushu.calculators.bazi_core import (
    get_branch_ten_gods,
    get_main_star,
    get_producing_element,
    get_producing_from_element,
    get_controlled_element,
)
from shushu.calculators.calc_logging import CalculationLog, safe_log
from shushu.calculators.lunar_converter import LunarConverter
from shushu.config import get_settings
from shushu.data.stems_branches import (
    BRANCH_ELEMENTS,
    ELEMENTS,
    HIDDEN_STEMS,
    HIDDEN_STEMS_WEIGHT,
    NAYIN,
    STEM_ELEMENTS,
    STEM_YINYANG,
)
from shushu.models.bazi import (
    BaziChart,
    BaziResult,
    BirthInput,
    DaYunCycle,
    FourPillars,
    LiuNianFortune,
    NaYinSet,
    PalaceInfo,
    Pillar,
    ShenSha,
    ShiShenAnalysis,
    ShiShenPillar,
    YunInfo,
)
from shushu.models.common import StemBranch

# EightChar 各柱方法名中的柱名
_EIGHT_CHAR_PILLAR = {'year': 'Year', 'month': 'Month', 'day': 'Day', 'hour': 'Time'}

# 得地：年/月/日/时 支的力量系数（月令提纲 ×1.5，日支近身 ×1.2）
PILLAR_ROOT_FACTOR = {'year': 1.0, 'month': 1.5, 'day': 1.2, 'hour': 1.0}


class BaziCalculator:
    """八字排盘计算器"""

    def __init__(self, birth: BirthInput):
        self.birth = birth
        self.log = CalculationLog('bazi')
        self.solar = None
        self.lunar = None
        self.eight_char = None
        self.four_pillars: Optional[FourPillars] = None
        self.day_master = ''
        self._yun = None
        self._da_yun = []

    # === 公开方法 ==================================================================================

    def calculate(self) -> BaziResult:
        """执行八字排盘，返回完整结果"""
        self._validate_input()
        self._load_calendar()
        self._build_four_pillars()
        wuxing = self._compute_wuxing()
        shishen = self._compute_shishen()
        self._cross_verify_shishen(shishen)
        nayin = self._compute_nayin()
        shensha = self._extract_shensha()
        mingge = self.determine_mingge(self.day_master, self.four_pillars)
        self.log.step('determineMingGe', {'dayMaster': self.day_master}, mingge)
        palaces = self._compute_palaces()
        yun = self._compute_yun()
        liu_nian = self._compute_liu_nian()

        chart = BaziChart(
            input=self.birth,
            four_pillars=self.four_pillars,
            day_master=self.day_master,
            wuxing_distribution=wuxing,
            shishen=shishen,
            shensha=shensha,
            nayin=nayin,
            mingge=mingge,
            ming_gong=palaces['ming_gong'],
            shen_gong=palaces['shen_gong'],
            tai_yuan=palaces['tai_yuan'],
            tai_xi=palaces['tai_xi'],
            calculation_log=self.log.steps,
        )
        return BaziResult(chart=chart, yun=yun, liu_nian=liu_nian)

    # === 内部计算步骤 ===============================================================================

    def _validate_input(self) -> None:
        LunarConverter.validate_year(self.birth.year)
        self.log.step('validateInput', {'year': self.birth.year, 'calendar': self.birth.calendar_type}, 'ok')

    def _load_calendar(self) -> None:
        resolved = LunarConverter.resolve(self.birth, hour_known=not self.birth.hour_unknown)
        self.solar = resolved.solar
        self.lunar = resolved.lunar
        self.eight_char = resolved.eight_char

        self.log.step('createSolar', {'correction_minutes': resolved.info.correction_minutes},
                      self.solar.toYmdHms())
        self.log.step('getLunar', self.solar.toYmdHms(), self.lunar.toFullString())
        self.log.step('getEightChar', {'zi_hour_mode': self.birth.zi_hour_mode}, {
            'year': self.eight_char.getYear(),
            'month': self.eight_char.getMonth(),
            'day': self.eight_char.getDay(),
            'hour': self.eight_char.getTime(),
        })

    def _build_pillar(self, name: str, gan_zhi: str) -> Pillar:
        key = _EIGHT_CHAR_PILLAR[name]
        stem_branch = StemBranch.parse(gan_zhi)
        return Pillar(
            stem_branch=stem_branch,
            hidden_stems=list(HIDDEN_STEMS[stem_branch.branch]),
            na_yin=NAYIN[gan_zhi],
            stem_wuxing=STEM_ELEMENTS[stem_branch.stem],
            branch_wuxing=BRANCH_ELEMENTS[stem_branch.branch],
            yin_yang=STEM_YINYANG[stem_branch.stem],
            di_shi=getattr(self.eight_char, f'get{key}DiShi')(),
            xun=getattr(self.eight_char, f'get{key}Xun')(),
            xun_kong=getattr(self.eight_char, f'get{key}XunKong')(),
        )

    def _build_four_pillars(self) -> None:
        ec = self.eight_char
        hour = None if self.birth.hour_unknown else self._build_pillar('hour', ec.getTime())
        self.four_pillars = FourPillars(
            year=self._build_pillar('year', ec.getYear()),
            month=self._build_pillar('month', ec.getMonth()),
            day=self._build_pillar('day', ec.getDay()),
            hour=hour,
        )
        self.day_master = self.four_pillars.day.stem_branch.stem
        self.log.step('buildFourPillars', None, {
            'dayMaster': self.day_master,
            'hourUnknown': self.birth.hour_unknown,
        })

    def _compute_wuxing(self) -> Dict[str, int]:
        """五行计数：天干、地支、藏干各计一次"""
        distribution = {element: 0 for element in ELEMENTS}
        for _, pillar in self.four_pillars.items():
            distribution[pillar.stem_wuxing] += 1
            distribution[pillar.branch_wuxing] += 1
            for stem in pillar.hidden_stems:
                distribution[STEM_ELEMENTS[stem]] += 1
        self.log.step('computeWuXing', None, distribution)
        return distribution

    def _compute_shishen(self) -> ShiShenAnalysis:
        pillars = {}
        for name, pillar in self.four_pillars.items():
            sb = pillar.stem_branch
            pillars[name] = ShiShenPillar(
                stem=get_main_star(self.day_master, sb.stem, name),
                branch=get_branch_ten_gods(self.day_master, sb.branch),
            )
        shishen = ShiShenAnalysis(**pillars)
        self.log.step('computeShiShen', {'dayMaster': self.day_master}, shishen)
        return shishen

    def _cross_verify_shishen(self, shishen: ShiShenAnalysis) -> None:
        """与 lunar_python 的天干十神逐柱比对，不一致只告警"""
        matches: List[str] = []
        mismatches: List[Dict[str, str]] = []
        for name, _ in self.four_pillars.items():
            ours = getattr(shishen, name).stem
            library = getattr(self.eight_char, f'get{_EIGHT_CHAR_PILLAR[name]}ShiShenGan')()
            if ours == library:
                matches.append(name)
            else:
                mismatches.append({'pillar': name, 'ours': ours, 'library': library})
                safe_log('warning', f"十神校验不一致 {name}: 计算={ours} 库={library}")
        self.log.step('crossVerifyShiShen', None, {'matches': matches, 'mismatches': mismatches})

    def _compute_nayin(self) -> NaYinSet:
        fp = self.four_pillars
        nayin = NaYinSet(
            year=fp.year.na_yin,
            month=fp.month.na_yin,
            day=fp.day.na_yin,
            hour=fp.hour.na_yin if fp.hour else None,
        )
        self.log.step('computeNaYin', None, nayin)
        return nayin

    def _extract_shensha(self) -> List[ShenSha]:
        shensha = [ShenSha(name=name, pillar='day', description='吉神') for name in self.lunar.getDayJiShen()]
        shensha += [ShenSha(name=name, pillar='day', description='凶煞') for name in self.lunar.getDayXiongSha()]
        self.log.step('extractShenSha', None, shensha)
        return shensha

    @staticmethod
    def determine_mingge(day_master: str, four_pillars: FourPillars) -> str:
        """
        命格：日主强弱

        得令（旺50 相30 休10 囚5 死0）+ 得地（藏干通根）+ 得助（天干比劫、印星），合计 ≥ 50 为身强
        """
        day_element = STEM_ELEMENTS[day_master]
        seal_element = get_producing_from_element(day_element)

        season = BRANCH_ELEMENTS[four_pillars.month.stem_branch.branch]
        if day_element == season:
            de_ling = 50
        elif get_producing_element(season) == day_element:
            de_ling = 30
        elif get_producing_element(day_element) == season:
            de_ling = 10
        elif get_controlled_element(day_element) == season:
            de_ling = 5
        else:
            de_ling = 0

        de_di = 0.0
        for name, pillar in four_pillars.items():
            factor = PILLAR_ROOT_FACTOR[name]
            for stem, weight in HIDDEN_STEMS_WEIGHT[pillar.stem_branch.branch]:
                element = STEM_ELEMENTS[stem]
                if element == day_element:
                    de_di += 8 * weight * factor
                elif element == seal_element:
                    de_di += 5 * weight * factor

        de_zhu = 0
        for name, pillar in four_pillars.items():
            if name == 'day':
                continue
            element = pillar.stem_wuxing
            if element == day_element:
                de_zhu += 8
            elif element == seal_element:
                de_zhu += 6

        total = de_ling + de_di + de_zhu
        if total >= 50:
            factors = [label for label, ok in (('得令', de_ling >= 30), ('得地', de_di >= 10), ('得助', de_zhu >= 6)) if ok]
            return f"{day_master}日主身强（{'、'.join(factors) or '综合偏强'}）"

        weak = [label for label, ok in (('不得令', de_ling < 30), ('不得地', de_di < 10), ('不得助', de_zhu < 6)) if ok]
        return f"{day_master}日主身弱（{'、'.join(weak) or '综合偏弱'}）"

    def _compute_palaces(self) -> Dict[str, Optional[PalaceInfo]]:
        ec = self.eight_char
        hour_known = not self.birth.hour_unknown
        palaces = {
            'ming_gong': PalaceInfo(gan_zhi=ec.getMingGong(), na_yin=ec.getMingGongNaYin()) if hour_known else None,
            'shen_gong': PalaceInfo(gan_zhi=ec.getShenGong(), na_yin=ec.getShenGongNaYin()) if hour_known else None,
            'tai_yuan': PalaceInfo(gan_zhi=ec.getTaiYuan(), na_yin=ec.getTaiYuanNaYin()),
            'tai_xi': PalaceInfo(gan_zhi=ec.getTaiXi(), na_yin=ec.getTaiXiNaYin()),
        }
        self.log.step('computePalaces', {'hourUnknown': self.birth.hour_unknown}, palaces)
        return palaces

    def _compute_yun(self) -> YunInfo:
        """起运：女命传 0，男命与不详传 1"""
        gender_code = 0 if self.birth.gender == 'female' else 1
        self._yun = self.eight_char.getYun(gender_code)
        self._da_yun = self._yun.getDaYun(get_settings().dayun_count)

        da_yun = [
            DaYunCycle(
                start_year=dy.getStartYear(),
                start_age=dy.getStartAge(),
                end_year=dy.getEndYear(),
                end_age=dy.getEndAge(),
                stem_branch=StemBranch.parse(dy.getGanZhi()),
            )
            for dy in self._da_yun
            if dy.getGanZhi()
        ]
        yun = YunInfo(
            gender=self.birth.gender,
            start_age=self._yun.getStartYear(),
            start_years=self._yun.getStartYear(),
            start_months=self._yun.getStartMonth(),
            start_days=self._yun.getStartDay(),
            forward=self._yun.isForward(),
            da_yun=da_yun,
        )
        self.log.step('computeYun', {'gender': self.birth.gender}, yun)
        return yun

    def _compute_liu_nian(self) -> List[LiuNianFortune]:
        """流年：每步大运（含起运前）的全部流年"""
        liu_nian = [
            LiuNianFortune(year=ln.getYear(), age=ln.getAge(), stem_branch=StemBranch.parse(ln.getGanZhi()))
            for dy in self._da_yun
            for ln in dy.getLiuNian()
        ]
        self.log.step('computeLiuNian', None, {'count': len(liu_nian)})
        return liu_nian


def calculate_bazi(birth: Union[BirthInput, Dict[str, Any]]) -> BaziResult:
    """
    八字排盘入口

    Args:
        birth: BirthInput 或等价字典

    Returns:
        BaziResult: 命盘、起运大运、流年
    """
    if not isinstance(birth, BirthInput):
        birth = BirthInput.model_validate(birth)
    return BaziCalculator(birth).calculate()
