#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
六爻纳甲排盘计算器

起卦 → 定本卦 → 定变卦 → 定卦宫世应 → 纳甲 → 六亲 → 六神 → 飞伏神
"""

import random
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from lunar_python.util import LunarUtil

from shushu.calculators.bazi_core import get_element_relation
from shushu.calculators.calc_logging import CalculationLog
from shushu.calculators.lunar_converter import LunarConverter
from shushu.data.hexagrams import lookup_hexagram, trigram_from_lines
from shushu.data.liuyao_tables import (
    GENERATION_LABELS,
    HEXAGRAM_PALACE_MAP,
    NAJIA_INNER,
    NAJIA_OUTER,
    NAJIA_STEMS,
    SIX_RELATIONS,
    SIX_SPIRITS,
    SPIRIT_START,
)
from shushu.data.stems_branches import BRANCH_ELEMENTS
from shushu.models.liuyao import YAO_VALUES, HiddenGod, LiuyaoHexagram, LiuyaoInput, LiuyaoLine, LiuyaoResult

# 以卦宫五行为我：同我兄弟，我生子孙，生我父母，我克妻财，克我官鬼
_RELATION_BY_ELEMENT = {
    'same': '兄弟',
    'me_producing': '子孙',
    'producing_me': '父母',
    'me_controlling': '妻财',
    'controlling_me': '官鬼',
}


def six_relation(palace_element: str, line_element: str) -> str:
    return _RELATION_BY_ELEMENT[get_element_relation(palace_element, line_element)]


def cast_lines(method: str, rng: random.Random) -> List[int]:
    """
    摇卦：coin 每爻三枚铜钱（字 2 背 3）求和；random 每爻在 6/7/8/9 中等概率取值
    """
    if method == 'coin':
        return [sum(rng.choice((2, 3)) for _ in range(3)) for _ in range(6)]
    return [rng.choice(YAO_VALUES) for _ in range(6)]


def najia(upper: str, lower: str, palace: str, basis: str) -> List[Tuple[str, str]]:
    """
    六爻纳甲 (干, 支)，初爻在前

    basis 为 palace 时按卦宫本卦纳甲，为 trigram 时按本卦上下卦纳甲
    """
    inner_trigram, outer_trigram = (palace, palace) if basis == 'palace' else (lower, upper)
    inner_stem = NAJIA_STEMS[inner_trigram][0]
    outer_stem = NAJIA_STEMS[outer_trigram][1]
    return ([(inner_stem, branch) for branch in NAJIA_INNER[inner_trigram]]
            + [(outer_stem, branch) for branch in NAJIA_OUTER[outer_trigram]])


class LiuyaoCalculator:
    """六爻排盘计算器"""

    def __init__(self, data: LiuyaoInput, rng: Optional[random.Random] = None):
        self.data = data
        self.rng = rng or random.Random()
        self.log = CalculationLog('liuyao')

    def calculate(self) -> LiuyaoResult:
        resolved = LunarConverter.resolve(self.data)
        day_gz = resolved.eight_char.getDay()
        month_branch = resolved.lunar.getMonthZhiExact()
        xun_kong = LunarUtil.getXunKong(day_gz)
        self.log.note('日月干支', f"日干支: {day_gz}, 月建: {month_branch}, 旬空: {xun_kong}")

        values = list(self.data.lines) if self.data.method == 'manual' else cast_lines(self.data.method, self.rng)
        self.log.note('起卦', f"六爻值(初→上): {', '.join(str(v) for v in values)} (方法: {self.data.method})")

        spirit_start = SPIRIT_START[day_gz[0]]
        spirits = [SIX_SPIRITS[(spirit_start + i) % 6] for i in range(6)]
        original_yang = [v in (7, 9) for v in values]
        moving = [i + 1 for i, v in enumerate(values) if v in (6, 9)]

        upper = trigram_from_lines(original_yang[3:])
        lower = trigram_from_lines(original_yang[:3])
        palace_entry = HEXAGRAM_PALACE_MAP[(upper, lower)]
        self.log.note('定本卦', f"{lookup_hexagram(upper, lower).name} ({upper}/{lower})")

        changed_hex = None
        changed_lines = None
        if moving:
            changed_yang = [(not yang) if (i + 1) in moving else yang for i, yang in enumerate(original_yang)]
            changed_hex = self._build_hexagram(
                changed_yang, [7 if yang else 8 for yang in changed_yang],
                spirits, palace_entry.palace_element,
            )
            changed_lines = changed_hex.lines
            self.log.note('定变卦', f"{changed_hex.name}, 动爻: {', '.join(str(p) for p in moving)}")
        else:
            self.log.note('定变卦', '无动爻，无变卦')

        original_hex = self._build_hexagram(
            original_yang, values, spirits, palace_entry.palace_element, changed_lines,
        )
        self.log.note('定卦宫', f"{original_hex.palace}宫 ({original_hex.palace_element}), "
                              f"世{original_hex.shi_position}应{original_hex.ying_position}")

        hidden_gods = self._hidden_gods(original_hex)
        if hidden_gods:
            self.log.note('飞伏神', '; '.join(
                f"{g.relation}({g.branch}{g.element})伏于第{g.position}爻" for g in hidden_gods
            ))
        else:
            self.log.note('飞伏神', '六亲齐全，无伏神')

        return LiuyaoResult(
            input=self.data,
            day_gan_zhi=day_gz,
            month_branch=month_branch,
            original_hex=original_hex,
            changed_hex=changed_hex,
            moving_lines=moving,
            hidden_gods=hidden_gods,
            xun_kong=xun_kong,
            calculation_log=self.log.entries,
        )

    def _build_hexagram(self, yang: Sequence[bool], values: Sequence[int], spirits: Sequence[str],
                        relation_element: str, changed_lines: Optional[Sequence[LiuyaoLine]] = None) -> LiuyaoHexagram:
        """
        组装一卦

        六亲一律以 relation_element（本卦卦宫五行）为我；
        changed_lines 不为空时，把变卦同位爻的支、五行、六亲写到动爻上
        """
        upper = trigram_from_lines(yang[3:])
        lower = trigram_from_lines(yang[:3])
        entry = HEXAGRAM_PALACE_MAP[(upper, lower)]
        stems_branches = najia(upper, lower, entry.palace, self.data.najia_basis)

        lines = []
        for i, (stem, branch) in enumerate(stems_branches):
            position = i + 1
            element = BRANCH_ELEMENTS[branch]
            is_moving = values[i] in (6, 9)
            changed = changed_lines[i] if (changed_lines is not None and is_moving) else None
            lines.append(LiuyaoLine(
                position=position,
                value=values[i],
                is_yang=yang[i],
                is_moving=is_moving,
                stem=stem,
                branch=branch,
                element=element,
                relation=six_relation(relation_element, element),
                spirit=spirits[i],
                is_shi=(position == entry.shi),
                is_ying=(position == entry.ying),
                changed_branch=changed.branch if changed else None,
                changed_element=changed.element if changed else None,
                changed_relation=changed.relation if changed else None,
            ))

        return LiuyaoHexagram(
            name=lookup_hexagram(upper, lower).name,
            palace=entry.palace,
            palace_element=entry.palace_element,
            generation=GENERATION_LABELS[entry.generation],
            upper_trigram=upper,
            lower_trigram=lower,
            lines=lines,
            shi_position=entry.shi,
            ying_position=entry.ying,
        )

    @staticmethod
    def _hidden_gods(original: LiuyaoHexagram) -> List[HiddenGod]:
        """本卦缺失的六亲，到本宫纯卦同类爻中寻伏神，伏于同位爻（飞神）之下"""
        present = {line.relation for line in original.lines}
        missing = [relation for relation in SIX_RELATIONS if relation not in present]
        if not missing:
            return []

        palace = original.palace
        pure = najia(palace, palace, palace, 'palace')
        hidden = []
        for i, (stem, branch) in enumerate(pure):
            element = BRANCH_ELEMENTS[branch]
            relation = six_relation(original.palace_element, element)
            if relation in missing:
                flying = original.lines[i]
                hidden.append(HiddenGod(
                    position=i + 1,
                    stem=stem,
                    branch=branch,
                    element=element,
                    relation=relation,
                    flying_branch=flying.branch,
                    flying_relation=flying.relation,
                ))
        return hidden


def calculate_liuyao(data: Union[LiuyaoInput, Dict[str, Any]], rng: Optional[random.Random] = None) -> LiuyaoResult:
    """
    六爻排盘入口

    Args:
        data: LiuyaoInput 或等价字典
        rng: 摇卦随机源，测试时可注入固定种子的 random.Random

    Returns:
        LiuyaoResult: 本卦、变卦、动爻、伏神
    """
    if not isinstance(data, LiuyaoInput):
        data = LiuyaoInput.model_validate(data)
    return LiuyaoCalculator(data, rng).calculate()
