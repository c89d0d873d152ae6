#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心四柱排盘计算逻辑

- compute_four_pillars: 出生信息 -> 四柱
- analyze_chart: 四柱 -> 命盘分析（十神、藏干、十二长生、空亡、纳音、神煞、刑冲合、大运、五行统计）

SajuCalculator 每次调用新建，只在单次计算内部保存中间结果。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from saju_core.analyzers.branch_relation_analyzer import BranchRelationAnalyzer
from saju_core.analyzers.five_element_analyzer import FiveElementAnalyzer
from saju_core.analyzers.fortune_cycle_analyzer import FortuneCycleAnalyzer
from saju_core.analyzers.guin_analyzer import GuinAnalyzer
from saju_core.analyzers.hidden_stem_analyzer import HiddenStemAnalyzer
from saju_core.analyzers.sinsal_analyzer import SinsalAnalyzer
from saju_core.analyzers.twelve_stage_analyzer import TwelveStageAnalyzer
from saju_core.analyzers.void_branch_analyzer import VoidBranchAnalyzer
from saju_core.calculators.calendar_converter import CalendarConverter
from saju_core.calculators.chart_core.ten_gods import get_branch_ten_gods, get_main_star, select_branch_ten_god
from saju_core.calculators.ganzhi_deriver import GanzhiDeriver
from saju_core.calculators.saju_logging import safe_log
from saju_core.models.chart import ChartAnalysis, PillarDetail
from saju_core.models.ganzhi import BirthInput, FourPillars, PillarPosition

logger = logging.getLogger(__name__)


def compute_four_pillars(birth_input: Union[BirthInput, Mapping[str, Any]]) -> FourPillars:
    """
    出生信息 -> 四柱

    Args:
        birth_input: BirthInput 或等价字典

    Returns:
        FourPillars: 四柱

    Raises:
        UnsupportedLunarDateError: 农历日期超出转换表范围
    """
    if not isinstance(birth_input, BirthInput):
        birth_input = BirthInput.model_validate(birth_input)

    civil_datetime = CalendarConverter.to_civil_datetime(birth_input)
    pillars = GanzhiDeriver.derive(
        civil_datetime,
        include_time_in_rollover=birth_input.time_known,
        gender=birth_input.gender,
    )
    safe_log('debug', f"四柱: {civil_datetime:%Y-%m-%d %H:%M} -> "
                      f"{pillars.year} {pillars.month} {pillars.day} {pillars.hour}")
    return pillars


def analyze_chart(four_pillars: FourPillars) -> ChartAnalysis:
    """四柱 -> 命盘分析"""
    return SajuCalculator(four_pillars).calculate()


class SajuCalculator:
    """命盘组装器 - 依次调用各分析器并汇总为 ChartAnalysis"""

    def __init__(self, four_pillars: FourPillars) -> None:
        self.pillars = four_pillars
        self.details: Dict[PillarPosition, Dict[str, Any]] = {position: {} for position, _ in four_pillars.items()}
        self.summary: Dict[str, Any] = {}

    # === 公开方法 ==================================================================================

    def calculate(self) -> ChartAnalysis:
        """执行命盘计算"""
        self._calculate_ten_gods()
        self._calculate_hidden_stems()
        self._calculate_twelve_stages()
        self._calculate_elements()
        self._calculate_void_branches()
        self._calculate_stars()
        self._calculate_branch_relations()
        self._calculate_fortune_cycles()
        logger.debug("命盘计算完成: %s", self.pillars.to_texts())
        return self._format_result()

    # === 内部计算步骤 ===============================================================================

    def _calculate_ten_gods(self) -> None:
        day_stem = self.pillars.day_master
        for position, pair in self.pillars.items():
            branch_god = select_branch_ten_god(day_stem, pair.branch)
            self.details[position].update({
                'ten_god_stem': get_main_star(day_stem, pair.stem, is_day_pillar=(position == PillarPosition.DAY)),
                'ten_god_branch': branch_god.value if branch_god else '',
                'hidden_ten_gods': [god.value for god in get_branch_ten_gods(day_stem, pair.branch)],
            })

    def _calculate_hidden_stems(self) -> None:
        for position, stems in HiddenStemAnalyzer.analyze(self.pillars).items():
            self.details[position]['hidden_stems'] = [stem.hanja for stem in stems]

    def _calculate_twelve_stages(self) -> None:
        stages = TwelveStageAnalyzer.analyze(self.pillars)
        self_sitting = TwelveStageAnalyzer.self_sitting(self.pillars)
        for position, _ in self.pillars.items():
            self.details[position].update({
                'twelve_stage': stages[position].label,
                'self_sitting': self_sitting[position].label,
            })

    def _calculate_elements(self) -> None:
        for position, pair in self.pillars.items():
            self.details[position].update({
                'stem_element': pair.stem.element.value,
                'branch_element': pair.branch.element.value,
                'napeum': FiveElementAnalyzer.napeum(pair),
                'napeum_element': FiveElementAnalyzer.napeum_element(pair).value,
            })
        self.summary['five_elements'] = FiveElementAnalyzer.analyze(self.pillars)

    def _calculate_void_branches(self) -> None:
        void_info = VoidBranchAnalyzer.analyze(self.pillars)
        for position, _ in self.pillars.items():
            self.details[position]['is_void'] = position.value in void_info.positions
        self.summary['void_branches'] = void_info

    def _calculate_stars(self) -> None:
        guin = GuinAnalyzer.analyze(self.pillars)
        guin_strength = GuinAnalyzer.strength(guin)
        self.summary.update({
            'guin': {star.value: [position.value for position in positions] for star, positions in guin.items()},
            'guin_strength': guin_strength,
            'guin_level': GuinAnalyzer.strength_level(guin_strength),
            'sinsal': {
                position.value: [star.value for star in stars]
                for position, stars in SinsalAnalyzer.analyze(self.pillars).items()
            },
        })

    def _calculate_branch_relations(self) -> None:
        relations = BranchRelationAnalyzer.analyze(self.pillars)
        strength = BranchRelationAnalyzer.total_strength(relations)
        self.summary.update({
            'branch_relations': {kind.value: items for kind, items in relations.items()},
            'relation_strength': strength,
            'relation_level': BranchRelationAnalyzer.strength_level(strength),
        })

    def _calculate_fortune_cycles(self) -> None:
        self.summary.update({
            'fortune_direction': FortuneCycleAnalyzer.direction_label(self.pillars),
            'fortune_cycles': FortuneCycleAnalyzer.cycles(self.pillars),
        })

    # === 结果格式化 ==================================================================================

    def _format_result(self) -> ChartAnalysis:
        details: Dict[str, PillarDetail] = {}
        for position, pair in self.pillars.items():
            details[position.value] = PillarDetail(
                pillar=pair.text,
                stem=pair.stem.hanja,
                branch=pair.branch.hanja,
                **self.details[position],
            )

        return ChartAnalysis(
            pillars=self.pillars.to_texts(),
            birth_year=self.pillars.birth_year,
            gender=self.pillars.gender,
            day_master=self.pillars.day_master.hanja,
            details=details,
            **self.summary,
        )
