#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
空亡分析器

以日柱所在旬查空亡地支，并统计落空亡的柱位。
"""

from typing import List, Tuple

from saju_core.data.constants import VOID_BRANCHES
from saju_core.data.stems_branches import Branch
from saju_core.models.chart import VoidBranchInfo
from saju_core.models.ganzhi import FourPillars, PillarPosition, SexagenaryPair


class VoidBranchAnalyzer:
    """空亡"""

    # 落空亡柱数阈值 -> 程度（从高到低）
    STRENGTH_LEVELS = ((3, '很强'), (2, '强'), (1, '中等'))
    DEFAULT_LEVEL = '弱'

    @staticmethod
    def void_branches(day_pillar: SexagenaryPair) -> Tuple[Branch, Branch]:
        """日柱对应的两个空亡地支"""
        return VOID_BRANCHES[day_pillar.index]

    @staticmethod
    def void_positions(pillars: FourPillars) -> List[PillarPosition]:
        """地支落空亡的柱位"""
        void = VoidBranchAnalyzer.void_branches(pillars.day)
        return [position for position, pair in pillars.items() if pair.branch in void]

    @staticmethod
    def strength_level(strength: int) -> str:
        for threshold, level in VoidBranchAnalyzer.STRENGTH_LEVELS:
            if strength >= threshold:
                return level
        return VoidBranchAnalyzer.DEFAULT_LEVEL

    @staticmethod
    def analyze(pillars: FourPillars) -> VoidBranchInfo:
        void = VoidBranchAnalyzer.void_branches(pillars.day)
        positions = VoidBranchAnalyzer.void_positions(pillars)
        strength = len(positions)
        return VoidBranchInfo(
            branches=[branch.hanja for branch in void],
            positions=[position.value for position in positions],
            strength=strength,
            level=VoidBranchAnalyzer.strength_level(strength),
        )
