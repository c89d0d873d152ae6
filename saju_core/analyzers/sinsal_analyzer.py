#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
凶煞分析器

华盖、将星、白虎、羊刃、福星按 (日干, 地支) 判断；
魁罡只看月柱与时柱是否构成固定组合。
"""

from typing import Dict, List

from saju_core.data.stars import KUIGANG_PILLAR_PAIRS, SINSAL_BRANCHES, SinsalStar
from saju_core.data.stems_branches import Branch, Stem
from saju_core.models.ganzhi import FourPillars, PillarPosition, SexagenaryPair

# 按地支判断的神煞（不含魁罡）
BRANCH_SINSAL_STARS = (
    SinsalStar.HUAGAI, SinsalStar.JIANGXING, SinsalStar.BAIHU, SinsalStar.YANGREN, SinsalStar.BOKSEONG,
)


class SinsalAnalyzer:
    """凶煞"""

    @staticmethod
    def is_active(star: SinsalStar, day_stem: Stem, branch: Branch) -> bool:
        """日干对目标地支是否构成该凶煞"""
        if star not in SINSAL_BRANCHES:
            return False
        return branch in SINSAL_BRANCHES[star][day_stem // 2]

    @staticmethod
    def is_kuigang(month: SexagenaryPair, hour: SexagenaryPair) -> bool:
        """月柱、时柱是否构成魁罡（无序）"""
        return frozenset({month.index, hour.index}) in KUIGANG_PILLAR_PAIRS

    @staticmethod
    def analyze(pillars: FourPillars) -> Dict[PillarPosition, List[SinsalStar]]:
        """
        逐柱检查凶煞

        Returns:
            {柱位: [凶煞]}，四个柱位都有键（无凶煞时为空列表）
        """
        day_stem = pillars.day_master
        result: Dict[PillarPosition, List[SinsalStar]] = {}

        for position, pair in pillars.items():
            result[position] = [
                star for star in BRANCH_SINSAL_STARS
                if SinsalAnalyzer.is_active(star, day_stem, pair.branch)
            ]

        if SinsalAnalyzer.is_kuigang(pillars.month, pillars.hour):
            result[PillarPosition.MONTH].append(SinsalStar.KUIGANG)
            result[PillarPosition.HOUR].append(SinsalStar.KUIGANG)

        return result
