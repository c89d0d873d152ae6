#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
贵人分析器

六种贵人各自查表，逐柱检查是否被命盘实际干支激活：
- 天乙贵人、福星贵人、天厨贵人：日干 -> 地支
- 天德贵人：日干 -> 天干（乙日为地支申）
- 月德贵人、月令：月支 -> 天干
"""

import logging
from typing import Dict, List, Tuple

from saju_core.data.stars import (
    FUXING_BRANCHES,
    GUIN_STRENGTH,
    GUIN_STRENGTH_DEFAULT_LEVEL,
    GUIN_STRENGTH_LEVELS,
    TIANCHU_BRANCHES,
    TIANDE_BRANCHES,
    TIANDE_STEMS,
    TIANYI_BRANCHES,
    YUEDE_STEMS,
    YUELING_STEMS,
    GuinStar,
)
from saju_core.data.stems_branches import Branch, Stem
from saju_core.models.ganzhi import FourPillars, PillarPosition, SexagenaryPair

logger = logging.getLogger(__name__)


class GuinAnalyzer:
    """贵人（吉神）"""

    @staticmethod
    def targets(star: GuinStar, day_stem: Stem, month_branch: Branch) -> Tuple[Tuple[Stem, ...], Tuple[Branch, ...]]:
        """
        查表得到某贵人的目标天干、目标地支

        Returns:
            (目标天干, 目标地支)
        """
        if star == GuinStar.TIANYI:
            return (), TIANYI_BRANCHES[day_stem]
        if star == GuinStar.TIANDE:
            return TIANDE_STEMS[day_stem], TIANDE_BRANCHES[day_stem]
        if star == GuinStar.YUEDE:
            return (YUEDE_STEMS[month_branch],), ()
        if star == GuinStar.YUELING:
            return (YUELING_STEMS[month_branch],), ()
        if star == GuinStar.FUXING:
            return (), (FUXING_BRANCHES[day_stem],)
        if star == GuinStar.TIANCHU:
            return (), TIANCHU_BRANCHES[day_stem // 2]
        raise ValueError(f"未知贵人: {star}")

    @staticmethod
    def is_activated(star: GuinStar, day_stem: Stem, month_branch: Branch, target: SexagenaryPair) -> bool:
        """目标干支是否激活该贵人"""
        stems, branches = GuinAnalyzer.targets(star, day_stem, month_branch)
        return target.stem in stems or target.branch in branches

    @staticmethod
    def analyze(pillars: FourPillars) -> Dict[GuinStar, List[PillarPosition]]:
        """
        逐柱检查各贵人

        Returns:
            {贵人: [所在柱位]}，只包含被激活的贵人，按 GuinStar 定义顺序
        """
        day_stem = pillars.day_master
        month_branch = pillars.month.branch
        activations: Dict[GuinStar, List[PillarPosition]] = {}

        for star in GuinStar:
            positions = [
                position for position, pair in pillars.items()
                if GuinAnalyzer.is_activated(star, day_stem, month_branch, pair)
            ]
            if positions:
                activations[star] = positions

        logger.debug("贵人: %s", {star.value: [p.value for p in positions] for star, positions in activations.items()})
        return activations

    @staticmethod
    def strength(activations: Dict[GuinStar, List[PillarPosition]]) -> int:
        """贵人总强度（每次激活累加该贵人强度）"""
        return sum(GUIN_STRENGTH[star] * len(positions) for star, positions in activations.items())

    @staticmethod
    def strength_level(strength: int) -> str:
        for threshold, level in GUIN_STRENGTH_LEVELS:
            if strength >= threshold:
                return level
        return GUIN_STRENGTH_DEFAULT_LEVEL
