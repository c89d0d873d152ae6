#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十二长生分析器
"""

from typing import Dict

from saju_core.data.constants import TWELVE_STAGE_TABLE, TwelveStage
from saju_core.data.stems_branches import Branch, Stem
from saju_core.models.ganzhi import FourPillars, PillarPosition


class TwelveStageAnalyzer:
    """十二长生（星运 / 自坐）"""

    @staticmethod
    def stage(stem: Stem, branch: Branch) -> TwelveStage:
        """天干在地支的十二长生"""
        return TWELVE_STAGE_TABLE[branch][stem]

    @staticmethod
    def analyze(pillars: FourPillars) -> Dict[PillarPosition, TwelveStage]:
        """日干对各柱地支的十二长生"""
        day_stem = pillars.day_master
        return {
            position: TwelveStageAnalyzer.stage(day_stem, pair.branch)
            for position, pair in pillars.items()
        }

    @staticmethod
    def self_sitting(pillars: FourPillars) -> Dict[PillarPosition, TwelveStage]:
        """各柱天干坐本柱地支的十二长生"""
        return {
            position: TwelveStageAnalyzer.stage(pair.stem, pair.branch)
            for position, pair in pillars.items()
        }
