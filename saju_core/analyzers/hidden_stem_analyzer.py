#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地支藏干分析器
"""

from typing import Dict, Tuple

from saju_core.data.constants import HIDDEN_STEMS
from saju_core.data.stems_branches import Branch, Stem
from saju_core.models.ganzhi import FourPillars, PillarPosition


class HiddenStemAnalyzer:
    """藏干（本气在前）"""

    @staticmethod
    def hidden_stems(branch: Branch) -> Tuple[Stem, ...]:
        return HIDDEN_STEMS[branch]

    @staticmethod
    def main_qi(branch: Branch) -> Stem:
        """本气"""
        return HIDDEN_STEMS[branch][0]

    @staticmethod
    def analyze(pillars: FourPillars) -> Dict[PillarPosition, Tuple[Stem, ...]]:
        return {position: HIDDEN_STEMS[pair.branch] for position, pair in pillars.items()}
