#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱数据模型
"""

from saju_core.models.ganzhi import (
    BirthInput,
    CalendarType,
    FourPillars,
    Gender,
    PillarPosition,
    SexagenaryPair,
)
from saju_core.models.chart import (
    BranchRelation,
    ChartAnalysis,
    FiveElementBalance,
    FortuneCycleEntry,
    PillarDetail,
    VoidBranchInfo,
)
from saju_core.models.score import Interaction, ScoreResult

__all__ = [
    'BirthInput',
    'CalendarType',
    'FourPillars',
    'Gender',
    'PillarPosition',
    'SexagenaryPair',
    'BranchRelation',
    'ChartAnalysis',
    'FiveElementBalance',
    'FortuneCycleEntry',
    'PillarDetail',
    'VoidBranchInfo',
    'Interaction',
    'ScoreResult',
]
