#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱（八字）排盘与评分引擎

对外接口：
- compute_four_pillars(birth_input) -> FourPillars
- analyze_chart(four_pillars) -> ChartAnalysis
- score_compatibility(chart_a, chart_b) -> ScoreResult
- score_today_fortune(person_chart, date) -> ScoreResult
"""

from saju_core.calculators.saju_calculator import analyze_chart, compute_four_pillars
from saju_core.exceptions import InvalidSexagenaryPairError, SajuError, UnsupportedLunarDateError
from saju_core.models import (
    BirthInput,
    CalendarType,
    ChartAnalysis,
    FourPillars,
    Gender,
    PillarPosition,
    ScoreResult,
    SexagenaryPair,
)
from saju_core.services.compatibility_scoring_service import score_compatibility
from saju_core.services.today_fortune_service import score_today_fortune

__version__ = '1.0.0'

__all__ = [
    'compute_four_pillars',
    'analyze_chart',
    'score_compatibility',
    'score_today_fortune',
    'BirthInput',
    'CalendarType',
    'ChartAnalysis',
    'FourPillars',
    'Gender',
    'PillarPosition',
    'ScoreResult',
    'SexagenaryPair',
    'SajuError',
    'UnsupportedLunarDateError',
    'InvalidSexagenaryPairError',
]
