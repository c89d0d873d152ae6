#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行分析器

功能：
- 天干、地支五行查表
- 纳音（六十甲子纳音五行）
- 四柱五行统计（四干四支各计一次）
- 判断：哪个五行过旺/缺失
"""

import logging
from typing import Dict, List

from saju_core.data.constants import NAPEUM_ELEMENTS, NAPEUM_LABELS
from saju_core.data.stems_branches import ELEMENT_ORDER, Branch, Element, Stem
from saju_core.models.chart import FiveElementBalance
from saju_core.models.ganzhi import FourPillars, SexagenaryPair

logger = logging.getLogger(__name__)


class FiveElementAnalyzer:
    """五行分析器"""

    # 五行旺衰阈值（计数，从高到低）
    BALANCE_THRESHOLDS = (
        (4, '过旺'),
        (3, '旺'),
        (2, '平'),
        (1, '弱'),
    )
    MISSING_STATUS = '缺'

    # 相合判断：>=3 为旺，=0 为缺
    STRONG_COUNT = 3
    WEAK_COUNT = 0

    @staticmethod
    def stem_element(stem: Stem) -> Element:
        return Stem(stem).element

    @staticmethod
    def branch_element(branch: Branch) -> Element:
        return Branch(branch).element

    @staticmethod
    def napeum(pair: SexagenaryPair) -> str:
        """纳音，如 甲子 -> 海中金"""
        return NAPEUM_LABELS[pair.index // 2]

    @staticmethod
    def napeum_element(pair: SexagenaryPair) -> Element:
        return NAPEUM_ELEMENTS[FiveElementAnalyzer.napeum(pair)]

    @staticmethod
    def count_elements(pillars: FourPillars) -> Dict[Element, int]:
        """四柱五行计数（按 木火土金水 顺序，缺失为 0）"""
        counts = {element: 0 for element in ELEMENT_ORDER}
        for _, pair in pillars.items():
            counts[pair.stem.element] += 1
            counts[pair.branch.element] += 1
        return counts

    @staticmethod
    def element_status(count: int) -> str:
        for threshold, status in FiveElementAnalyzer.BALANCE_THRESHOLDS:
            if count >= threshold:
                return status
        return FiveElementAnalyzer.MISSING_STATUS

    @staticmethod
    def analyze(pillars: FourPillars) -> FiveElementBalance:
        """
        分析五行平衡

        Returns:
            FiveElementBalance: 计数、各五行状态、旺/缺五行、最旺五行
        """
        counts = FiveElementAnalyzer.count_elements(pillars)

        strong: List[str] = []
        weak: List[str] = []
        for element, count in counts.items():
            if count >= FiveElementAnalyzer.STRONG_COUNT:
                strong.append(element.value)
            elif count == FiveElementAnalyzer.WEAK_COUNT:
                weak.append(element.value)

        # 并列时取 木火土金水 顺序中靠前者
        dominant = max(ELEMENT_ORDER, key=lambda element: counts[element])
        logger.debug("五行统计: %s", {element.value: count for element, count in counts.items()})

        return FiveElementBalance(
            counts={element.value: count for element, count in counts.items()},
            status={element.value: FiveElementAnalyzer.element_status(count) for element, count in counts.items()},
            strong_elements=strong,
            weak_elements=weak,
            dominant_element=dominant.value,
        )
