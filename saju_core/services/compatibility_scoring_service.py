#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
合婚评分服务 - 比较两人命盘，给出 1-100 分及分项得分

分项与权重（固定常量，不可配置）：
- day_pillar      日柱（日干、日支五行生克）   30%
- five_elements   五行互补                    25%
- branch_relation 两盘地支合冲                25%
- stars           贵人                        20%

四个分项都只依赖两人的对称比较，交换 A、B 结果不变。
"""

import logging
from itertools import product
from typing import Dict, List, Tuple

from saju_core.analyzers.branch_relation_analyzer import BranchRelationAnalyzer
from saju_core.calculators.chart_core.element_relations import generates_either, overcomes_either
from saju_core.models.chart import ChartAnalysis
from saju_core.models.score import Interaction, ScoreResult
from saju_core.services.score_utils import clamp_score, get_grade

logger = logging.getLogger(__name__)

WEIGHTS: Dict[str, float] = {
    'day_pillar': 0.30,
    'five_elements': 0.25,
    'branch_relation': 0.25,
    'stars': 0.20,
}

CATEGORY_LABELS: Dict[str, str] = {
    'day_pillar': '日柱',
    'five_elements': '五行',
    'branch_relation': '地支',
    'stars': '贵人',
}

BASE_SCORE = 50

# 分项 >= 70 为优势，< 40 为不足
STRENGTH_THRESHOLD = 70
WEAKNESS_THRESHOLD = 40

# 贵人激活次数超过该值视为贵人多
STAR_ACTIVATION_THRESHOLD = 2


class CompatibilityScoring:
    """合婚评分计算器"""

    @staticmethod
    def calculate_day_pillar_score(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> Tuple[int, List[Interaction]]:
        """
        日柱评分

        评分规则：
        - 基准分50分
        - 日干五行相生 +20，相克 -15，同五行 +10
        - 日支五行相生 +15，相克 -10
        """
        score = BASE_SCORE
        interactions: List[Interaction] = []
        day_a = chart_a.to_four_pillars().day
        day_b = chart_b.to_four_pillars().day

        stem_a, stem_b = day_a.stem.element, day_b.stem.element
        if generates_either(stem_a, stem_b):
            score += 20
            interactions.append(Interaction(type='相生', score=20, detail=f'日干{day_a.stem.hanja}{day_b.stem.hanja}五行相生'))
        elif overcomes_either(stem_a, stem_b):
            score -= 15
            interactions.append(Interaction(type='相克', score=-15, detail=f'日干{day_a.stem.hanja}{day_b.stem.hanja}五行相克'))
        elif stem_a == stem_b:
            score += 10
            interactions.append(Interaction(type='比和', score=10, detail=f'日干同属{stem_a.value}'))

        branch_a, branch_b = day_a.branch.element, day_b.branch.element
        if generates_either(branch_a, branch_b):
            score += 15
            interactions.append(Interaction(type='相生', score=15, detail=f'日支{day_a.branch.hanja}{day_b.branch.hanja}五行相生'))
        elif overcomes_either(branch_a, branch_b):
            score -= 10
            interactions.append(Interaction(type='相克', score=-10, detail=f'日支{day_a.branch.hanja}{day_b.branch.hanja}五行相克'))

        return clamp_score(score), interactions

    @staticmethod
    def calculate_five_element_score(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> Tuple[int, List[Interaction]]:
        """
        五行互补评分

        一方旺的五行（>=3）补上另一方缺的五行（=0）即为互补：
        双向互补 +25，单向互补 +15
        """
        a_helps_b = CompatibilityScoring._complements(chart_a, chart_b)
        b_helps_a = CompatibilityScoring._complements(chart_b, chart_a)

        score = BASE_SCORE
        interactions: List[Interaction] = []
        if a_helps_b and b_helps_a:
            score += 25
            interactions.append(Interaction(type='五行互补', score=25, detail='双方五行互相补足'))
        elif a_helps_b or b_helps_a:
            score += 15
            interactions.append(Interaction(type='五行互补', score=15, detail='一方五行补足另一方'))

        return clamp_score(score), interactions

    @staticmethod
    def _complements(giver: ChartAnalysis, receiver: ChartAnalysis) -> bool:
        strong = set(giver.five_elements.strong_elements)
        weak = set(receiver.five_elements.weak_elements)
        return bool(strong & weak)

    @staticmethod
    def calculate_branch_relation_score(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> Tuple[int, List[Interaction]]:
        """
        两盘地支评分：两人地支两两组合（16对）

        - 构成三合/六合/方合：每对 +10
        - 构成六冲：每对 -5
        """
        branches_a = chart_a.to_four_pillars().branches
        branches_b = chart_b.to_four_pillars().branches

        harmonious = 0
        conflicting = 0
        for branch_a, branch_b in product(branches_a, branches_b):
            if BranchRelationAnalyzer.combination(branch_a, branch_b) is not None:
                harmonious += 1
            if BranchRelationAnalyzer.is_clash(branch_a, branch_b):
                conflicting += 1

        interactions: List[Interaction] = []
        if harmonious:
            interactions.append(Interaction(type='合', score=10 * harmonious, detail=f'两盘地支相合{harmonious}对'))
        if conflicting:
            interactions.append(Interaction(type='冲', score=-5 * conflicting, detail=f'两盘地支相冲{conflicting}对'))

        return clamp_score(BASE_SCORE + 10 * harmonious - 5 * conflicting), interactions

    @staticmethod
    def calculate_star_score(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> Tuple[int, List[Interaction]]:
        """
        贵人评分：贵人激活次数多于2次记为贵人多
        双方都多 +20，一方多 +10
        """
        rich = [
            chart.guin_activation_count() > STAR_ACTIVATION_THRESHOLD
            for chart in (chart_a, chart_b)
        ]
        score = BASE_SCORE
        interactions: List[Interaction] = []
        if all(rich):
            score += 20
            interactions.append(Interaction(type='贵人', score=20, detail='双方贵人俱多'))
        elif any(rich):
            score += 10
            interactions.append(Interaction(type='贵人', score=10, detail='一方贵人多'))
        return clamp_score(score), interactions

    @staticmethod
    def calculate(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> ScoreResult:
        """
        计算合婚总评分

        Args:
            chart_a: 甲方命盘
            chart_b: 乙方命盘

        Returns:
            ScoreResult: 总分、等级、分项得分、作用描述
        """
        calculators = {
            'day_pillar': CompatibilityScoring.calculate_day_pillar_score,
            'five_elements': CompatibilityScoring.calculate_five_element_score,
            'branch_relation': CompatibilityScoring.calculate_branch_relation_score,
            'stars': CompatibilityScoring.calculate_star_score,
        }

        categories: Dict[str, int] = {}
        interactions: List[Interaction] = []
        for name, calculator in calculators.items():
            categories[name], category_interactions = calculator(chart_a, chart_b)
            interactions.extend(category_interactions)

        weighted = sum(categories[name] * weight for name, weight in WEIGHTS.items())
        total = clamp_score(weighted)

        strengths = [name for name, score in categories.items() if score >= STRENGTH_THRESHOLD]
        weaknesses = [name for name, score in categories.items() if score < WEAKNESS_THRESHOLD]
        for name in strengths:
            interactions.append(Interaction(type='优势', score=categories[name], detail=f'{CATEGORY_LABELS[name]}契合'))
        for name in weaknesses:
            interactions.append(Interaction(type='不足', score=categories[name], detail=f'{CATEGORY_LABELS[name]}欠佳'))

        logger.debug("合婚评分: %s %s -> %s %s", chart_a.pillars, chart_b.pillars, total, categories)

        return ScoreResult(
            total=total,
            grade=get_grade(total),
            categories=categories,
            interactions=interactions,
            details={
                'weights': dict(WEIGHTS),
                'weighted_score': round(weighted, 2),
                'strengths': strengths,
                'weaknesses': weaknesses,
            },
        )


def score_compatibility(chart_a: ChartAnalysis, chart_b: ChartAnalysis) -> ScoreResult:
    """两人合婚评分"""
    return CompatibilityScoring.calculate(chart_a, chart_b)
