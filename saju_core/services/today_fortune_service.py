#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
今日运势评分服务 - 结合用户命盘与当日日柱，计算今日运势

评分组成：
- 天干地支作用（50%）：当日日干对命主日干的生克，当日日支与命盘合冲
- 凶煞触发（25%）：当日日支触发命盘已有的凶煞
- 贵人触发（15%）：当日日柱触发命盘已有的贵人
- 日期加分（10%）：星期、日期、月份的固定加分

总分 = 50 + 各部分加权分（各自按占比限幅），再限定在 1-100。
同一 (命盘, 日期) 结果唯一，不依赖当前时间。
"""

import logging
from datetime import date, datetime
from typing import Dict, List, Set, Tuple, Union

from saju_core.analyzers.branch_relation_analyzer import BranchRelationAnalyzer
from saju_core.analyzers.guin_analyzer import GuinAnalyzer
from saju_core.analyzers.sinsal_analyzer import SinsalAnalyzer
from saju_core.calculators.chart_core.element_relations import generates, overcomes
from saju_core.calculators.chart_core.ten_gods import TenGod, get_stem_ten_god
from saju_core.calculators.saju_calculator import compute_four_pillars
from saju_core.data.relations import RelationKind
from saju_core.data.stars import GUIN_TODAY_WEIGHTS, SINSAL_TODAY_WEIGHTS, GuinStar, SinsalStar
from saju_core.data.stems_branches import Branch
from saju_core.models.chart import ChartAnalysis
from saju_core.models.ganzhi import BirthInput, FourPillars, SexagenaryPair
from saju_core.models.score import Interaction, ScoreResult
from saju_core.services.score_utils import clamp, clamp_score, get_grade

logger = logging.getLogger(__name__)

BASE_SCORE = 50.0

# (权重, 加权后上下限)
INTERACTION_WEIGHT = (0.50, 25.0)
SINSAL_WEIGHT = (0.25, 12.5)
GUIN_WEIGHT = (0.15, 7.5)
HEURISTIC_WEIGHT = (0.10, 5.0)

# 日期加分原始分上限
HEURISTIC_CAP = 5.0

MONDAY = 0
FRIDAY = 4
WEEKEND = (5, 6)
WINTER_MONTHS = (12, 1, 2)


class TodayFortuneService:
    """今日运势评分"""

    # ==================== 当日日柱 ====================

    @staticmethod
    def today_pillars(target_date: Union[date, datetime]) -> FourPillars:
        """当日四柱（按 0 点、时间未知计算，不做 23:30 换日）"""
        return compute_four_pillars(BirthInput(
            year=target_date.year,
            month=target_date.month,
            day=target_date.day,
        ))

    # ==================== 各项原始分 ====================

    @staticmethod
    def stem_interaction(person_day: SexagenaryPair, today_day: SexagenaryPair) -> Tuple[int, List[Interaction]]:
        """
        当日日干对命主日干

        - 当日生命主 +15（相生）
        - 当日克命主 -10（相克）
        - 同一天干 +8（比和）
        """
        today_element = today_day.stem.element
        person_element = person_day.stem.element

        if generates(today_element, person_element):
            return 15, [Interaction(type='相生', score=15, detail=f'今日{today_day.stem.hanja}{today_element.value}生日主')]
        if overcomes(today_element, person_element):
            return -10, [Interaction(type='相克', score=-10, detail=f'今日{today_day.stem.hanja}{today_element.value}克日主')]
        if today_day.stem == person_day.stem:
            return 8, [Interaction(type='比和', score=8, detail=f'今日天干与日主同为{today_day.stem.hanja}')]
        return 0, []

    @staticmethod
    def _relation_branches(person_chart: ChartAnalysis, kind: RelationKind) -> Set[Branch]:
        return {
            Branch.from_hanja(branch)
            for relation in person_chart.relations_of(kind.value)
            for branch in relation.branches
        }

    @staticmethod
    def branch_interaction(person_chart: ChartAnalysis, today_branch: Branch) -> Tuple[int, List[Interaction]]:
        """
        当日日支与命盘地支关系（可叠加）

        - 与命盘三合局同局 +12
        - 与命盘六合地支相合 +8
        - 与命盘六冲地支相冲 -15
        """
        score = 0
        interactions: List[Interaction] = []

        sanhe_branches = TodayFortuneService._relation_branches(person_chart, RelationKind.SANHE)
        if any(today_branch in BranchRelationAnalyzer.sanhe_group(branch) for branch in sanhe_branches):
            score += 12
            interactions.append(Interaction(type='三合', score=12, detail=f'今日{today_branch.hanja}入命盘三合局'))

        liuhe_branches = TodayFortuneService._relation_branches(person_chart, RelationKind.LIUHE)
        if BranchRelationAnalyzer.liuhe_partner(today_branch) in liuhe_branches:
            score += 8
            interactions.append(Interaction(type='六合', score=8, detail=f'今日{today_branch.hanja}与命盘六合'))

        chong_branches = TodayFortuneService._relation_branches(person_chart, RelationKind.CHONG)
        if BranchRelationAnalyzer.clash_partner(today_branch) in chong_branches:
            score -= 15
            interactions.append(Interaction(type='冲', score=-15, detail=f'今日{today_branch.hanja}冲动命盘'))

        return score, interactions

    @staticmethod
    def sinsal_activation(person_chart: ChartAnalysis, today_branch: Branch) -> Tuple[int, List[Interaction]]:
        """当日日支触发命盘已有凶煞（只计有当日权重的凶煞；魁罡为两柱组合，不由单日触发）"""
        day_stem = person_chart.to_four_pillars().day_master
        score = 0
        interactions: List[Interaction] = []
        for name in person_chart.sinsal_stars():
            star = SinsalStar(name)
            if star not in SINSAL_TODAY_WEIGHTS:
                continue
            if SinsalAnalyzer.is_active(star, day_stem, today_branch):
                weight = SINSAL_TODAY_WEIGHTS[star]
                score += weight
                interactions.append(Interaction(type=star.value, score=weight, detail=f'今日{today_branch.hanja}触发{star.value}'))
        return score, interactions

    @staticmethod
    def guin_activation(person_chart: ChartAnalysis, today_day: SexagenaryPair) -> Tuple[int, List[Interaction]]:
        """当日日柱触发命盘已有贵人"""
        pillars = person_chart.to_four_pillars()
        score = 0
        interactions: List[Interaction] = []
        for name in person_chart.guin:
            star = GuinStar(name)
            if GuinAnalyzer.is_activated(star, pillars.day_master, pillars.month.branch, today_day):
                weight = GUIN_TODAY_WEIGHTS[star]
                score += weight
                interactions.append(Interaction(type=star.value, score=weight, detail=f'今日{today_day.text}引动{star.value}'))
        return score, interactions

    @staticmethod
    def date_heuristic(target_date: Union[date, datetime]) -> float:
        """
        日期固定加分（原始分，最多5分）

        - 周一 +3，周五 +3，周末 +2
        - 25日及以后 +2
        - 3-11月 +1，冬季 +0.5
        - 初一、十五（按公历1日、15日） +1
        """
        score = 0.0
        weekday = target_date.weekday()
        if weekday in (MONDAY, FRIDAY):
            score += 3
        elif weekday in WEEKEND:
            score += 2

        if target_date.day >= 25:
            score += 2

        score += 0.5 if target_date.month in WINTER_MONTHS else 1

        if target_date.day in (1, 15):
            score += 1

        return min(HEURISTIC_CAP, score)

    # ==================== 汇总 ====================

    @staticmethod
    def _weighted(raw: float, weight: Tuple[float, float]) -> float:
        ratio, bound = weight
        return clamp(raw * ratio, -bound, bound)

    @staticmethod
    def calculate_categories(total: float, target_date: Union[date, datetime], today_ten_god: TenGod,
                             branch_types: List[str]) -> Dict[str, int]:
        """
        分项运势：以未取整的总分为基础，各自加减后限定在 1-100

        - 事业：周一 +5，正官 +10，偏官 +8
        - 感情：周五 +5，六合 +10，三合 +8
        - 财运：25日及以后 +3，正财 +12，偏财 +8
        - 人际：周末 +3，三合 +10，冲 -8
        """
        weekday = target_date.weekday()

        career = total
        if weekday == MONDAY:
            career += 5
        if today_ten_god == TenGod.ZHENGGUAN:
            career += 10
        elif today_ten_god == TenGod.PIANGUAN:
            career += 8

        love = total
        if weekday == FRIDAY:
            love += 5
        if RelationKind.LIUHE.value in branch_types:
            love += 10
        if RelationKind.SANHE.value in branch_types:
            love += 8

        wealth = total
        if target_date.day >= 25:
            wealth += 3
        if today_ten_god == TenGod.ZHENGCAI:
            wealth += 12
        elif today_ten_god == TenGod.PIANCAI:
            wealth += 8

        relationship = total
        if weekday in WEEKEND:
            relationship += 3
        if RelationKind.SANHE.value in branch_types:
            relationship += 10
        if RelationKind.CHONG.value in branch_types:
            relationship -= 8

        return {
            'career': clamp_score(career),
            'love': clamp_score(love),
            'wealth': clamp_score(wealth),
            'relationship': clamp_score(relationship),
        }

    @staticmethod
    def score(person_chart: ChartAnalysis, target_date: Union[date, datetime]) -> ScoreResult:
        """
        计算今日运势

        Args:
            person_chart: 命主命盘
            target_date: 目标日期

        Returns:
            ScoreResult: 总分、等级、四个分项（career/love/wealth/relationship）
        """
        person_day = person_chart.to_four_pillars().day
        today_day = TodayFortuneService.today_pillars(target_date).day

        stem_score, stem_items = TodayFortuneService.stem_interaction(person_day, today_day)
        branch_score, branch_items = TodayFortuneService.branch_interaction(person_chart, today_day.branch)
        sinsal_score, sinsal_items = TodayFortuneService.sinsal_activation(person_chart, today_day.branch)
        guin_score, guin_items = TodayFortuneService.guin_activation(person_chart, today_day)
        heuristic = TodayFortuneService.date_heuristic(target_date)

        raw_total = (
            BASE_SCORE
            + TodayFortuneService._weighted(stem_score + branch_score, INTERACTION_WEIGHT)
            + TodayFortuneService._weighted(sinsal_score, SINSAL_WEIGHT)
            + TodayFortuneService._weighted(guin_score, GUIN_WEIGHT)
            + TodayFortuneService._weighted(heuristic, HEURISTIC_WEIGHT)
        )
        total = clamp_score(raw_total)

        today_ten_god = get_stem_ten_god(person_day.stem, today_day.stem)
        branch_types = [item.type for item in branch_items]
        categories = TodayFortuneService.calculate_categories(raw_total, target_date, today_ten_god, branch_types)

        logger.debug("今日运势: %s 日主%s 今日%s -> %s", target_date, person_day.text, today_day.text, total)

        return ScoreResult(
            total=total,
            grade=get_grade(total),
            categories=categories,
            interactions=stem_items + branch_items + sinsal_items + guin_items,
            details={
                'date': f'{target_date:%Y-%m-%d}',
                'today_pillar': today_day.text,
                'today_ten_god': today_ten_god.value,
                'branch_relation': '冲' if RelationKind.CHONG.value in branch_types else (branch_types[0] if branch_types else ''),
                'stem_score': stem_score,
                'branch_score': branch_score,
                'sinsal_score': sinsal_score,
                'guin_score': guin_score,
                'heuristic_score': heuristic,
                'raw_total': round(raw_total, 2),
            },
        )


def score_today_fortune(person_chart: ChartAnalysis, target_date: Union[date, datetime]) -> ScoreResult:
    """命主今日运势评分"""
    return TodayFortuneService.score(person_chart, target_date)
