#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""合婚评分单元测试"""

import pytest

from saju_core import score_compatibility
from saju_core.services.compatibility_scoring_service import WEIGHTS, CompatibilityScoring
from saju_core.services.score_utils import clamp_score, get_grade

CHART_TEXTS = [
    ('壬申', '壬寅', '壬子', '庚子'),
    ('甲子', '丙寅', '甲子', '甲子'),
    ('丙午', '甲午', '丙午', '甲午'),
    ('辛丑', '丙寅', '甲子', '辛未'),
    ('壬辰', '甲辰', '壬辰', '甲子'),
    ('庚戌', '戊子', '己丑', '丁卯'),
]


class TestGrade:
    @pytest.mark.parametrize("score,grade", [(100, '极好'), (80, '极好'), (79, '好'), (65, '好'), (50, '中等'), (35, '差'), (34, '极差'), (1, '极差')])
    def test_grade(self, score, grade):
        assert get_grade(score) == grade

    @pytest.mark.parametrize("raw,expected", [(-20, 1), (0, 1), (55.4, 55), (101, 100), (250, 100)])
    def test_clamp_score(self, raw, expected):
        assert clamp_score(raw) == expected


class TestCategories:
    def test_weights(self):
        assert WEIGHTS == {'day_pillar': 0.30, 'five_elements': 0.25, 'branch_relation': 0.25, 'stars': 0.20}
        assert sum(WEIGHTS.values()) == pytest.approx(1.0)

    def test_day_pillar_generating(self, make_chart):
        # 甲木、丙火相生；子水、午火相克
        chart_a = make_chart('甲子', '丙寅', '甲子', '甲子')
        chart_b = make_chart('丙午', '甲午', '丙午', '甲午')
        score, interactions = CompatibilityScoring.calculate_day_pillar_score(chart_a, chart_b)
        assert score == 50 + 20 - 10
        assert [item.type for item in interactions] == ['相生', '相克']

    def test_day_pillar_same_element(self, sample_chart):
        score, _ = CompatibilityScoring.calculate_day_pillar_score(sample_chart, sample_chart)
        assert score == 60

    def test_five_elements_both_ways(self, sample_chart, make_chart):
        # 火旺缺水 与 水旺缺火 互补
        fire_chart = make_chart('丙午', '甲午', '丙午', '甲午')
        assert fire_chart.five_elements.weak_elements == ['土', '金', '水']
        score, _ = CompatibilityScoring.calculate_five_element_score(sample_chart, fire_chart)
        assert score == 50 + 25

    def test_five_elements_one_way(self, sample_chart, make_chart):
        # 火旺、不缺水：只补足对方缺火
        chart = make_chart('丙午', '甲午', '丙午', '壬子')
        assert '水' not in chart.five_elements.weak_elements
        score, _ = CompatibilityScoring.calculate_five_element_score(sample_chart, chart)
        assert score == 50 + 15

    def test_five_elements_none(self, sample_chart):
        score, interactions = CompatibilityScoring.calculate_five_element_score(sample_chart, sample_chart)
        assert score == 50
        assert interactions == []

    def test_branch_relation_cross_pairs(self, sample_chart):
        # 申寅子子 x 申寅子子：申子相合 4 对，寅申相冲 2 对
        score, _ = CompatibilityScoring.calculate_branch_relation_score(sample_chart, sample_chart)
        assert score == 50 + 40 - 10

    def test_stars(self, sample_chart, make_chart):
        rich = make_chart('辛丑', '丙寅', '甲子', '辛未')
        assert rich.guin_activation_count() > 2
        assert CompatibilityScoring.calculate_star_score(rich, rich)[0] == 70
        assert CompatibilityScoring.calculate_star_score(rich, sample_chart)[0] == 60
        assert CompatibilityScoring.calculate_star_score(sample_chart, sample_chart)[0] == 50


class TestScoreCompatibility:
    @pytest.mark.parametrize("texts_a", CHART_TEXTS)
    @pytest.mark.parametrize("texts_b", CHART_TEXTS)
    def test_symmetric_and_bounded(self, make_chart, texts_a, texts_b):
        chart_a = make_chart(*texts_a)
        chart_b = make_chart(*texts_b)
        forward = score_compatibility(chart_a, chart_b)
        backward = score_compatibility(chart_b, chart_a)

        assert forward.total == backward.total
        assert forward.categories == backward.categories
        assert 1 <= forward.total <= 100
        assert all(1 <= value <= 100 for value in forward.categories.values())
        assert set(forward.categories) == set(WEIGHTS)

    def test_total_is_weighted_sum(self, sample_chart, make_chart):
        other = make_chart('丙午', '甲午', '丙午', '甲午')
        result = score_compatibility(sample_chart, other)
        weighted = sum(result.categories[name] * weight for name, weight in WEIGHTS.items())
        assert result.total == clamp_score(weighted)
        assert result.grade == get_grade(result.total)

    def test_strengths_and_weaknesses(self, sample_chart):
        result = score_compatibility(sample_chart, sample_chart)
        assert result.details['strengths'] == ['branch_relation']
        assert result.details['weaknesses'] == []
        assert any(item.type == '优势' for item in result.interactions)

    def test_deterministic(self, sample_chart, make_chart):
        other = make_chart('庚戌', '戊子', '己丑', '丁卯')
        assert score_compatibility(sample_chart, other) == score_compatibility(sample_chart, other)
