#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""命盘组装单元测试"""

import pytest

from saju_core import analyze_chart, compute_four_pillars
from saju_core.calculators.saju_calculator import SajuCalculator
from saju_core.models.chart import ChartAnalysis
from saju_core.models.ganzhi import BirthInput, Gender

CASES = [
    {"birth": {"year": 1987, "month": 1, "day": 7, "hour": 9, "minute": 55}, "day": "丙辰"},
    {"birth": {"year": 1984, "month": 3, "day": 8, "hour": 9, "minute": 15}, "day": "辛丑"},
    {"birth": {"year": 2008, "month": 9, "day": 8, "hour": 16, "minute": 3, "gender": "female"}, "day": "辛亥"},
]


class TestAnalyzeChart:
    def test_pillars_and_basics(self, sample_chart):
        assert isinstance(sample_chart, ChartAnalysis)
        assert sample_chart.pillars == {'year': '壬申', 'month': '壬寅', 'day': '壬子', 'hour': '庚子'}
        assert sample_chart.day_master == '壬'
        assert sample_chart.birth_year == 1992
        assert sample_chart.gender == Gender.MALE

    def test_details_ten_gods(self, sample_chart):
        details = sample_chart.details
        assert [details[p].ten_god_stem for p in ('year', 'month', 'day', 'hour')] == ['比肩', '比肩', '日干', '偏印']
        assert [details[p].ten_god_branch for p in ('year', 'month', 'day', 'hour')] == ['偏印', '食神', '劫财', '劫财']
        assert details['year'].hidden_ten_gods == ['偏印', '偏官', '比肩']

    def test_details_stages_and_elements(self, sample_chart):
        year = sample_chart.details['year']
        assert year.pillar == '壬申'
        assert year.stem == '壬'
        assert year.branch == '申'
        assert year.hidden_stems == ['庚', '戊', '壬']
        assert year.twelve_stage == '长生'
        assert year.self_sitting == '长生'
        assert year.stem_element == '水'
        assert year.branch_element == '金'
        assert year.napeum == '剑锋金'
        assert year.napeum_element == '金'
        assert sample_chart.details['hour'].self_sitting == '死'

    def test_void_flags(self, sample_chart):
        assert sample_chart.details['month'].is_void is True
        assert sample_chart.details['day'].is_void is False
        assert sample_chart.void_branches.branches == ['寅', '卯']

    def test_stars(self, sample_chart):
        assert sample_chart.guin == {'福星贵人': ['year']}
        assert sample_chart.guin_strength == 2
        assert sample_chart.guin_level == '弱'
        assert sample_chart.guin_activation_count() == 1
        assert sample_chart.sinsal == {'year': ['白虎'], 'month': ['福星'], 'day': ['将星'], 'hour': ['将星']}
        assert sample_chart.sinsal_stars() == ['白虎', '福星', '将星']

    def test_relations(self, sample_chart):
        assert set(sample_chart.branch_relations) == {'三合', '六合', '方合', '冲', '刑'}
        assert len(sample_chart.relations_of('三合')) == 2
        assert sample_chart.relation_strength == 8
        assert sample_chart.relation_level == '强'

    def test_fortune(self, sample_chart):
        assert sample_chart.fortune_direction == '顺行'
        assert len(sample_chart.fortune_cycles) == 12

    def test_five_elements(self, sample_chart):
        assert sample_chart.five_elements.counts == {'木': 1, '火': 0, '土': 0, '金': 2, '水': 5}

    def test_to_four_pillars_roundtrip(self, sample_chart, sample_pillars):
        assert sample_chart.to_four_pillars() == sample_pillars

    def test_pure(self, sample_pillars):
        assert analyze_chart(sample_pillars) == analyze_chart(sample_pillars)

    def test_serializable(self, sample_chart):
        data = sample_chart.model_dump()
        assert data['pillars']['day'] == '壬子'
        assert ChartAnalysis.model_validate(data) == sample_chart

    @pytest.mark.parametrize("case", CASES, ids=[c["day"] for c in CASES])
    def test_cases(self, case):
        chart = analyze_chart(compute_four_pillars(BirthInput(**case["birth"])))
        assert chart.pillars['day'] == case["day"]
        assert chart.details['day'].ten_god_stem == '日干'
        assert len(chart.details) == 4

    def test_calculator_instances_independent(self, sample_pillars, make_pillars):
        first = SajuCalculator(sample_pillars)
        second = SajuCalculator(make_pillars('甲子', '丙寅', '甲子', '甲子'))
        assert first.calculate().day_master == '壬'
        assert second.calculate().day_master == '甲'
