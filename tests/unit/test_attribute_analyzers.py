#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""十二长生、藏干、五行、纳音、空亡分析器单元测试"""

import pytest

from saju_core.analyzers.five_element_analyzer import FiveElementAnalyzer
from saju_core.analyzers.hidden_stem_analyzer import HiddenStemAnalyzer
from saju_core.analyzers.twelve_stage_analyzer import TwelveStageAnalyzer
from saju_core.analyzers.void_branch_analyzer import VoidBranchAnalyzer
from saju_core.data.constants import TwelveStage
from saju_core.data.stems_branches import Branch, Element, Stem
from saju_core.models.ganzhi import PillarPosition, SexagenaryPair


class TestTwelveStage:
    @pytest.mark.parametrize("stem,branch,expected", [
        (Stem.JIA, Branch.HAI, '长生'),
        (Stem.JIA, Branch.ZI, '沐浴'),
        (Stem.JIA, Branch.YIN, '临官'),
        (Stem.JIA, Branch.MAO, '帝旺'),
        (Stem.JIA, Branch.WU, '死'),
        (Stem.JIA, Branch.WEI, '墓'),
        (Stem.YI, Branch.WU, '长生'),
        (Stem.YI, Branch.SI, '沐浴'),
        (Stem.YI, Branch.YIN, '帝旺'),
        (Stem.YI, Branch.HAI, '死'),
        (Stem.BING, Branch.YIN, '长生'),
        (Stem.WU, Branch.YIN, '长生'),
        (Stem.DING, Branch.YOU, '长生'),
        (Stem.GENG, Branch.SI, '长生'),
        (Stem.GENG, Branch.ZI, '死'),
        (Stem.XIN, Branch.ZI, '长生'),
        (Stem.REN, Branch.SHEN, '长生'),
        (Stem.REN, Branch.ZI, '帝旺'),
        (Stem.GUI, Branch.MAO, '长生'),
        (Stem.GUI, Branch.YIN, '沐浴'),
    ])
    def test_stage(self, stem, branch, expected):
        assert TwelveStageAnalyzer.stage(stem, branch).label == expected

    def test_each_stem_visits_all_stages(self):
        for stem in Stem:
            stages = {TwelveStageAnalyzer.stage(stem, branch) for branch in Branch}
            assert stages == set(TwelveStage)

    def test_analyze_uses_day_stem(self, sample_pillars):
        stages = TwelveStageAnalyzer.analyze(sample_pillars)
        assert [stages[p].label for p in PillarPosition] == ['长生', '病', '帝旺', '帝旺']

    def test_self_sitting(self, sample_pillars):
        stages = TwelveStageAnalyzer.self_sitting(sample_pillars)
        assert stages[PillarPosition.HOUR].label == '死'
        assert stages[PillarPosition.YEAR].label == '长生'


class TestHiddenStems:
    @pytest.mark.parametrize("branch,expected", [
        (Branch.ZI, '癸'),
        (Branch.CHOU, '己辛癸'),
        (Branch.YIN, '甲丙戊'),
        (Branch.CHEN, '戊乙癸'),
        (Branch.WU, '丁己'),
        (Branch.SHEN, '庚戊壬'),
        (Branch.HAI, '壬甲'),
    ])
    def test_hidden_stems(self, branch, expected):
        assert ''.join(stem.hanja for stem in HiddenStemAnalyzer.hidden_stems(branch)) == expected

    def test_main_qi(self):
        assert HiddenStemAnalyzer.main_qi(Branch.XU) == Stem.WU

    def test_every_branch_has_one_to_three(self):
        for branch in Branch:
            assert 1 <= len(HiddenStemAnalyzer.hidden_stems(branch)) <= 3


class TestFiveElements:
    def test_count_sample(self, sample_pillars):
        counts = FiveElementAnalyzer.count_elements(sample_pillars)
        assert counts == {
            Element.WOOD: 1, Element.FIRE: 0, Element.EARTH: 0, Element.METAL: 2, Element.WATER: 5,
        }

    def test_balance_sample(self, sample_pillars):
        balance = FiveElementAnalyzer.analyze(sample_pillars)
        assert balance.status == {'木': '弱', '火': '缺', '土': '缺', '金': '平', '水': '过旺'}
        assert balance.strong_elements == ['水']
        assert balance.weak_elements == ['火', '土']
        assert balance.dominant_element == '水'

    def test_dominant_tie_breaks_by_order(self, make_pillars):
        # 木、火各4
        pillars = make_pillars('甲寅', '丙午', '甲寅', '丙午')
        assert FiveElementAnalyzer.analyze(pillars).dominant_element == '木'

    @pytest.mark.parametrize("text,expected", [
        ('甲子', '海中金'),
        ('乙丑', '海中金'),
        ('壬申', '剑锋金'),
        ('壬寅', '金箔金'),
        ('壬子', '桑柘木'),
        ('庚子', '壁上土'),
        ('壬戌', '大海水'),
        ('癸亥', '大海水'),
    ])
    def test_napeum(self, text, expected):
        assert FiveElementAnalyzer.napeum(SexagenaryPair.from_text(text)) == expected

    def test_napeum_element(self):
        assert FiveElementAnalyzer.napeum_element(SexagenaryPair.from_text('丙寅')) == Element.FIRE


class TestVoidBranches:
    @pytest.mark.parametrize("day,expected", [
        ('甲子', '戌亥'),
        ('癸酉', '戌亥'),
        ('甲戌', '申酉'),
        ('甲申', '午未'),
        ('壬辰', '午未'),
        ('甲午', '辰巳'),
        ('甲辰', '寅卯'),
        ('壬子', '寅卯'),
        ('甲寅', '子丑'),
        ('癸亥', '子丑'),
    ])
    def test_void_branches(self, day, expected):
        branches = VoidBranchAnalyzer.void_branches(SexagenaryPair.from_text(day))
        assert ''.join(branch.hanja for branch in branches) == expected

    def test_analyze_sample(self, sample_pillars):
        info = VoidBranchAnalyzer.analyze(sample_pillars)
        assert info.branches == ['寅', '卯']
        assert info.positions == ['month']
        assert info.strength == 1
        assert info.level == '中等'

    @pytest.mark.parametrize("strength,level", [(0, '弱'), (1, '中等'), (2, '强'), (3, '很强'), (4, '很强')])
    def test_strength_level(self, strength, level):
        assert VoidBranchAnalyzer.strength_level(strength) == level

    def test_no_void(self, make_pillars):
        info = VoidBranchAnalyzer.analyze(make_pillars('甲子', '甲子', '甲子', '甲子'))
        assert info.positions == []
        assert info.level == '弱'
