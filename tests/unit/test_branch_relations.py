#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""地支刑冲合单元测试"""

import pytest

from saju_core.analyzers.branch_relation_analyzer import BranchRelationAnalyzer
from saju_core.data.relations import RelationKind
from saju_core.data.stems_branches import Branch, Element


class TestPairRelations:
    @pytest.mark.parametrize("first,second,kind", [
        (Branch.SHEN, Branch.ZI, RelationKind.SANHE),
        (Branch.ZI, Branch.CHEN, RelationKind.SANHE),
        (Branch.ZI, Branch.CHOU, RelationKind.LIUHE),
        (Branch.YIN, Branch.HAI, RelationKind.LIUHE),
        (Branch.YIN, Branch.CHEN, RelationKind.FANGHE),
        (Branch.SHEN, Branch.XU, RelationKind.FANGHE),
    ])
    def test_combination(self, first, second, kind):
        assert BranchRelationAnalyzer.combination(first, second)[0] == kind
        assert BranchRelationAnalyzer.combination(second, first)[0] == kind

    def test_sanhe_precedes_fanghe(self):
        # 子午 既不同局，按方合表判定
        assert BranchRelationAnalyzer.combination(Branch.ZI, Branch.WU)[0] == RelationKind.FANGHE
        # 卯未 同属亥卯未木局
        assert BranchRelationAnalyzer.combination(Branch.MAO, Branch.WEI) == (RelationKind.SANHE, Element.WOOD)

    def test_no_combination(self):
        assert BranchRelationAnalyzer.combination(Branch.YIN, Branch.ZI) is None
        assert BranchRelationAnalyzer.combination(Branch.ZI, Branch.ZI) is None

    @pytest.mark.parametrize("first,second", [
        (Branch.ZI, Branch.WU), (Branch.CHOU, Branch.WEI), (Branch.YIN, Branch.SHEN),
        (Branch.MAO, Branch.YOU), (Branch.CHEN, Branch.XU), (Branch.SI, Branch.HAI),
    ])
    def test_clash(self, first, second):
        assert BranchRelationAnalyzer.is_clash(first, second)
        assert BranchRelationAnalyzer.clash_partner(first) == second

    def test_partners(self):
        assert BranchRelationAnalyzer.liuhe_partner(Branch.WU) == Branch.WEI
        assert BranchRelationAnalyzer.sanhe_group(Branch.XU) == (Branch.YIN, Branch.WU, Branch.XU)


class TestAnalyze:
    def test_sample(self, sample_pillars):
        relations = BranchRelationAnalyzer.analyze(sample_pillars)

        sanhe = relations[RelationKind.SANHE]
        assert [r.label for r in sanhe] == ['申子', '申子']
        assert [r.positions for r in sanhe] == [['year', 'day'], ['year', 'hour']]
        assert all(r.element == '水' and r.strength == 4 for r in sanhe)

        chong = relations[RelationKind.CHONG]
        assert [r.label for r in chong] == ['申寅']
        assert relations[RelationKind.LIUHE] == []
        assert relations[RelationKind.XING] == []

        total = BranchRelationAnalyzer.total_strength(relations)
        assert total == 8
        assert BranchRelationAnalyzer.strength_level(total) == '强'

    def test_all_kinds_present(self, sample_pillars):
        assert set(BranchRelationAnalyzer.analyze(sample_pillars)) == set(RelationKind)

    def test_triple_chen(self, make_pillars):
        relations = BranchRelationAnalyzer.analyze(make_pillars('壬辰', '甲辰', '壬辰', '甲子'))

        sanhe_labels = [r.label for r in relations[RelationKind.SANHE]]
        assert '辰辰辰' in sanhe_labels
        triple = next(r for r in relations[RelationKind.SANHE] if r.label == '辰辰辰')
        assert triple.element == '水'

        self_xing = [r for r in relations[RelationKind.XING] if r.is_self_punishment]
        assert [r.label for r in self_xing] == ['辰辰辰']
        assert self_xing[0].positions == ['year', 'month', 'day']

    def test_double_branch_is_not_self_punishment(self, make_pillars):
        relations = BranchRelationAnalyzer.analyze(make_pillars('壬辰', '甲辰', '甲子', '甲子'))
        assert not any(r.is_self_punishment for r in relations[RelationKind.XING])

    def test_full_triad(self, make_pillars):
        relations = BranchRelationAnalyzer.analyze(make_pillars('壬申', '甲子', '壬辰', '甲子'))
        full = [r for r in relations[RelationKind.SANHE] if len(r.branches) == 3]
        assert len(full) == 1
        assert full[0].label == '申子辰'
        assert full[0].strength == 0
        # 两两：申子 x2、申辰、子辰 x2
        assert BranchRelationAnalyzer.total_strength(relations) == 4 * 5

    @pytest.mark.parametrize("texts,label", [
        (('甲寅', '丁巳', '壬申', '甲子'), '寅巳申'),
        (('乙丑', '甲戌', '乙未', '甲子'), '丑戌未'),
        (('甲子', '丁卯', '甲子', '甲子'), '子卯'),
    ])
    def test_xing_groups(self, make_pillars, texts, label):
        relations = BranchRelationAnalyzer.analyze(make_pillars(*texts))
        assert label in [r.label for r in relations[RelationKind.XING]]

    def test_partial_xing_group_ignored(self, make_pillars):
        relations = BranchRelationAnalyzer.analyze(make_pillars('甲寅', '丁巳', '甲午', '甲子'))
        assert relations[RelationKind.XING] == []

    @pytest.mark.parametrize("strength,level", [(0, '弱'), (4, '中等'), (8, '强'), (12, '很强')])
    def test_strength_level(self, strength, level):
        assert BranchRelationAnalyzer.strength_level(strength) == level
