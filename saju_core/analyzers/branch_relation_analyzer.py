#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地支关系分析器

两两扫描四柱地支，报告全部匹配（不是只报第一个）：
- 合局：三合（同局两支）> 六合 > 方合，每对地支最多记一种合
- 六冲：独立判断
- 三刑：寅巳申、丑戌未、子卯，成员齐全时成立
- 同一地支出现3次及以上：同时记为三合局与自刑
"""

import logging
from collections import Counter
from itertools import combinations
from typing import Dict, List, Optional, Tuple

from saju_core.data.relations import (
    BRANCH_SANHE_GROUPS,
    BRANCH_XING_GROUPS,
    CHONG_PAIRS,
    CHONG_PARTNER,
    COMBINATION_KINDS,
    FANGHE_PAIRS,
    LIUHE_PAIRS,
    LIUHE_PARTNER,
    RELATION_STRENGTH,
    RELATION_STRENGTH_DEFAULT_LEVEL,
    RELATION_STRENGTH_LEVELS,
    SANHE_GROUP_OF,
    SELF_XING_MIN_COUNT,
    RelationKind,
)
from saju_core.data.stems_branches import Branch, Element
from saju_core.models.chart import BranchRelation
from saju_core.models.ganzhi import FourPillars, PillarPosition

logger = logging.getLogger(__name__)


class BranchRelationAnalyzer:
    """地支刑冲合"""

    # ==================== 两支关系 ====================

    @staticmethod
    def sanhe_element(first: Branch, second: Branch) -> Optional[Element]:
        """两支同属一个三合局（且不同支）时返回该局五行"""
        if first == second:
            return None
        group = SANHE_GROUP_OF[first]
        if group != SANHE_GROUP_OF[second]:
            return None
        return BRANCH_SANHE_GROUPS[group][1]

    @staticmethod
    def combination(first: Branch, second: Branch) -> Optional[Tuple[RelationKind, Optional[Element]]]:
        """
        两支的合局类型（三合 > 六合 > 方合）

        Returns:
            (关系类型, 三合五行) 或 None
        """
        element = BranchRelationAnalyzer.sanhe_element(first, second)
        if element is not None:
            return RelationKind.SANHE, element
        pair = frozenset((first, second))
        if pair in LIUHE_PAIRS:
            return RelationKind.LIUHE, None
        if pair in FANGHE_PAIRS:
            return RelationKind.FANGHE, None
        return None

    @staticmethod
    def is_clash(first: Branch, second: Branch) -> bool:
        return frozenset((first, second)) in CHONG_PAIRS

    @staticmethod
    def liuhe_partner(branch: Branch) -> Branch:
        return LIUHE_PARTNER[branch]

    @staticmethod
    def clash_partner(branch: Branch) -> Branch:
        return CHONG_PARTNER[branch]

    @staticmethod
    def sanhe_group(branch: Branch) -> Tuple[Branch, ...]:
        """地支所属三合局的三个成员"""
        return BRANCH_SANHE_GROUPS[SANHE_GROUP_OF[branch]][0]

    # ==================== 四柱扫描 ====================

    @staticmethod
    def analyze(pillars: FourPillars) -> Dict[RelationKind, List[BranchRelation]]:
        """
        扫描四柱地支关系

        Returns:
            {关系类型: [BranchRelation]}，五种类型都有键
        """
        items: List[Tuple[PillarPosition, Branch]] = [(position, pair.branch) for position, pair in pillars.items()]
        branches = [branch for _, branch in items]
        relations: Dict[RelationKind, List[BranchRelation]] = {kind: [] for kind in RelationKind}

        for (pos_a, branch_a), (pos_b, branch_b) in combinations(items, 2):
            combo = BranchRelationAnalyzer.combination(branch_a, branch_b)
            if combo is not None:
                kind, element = combo
                relations[kind].append(BranchRelationAnalyzer._relation(
                    kind, (branch_a, branch_b), [pos_a, pos_b], element, RELATION_STRENGTH[kind]
                ))
            if BranchRelationAnalyzer.is_clash(branch_a, branch_b):
                relations[RelationKind.CHONG].append(BranchRelationAnalyzer._relation(
                    RelationKind.CHONG, (branch_a, branch_b), [pos_a, pos_b]
                ))

        # 三合全局
        for members, element in BRANCH_SANHE_GROUPS:
            if all(member in branches for member in members):
                positions = [position for position, branch in items if branch in members]
                relations[RelationKind.SANHE].append(BranchRelationAnalyzer._relation(
                    RelationKind.SANHE, members, positions, element
                ))

        # 三刑
        for group in BRANCH_XING_GROUPS:
            if all(member in branches for member in group):
                positions = [position for position, branch in items if branch in group]
                relations[RelationKind.XING].append(BranchRelationAnalyzer._relation(
                    RelationKind.XING, group, positions
                ))

        # 同支重复：三合局 + 自刑
        for branch, count in Counter(branches).items():
            if count < SELF_XING_MIN_COUNT:
                continue
            repeated = (branch,) * count
            positions = [position for position, item in items if item == branch]
            group_element = BRANCH_SANHE_GROUPS[SANHE_GROUP_OF[branch]][1]
            relations[RelationKind.SANHE].append(BranchRelationAnalyzer._relation(
                RelationKind.SANHE, repeated, positions, group_element
            ))
            relations[RelationKind.XING].append(BranchRelationAnalyzer._relation(
                RelationKind.XING, repeated, positions, is_self_punishment=True
            ))
            logger.debug(f"地支{branch.hanja}出现{count}次，记为自刑")

        return relations

    @staticmethod
    def _relation(kind: RelationKind, branches, positions, element: Optional[Element] = None,
                  strength: int = 0, is_self_punishment: bool = False) -> BranchRelation:
        return BranchRelation(
            kind=kind.value,
            label=''.join(branch.hanja for branch in branches),
            branches=[branch.hanja for branch in branches],
            positions=[PillarPosition(position).value for position in positions],
            element=element.value if element is not None else None,
            strength=strength,
            is_self_punishment=is_self_punishment,
        )

    # ==================== 强度 ====================

    @staticmethod
    def total_strength(relations: Dict[RelationKind, List[BranchRelation]]) -> int:
        """合局总强度（只累计两支合局，全局与重复项强度为0）"""
        return sum(
            relation.strength
            for kind in COMBINATION_KINDS
            for relation in relations.get(kind, [])
        )

    @staticmethod
    def strength_level(strength: int) -> str:
        for threshold, level in RELATION_STRENGTH_LEVELS:
            if strength >= threshold:
                return level
        return RELATION_STRENGTH_DEFAULT_LEVEL
