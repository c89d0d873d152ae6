#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地支关系数据：三合、六合、方合、六冲、三刑
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple

from saju_core.data.stems_branches import Branch, Element


# 三合局
BRANCH_SANHE_GROUPS: Tuple[Tuple[Tuple[Branch, Branch, Branch], Element], ...] = (
    ((Branch.SHEN, Branch.ZI, Branch.CHEN), Element.WATER),
    ((Branch.HAI, Branch.MAO, Branch.WEI), Element.WOOD),
    ((Branch.YIN, Branch.WU, Branch.XU), Element.FIRE),
    ((Branch.SI, Branch.YOU, Branch.CHOU), Element.METAL),
)

# 六合
BRANCH_LIUHE: Tuple[Tuple[Branch, Branch], ...] = (
    (Branch.ZI, Branch.CHOU),
    (Branch.YIN, Branch.HAI),
    (Branch.MAO, Branch.XU),
    (Branch.CHEN, Branch.YOU),
    (Branch.SI, Branch.SHEN),
    (Branch.WU, Branch.WEI),
)

# 方合（两两成对，与六合为不同的表）
BRANCH_FANGHE: Tuple[Tuple[Branch, Branch], ...] = (
    (Branch.YIN, Branch.CHEN),
    (Branch.SI, Branch.WEI),
    (Branch.SHEN, Branch.XU),
    (Branch.HAI, Branch.CHOU),
    (Branch.ZI, Branch.WU),
    (Branch.MAO, Branch.YOU),
)

# 六冲
BRANCH_CHONG: Tuple[Tuple[Branch, Branch], ...] = (
    (Branch.ZI, Branch.WU),
    (Branch.CHOU, Branch.WEI),
    (Branch.YIN, Branch.SHEN),
    (Branch.MAO, Branch.YOU),
    (Branch.CHEN, Branch.XU),
    (Branch.SI, Branch.HAI),
)

# 三刑：寅巳申（恃势）、丑戌未（无恩）、子卯（无礼，仅两支）
BRANCH_XING_GROUPS: Tuple[Tuple[Branch, ...], ...] = (
    (Branch.YIN, Branch.SI, Branch.SHEN),
    (Branch.CHOU, Branch.XU, Branch.WEI),
    (Branch.ZI, Branch.MAO),
)

# 同一地支出现3次及以上视为自刑
SELF_XING_MIN_COUNT = 3

# 关系强度等级阈值（从高到低）
RELATION_STRENGTH_LEVELS: Tuple[Tuple[int, str], ...] = (
    (12, '很强'),
    (8, '强'),
    (4, '中等'),
)
RELATION_STRENGTH_DEFAULT_LEVEL = '弱'


def _pair_set(pairs: Tuple[Tuple[Branch, Branch], ...]) -> FrozenSet[FrozenSet[Branch]]:
    return frozenset(frozenset(pair) for pair in pairs)


def _partner_map(pairs: Tuple[Tuple[Branch, Branch], ...]) -> Dict[Branch, Branch]:
    partners: Dict[Branch, Branch] = {}
    for first, second in pairs:
        partners[first] = second
        partners[second] = first
    return partners


LIUHE_PAIRS = _pair_set(BRANCH_LIUHE)
FANGHE_PAIRS = _pair_set(BRANCH_FANGHE)
CHONG_PAIRS = _pair_set(BRANCH_CHONG)

LIUHE_PARTNER = _partner_map(BRANCH_LIUHE)
CHONG_PARTNER = _partner_map(BRANCH_CHONG)

# 地支 -> 所属三合局序号
SANHE_GROUP_OF: Dict[Branch, int] = {
    branch: group_index
    for group_index, (members, _) in enumerate(BRANCH_SANHE_GROUPS)
    for branch in members
}


class RelationKind(str, Enum):
    """地支关系类型"""
    SANHE = '三合'
    LIUHE = '六合'
    FANGHE = '方合'
    CHONG = '冲'
    XING = '刑'


# 合局类（计入合局强度）
COMBINATION_KINDS = (RelationKind.SANHE, RelationKind.LIUHE, RelationKind.FANGHE)

# 关系强度
RELATION_STRENGTH: Dict[RelationKind, int] = {
    RelationKind.SANHE: 4,
    RelationKind.LIUHE: 3,
    RelationKind.FANGHE: 3,
}
