#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

提供天干十神（主星）与地支十神（藏干十神）的计算功能。
"""

from enum import Enum
from typing import List, Optional, Tuple

from saju_core.data.constants import HIDDEN_STEMS
from saju_core.data.stems_branches import Branch, Stem

from .element_relations import get_element_relation


class TenGod(str, Enum):
    """十神"""
    BIJIAN = '比肩'
    JIECAI = '劫财'
    SHISHEN = '食神'
    SHANGGUAN = '伤官'
    PIANCAI = '偏财'
    ZHENGCAI = '正财'
    PIANGUAN = '偏官'
    ZHENGGUAN = '正官'
    PIANYIN = '偏印'
    ZHENGYIN = '正印'


# 日柱天干即日主本身
DAY_MASTER_LABEL = '日干'

# (同阴阳, 异阴阳)
_RELATION_TEN_GODS = {
    'same': (TenGod.BIJIAN, TenGod.JIECAI),
    'me_producing': (TenGod.SHISHEN, TenGod.SHANGGUAN),
    'me_controlling': (TenGod.PIANCAI, TenGod.ZHENGCAI),
    'controlling_me': (TenGod.PIANGUAN, TenGod.ZHENGGUAN),
    'producing_me': (TenGod.PIANYIN, TenGod.ZHENGYIN),
}

# 地支十神取用集合：按藏干顺序取第一个落在此集合中的十神，
# 都不在集合中时取本气十神。比肩、偏财不在集合内。
BRANCH_TEN_GOD_PRIORITY: Tuple[TenGod, ...] = (
    TenGod.PIANGUAN,
    TenGod.JIECAI,
    TenGod.SHISHEN,
    TenGod.PIANYIN,
    TenGod.ZHENGGUAN,
    TenGod.ZHENGCAI,
    TenGod.SHANGGUAN,
    TenGod.ZHENGYIN,
)


def _build_ten_god_table() -> Tuple[Tuple[TenGod, ...], ...]:
    table = []
    for day_stem in Stem:
        row = []
        for target_stem in Stem:
            relation_type = get_element_relation(day_stem.element, target_stem.element)
            same_polarity, other_polarity = _RELATION_TEN_GODS[relation_type]
            row.append(same_polarity if day_stem.polarity == target_stem.polarity else other_polarity)
        table.append(tuple(row))
    return tuple(table)


# [日干][目标天干] -> 十神
TEN_GOD_TABLE: Tuple[Tuple[TenGod, ...], ...] = _build_ten_god_table()


def get_stem_ten_god(day_stem: Stem, target_stem: Stem) -> TenGod:
    """日干对目标天干的十神"""
    return TEN_GOD_TABLE[day_stem][target_stem]


def get_main_star(day_stem: Stem, target_stem: Stem, is_day_pillar: bool = False) -> str:
    """
    计算天干十神标签

    Args:
        day_stem: 日干
        target_stem: 目标天干
        is_day_pillar: 是否为日柱天干（返回"日干"）

    Returns:
        str: 十神名称
    """
    if is_day_pillar:
        return DAY_MASTER_LABEL
    return get_stem_ten_god(day_stem, target_stem).value


def get_branch_ten_gods(day_stem: Stem, branch: Branch) -> List[TenGod]:
    """地支各藏干的十神（按藏干顺序）"""
    return [get_stem_ten_god(day_stem, hidden_stem) for hidden_stem in HIDDEN_STEMS[branch]]


def select_branch_ten_god(day_stem: Stem, branch: Branch) -> Optional[TenGod]:
    """
    地支十神：按藏干顺序取第一个在 BRANCH_TEN_GOD_PRIORITY 中的十神，否则取本气十神
    """
    relations = get_branch_ten_gods(day_stem, branch)
    prioritized = [ten_god for ten_god in relations if ten_god in BRANCH_TEN_GOD_PRIORITY]
    if prioritized:
        return prioritized[0]
    return relations[0] if relations else None
