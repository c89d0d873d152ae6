#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

提供五行生克关系的常量定义和判断函数。
"""

from typing import Dict, Literal

from saju_core.data.stems_branches import Element

# 五行关系类型
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me']

# 五行生克关系定义
ELEMENT_RELATIONS: Dict[Element, Dict[str, Element]] = {
    Element.WOOD: {'produces': Element.FIRE, 'controls': Element.EARTH, 'produced_by': Element.WATER, 'controlled_by': Element.METAL},
    Element.FIRE: {'produces': Element.EARTH, 'controls': Element.METAL, 'produced_by': Element.WOOD, 'controlled_by': Element.WATER},
    Element.EARTH: {'produces': Element.METAL, 'controls': Element.WATER, 'produced_by': Element.FIRE, 'controlled_by': Element.WOOD},
    Element.METAL: {'produces': Element.WATER, 'controls': Element.WOOD, 'produced_by': Element.EARTH, 'controlled_by': Element.FIRE},
    Element.WATER: {'produces': Element.WOOD, 'controls': Element.FIRE, 'produced_by': Element.METAL, 'controlled_by': Element.EARTH},
}


def get_element_relation(day_element: Element, target_element: Element) -> RelationType:
    """
    判断五行生克关系（以 day_element 为"我"）

    Args:
        day_element: 日主五行
        target_element: 目标五行

    Returns:
        RelationType:
        - 'same': 同元素
        - 'me_producing': 我生
        - 'me_controlling': 我克
        - 'producing_me': 生我
        - 'controlling_me': 克我
    """
    if day_element == target_element:
        return 'same'

    relations = ELEMENT_RELATIONS[Element(day_element)]

    if target_element == relations['produces']:
        return 'me_producing'
    if target_element == relations['controls']:
        return 'me_controlling'
    if target_element == relations['produced_by']:
        return 'producing_me'
    return 'controlling_me'


def generates(source: Element, target: Element) -> bool:
    """source 生 target"""
    return ELEMENT_RELATIONS[Element(source)]['produces'] == target


def overcomes(source: Element, target: Element) -> bool:
    """source 克 target"""
    return ELEMENT_RELATIONS[Element(source)]['controls'] == target


def generates_either(first: Element, second: Element) -> bool:
    return generates(first, second) or generates(second, first)


def overcomes_either(first: Element, second: Element) -> bool:
    return overcomes(first, second) or overcomes(second, first)
