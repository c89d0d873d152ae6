#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘核心计算模块

提供：
- 五行生克关系
- 十神计算
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    generates,
    generates_either,
    get_element_relation,
    overcomes,
    overcomes_either,
)
from .ten_gods import (
    BRANCH_TEN_GOD_PRIORITY,
    DAY_MASTER_LABEL,
    TenGod,
    get_branch_ten_gods,
    get_main_star,
    get_stem_ten_god,
    select_branch_ten_god,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'generates',
    'generates_either',
    'get_element_relation',
    'overcomes',
    'overcomes_either',
    'BRANCH_TEN_GOD_PRIORITY',
    'DAY_MASTER_LABEL',
    'TenGod',
    'get_branch_ten_gods',
    'get_main_star',
    'get_stem_ten_god',
    'select_branch_ten_god',
]
