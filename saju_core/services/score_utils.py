#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
评分公共工具：分数限幅、等级划分
"""

from typing import Tuple

MIN_SCORE = 1
MAX_SCORE = 100

# 等级阈值（从高到低）
GRADE_LEVELS: Tuple[Tuple[int, str], ...] = (
    (80, '极好'),
    (65, '好'),
    (50, '中等'),
    (35, '差'),
)
LOWEST_GRADE = '极差'


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def clamp_score(value: float) -> int:
    """限定在 1-100 并取整"""
    return int(round(clamp(value, MIN_SCORE, MAX_SCORE)))


def get_grade(score: float) -> str:
    """
    分数 -> 等级

    Args:
        score: 1-100 分

    Returns:
        str: 极好/好/中等/差/极差
    """
    for threshold, grade in GRADE_LEVELS:
        if score >= threshold:
            return grade
    return LOWEST_GRADE
