#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
展示层转换 - 内部汉字标签 -> 韩文读音，以及提供给文本生成层的命盘摘要

引擎内部统一使用序号与汉字标签，只在对外展示时转换。
"""

from datetime import date
from typing import Any, Dict, Optional

from saju_core.analyzers.fortune_cycle_analyzer import FortuneCycleAnalyzer
from saju_core.data.constants import NAPEUM_LABELS
from saju_core.data.stems_branches import BRANCH_HANGUL, BRANCH_HANJA, STEM_HANGUL, STEM_HANJA
from saju_core.models.chart import ChartAnalysis

# 单字：天干、地支、五行
CHAR_HANGUL: Dict[str, str] = {
    **dict(zip(STEM_HANJA, STEM_HANGUL)),
    **dict(zip(BRANCH_HANJA, BRANCH_HANGUL)),
    '木': '목',
    '火': '화',
    '土': '토',
    '金': '금',
    '水': '수',
}

TEN_GOD_HANGUL: Dict[str, str] = {
    '比肩': '비견',
    '劫财': '겁재',
    '食神': '식신',
    '伤官': '상관',
    '偏财': '편재',
    '正财': '정재',
    '偏官': '편관',
    '正官': '정관',
    '偏印': '편인',
    '正印': '정인',
    '日干': '일간',
}

# 临官在韩国命理中称 건록
TWELVE_STAGE_HANGUL: Dict[str, str] = {
    '长生': '장생',
    '沐浴': '목욕',
    '冠带': '관대',
    '临官': '건록',
    '帝旺': '제왕',
    '衰': '쇠',
    '病': '병',
    '死': '사',
    '墓': '묘',
    '绝': '절',
    '胎': '태',
    '养': '양',
}

NAPEUM_HANGUL: Dict[str, str] = dict(zip(NAPEUM_LABELS, (
    '해중금', '노중화', '대림목', '노방토', '검봉금',
    '산두화', '간하수', '성두토', '백랍금', '양류목',
    '천중수', '옥상토', '벽력화', '송백목', '장류수',
    '사중금', '산하화', '평지목', '벽상토', '금박금',
    '복등화', '천하수', '대역토', '차천금', '상자목',
    '대계수', '사중토', '천상화', '석류목', '대해수',
)))

STAR_HANGUL: Dict[str, str] = {
    '天乙贵人': '천을귀인',
    '天德贵人': '천덕귀인',
    '月德贵人': '월덕귀인',
    '月令': '월령',
    '福星贵人': '복성귀인',
    '天厨贵人': '천주귀인',
    '华盖': '화개',
    '将星': '장성',
    '白虎': '백호',
    '羊刃': '양인',
    '魁罡': '괴강',
    '福星': '복성',
}

RELATION_HANGUL: Dict[str, str] = {
    '三合': '삼합',
    '六合': '육합',
    '方合': '방합',
    '冲': '충',
    '刑': '형',
}

LABEL_HANGUL: Dict[str, str] = {
    **TEN_GOD_HANGUL,
    **TWELVE_STAGE_HANGUL,
    **NAPEUM_HANGUL,
    **STAR_HANGUL,
    **RELATION_HANGUL,
}


def to_hangul(text: str) -> str:
    """
    汉字标签转韩文

    先按完整标签（十神、十二长生、纳音、神煞、地支关系）查表，
    否则逐字转换天干、地支、五行，无法识别的字符原样保留。

    Args:
        text: 汉字标签，如 '偏官'、'壬辰'

    Returns:
        str: 韩文，如 '편관'、'임진'
    """
    if text in LABEL_HANGUL:
        return LABEL_HANGUL[text]
    return ''.join(CHAR_HANGUL.get(char, char) for char in text)


def to_summary(chart: ChartAnalysis, reference_year: Optional[int] = None) -> Dict[str, Any]:
    """
    命盘摘要（供文本生成层使用，不含任何叙述文字）

    Args:
        chart: 命盘分析
        reference_year: 计算年龄与当前大运的年份，默认今年

    Returns:
        dict: 四柱（汉字/韩文）、日主、五行计数、当前大运等
    """
    if reference_year is None:
        reference_year = date.today().year

    age = reference_year - chart.birth_year + 1
    current = FortuneCycleAnalyzer.current_cycle(chart.fortune_cycles, age)

    return {
        'birth_year': chart.birth_year,
        'gender': chart.gender.value,
        'age': age,
        'pillars': dict(chart.pillars),
        'pillars_hangul': {position: to_hangul(text) for position, text in chart.pillars.items()},
        'day_master': chart.day_master,
        'day_master_hangul': to_hangul(chart.day_master),
        'element_counts': dict(chart.five_elements.counts),
        'dominant_element': chart.five_elements.dominant_element,
        'weak_elements': list(chart.five_elements.weak_elements),
        'void_branches': list(chart.void_branches.branches),
        'guin': list(chart.guin),
        'sinsal': chart.sinsal_stars(),
        'fortune_direction': chart.fortune_direction,
        'current_fortune_cycle': current.model_dump() if current else None,
    }
