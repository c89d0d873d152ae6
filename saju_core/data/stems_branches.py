#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据

天干、地支以 0-9 / 0-11 序号表示，所有查表均按序号索引。
汉字与韩文只在边界处转换（见 saju_core.display）。
"""

from enum import Enum, IntEnum
from typing import Tuple


class Element(str, Enum):
    """五行"""
    WOOD = '木'
    FIRE = '火'
    EARTH = '土'
    METAL = '金'
    WATER = '水'


class Polarity(str, Enum):
    """阴阳"""
    YANG = '阳'
    YIN = '阴'


# 天干汉字 / 韩文
STEM_HANJA: Tuple[str, ...] = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')
STEM_HANGUL: Tuple[str, ...] = ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계')

# 地支汉字 / 韩文
BRANCH_HANJA: Tuple[str, ...] = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')
BRANCH_HANGUL: Tuple[str, ...] = ('자', '축', '인', '묘', '진', '사', '오', '미', '신', '유', '술', '해')

# 天干五行（按天干序号）
STEM_ELEMENTS: Tuple[Element, ...] = (
    Element.WOOD, Element.WOOD,
    Element.FIRE, Element.FIRE,
    Element.EARTH, Element.EARTH,
    Element.METAL, Element.METAL,
    Element.WATER, Element.WATER,
)

# 地支五行（按地支序号）
BRANCH_ELEMENTS: Tuple[Element, ...] = (
    Element.WATER,  # 子
    Element.EARTH,  # 丑
    Element.WOOD,   # 寅
    Element.WOOD,   # 卯
    Element.EARTH,  # 辰
    Element.FIRE,   # 巳
    Element.FIRE,   # 午
    Element.EARTH,  # 未
    Element.METAL,  # 申
    Element.METAL,  # 酉
    Element.EARTH,  # 戌
    Element.WATER,  # 亥
)

ELEMENT_ORDER: Tuple[Element, ...] = (Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER)


def _polarity(ordinal: int) -> Polarity:
    return Polarity.YANG if ordinal % 2 == 0 else Polarity.YIN


class Stem(IntEnum):
    """十天干"""
    JIA = 0
    YI = 1
    BING = 2
    DING = 3
    WU = 4
    JI = 5
    GENG = 6
    XIN = 7
    REN = 8
    GUI = 9

    @property
    def hanja(self) -> str:
        return STEM_HANJA[self]

    @property
    def hangul(self) -> str:
        return STEM_HANGUL[self]

    @property
    def element(self) -> Element:
        return STEM_ELEMENTS[self]

    @property
    def polarity(self) -> Polarity:
        return _polarity(self)

    @classmethod
    def from_hanja(cls, char: str) -> 'Stem':
        """汉字转天干，未知字符抛出 ValueError"""
        try:
            return cls(STEM_HANJA.index(char))
        except ValueError:
            raise ValueError(f"未知天干: {char!r}")


class Branch(IntEnum):
    """十二地支"""
    ZI = 0
    CHOU = 1
    YIN = 2
    MAO = 3
    CHEN = 4
    SI = 5
    WU = 6
    WEI = 7
    SHEN = 8
    YOU = 9
    XU = 10
    HAI = 11

    @property
    def hanja(self) -> str:
        return BRANCH_HANJA[self]

    @property
    def hangul(self) -> str:
        return BRANCH_HANGUL[self]

    @property
    def element(self) -> Element:
        return BRANCH_ELEMENTS[self]

    @property
    def polarity(self) -> Polarity:
        return _polarity(self)

    @classmethod
    def from_hanja(cls, char: str) -> 'Branch':
        """汉字转地支，未知字符抛出 ValueError"""
        try:
            return cls(BRANCH_HANJA.index(char))
        except ValueError:
            raise ValueError(f"未知地支: {char!r}")


__all__ = [
    'Element',
    'Polarity',
    'Stem',
    'Branch',
    'STEM_HANJA',
    'STEM_HANGUL',
    'BRANCH_HANJA',
    'BRANCH_HANGUL',
    'STEM_ELEMENTS',
    'BRANCH_ELEMENTS',
    'ELEMENT_ORDER',
]
