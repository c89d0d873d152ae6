#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
干支与四柱模型

SexagenaryPair / FourPillars 为不可变值对象；BirthInput 为出生信息输入模型。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from saju_core.data.stems_branches import Branch, Stem
from saju_core.exceptions import InvalidSexagenaryPairError


class Gender(str, Enum):
    """性别（决定大运顺逆）"""
    MALE = 'male'
    FEMALE = 'female'


class CalendarType(str, Enum):
    """历法类型"""
    SOLAR = 'solar'
    LUNAR = 'lunar'


class PillarPosition(str, Enum):
    """柱位"""
    YEAR = 'year'
    MONTH = 'month'
    DAY = 'day'
    HOUR = 'hour'

    @property
    def label(self) -> str:
        return PILLAR_LABELS[self]


PILLAR_LABELS = {
    PillarPosition.YEAR: '年柱',
    PillarPosition.MONTH: '月柱',
    PillarPosition.DAY: '日柱',
    PillarPosition.HOUR: '时柱',
}


@dataclass(frozen=True)
class SexagenaryPair:
    """
    干支组合

    只有天干与地支阴阳相同的60种组合有效，构造时校验，
    不合法时抛出 InvalidSexagenaryPairError。
    """
    stem: Stem
    branch: Branch

    def __post_init__(self):
        try:
            stem = Stem(self.stem)
            branch = Branch(self.branch)
        except ValueError as exc:
            raise InvalidSexagenaryPairError(f"干支序号越界: stem={self.stem!r}, branch={self.branch!r}") from exc
        if stem % 2 != branch % 2:
            raise InvalidSexagenaryPairError(f"天干{stem.hanja}与地支{branch.hanja}阴阳不一致")
        object.__setattr__(self, 'stem', stem)
        object.__setattr__(self, 'branch', branch)

    @classmethod
    def from_index(cls, index: int) -> 'SexagenaryPair':
        """由六十甲子循环序号构造（自动取模）"""
        index %= 60
        return cls(Stem(index % 10), Branch(index % 12))

    @classmethod
    def from_text(cls, text: str) -> 'SexagenaryPair':
        """由汉字干支构造，如 '壬辰'"""
        if not isinstance(text, str) or len(text) != 2:
            raise InvalidSexagenaryPairError(f"干支格式错误: {text!r}")
        try:
            stem = Stem.from_hanja(text[0])
            branch = Branch.from_hanja(text[1])
        except ValueError as exc:
            raise InvalidSexagenaryPairError(f"干支格式错误: {text!r}") from exc
        return cls(stem, branch)

    @property
    def index(self) -> int:
        """六十甲子循环序号 0-59"""
        return (6 * self.stem - 5 * self.branch) % 60

    @property
    def text(self) -> str:
        return f"{self.stem.hanja}{self.branch.hanja}"

    def shift(self, steps: int) -> 'SexagenaryPair':
        """沿六十甲子前进（正数）或后退（负数）"""
        return SexagenaryPair.from_index(self.index + steps)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FourPillars:
    """四柱（年、月、日、时）及出生年份、性别"""
    year: SexagenaryPair
    month: SexagenaryPair
    day: SexagenaryPair
    hour: SexagenaryPair
    birth_year: int
    gender: Gender = Gender.MALE

    @property
    def day_master(self) -> Stem:
        """日干"""
        return self.day.stem

    def items(self) -> Tuple[Tuple[PillarPosition, SexagenaryPair], ...]:
        return (
            (PillarPosition.YEAR, self.year),
            (PillarPosition.MONTH, self.month),
            (PillarPosition.DAY, self.day),
            (PillarPosition.HOUR, self.hour),
        )

    def pillar(self, position: PillarPosition) -> SexagenaryPair:
        return getattr(self, PillarPosition(position).value)

    @property
    def stems(self) -> Tuple[Stem, ...]:
        return tuple(pair.stem for _, pair in self.items())

    @property
    def branches(self) -> Tuple[Branch, ...]:
        return tuple(pair.branch for _, pair in self.items())

    def to_texts(self) -> Dict[str, str]:
        return {position.value: pair.text for position, pair in self.items()}

    @classmethod
    def from_texts(cls, pillars: Mapping[str, str], birth_year: int, gender: Gender = Gender.MALE) -> 'FourPillars':
        """由 {'year': '壬申', ...} 构造"""
        return cls(
            year=SexagenaryPair.from_text(pillars['year']),
            month=SexagenaryPair.from_text(pillars['month']),
            day=SexagenaryPair.from_text(pillars['day']),
            hour=SexagenaryPair.from_text(pillars['hour']),
            birth_year=birth_year,
            gender=Gender(gender),
        )


class BirthInput(BaseModel):
    """出生信息"""
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="出生年")
    month: int = Field(..., ge=1, le=12, description="出生月")
    day: int = Field(..., ge=1, le=31, description="出生日")
    hour: Optional[int] = Field(None, ge=0, le=23, description="出生时（None 表示未知，按 0 点计算）")
    minute: Optional[int] = Field(None, ge=0, le=59, description="出生分")
    calendar_type: CalendarType = Field(CalendarType.SOLAR, description="历法类型：solar(阳历) 或 lunar(农历)")
    is_leap_month: bool = Field(False, description="是否闰月（仅农历有效）")
    gender: Gender = Field(Gender.MALE, description="性别：male(男) 或 female(女)")

    @model_validator(mode='before')
    @classmethod
    def normalize_leap_month(cls, data: Any) -> Any:
        """阳历忽略闰月标记"""
        if isinstance(data, dict):
            calendar_type = data.get('calendar_type', CalendarType.SOLAR)
            if calendar_type in (CalendarType.SOLAR, CalendarType.SOLAR.value) and data.get('is_leap_month'):
                data = {**data, 'is_leap_month': False}
        return data

    @property
    def time_known(self) -> bool:
        return self.hour is not None
