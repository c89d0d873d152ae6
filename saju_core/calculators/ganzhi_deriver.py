#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱推算

由公历时间推算年、月、日、时四柱：
- 年柱：立春前算上一年
- 月柱：五虎遁月表，按交节日换月
- 日柱：以 1900-01-01 甲戌日为基准逐日推进，23:30 起算次日
- 时柱：五鼠遁时表，23:30-23:59 用次日日干起时
"""

import logging
from datetime import date, datetime, timedelta

from saju_core.calculators.calendar_converter import CalendarConverter
from saju_core.data.constants import (
    DAY_EPOCH,
    DAY_EPOCH_INDEX,
    DAY_ROLLOVER_HOUR,
    DAY_ROLLOVER_MINUTE,
    HOUR_PILLAR_TABLES,
    MONTH_PILLAR_TABLES,
    YEAR_BRANCH_BY_MOD12,
    YEAR_STEM_BY_MOD10,
)
from saju_core.data.stems_branches import Stem
from saju_core.models.ganzhi import FourPillars, Gender, SexagenaryPair

logger = logging.getLogger(__name__)

_EPOCH_DATE = date(*DAY_EPOCH)


class GanzhiDeriver:
    """四柱推算器（无状态）"""

    @staticmethod
    def derive(civil_datetime: datetime, include_time_in_rollover: bool,
               gender: Gender = Gender.MALE) -> FourPillars:
        """
        推算四柱

        Args:
            civil_datetime: 公历出生时间
            include_time_in_rollover: 是否按 23:30 换日（出生时间已知时为 True）
            gender: 性别

        Returns:
            FourPillars: 四柱
        """
        year_pillar = GanzhiDeriver.year_pillar(civil_datetime.date())
        month_pillar = GanzhiDeriver.month_pillar(civil_datetime.date(), year_pillar.stem)
        day_pillar = GanzhiDeriver.day_pillar(civil_datetime, include_time_in_rollover)
        hour_pillar = GanzhiDeriver.hour_pillar(civil_datetime, day_pillar.stem)

        return FourPillars(
            year=year_pillar,
            month=month_pillar,
            day=day_pillar,
            hour=hour_pillar,
            birth_year=civil_datetime.year,
            gender=gender,
        )

    @staticmethod
    def year_pillar(value: date) -> SexagenaryPair:
        """年柱：未到立春按上一年"""
        year = value.year
        if not CalendarConverter.has_reached_spring_start(value):
            year -= 1
        return SexagenaryPair(YEAR_STEM_BY_MOD10[year % 10], YEAR_BRANCH_BY_MOD12[year % 12])

    @staticmethod
    def month_pillar(value: date, year_stem: Stem) -> SexagenaryPair:
        """
        月柱

        月表以寅月为首。序号先按公历月减一，未过交节日再减一，
        之后固定再减一（两次减一均在小于0时回绕到11）。
        """
        index = value.month - 1
        if not CalendarConverter.is_past_solar_term_boundary(value):
            index -= 1
            if index < 0:
                index = 11
        index -= 1
        if index < 0:
            index = 11

        table = MONTH_PILLAR_TABLES[year_stem % 5]
        return SexagenaryPair.from_index(table[index])

    @staticmethod
    def is_rollover_time(value: datetime) -> bool:
        """是否处于 23:30-23:59（算作次日）"""
        return value.hour >= DAY_ROLLOVER_HOUR and value.minute >= DAY_ROLLOVER_MINUTE

    @staticmethod
    def day_pillar(value: datetime, include_time_in_rollover: bool) -> SexagenaryPair:
        """日柱"""
        elapsed_days = (value.date() - _EPOCH_DATE).days
        if include_time_in_rollover and GanzhiDeriver.is_rollover_time(value):
            elapsed_days += 1
            logger.debug(f"{value:%Y-%m-%d %H:%M} 已过 23:30，日柱按次日计算")
        return SexagenaryPair.from_index(DAY_EPOCH_INDEX + elapsed_days)

    @staticmethod
    def hour_slot(value: datetime) -> int:
        """时辰序号：23:30-01:29 为 0（子时），每两小时一个时辰"""
        minutes = value.hour * 60 + value.minute
        return ((minutes + 30) // 120) % 12

    @staticmethod
    def hour_pillar(value: datetime, day_stem: Stem) -> SexagenaryPair:
        """
        时柱

        Args:
            value: 公历时间
            day_stem: 日柱天干（23:30-23:59 时改用次日日干）
        """
        if GanzhiDeriver.is_rollover_time(value):
            next_day = value + timedelta(days=1)
            day_stem = GanzhiDeriver.day_pillar(next_day, include_time_in_rollover=False).stem

        table = HOUR_PILLAR_TABLES[day_stem % 5]
        return SexagenaryPair.from_index(table[GanzhiDeriver.hour_slot(value)])
