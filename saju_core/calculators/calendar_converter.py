#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法转换

- 农历转公历（lunar_python 农历表，闰月以负数月份表示）
- 简化节气判断：每月固定交节日，立春固定为2月4日
"""

import logging
from datetime import date, datetime

from lunar_python import Lunar

from saju_core.config.app_config import get_config
from saju_core.data.constants import SOLAR_TERM_ENTRY_DAYS, SPRING_START_DAY, SPRING_START_MONTH
from saju_core.exceptions import UnsupportedLunarDateError
from saju_core.models.ganzhi import BirthInput, CalendarType

logger = logging.getLogger(__name__)


class CalendarConverter:
    """历法转换工具类"""

    @staticmethod
    def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False) -> date:
        """
        农历转公历

        Args:
            year: 农历年
            month: 农历月（1-12）
            day: 农历日
            is_leap_month: 是否闰月

        Returns:
            date: 公历日期

        Raises:
            UnsupportedLunarDateError: 超出农历表覆盖范围或该日期不存在
        """
        calendar_config = get_config().calendar
        if not calendar_config.lunar_min_year <= year <= calendar_config.lunar_max_year:
            raise UnsupportedLunarDateError(
                year, month, day, is_leap_month,
                reason=f"仅支持 {calendar_config.lunar_min_year}-{calendar_config.lunar_max_year} 年",
            )

        lunar_month = -month if is_leap_month else month
        try:
            solar = Lunar.fromYmd(year, lunar_month, day).getSolar()
            # 回查校验：农历表会把不存在的日期顺延到下一个月
            check = solar.getLunar()
        except Exception as exc:
            logger.warning(f"农历转阳历失败: {year}-{lunar_month}-{day}: {exc}")
            raise UnsupportedLunarDateError(year, month, day, is_leap_month, reason=str(exc)) from exc

        if (check.getYear(), check.getMonth(), check.getDay()) != (year, lunar_month, day):
            logger.warning(f"农历日期不存在: {year}-{lunar_month}-{day}")
            raise UnsupportedLunarDateError(year, month, day, is_leap_month, reason="农历表中无此日期")

        return date(solar.getYear(), solar.getMonth(), solar.getDay())

    @staticmethod
    def to_civil_datetime(birth_input: BirthInput) -> datetime:
        """
        出生信息转公历时间

        时间未知时按 0 点计算。
        """
        if birth_input.calendar_type == CalendarType.LUNAR:
            civil_date = CalendarConverter.lunar_to_solar(
                birth_input.year, birth_input.month, birth_input.day, birth_input.is_leap_month
            )
        else:
            civil_date = date(birth_input.year, birth_input.month, birth_input.day)

        if birth_input.time_known:
            hour, minute = birth_input.hour, birth_input.minute or 0
        else:
            hour, minute = 0, 0
        return datetime(civil_date.year, civil_date.month, civil_date.day, hour, minute)

    @staticmethod
    def is_past_solar_term_boundary(value: date) -> bool:
        """是否已过本月交节日"""
        return value.day >= SOLAR_TERM_ENTRY_DAYS[value.month - 1]

    @staticmethod
    def has_reached_spring_start(value: date) -> bool:
        """是否已过立春（年柱换年）"""
        if value.month != SPRING_START_MONTH:
            return value.month > SPRING_START_MONTH
        return value.day >= SPRING_START_DAY
