#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱引擎异常定义

- UnsupportedLunarDateError: 农历日期超出转换表覆盖范围，需向调用方抛出
- InvalidSexagenaryPairError: 干支阴阳不匹配，属于查表错误（程序缺陷）
"""


class SajuError(Exception):
    """引擎异常基类"""


class UnsupportedLunarDateError(SajuError, ValueError):
    """农历日期无法转换为公历"""

    def __init__(self, year: int, month: int, day: int, is_leap_month: bool = False, reason: str = ''):
        self.year = year
        self.month = month
        self.day = day
        self.is_leap_month = is_leap_month
        leap = '闰' if is_leap_month else ''
        message = f"不支持的农历日期: {year}年{leap}{month}月{day}日"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidSexagenaryPairError(SajuError, ValueError):
    """干支组合无效（天干与地支阴阳不一致，或序号越界）"""
