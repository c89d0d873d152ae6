#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大运分析器

- 方向：阳年男、阴年女顺行，其余逆行
- 从月柱起，每步先沿六十甲子前进/后退一位再记录
- 起运年龄为固定常数（默认9岁，见 FortuneCycleConfig），不按出生日到节气的距离推算
- 大运年份 = 出生年 + 起运年龄 - 1
"""

from typing import List, Optional

from saju_core.config.app_config import get_config
from saju_core.data.stems_branches import Polarity
from saju_core.models.chart import FortuneCycleEntry
from saju_core.models.ganzhi import FourPillars, Gender

FORWARD_LABEL = '顺行'
BACKWARD_LABEL = '逆行'

# 每步大运年数
CYCLE_SPAN_YEARS = 10


class FortuneCycleAnalyzer:
    """大运"""

    @staticmethod
    def direction(pillars: FourPillars) -> int:
        """顺行返回 1，逆行返回 -1"""
        is_yang_year = pillars.year.stem.polarity == Polarity.YANG
        is_male = pillars.gender == Gender.MALE
        return 1 if is_yang_year == is_male else -1

    @staticmethod
    def direction_label(pillars: FourPillars) -> str:
        return FORWARD_LABEL if FortuneCycleAnalyzer.direction(pillars) > 0 else BACKWARD_LABEL

    @staticmethod
    def cycles(pillars: FourPillars, count: Optional[int] = None,
               first_age: Optional[int] = None) -> List[FortuneCycleEntry]:
        """
        推算大运序列

        Args:
            pillars: 四柱
            count: 大运步数（8-12），默认读取配置
            first_age: 起运年龄，默认读取配置

        Returns:
            List[FortuneCycleEntry]: 大运序列
        """
        cycle_config = get_config().fortune_cycle
        if count is None:
            count = cycle_config.count
        if first_age is None:
            first_age = cycle_config.first_age
        count = max(cycle_config.MIN_COUNT, min(cycle_config.MAX_COUNT, count))

        step = FortuneCycleAnalyzer.direction(pillars)
        current = pillars.month
        entries: List[FortuneCycleEntry] = []

        for index in range(count):
            current = current.shift(step)
            start_age = first_age + index * CYCLE_SPAN_YEARS
            entries.append(FortuneCycleEntry(
                index=index,
                start_age=start_age,
                end_age=start_age + CYCLE_SPAN_YEARS - 1,
                year=pillars.birth_year + start_age - 1,
                pillar=current.text,
                stem=current.stem.hanja,
                branch=current.branch.hanja,
            ))

        return entries

    @staticmethod
    def current_cycle(entries: List[FortuneCycleEntry], age: int) -> Optional[FortuneCycleEntry]:
        """指定年龄所在的大运（未起运或超出范围时返回 None）"""
        for entry in entries:
            if entry.start_age <= age < entry.start_age + CYCLE_SPAN_YEARS:
                return entry
        return None
