#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱静态查询表

所有表在导入时构建完成，进程生命周期内只读。
六十甲子以循环序号 0-59 表示（序号 n 满足 n%10=天干序号，n%12=地支序号）。
"""

from enum import IntEnum
from typing import Tuple

from saju_core.data.stems_branches import Branch, Element, Stem


# ==================== 节气（简化） ====================

# 各公历月份的交节日（1-12月）
SOLAR_TERM_ENTRY_DAYS: Tuple[int, ...] = (6, 4, 6, 5, 6, 6, 7, 8, 8, 8, 7, 7)

# 立春：2月4日
SPRING_START_MONTH = 2
SPRING_START_DAY = 4


# ==================== 年柱 ====================

# year % 10 -> 年干
YEAR_STEM_BY_MOD10: Tuple[Stem, ...] = (
    Stem.GENG, Stem.XIN, Stem.REN, Stem.GUI, Stem.JIA,
    Stem.YI, Stem.BING, Stem.DING, Stem.WU, Stem.JI,
)

# year % 12 -> 年支
YEAR_BRANCH_BY_MOD12: Tuple[Branch, ...] = (
    Branch.SHEN, Branch.YOU, Branch.XU, Branch.HAI, Branch.ZI, Branch.CHOU,
    Branch.YIN, Branch.MAO, Branch.CHEN, Branch.SI, Branch.WU, Branch.WEI,
)


# ==================== 月柱 / 时柱 ====================

# 五虎遁：甲己丙寅、乙庚戊寅、丙辛庚寅、丁壬壬寅、戊癸甲寅（寅月起，共12个月）
MONTH_TABLE_START_INDEXES: Tuple[int, ...] = (2, 14, 26, 38, 50)

# 五鼠遁：甲己甲子、乙庚丙子、丙辛戊子、丁壬庚子、戊癸壬子（子时起，共12个时辰）
HOUR_TABLE_START_INDEXES: Tuple[int, ...] = (0, 12, 24, 36, 48)

# 天干序号 % 5 选表，每表12个干支循环序号
MONTH_PILLAR_TABLES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple((start + offset) % 60 for offset in range(12)) for start in MONTH_TABLE_START_INDEXES
)
HOUR_PILLAR_TABLES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple((start + offset) % 60 for offset in range(12)) for start in HOUR_TABLE_START_INDEXES
)


# ==================== 日柱 ====================

# 1900-01-01 为甲戌日
DAY_EPOCH = (1900, 1, 1)
DAY_EPOCH_INDEX = 10

# 23:30 起算次日
DAY_ROLLOVER_HOUR = 23
DAY_ROLLOVER_MINUTE = 30


# ==================== 藏干 ====================

# 按地支序号，本气在前
HIDDEN_STEMS: Tuple[Tuple[Stem, ...], ...] = (
    (Stem.GUI,),                        # 子
    (Stem.JI, Stem.XIN, Stem.GUI),      # 丑
    (Stem.JIA, Stem.BING, Stem.WU),     # 寅
    (Stem.YI,),                         # 卯
    (Stem.WU, Stem.YI, Stem.GUI),       # 辰
    (Stem.BING, Stem.WU, Stem.GENG),    # 巳
    (Stem.DING, Stem.JI),               # 午
    (Stem.JI, Stem.DING, Stem.YI),      # 未
    (Stem.GENG, Stem.WU, Stem.REN),     # 申
    (Stem.XIN,),                        # 酉
    (Stem.WU, Stem.XIN, Stem.DING),     # 戌
    (Stem.REN, Stem.JIA),               # 亥
)


# ==================== 十二长生 ====================

class TwelveStage(IntEnum):
    """十二长生（循环顺序）"""
    CHANGSHENG = 0
    MUYU = 1
    GUANDAI = 2
    LINGUAN = 3
    DIWANG = 4
    SHUAI = 5
    BING = 6
    SI = 7
    MU = 8
    JUE = 9
    TAI = 10
    YANG = 11

    @property
    def label(self) -> str:
        return TWELVE_STAGE_LABELS[self]


TWELVE_STAGE_LABELS: Tuple[str, ...] = ('长生', '沐浴', '冠带', '临官', '帝旺', '衰', '病', '死', '墓', '绝', '胎', '养')

# 各天干长生所在地支：阳干顺行，阴干逆行
CHANGSHENG_BRANCHES: Tuple[Branch, ...] = (
    Branch.HAI,   # 甲
    Branch.WU,    # 乙
    Branch.YIN,   # 丙
    Branch.YOU,   # 丁
    Branch.YIN,   # 戊
    Branch.YOU,   # 己
    Branch.SI,    # 庚
    Branch.ZI,    # 辛
    Branch.SHEN,  # 壬
    Branch.MAO,   # 癸
)


def _build_twelve_stage_table() -> Tuple[Tuple[TwelveStage, ...], ...]:
    rows = []
    for branch in Branch:
        row = []
        for stem in Stem:
            anchor = CHANGSHENG_BRANCHES[stem]
            if stem % 2 == 0:
                offset = (branch - anchor) % 12
            else:
                offset = (anchor - branch) % 12
            row.append(TwelveStage(offset))
        rows.append(tuple(row))
    return tuple(rows)


# [地支序号][天干序号] -> 十二长生
TWELVE_STAGE_TABLE: Tuple[Tuple[TwelveStage, ...], ...] = _build_twelve_stage_table()


# ==================== 纳音 ====================

# 每两个相邻干支共用一个纳音，按循环序号 // 2 索引
NAPEUM_LABELS: Tuple[str, ...] = (
    '海中金', '炉中火', '大林木', '路旁土', '剑锋金',
    '山头火', '涧下水', '城头土', '白蜡金', '杨柳木',
    '泉中水', '屋上土', '霹雳火', '松柏木', '长流水',
    '砂中金', '山下火', '平地木', '壁上土', '金箔金',
    '覆灯火', '天河水', '大驿土', '钗钏金', '桑柘木',
    '大溪水', '沙中土', '天上火', '石榴木', '大海水',
)

NAPEUM_ELEMENTS = {label: Element(label[-1]) for label in NAPEUM_LABELS}


# ==================== 空亡 ====================

# 六甲旬空：甲子旬戌亥、甲戌旬申酉、甲申旬午未、甲午旬辰巳、甲辰旬寅卯、甲寅旬子丑
VOID_BRANCHES_BY_DECADE: Tuple[Tuple[Branch, Branch], ...] = (
    (Branch.XU, Branch.HAI),
    (Branch.SHEN, Branch.YOU),
    (Branch.WU, Branch.WEI),
    (Branch.CHEN, Branch.SI),
    (Branch.YIN, Branch.MAO),
    (Branch.ZI, Branch.CHOU),
)

# 按日柱循环序号（60项）
VOID_BRANCHES: Tuple[Tuple[Branch, Branch], ...] = tuple(
    VOID_BRANCHES_BY_DECADE[index // 10] for index in range(60)
)
