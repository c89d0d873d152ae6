#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞数据

贵人（吉神）按日干或月支查表；凶煞按日干所属组（甲乙/丙丁/戊己/庚辛/壬癸）查地支。
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple

from saju_core.data.stems_branches import Branch, Stem


class GuinStar(str, Enum):
    """贵人"""
    TIANYI = '天乙贵人'
    TIANDE = '天德贵人'
    YUEDE = '月德贵人'
    YUELING = '月令'
    FUXING = '福星贵人'
    TIANCHU = '天厨贵人'


class SinsalStar(str, Enum):
    """按柱位报告的神煞"""
    HUAGAI = '华盖'
    JIANGXING = '将星'
    BAIHU = '白虎'
    YANGREN = '羊刃'
    KUIGANG = '魁罡'
    # 日干所生五行的地支；与贵人表中的福星贵人（GuinStar.FUXING）不是同一张表
    BOKSEONG = '福星'


# ==================== 贵人 ====================

# 天乙贵人：日干 -> 地支
TIANYI_BRANCHES: Tuple[Tuple[Branch, ...], ...] = (
    (Branch.CHOU, Branch.WEI),   # 甲
    (Branch.ZI, Branch.SHEN),    # 乙
    (Branch.HAI, Branch.YOU),    # 丙
    (Branch.HAI, Branch.YOU),    # 丁
    (Branch.CHOU, Branch.WEI),   # 戊
    (Branch.ZI, Branch.SHEN),    # 己
    (Branch.CHOU, Branch.WEI),   # 庚
    (Branch.WU, Branch.YIN),     # 辛
    (Branch.MAO, Branch.SI),     # 壬
    (Branch.MAO, Branch.SI),     # 癸
)

# 天德贵人：日干 -> 天干（乙日为地支申，见 TIANDE_BRANCHES）
TIANDE_STEMS: Tuple[Tuple[Stem, ...], ...] = (
    (Stem.DING,),  # 甲
    (),            # 乙
    (Stem.XIN,),   # 丙
    (Stem.REN,),   # 丁
    (Stem.XIN,),   # 戊
    (Stem.JIA,),   # 己
    (Stem.YI,),    # 庚
    (Stem.BING,),  # 辛
    (Stem.DING,),  # 壬
    (Stem.WU,),    # 癸
)
TIANDE_BRANCHES: Tuple[Tuple[Branch, ...], ...] = (
    (), (Branch.SHEN,), (), (), (), (), (), (), (), (),
)

# 月德贵人：月支 -> 天干
YUEDE_STEMS: Tuple[Stem, ...] = (
    Stem.REN,   # 子
    Stem.GENG,  # 丑
    Stem.BING,  # 寅
    Stem.JIA,   # 卯
    Stem.REN,   # 辰
    Stem.GENG,  # 巳
    Stem.BING,  # 午
    Stem.JIA,   # 未
    Stem.REN,   # 申
    Stem.GENG,  # 酉
    Stem.BING,  # 戌
    Stem.JIA,   # 亥
)

# 月令：月支 -> 天干
YUELING_STEMS: Tuple[Stem, ...] = (
    Stem.GUI,   # 子
    Stem.JI,    # 丑
    Stem.JIA,   # 寅
    Stem.YI,    # 卯
    Stem.WU,    # 辰
    Stem.BING,  # 巳
    Stem.DING,  # 午
    Stem.JI,    # 未
    Stem.GENG,  # 申
    Stem.XIN,   # 酉
    Stem.WU,    # 戌
    Stem.REN,   # 亥
)

# 福星贵人：日干 -> 地支
FUXING_BRANCHES: Tuple[Branch, ...] = (
    Branch.ZI, Branch.CHOU, Branch.YIN, Branch.MAO, Branch.CHEN,
    Branch.SI, Branch.WU, Branch.WEI, Branch.SHEN, Branch.YOU,
)

# 天厨贵人：日干组 -> 地支
TIANCHU_BRANCHES: Tuple[Tuple[Branch, ...], ...] = (
    (Branch.SHEN, Branch.YOU),
    (Branch.HAI, Branch.ZI),
    (Branch.YIN, Branch.MAO),
    (Branch.SI, Branch.WU),
    (Branch.CHEN, Branch.XU, Branch.CHOU, Branch.WEI),
)

# 贵人强度
GUIN_STRENGTH: Dict[GuinStar, int] = {
    GuinStar.TIANYI: 5,
    GuinStar.TIANDE: 4,
    GuinStar.YUELING: 4,
    GuinStar.YUEDE: 3,
    GuinStar.FUXING: 2,
    GuinStar.TIANCHU: 2,
}

GUIN_STRENGTH_LEVELS: Tuple[Tuple[int, str], ...] = (
    (15, '很强'),
    (10, '强'),
    (5, '中等'),
)
GUIN_STRENGTH_DEFAULT_LEVEL = '弱'


# ==================== 凶煞 ====================

_FOUR_TOMBS = (Branch.CHEN, Branch.XU, Branch.CHOU, Branch.WEI)

# 神煞：日干组（甲乙/丙丁/戊己/庚辛/壬癸） -> 地支
SINSAL_BRANCHES: Dict[SinsalStar, Tuple[Tuple[Branch, ...], ...]] = {
    SinsalStar.HUAGAI: (
        (Branch.SHEN, Branch.YOU),
        (Branch.HAI, Branch.ZI),
        (Branch.YIN, Branch.MAO),
        (Branch.SI, Branch.WU),
        _FOUR_TOMBS,
    ),
    SinsalStar.JIANGXING: (
        (Branch.YIN, Branch.MAO),
        (Branch.SI, Branch.WU),
        _FOUR_TOMBS,
        (Branch.SHEN, Branch.YOU),
        (Branch.HAI, Branch.ZI),
    ),
    SinsalStar.BAIHU: (
        (Branch.HAI, Branch.ZI),
        (Branch.YIN, Branch.MAO),
        (Branch.SI, Branch.WU),
        _FOUR_TOMBS,
        (Branch.SHEN, Branch.YOU),
    ),
    SinsalStar.YANGREN: (
        _FOUR_TOMBS,
        (Branch.SHEN, Branch.YOU),
        (Branch.HAI, Branch.ZI),
        (Branch.YIN, Branch.MAO),
        (Branch.SI, Branch.WU),
    ),
    SinsalStar.BOKSEONG: (
        (Branch.SI, Branch.WU),
        _FOUR_TOMBS,
        (Branch.SHEN, Branch.YOU),
        (Branch.HAI, Branch.ZI),
        (Branch.YIN, Branch.MAO),
    ),
}

# 魁罡：月柱与时柱构成的无序组合（干支循环序号）
# 壬辰=28 戊戌=34 庚辰=16 庚戌=46
KUIGANG_PILLAR_PAIRS: FrozenSet[FrozenSet[int]] = frozenset({
    frozenset({28, 34}),
    frozenset({46, 16}),
})


# ==================== 今日运势权重 ====================

SINSAL_TODAY_WEIGHTS: Dict[SinsalStar, int] = {
    SinsalStar.JIANGXING: -15,
    SinsalStar.HUAGAI: -10,
    SinsalStar.BAIHU: -10,
    SinsalStar.YANGREN: -8,
}

GUIN_TODAY_WEIGHTS: Dict[GuinStar, int] = {
    GuinStar.TIANYI: 15,
    GuinStar.YUELING: 12,
    GuinStar.FUXING: 10,
    GuinStar.YUEDE: 8,
    GuinStar.TIANDE: 8,
    GuinStar.TIANCHU: 5,
}
