#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘分析数据模型 - 统一的数据结构定义

ChartAnalysis 是四柱的纯派生视图，可直接 model_dump() 交给持久化层或文本生成层。
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from saju_core.models.ganzhi import FourPillars, Gender


class PillarDetail(BaseModel):
    """单柱详细信息"""
    model_config = ConfigDict(frozen=True)

    pillar: str = Field(..., description="干支，如 壬辰")
    stem: str = Field(..., description="天干")
    branch: str = Field(..., description="地支")
    ten_god_stem: str = Field(..., description="天干十神（日柱为日干）")
    ten_god_branch: str = Field(..., description="地支十神（按藏干优先级选取）")
    hidden_ten_gods: List[str] = Field(default_factory=list, description="各藏干十神")
    twelve_stage: str = Field(..., description="十二长生（日干对本柱地支）")
    self_sitting: str = Field(..., description="自坐（本柱天干对本柱地支）")
    hidden_stems: List[str] = Field(default_factory=list, description="地支藏干")
    stem_element: str = Field(..., description="天干五行")
    branch_element: str = Field(..., description="地支五行")
    napeum: str = Field(..., description="纳音")
    napeum_element: str = Field(..., description="纳音五行")
    is_void: bool = Field(False, description="地支是否落空亡")


class FiveElementBalance(BaseModel):
    """五行统计与旺衰"""
    model_config = ConfigDict(frozen=True)

    counts: Dict[str, int] = Field(..., description="五行计数（四干四支）")
    status: Dict[str, str] = Field(..., description="各五行状态：缺/弱/平/旺/过旺")
    strong_elements: List[str] = Field(default_factory=list, description="旺的五行（>=3）")
    weak_elements: List[str] = Field(default_factory=list, description="缺的五行（=0）")
    dominant_element: Optional[str] = Field(None, description="最旺五行")


class VoidBranchInfo(BaseModel):
    """空亡"""
    model_config = ConfigDict(frozen=True)

    branches: List[str] = Field(..., description="空亡地支（两个）")
    positions: List[str] = Field(default_factory=list, description="落空亡的柱位")
    strength: int = Field(0, description="落空亡柱数")
    level: str = Field('弱', description="空亡程度")


class BranchRelation(BaseModel):
    """地支关系"""
    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="关系类型：三合/六合/方合/冲/刑")
    label: str = Field(..., description="关系标签，如 申子、辰辰辰")
    branches: List[str] = Field(..., description="参与的地支")
    positions: List[str] = Field(..., description="参与的柱位")
    element: Optional[str] = Field(None, description="合化五行（三合局）")
    strength: int = Field(0, description="关系强度")
    is_self_punishment: bool = Field(False, description="是否自刑")


class FortuneCycleEntry(BaseModel):
    """大运"""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="大运序号（从0开始）")
    start_age: int = Field(..., description="起运年龄")
    end_age: int = Field(..., description="结束年龄")
    year: int = Field(..., description="起运年份")
    pillar: str = Field(..., description="大运干支")
    stem: str = Field(..., description="大运天干")
    branch: str = Field(..., description="大运地支")


class ChartAnalysis(BaseModel):
    """完整命盘分析"""
    model_config = ConfigDict(frozen=True)

    pillars: Dict[str, str] = Field(..., description="四柱干支 {'year': '壬申', ...}")
    birth_year: int = Field(..., description="出生年份")
    gender: Gender = Field(..., description="性别")
    day_master: str = Field(..., description="日干")
    details: Dict[str, PillarDetail] = Field(..., description="各柱详情")
    five_elements: FiveElementBalance = Field(..., description="五行统计")
    void_branches: VoidBranchInfo = Field(..., description="空亡")
    guin: Dict[str, List[str]] = Field(default_factory=dict, description="贵人 -> 所在柱位")
    guin_strength: int = Field(0, description="贵人总强度")
    guin_level: str = Field('弱', description="贵人强度等级")
    sinsal: Dict[str, List[str]] = Field(default_factory=dict, description="柱位 -> 凶煞")
    branch_relations: Dict[str, List[BranchRelation]] = Field(default_factory=dict, description="关系类型 -> 地支关系")
    relation_strength: int = Field(0, description="地支合局总强度")
    relation_level: str = Field('弱', description="地支合局强度等级")
    fortune_direction: str = Field(..., description="大运方向：顺行/逆行")
    fortune_cycles: List[FortuneCycleEntry] = Field(default_factory=list, description="大运序列")

    def to_four_pillars(self) -> FourPillars:
        """还原为不可变四柱"""
        return FourPillars.from_texts(self.pillars, self.birth_year, self.gender)

    def sinsal_stars(self) -> List[str]:
        """命盘中出现的全部凶煞（去重，保持出现顺序）"""
        seen: List[str] = []
        for stars in self.sinsal.values():
            for star in stars:
                if star not in seen:
                    seen.append(star)
        return seen

    def guin_activation_count(self) -> int:
        """贵人激活次数（同一贵人落多柱分别计数）"""
        return sum(len(positions) for positions in self.guin.values())

    def relations_of(self, kind: str) -> List[BranchRelation]:
        return list(self.branch_relations.get(kind, []))
