#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
评分结果模型
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Interaction(BaseModel):
    """单项作用描述"""
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="作用类型，如 相生、三合、冲")
    score: float = Field(0, description="该项原始分值")
    detail: str = Field('', description="作用说明")


class ScoreResult(BaseModel):
    """评分结果（每次按需计算，不持久化）"""
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=1, le=100, description="总分 1-100")
    grade: str = Field(..., description="等级：极好/好/中等/差/极差")
    categories: Dict[str, int] = Field(..., description="分项得分，各自限定在 1-100")
    interactions: List[Interaction] = Field(default_factory=list, description="作用描述")
    details: Dict[str, Any] = Field(default_factory=dict, description="计算明细")
