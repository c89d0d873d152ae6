#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（出生信息、四柱、命盘）
- 测试钩子
"""

import os
import sys
from typing import Any, Dict

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_birth_request() -> Dict[str, Any]:
    """
    示例出生信息（1992-02-06，时间未知）

    四柱：壬申 壬寅 壬子 庚子
    """
    return {
        "year": 1992,
        "month": 2,
        "day": 6,
        "calendar_type": "solar",
        "gender": "male",
    }


@pytest.fixture(scope="function")
def sample_birth_input(sample_birth_request):
    """示例 BirthInput"""
    from saju_core.models.ganzhi import BirthInput
    return BirthInput(**sample_birth_request)


@pytest.fixture(scope="function")
def sample_pillars(sample_birth_input):
    """示例四柱"""
    from saju_core import compute_four_pillars
    return compute_four_pillars(sample_birth_input)


@pytest.fixture(scope="function")
def sample_chart(sample_pillars):
    """示例命盘"""
    from saju_core import analyze_chart
    return analyze_chart(sample_pillars)


@pytest.fixture(scope="function")
def make_pillars():
    """
    由汉字干支构造四柱的工厂

    用法：make_pillars('壬辰', '壬辰', '壬辰', '壬辰', birth_year=1952)
    """
    from saju_core.models.ganzhi import FourPillars, Gender

    def _make(year: str, month: str, day: str, hour: str, birth_year: int = 2000, gender: str = "male"):
        return FourPillars.from_texts(
            {"year": year, "month": month, "day": day, "hour": hour},
            birth_year=birth_year,
            gender=Gender(gender),
        )

    return _make


@pytest.fixture(scope="function")
def make_chart(make_pillars):
    """由汉字干支直接得到命盘的工厂"""
    from saju_core import analyze_chart

    def _make(*texts: str, **kwargs):
        return analyze_chart(make_pillars(*texts, **kwargs))

    return _make


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """
    pytest 配置钩子

    在 pytest 初始化时调用
    """
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "unit: 单元测试")


def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    按路径自动添加标记
    """
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
