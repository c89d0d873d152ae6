#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命盘属性分析器

各分析器均为无状态静态方法集合，输入四柱（或日干与目标干支），输出查表结果。
"""
