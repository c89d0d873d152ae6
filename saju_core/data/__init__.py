#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""四柱静态数据（只读查询表）"""
