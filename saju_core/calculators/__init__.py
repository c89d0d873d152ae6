#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""四柱计算模块：历法转换、四柱推算、命盘组装"""
