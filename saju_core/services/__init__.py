#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
评分服务：合婚评分、今日运势评分
"""
