#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NEURA OS API
Energy scoring, task and focus tracking, adaptive coaching

Version: 1.0.0
"""

__version__ = "1.0.0"

__all__ = ['__version__']
