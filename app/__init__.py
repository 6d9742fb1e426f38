# -*- coding: utf-8 -*-
"""
Hami Application Core Module
"""

from .config import Config

__all__ = ["Config"]
