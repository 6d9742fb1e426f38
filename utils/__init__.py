# -*- coding: utf-8 -*-
"""
Hami Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import calculate_age, parse_iso_date, to_date_isoformat, format_display_date

__all__ = [
    "get_logger",
    "setup_logger",
    "calculate_age",
    "parse_iso_date",
    "to_date_isoformat",
    "format_display_date",
]
