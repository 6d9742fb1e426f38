# -*- coding: utf-8 -*-
"""
Hami UI Components
"""

from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter
from .celebration_popup import CelebrationPopup

__all__ = [
    "WizardHeader",
    "WizardFooter",
    "CelebrationPopup",
]
