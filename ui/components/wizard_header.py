# -*- coding: utf-8 -*-
"""
Wizard Header Component - Title and progress of a multi-step wizard.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QProgressBar

from app.config import Config
from services.translation_manager import tr


class WizardHeader(QWidget):
    """
    Wizard header component.

    Features:
    - Title display
    - Localized "Step X of N" text
    - Progress bar

    Usage:
        header = WizardHeader(title=tr("wizard.title"))
        header.set_progress(2, 6)
    """

    def __init__(self, title: str, parent=None):
        """
        Initialize wizard header.

        Args:
            title: Main title text
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title
        self.current = 0
        self.total = 0

        self._setup_ui()

    def _setup_ui(self):
        """Setup header UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.title_text)
        self.title_label.setStyleSheet(f"font-size: 18px; font-weight: 600; color: {Config.PRIMARY_DARK};")
        layout.addWidget(self.title_label)

        self.progress_label = QLabel("")
        self.progress_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{ border: none; background: #E9ECEF; border-radius: 3px; }}
            QProgressBar::chunk {{ background: {Config.PRIMARY_COLOR}; border-radius: 3px; }}
        """)
        layout.addWidget(self.progress_bar)

    def set_progress(self, current: int, total: int):
        """Show the position of the active step."""
        self.current = current
        self.total = total
        self.progress_label.setText(tr("wizard.progress", current=current, total=total))
        self.progress_bar.setRange(0, max(total, 1))
        self.progress_bar.setValue(current)
