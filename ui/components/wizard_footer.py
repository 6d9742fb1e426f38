# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Previous/Next controls for wizards and multi-step forms.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from services.translation_manager import tr


class WizardFooter(QWidget):
    """
    Wizard footer component.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next (or Finish) button is clicked

    Usage:
        footer = WizardFooter()
        footer.next_clicked.connect(self._on_next)
        footer.set_last_step(True)  # Next reads "Finish"
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, next_text: str = None, previous_text: str = None,
                 finish_text: str = None, parent=None):
        """
        Initialize wizard footer.

        Args:
            next_text: Text for next button
            previous_text: Text for previous button
            finish_text: Text for next button on the last step
            parent: Parent widget
        """
        super().__init__(parent)
        self.next_text = next_text or tr("button.next")
        self.previous_text = previous_text or tr("button.previous")
        self.finish_text = finish_text or tr("button.finish")

        self._setup_ui()

    def _setup_ui(self):
        """Setup footer UI."""
        self.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
                border-top: 1px solid #dee2e6;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = QPushButton(self.previous_text)
        self.btn_previous.setMinimumSize(114, 44)
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = QPushButton(self.next_text)
        self.btn_next.setMinimumSize(114, 44)
        self.btn_next.setStyleSheet(f"""
            QPushButton {{ background-color: {Config.PRIMARY_COLOR}; color: white; border-radius: 8px; }}
            QPushButton:disabled {{ background-color: #adb5bd; }}
        """)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        """Enable/disable next button."""
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        """Enable/disable previous button."""
        self.btn_previous.setEnabled(enabled)

    def set_last_step(self, is_last: bool):
        """Show Finish instead of Next on the last step."""
        self.btn_next.setText(self.finish_text if is_last else self.next_text)
