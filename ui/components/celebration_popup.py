# -*- coding: utf-8 -*-
"""
Celebration Popup - Shows a short celebration when signup completes.
"""

from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QGraphicsDropShadowEffect, QWidget, QDesktopWidget
)
from PyQt5.QtCore import Qt, QTimer, QPoint
from PyQt5.QtGui import QColor

from app.config import Config
from services.translation_manager import tr, get_layout_direction


class CelebrationPopup(QDialog):
    """
    Frameless popup anchored at the control that completed the wizard.

    Displays:
    - Celebration icon
    - Title message
    - Description text
    """

    def __init__(self,
                 title: str = None,
                 description: str = None,
                 auto_close_ms: int = None,
                 parent=None):
        """
        Initialize the popup.

        Args:
            title: The title text
            description: The description text
            auto_close_ms: Auto-close after this many milliseconds (0 = no auto-close)
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title or tr("celebration.title")
        self.description_text = description or tr("celebration.description")
        self.auto_close_ms = Config.CELEBRATION_AUTO_CLOSE_MS if auto_close_ms is None else auto_close_ms
        self._init_ui()

    def _init_ui(self):
        """Initialize the popup UI."""
        # Window Setup - frameless, translucent, stays on top
        self.setWindowFlags(Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Dialog)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setFixedSize(300, 260)
        self.setLayoutDirection(get_layout_direction())

        # The Main Card Container - white rounded box
        card = QLabel(self)
        card.setFixedSize(260, 220)
        card.move(20, 20)
        card.setObjectName("MainCard")
        card.setStyleSheet("""
            #MainCard {
                background-color: white;
                border-radius: 30px;
                border: 1px solid #e0e0e0;
            }
        """)

        # Add shadow for a "popup" feel
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 40))
        shadow.setOffset(0, 5)
        card.setGraphicsEffect(shadow)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 24, 20, 24)
        layout.setSpacing(10)
        layout.setAlignment(Qt.AlignCenter)

        icon_label = QLabel("🎉")
        icon_label.setAlignment(Qt.AlignCenter)
        icon_label.setStyleSheet("font-size: 42px; background: transparent; border: none;")

        self.title_label = QLabel(self.title_text)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(f"""
            font-size: 20px;
            font-weight: bold;
            color: {Config.PRIMARY_DARK};
            background: transparent;
            border: none;
        """)

        self.description_label = QLabel(self.description_text)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"""
            font-size: 14px;
            color: {Config.MUTED_TEXT_COLOR};
            background: transparent;
            border: none;
        """)

        layout.addWidget(icon_label)
        layout.addWidget(self.title_label)
        layout.addWidget(self.description_label)

        # Auto-close timer if specified
        if self.auto_close_ms > 0:
            QTimer.singleShot(self.auto_close_ms, self.close)

    def mousePressEvent(self, event):
        """Close the popup when clicking on it."""
        self.accept()

    def keyPressEvent(self, event):
        """Close on Escape or Enter key."""
        if event.key() in (Qt.Key_Escape, Qt.Key_Return, Qt.Key_Enter):
            self.accept()
        else:
            super().keyPressEvent(event)

    def anchor_to(self, anchor: QWidget = None):
        """Center the popup on the anchor widget, or on the screen without one."""
        if anchor is not None:
            center = anchor.mapToGlobal(QPoint(anchor.width() // 2, anchor.height() // 2))
        else:
            center = QDesktopWidget().availableGeometry().center()
        self.move(max(0, center.x() - self.width() // 2), max(0, center.y() - self.height() // 2))

    @staticmethod
    def celebrate(anchor: QWidget = None, parent=None) -> 'CelebrationPopup':
        """
        Show the popup non-modally at the anchor's position.

        Args:
            anchor: Control that triggered completion
            parent: Parent widget

        Returns:
            The shown popup
        """
        popup = CelebrationPopup(parent=parent)
        popup.setAttribute(Qt.WA_DeleteOnClose)
        popup.anchor_to(anchor)
        popup.show()
        return popup
