# -*- coding: utf-8 -*-
"""
Main application window.

Shows the signup wizard and, once the session is established, the
landing page of the route the session asked for, where the sharing
connections kept from signup can be reviewed and removed.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt

from app.config import Config
from models.signup_record import SharingConnection
from repositories.connection_repository import ConnectionRepository
from repositories.local_storage import LocalStorage
from repositories.signup_draft_repository import SignupDraftRepository
from services.session_service import SessionService
from services.sharing_service import SharingService
from services.translation_manager import get_language, get_layout_direction, set_language, tr
from services.wizard.step_router import StepRouter
from ui.wizards.signup import SignupWizard, WizardOrchestrator
from utils.logger import get_logger

logger = get_logger(__name__)


class LandingPage(QWidget):
    """Landing surface shown after signup, with the saved sharing connections."""

    def __init__(self, connections: ConnectionRepository, parent=None):
        super().__init__(parent)
        self.connections = connections
        self.connection_rows = {}

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self.welcome_label = QLabel("")
        self.welcome_label.setAlignment(Qt.AlignCenter)
        self.welcome_label.setStyleSheet(f"font-size: 22px; color: {Config.PRIMARY_DARK};")
        layout.addWidget(self.welcome_label)

        self.route_label = QLabel("")
        self.route_label.setAlignment(Qt.AlignCenter)
        self.route_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        layout.addWidget(self.route_label)

        connections_title = QLabel(tr("landing.connections_title"))
        connections_title.setStyleSheet("font-weight: bold; margin-top: 16px;")
        layout.addWidget(connections_title)

        self.connections_layout = QVBoxLayout()
        layout.addLayout(self.connections_layout)

        self.empty_label = QLabel(tr("step.sharing.empty"))
        self.empty_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        layout.addWidget(self.empty_label)

    def show_user(self, user: dict, route: str):
        self.welcome_label.setText(tr("landing.welcome", name=user.get("name", "")))
        self.route_label.setText(route)
        self.refresh_connections()

    def refresh_connections(self):
        """Rebuild the connection rows from the repository."""
        while self.connections_layout.count():
            item = self.connections_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        saved = self.connections.list()
        self.connection_rows = {}
        for connection in saved:
            row = self._connection_row(connection)
            self.connection_rows[connection.id] = row
            self.connections_layout.addWidget(row)

        self.empty_label.setVisible(not saved)

    def remove_connection(self, connection_id: str):
        self.connections.remove(connection_id)
        self.refresh_connections()

    def _connection_row(self, connection: SharingConnection) -> QWidget:
        row = QFrame()
        row.setFrameShape(QFrame.StyledPanel)
        layout = QHBoxLayout(row)

        summary = QLabel(
            f"{connection.contact}\n{tr('step.sharing.permissions_prefix')} "
            f"{SharingService.permissions_summary(connection.permissions)}"
        )
        layout.addWidget(summary)
        layout.addStretch()

        row.remove_button = QPushButton(tr("button.remove"))
        row.remove_button.clicked.connect(lambda: self.remove_connection(connection.id))
        layout.addWidget(row.remove_button)
        return row


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, storage: LocalStorage, lang: Optional[str] = None,
                 router: Optional[StepRouter] = None):
        super().__init__()
        set_language(lang or Config.DEFAULT_LANGUAGE)

        self.session = SessionService(self)
        self.router = router or StepRouter(lang=get_language(), parent=self)
        self.connections = ConnectionRepository(storage)
        self.orchestrator = WizardOrchestrator(
            store=SignupDraftRepository(storage),
            router=self.router,
            session=self.session,
            connections=self.connections,
            parent=self,
        )

        self._setup_ui()
        self.session.redirect_requested.connect(self._on_redirect)

    def _setup_ui(self):
        self.setWindowTitle(Config.APP_TITLE_FA if get_language() == "fa" else Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())

        self.stack = QStackedWidget()
        self.wizard = SignupWizard(self.orchestrator)
        self.landing = LandingPage(self.connections)
        self.stack.addWidget(self.wizard)
        self.stack.addWidget(self.landing)
        self.setCentralWidget(self.stack)

    def start(self):
        """Mount the signup wizard at the location's step."""
        self.wizard.start()
        self.stack.setCurrentWidget(self.wizard)

    def _on_redirect(self, route: str):
        if not self.session.is_authenticated:
            logger.warning(f"Ignoring redirect to {route} without a session")
            return

        logger.info(f"Redirecting to {route}")
        self.landing.show_user(self.session.current_user, route)
        self.stack.setCurrentWidget(self.landing)
