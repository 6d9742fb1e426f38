# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from datetime import date
from typing import Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

_DATA_DIR = Path(os.getenv("HAMI_DATA_DIR", str(_PROJECT_ROOT / "data")))
_LOGS_DIR = Path(os.getenv("HAMI_LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_DEFAULT_LANGUAGE = os.getenv("HAMI_DEFAULT_LANGUAGE", "fa")
_LOG_LEVEL = os.getenv("HAMI_LOG_LEVEL", "DEBUG").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Hami"
    APP_TITLE: str = "Hami - Mental Wellness Companion"
    APP_TITLE_FA: str = "حامی - همراه سلامت روان"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Hami"

    # Localization
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE
    SUPPORTED_LANGUAGES: Tuple[str, ...] = ("fa", "en")
    RTL_LANGUAGES: Tuple[str, ...] = ("fa", "ar", "he")

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = _LOGS_DIR

    # Local storage (desktop counterpart of browser localStorage)
    LOCAL_STORAGE_DB_NAME: str = "local_storage.db"
    LOCAL_STORAGE_DB_PATH: Path = _DATA_DIR / LOCAL_STORAGE_DB_NAME
    SIGNUP_STORAGE_KEY: str = "signupFormData"
    CONNECTIONS_STORAGE_KEY: str = "hami-connections"

    # Navigation
    SIGNUP_URL_TEMPLATE: str = "hami://app/{lang}/signup"
    LANDING_ROUTE_TEMPLATE: str = "/{lang}/dashboard"
    STEP_QUERY_PARAM: str = "step"

    # Signup rules
    YOUTH_AGE_LIMIT: int = 18
    MIN_PASSWORD_LENGTH: int = 6
    VERIFICATION_CODE_LENGTH: int = 5
    EARLIEST_BIRTH_DATE: date = date(1900, 1, 1)

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = _LOGS_DIR / LOG_FILE
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 560
    WINDOW_MIN_HEIGHT: int = 720
    CELEBRATION_AUTO_CLOSE_MS: int = 2500

    # Branding Colors
    PRIMARY_COLOR: str = "#3F7E6B"
    PRIMARY_DARK: str = "#2C5C4E"
    ERROR_COLOR: str = "#DC3545"
    MUTED_TEXT_COLOR: str = "#6C757D"

    @classmethod
    def signup_url(cls, lang: str) -> str:
        """Base URL of the signup wizard for a language."""
        return cls.SIGNUP_URL_TEMPLATE.format(lang=lang)

    @classmethod
    def landing_route(cls, lang: str) -> str:
        """Route of the main landing surface for a language."""
        return cls.LANDING_ROUTE_TEMPLATE.format(lang=lang)
