# -*- coding: utf-8 -*-
"""
Signup record entity models.

The signup record accumulates everything the user provides while moving
through the signup wizard. It is persisted to local storage after every
change and discarded once signup completes.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import time
import uuid

from utils.datetime_utils import to_date_isoformat


# Named permissions a sharing connection may grant
PERMISSION_KEYS = (
    "basic_information",
    "daily_quiz_results",
    "biometric_reports",
    "test_results",
    "synced_information",
    "others_notes",
)

# Roles an adult can declare during signup
ADULT_ROLE_KEYS = (
    "parent",
    "therapist",
    "school_consultant",
    "supervisor",
)

_CONSENT_FIELDS = (
    "accepted_mandatory_terms",
    "accepted_optional_communications",
    "accepted_optional_marketing",
)


def default_permissions() -> Dict[str, bool]:
    """Permission mapping with every permission switched off."""
    return {key: False for key in PERMISSION_KEYS}


def default_adult_roles() -> Dict[str, bool]:
    """Adult role mapping with no role selected."""
    return {key: False for key in ADULT_ROLE_KEYS}


def _generate_connection_id(created_at: Optional[datetime] = None) -> str:
    """Opaque id derived from the creation time (epoch ms) plus a short random suffix."""
    if created_at is None:
        millis = int(time.time() * 1000)
    else:
        millis = int(created_at.timestamp() * 1000)
    return f"{millis}-{uuid.uuid4().hex[:6]}"


@dataclass
class SharingConnection:
    """
    One consent-scoped data-sharing relationship.

    A connection names a contact (email or phone) and the fixed set of
    permissions the user grants to that contact.
    """

    contact: str = ""
    permissions: Dict[str, bool] = field(default_factory=default_permissions)
    id: str = field(default_factory=_generate_connection_id)

    @classmethod
    def create(cls, contact: str, permissions: Dict[str, bool],
               created_at: Optional[datetime] = None) -> 'SharingConnection':
        """Build a connection with a fresh creation-time id and a complete permission map."""
        normalized = default_permissions()
        for key in PERMISSION_KEYS:
            normalized[key] = bool(permissions.get(key, False))
        return cls(
            contact=contact.strip(),
            permissions=normalized,
            id=_generate_connection_id(created_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "contact": self.contact,
            "permissions": {key: bool(self.permissions.get(key, False)) for key in PERMISSION_KEYS},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SharingConnection':
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"Sharing connection must be a mapping, got {type(data).__name__}")

        permissions = data.get("permissions") or {}
        if not isinstance(permissions, dict):
            raise TypeError("Sharing connection permissions must be a mapping")

        return cls(
            id=str(data["id"]),
            contact=str(data.get("contact", "")),
            permissions={key: bool(permissions.get(key, False)) for key in PERMISSION_KEYS},
        )


@dataclass
class SignupRecord:
    """
    The accumulating user-provided record for the duration of signup.

    All identity fields stay None until the user fills them in.
    `is_youth` stays None until the branch is resolved after verification.
    """

    # Consent flags
    accepted_mandatory_terms: bool = False
    accepted_optional_communications: bool = False
    accepted_optional_marketing: bool = False

    # Identity
    name: Optional[str] = None
    email_or_phone: Optional[str] = None
    dob: Optional[str] = None  # canonical yyyy-MM-dd

    # Credential and verification
    password: Optional[str] = None
    verification_code: Optional[str] = None

    # Branch flag derived from dob (None = undetermined)
    is_youth: Optional[bool] = None

    # Adult role selection
    adult_roles_selected: Dict[str, bool] = field(default_factory=default_adult_roles)
    clinic_code: str = ""
    school_code: str = ""

    # Sharing
    sharing_connections: List[SharingConnection] = field(default_factory=list)

    @classmethod
    def field_names(cls) -> List[str]:
        """Names of every field a partial update may carry."""
        return [f.name for f in fields(cls)]

    def identity(self) -> Dict[str, str]:
        """The finished identity handed to the session on completion."""
        return {
            "name": self.name or "",
            "contact": self.email_or_phone or "",
        }

    def merged(self, partial: Dict[str, Any]) -> 'SignupRecord':
        """
        Shallow-merge a partial update into a new record.

        Keys present in `partial` overwrite, omitted keys are retained.

        Raises:
            ValueError: If `partial` names a field the record does not have
                or carries a value of the wrong type
        """
        unknown = set(partial) - set(self.field_names())
        if unknown:
            raise ValueError(f"Unknown signup record fields: {', '.join(sorted(unknown))}")

        changes = {key: self._normalize(key, value) for key, value in partial.items()}
        return replace(self, **changes)

    @staticmethod
    def _normalize(key: str, value: Any) -> Any:
        """
        Bring a partial value into the stored representation.

        Raises:
            ValueError: If the value has the wrong type for the field
        """
        if key in _CONSENT_FIELDS:
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be a boolean, got {value!r}")
            return value

        if key == "is_youth":
            if value is not None and not isinstance(value, bool):
                raise ValueError(f"is_youth must be a boolean or None, got {value!r}")
            return value

        if key == "dob":
            if isinstance(value, (date, datetime)):
                return to_date_isoformat(value)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"dob must be a date or ISO string, got {value!r}")
            return value or None

        if key == "sharing_connections":
            if value is not None and not isinstance(value, list):
                raise ValueError(f"sharing_connections must be a list, got {value!r}")
            return [
                conn if isinstance(conn, SharingConnection) else SharingConnection.from_dict(conn)
                for conn in (value or [])
            ]

        if key == "adult_roles_selected":
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"adult_roles_selected must be a mapping, got {value!r}")
            roles = default_adult_roles()
            for role in ADULT_ROLE_KEYS:
                roles[role] = bool((value or {}).get(role, False))
            return roles

        if value is not None and not isinstance(value, str):
            raise ValueError(f"{key} must be a string, got {value!r}")

        if key in ("clinic_code", "school_code"):
            return value or ""

        return value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "accepted_mandatory_terms": self.accepted_mandatory_terms,
            "accepted_optional_communications": self.accepted_optional_communications,
            "accepted_optional_marketing": self.accepted_optional_marketing,
            "name": self.name,
            "email_or_phone": self.email_or_phone,
            "dob": self.dob,
            "password": self.password,
            "verification_code": self.verification_code,
            "is_youth": self.is_youth,
            "adult_roles_selected": dict(self.adult_roles_selected),
            "clinic_code": self.clinic_code,
            "school_code": self.school_code,
            "sharing_connections": [conn.to_dict() for conn in self.sharing_connections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SignupRecord':
        """
        Create from dictionary.

        Missing keys fall back to defaults; unknown keys are ignored.

        Raises:
            TypeError: If the data is not shaped like a signup record
        """
        if not isinstance(data, dict):
            raise TypeError(f"Signup record must be a mapping, got {type(data).__name__}")

        is_youth = data.get("is_youth")
        if is_youth is not None and not isinstance(is_youth, bool):
            raise TypeError("is_youth must be a boolean or null")

        roles = data.get("adult_roles_selected") or {}
        connections = data.get("sharing_connections") or []
        if not isinstance(roles, dict) or not isinstance(connections, list):
            raise TypeError("Malformed role selection or sharing connections")

        record = cls(
            accepted_mandatory_terms=bool(data.get("accepted_mandatory_terms", False)),
            accepted_optional_communications=bool(data.get("accepted_optional_communications", False)),
            accepted_optional_marketing=bool(data.get("accepted_optional_marketing", False)),
            name=data.get("name"),
            email_or_phone=data.get("email_or_phone"),
            dob=data.get("dob"),
            password=data.get("password"),
            verification_code=data.get("verification_code"),
            is_youth=is_youth,
            clinic_code=data.get("clinic_code") or "",
            school_code=data.get("school_code") or "",
        )
        record.adult_roles_selected = cls._normalize("adult_roles_selected", roles)
        record.sharing_connections = [SharingConnection.from_dict(conn) for conn in connections]
        return record
