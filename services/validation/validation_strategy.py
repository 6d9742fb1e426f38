# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

Provides a pluggable architecture for the per-step signup rules and the
sharing connection rules. Every strategy reports errors per field so the
step widgets can show them inline; `validate` flattens them for callers
that only need a message list.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from app.config import Config
from models.signup_record import PERMISSION_KEYS
from services.translation_manager import tr
from services.validation.rules import is_blank, is_valid_contact, birth_date_error


FieldErrors = Dict[str, List[str]]


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements specific validation rules for different record types.
    """

    @abstractmethod
    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        """
        Validate a record and return error messages grouped by field.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            Mapping of field name to error messages (empty if valid)
        """
        pass

    def validate(self, record: Dict[str, Any]) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            List of error messages (empty list if valid)
        """
        errors = []
        for messages in self.validate_fields(record).values():
            errors.extend(messages)
        return errors

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """
        Check if record is valid.

        Args:
            record: Dictionary containing record data

        Returns:
            True if record passes all validations, False otherwise
        """
        return len(self.validate(record)) == 0


class GenericRequiredFieldsValidator(ValidationStrategy):
    """
    Generic validator for checking required fields.

    Validates that specified fields exist and are not empty.
    """

    def __init__(self, required_fields: List[str], field_labels: Optional[Dict[str, str]] = None):
        """
        Initialize validator with required fields.

        Args:
            required_fields: List of field names that must be present and non-empty
            field_labels: Optional mapping of field names to translation keys of their labels
        """
        self.required_fields = list(required_fields)
        self.field_labels = field_labels or {}

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        errors: FieldErrors = {}

        for field in self.required_fields:
            if is_blank(record.get(field)):
                label = tr(self.field_labels[field]) if field in self.field_labels else field
                errors[field] = [tr("validation.field_required", field=label)]

        return errors


class TermsValidator(ValidationStrategy):
    """Only the mandatory terms checkbox gates the step."""

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        if record.get("accepted_mandatory_terms") is True:
            return {}
        return {"accepted_mandatory_terms": [tr("validation.terms_required")]}


class UserInfoValidator(ValidationStrategy):
    """
    Identity and credential rules.

    Expects name, email_or_phone, dob, password and confirm_password.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        errors: FieldErrors = {}

        if is_blank(record.get("name")):
            errors["name"] = [tr("validation.name_required")]

        contact = record.get("email_or_phone")
        if is_blank(contact):
            errors["email_or_phone"] = [tr("validation.contact_required")]
        elif not is_valid_contact(contact):
            errors["email_or_phone"] = [tr("validation.contact_invalid")]

        dob_error = birth_date_error(record.get("dob"), self._today())
        if dob_error == "too_early":
            errors["dob"] = [tr("validation.dob_too_early",
                                earliest=Config.EARLIEST_BIRTH_DATE.isoformat())]
        elif dob_error:
            errors["dob"] = [tr(f"validation.dob_{dob_error}")]

        password = record.get("password") or ""
        if len(password) < Config.MIN_PASSWORD_LENGTH:
            errors["password"] = [tr("validation.password_min_length",
                                     min_length=Config.MIN_PASSWORD_LENGTH)]

        if (record.get("confirm_password") or "") != password:
            errors["confirm_password"] = [tr("validation.passwords_dont_match")]

        return errors


class VerificationCodeValidator(ValidationStrategy):
    """The code must have exactly the configured length."""

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        code = record.get("verification_code") or ""
        if len(code) == Config.VERIFICATION_CODE_LENGTH:
            return {}
        return {"verification_code": [tr("validation.code_length",
                                         length=Config.VERIFICATION_CODE_LENGTH)]}


class AdultRoleValidator(ValidationStrategy):
    """A school consultant must give a school code."""

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        roles = record.get("adult_roles_selected") or {}
        if roles.get("school_consultant") and is_blank(record.get("school_code")):
            return {"school_code": [tr("validation.school_code_required")]}
        return {}


class SharingConnectionValidator(ValidationStrategy):
    """A new connection needs a well-formed contact and at least one permission."""

    def validate_fields(self, record: Dict[str, Any]) -> FieldErrors:
        errors: FieldErrors = {}

        contact = record.get("contact")
        if is_blank(contact):
            errors["contact"] = [tr("validation.contact_required")]
        elif not is_valid_contact(contact):
            errors["contact"] = [tr("validation.contact_invalid")]

        permissions = record.get("permissions") or {}
        if not any(permissions.get(key) for key in PERMISSION_KEYS):
            errors["permissions"] = [tr("validation.permissions_required")]

        return errors
