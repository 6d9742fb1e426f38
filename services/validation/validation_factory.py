# -*- coding: utf-8 -*-
"""
Validation Factory - Creates appropriate validators for different record types.

Provides a central point for creating and managing validation strategies.
"""

from datetime import date
from typing import Callable, Dict, Optional, List

from .validation_strategy import (
    ValidationStrategy,
    GenericRequiredFieldsValidator,
    TermsValidator,
    UserInfoValidator,
    VerificationCodeValidator,
    AdultRoleValidator,
    SharingConnectionValidator,
)


class ValidationFactory:
    """
    Factory for creating validation strategies based on record type.

    This class acts as a registry and factory for different validation strategies,
    allowing easy creation of validators for different record types.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        """
        Initialize the validation factory.

        Args:
            today: Clock used by date rules, defaults to date.today
        """
        self._validators: Dict[str, ValidationStrategy] = {}
        self._today = today
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators for the signup record types."""
        self.register_validator('terms', TermsValidator())
        self.register_validator('user_info', UserInfoValidator(today=self._today))
        self.register_validator('verification', VerificationCodeValidator())
        self.register_validator('adult_roles', AdultRoleValidator())
        self.register_validator('sharing_connection', SharingConnectionValidator())

        # Identity handed to the session on completion
        self.register_validator(
            'identity',
            GenericRequiredFieldsValidator(
                required_fields=['name', 'contact'],
                field_labels={
                    'name': 'step.user_info.name_label',
                    'contact': 'step.user_info.contact_label',
                }
            )
        )

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'terms', 'user_info')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        """
        Get a registered validator by record type.

        Args:
            record_type: Type identifier

        Returns:
            ValidationStrategy instance or None if not found
        """
        return self._validators.get(record_type.lower())

    def validate(self, record: Dict, record_type: str) -> List[str]:
        """
        Validate a record using the appropriate validator.

        Args:
            record: Dictionary containing record data
            record_type: Type of record to validate

        Returns:
            List of error messages (empty if valid)
        """
        validator = self.get_validator(record_type)
        if not validator:
            return [f"No validator registered for record type: {record_type}"]

        return validator.validate(record)

    def validate_fields(self, record: Dict, record_type: str) -> Dict[str, List[str]]:
        """Validate a record and return errors grouped by field."""
        validator = self.get_validator(record_type)
        if not validator:
            return {"": [f"No validator registered for record type: {record_type}"]}

        return validator.validate_fields(record)

    def is_valid(self, record: Dict, record_type: str) -> bool:
        """
        Check if a record is valid.

        Args:
            record: Dictionary containing record data
            record_type: Type of record to validate

        Returns:
            True if record passes validation, False otherwise
        """
        return len(self.validate(record, record_type)) == 0
