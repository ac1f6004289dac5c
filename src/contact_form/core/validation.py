"""Validation of raw contact submissions.

``validate_contact`` is the only way untyped request data becomes a
``NormalizedContact``. Every field is checked, and all failures are reported
together in field declaration order: name, email, phone.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from src.contact_form.core.errors import ContactValidationError

# Brazilian mobile format, e.g. "(11) 91234-5678". Used with fullmatch only.
PHONE_PATTERN = re.compile(r"\(\d{2}\) \d{5}-\d{4}", re.ASCII)

NAME_MIN_LENGTH = 3

NAME_REQUIRED = "name is required"
NAME_TOO_SHORT = f"name must be at least {NAME_MIN_LENGTH} characters"
EMAIL_REQUIRED = "email is required"
EMAIL_INVALID = "must be a valid email"
PHONE_INVALID = "must be a valid phone number"

# Maps (field, pydantic error type) to the message reported to clients.
_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "missing"): NAME_REQUIRED,
    ("name", "string_type"): NAME_REQUIRED,
    ("name", "string_too_short"): NAME_TOO_SHORT,
    ("email", "missing"): EMAIL_REQUIRED,
    ("email", "string_type"): EMAIL_REQUIRED,
    ("phone", "missing"): PHONE_INVALID,
}


class NormalizedContact(BaseModel):
    """A contact that passed every field check and is ready to be stored."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    name: str = Field(min_length=NAME_MIN_LENGTH, description="Contact name")
    email: str = Field(description="Contact email address")
    phone: str = Field(description="Contact phone, formatted as (DD) DDDDD-DDDD")

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        try:
            validate_email(
                value, check_deliverability=False, test_environment=True
            )
        except EmailNotValidError as exc:
            raise PydanticCustomError("email_format", EMAIL_INVALID) from exc
        return value

    @field_validator("phone", mode="before")
    @classmethod
    def _check_phone(cls, value: Any) -> Any:
        if not isinstance(value, str) or PHONE_PATTERN.fullmatch(value) is None:
            raise PydanticCustomError("phone_format", PHONE_INVALID)
        return value


def _message_for(error: Mapping[str, Any]) -> str:
    field = str(error["loc"][0]) if error.get("loc") else ""
    return _MESSAGES.get((field, error["type"]), error["msg"])


def validate_contact(data: Any) -> NormalizedContact:
    """Validate an untyped input record.

    Args:
        data: Request body as parsed from JSON or form data. Anything that is
            not a mapping is treated as an empty record.

    Returns:
        NormalizedContact: The validated contact, with values unchanged.

    Raises:
        ContactValidationError: If any field fails. ``messages`` holds one
            entry per failing field, ordered name, email, phone.
    """
    record = dict(data) if isinstance(data, Mapping) else {}

    try:
        return NormalizedContact.model_validate(record)
    except ValidationError as exc:
        messages = [_message_for(error) for error in exc.errors()]
        raise ContactValidationError(messages) from None
