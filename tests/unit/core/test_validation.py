"""Unit tests for contact submission validation."""

import pytest
from pydantic import ValidationError

from src.contact_form.core.errors import ContactValidationError
from src.contact_form.core.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    NAME_TOO_SHORT,
    PHONE_INVALID,
    NormalizedContact,
    validate_contact,
)

VALID = {"name": "Ana Silva", "email": "ana@example.com", "phone": "(11) 91234-5678"}


def _messages(data) -> list[str]:
    with pytest.raises(ContactValidationError) as exc_info:
        validate_contact(data)
    return exc_info.value.messages


class TestValidContacts:
    """Inputs that pass every check."""

    def test_valid_contact_is_returned_unchanged(self):
        contact = validate_contact(VALID)

        assert isinstance(contact, NormalizedContact)
        assert contact.name == "Ana Silva"
        assert contact.email == "ana@example.com"
        assert contact.phone == "(11) 91234-5678"

    def test_extra_keys_are_ignored(self):
        contact = validate_contact({**VALID, "company": "ACME", "id": "forged"})

        assert contact.model_dump() == VALID

    def test_name_of_exactly_three_characters_is_accepted(self):
        contact = validate_contact({**VALID, "name": "Bia"})
        assert contact.name == "Bia"

    @pytest.mark.parametrize(
        "email", ["ana@example.com", "ana.silva+news@mail.example.com.br", "ana@foo.test"]
    )
    def test_syntactically_valid_emails_are_accepted(self, email):
        assert validate_contact({**VALID, "email": email}).email == email

    def test_normalized_contact_is_frozen(self):
        contact = validate_contact(VALID)
        with pytest.raises(ValidationError):
            contact.name = "Other"  # type: ignore[misc]


class TestFieldErrors:
    """One failing field at a time."""

    def test_missing_name(self):
        data = {k: v for k, v in VALID.items() if k != "name"}
        assert _messages(data) == [NAME_REQUIRED]

    def test_non_string_name(self):
        assert _messages({**VALID, "name": 12345}) == [NAME_REQUIRED]

    def test_short_name(self):
        assert _messages({**VALID, "name": "Al"}) == [NAME_TOO_SHORT]

    def test_empty_name_is_too_short(self):
        assert _messages({**VALID, "name": ""}) == [NAME_TOO_SHORT]

    def test_missing_email(self):
        data = {k: v for k, v in VALID.items() if k != "email"}
        assert _messages(data) == [EMAIL_REQUIRED]

    def test_non_string_email(self):
        assert _messages({**VALID, "email": ["ana@example.com"]}) == [EMAIL_REQUIRED]

    @pytest.mark.parametrize(
        "email",
        ["bad", "ana@", "@example.com", "ana example@example.com", "ana@@example.com"],
    )
    def test_malformed_email(self, email):
        assert _messages({**VALID, "email": email}) == [EMAIL_INVALID]

    @pytest.mark.parametrize(
        "phone",
        [
            "11 91234-5678",
            "(11) 9123-45678",
            "(11)91234-5678",
            "(11) 912345678",
            " (11) 91234-5678",
            "(11) 91234-5678 ",
            "(11) 91234-5678\n",
            "(1a) 91234-5678",
            "(١١) 91234-5678",
            "(１１) ９１２３４-５６７８",
            "123",
        ],
    )
    def test_phone_must_match_exactly(self, phone):
        assert _messages({**VALID, "phone": phone}) == [PHONE_INVALID]

    def test_missing_phone(self):
        data = {k: v for k, v in VALID.items() if k != "phone"}
        assert _messages(data) == [PHONE_INVALID]

    def test_non_string_phone(self):
        assert _messages({**VALID, "phone": 11912345678}) == [PHONE_INVALID]


class TestErrorCollection:
    """All failures are reported together, in field order."""

    def test_all_three_fields_invalid(self):
        messages = _messages({"name": "Al", "email": "bad", "phone": "123"})

        assert messages == [NAME_TOO_SHORT, EMAIL_INVALID, PHONE_INVALID]

    def test_joined_message(self):
        with pytest.raises(ContactValidationError) as exc_info:
            validate_contact({"name": "Al", "email": "bad", "phone": "123"})

        assert str(exc_info.value) == (
            "name must be at least 3 characters; must be a valid email; "
            "must be a valid phone number"
        )

    def test_empty_record(self):
        assert _messages({}) == [NAME_REQUIRED, EMAIL_REQUIRED, PHONE_INVALID]

    @pytest.mark.parametrize("data", [None, "name=Ana", ["Ana Silva"], 42])
    def test_non_mapping_input_is_treated_as_empty(self, data):
        assert _messages(data) == [NAME_REQUIRED, EMAIL_REQUIRED, PHONE_INVALID]

    def test_order_does_not_depend_on_input_key_order(self):
        data = {"phone": "123", "email": "bad", "name": "Al"}
        assert _messages(data) == [NAME_TOO_SHORT, EMAIL_INVALID, PHONE_INVALID]

    def test_validation_is_deterministic(self):
        data = {"name": "", "email": "x", "phone": ""}
        assert _messages(data) == _messages(data)
