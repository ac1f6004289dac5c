"""Error taxonomy for the contact submission path."""

from __future__ import annotations


class ContactFormError(Exception):
    """Base class for all contact form errors."""


class ContactValidationError(ContactFormError):
    """Raised when a submission fails one or more field checks.

    The messages are kept in field declaration order (name, email, phone)
    so callers can join them without re-sorting.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class StorageError(ContactFormError):
    """Raised when the contact store cannot complete an operation."""


class AccessLogError(ContactFormError):
    """Raised when an access log line cannot be appended."""
