"""Core services exports."""

from .access_log import AccessLogWriter
from .contact_store import ContactStore
from .database import DbSessionService

__all__ = ["AccessLogWriter", "ContactStore", "DbSessionService"]
