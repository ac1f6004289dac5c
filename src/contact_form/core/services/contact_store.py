"""Async persistence interface for contacts."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from src.contact_form.core.errors import StorageError
from src.contact_form.core.services.database import DbSessionService
from src.contact_form.core.validation import NormalizedContact
from src.contact_form.entities.contact import Contact, ContactRepository


class ContactStore:
    """Creates and lists contacts.

    Each operation runs in its own session scope on a worker thread, so a
    slow database suspends only the request awaiting it. Driver errors are
    raised as ``StorageError``; nothing is retried.
    """

    def __init__(self, database_service: DbSessionService) -> None:
        self._database_service = database_service

    async def create(self, contact: NormalizedContact) -> Contact:
        """Insert one contact in a single transaction and return the stored row."""
        try:
            created = await run_in_threadpool(self._create, contact)
        except SQLAlchemyError as e:
            raise StorageError("Failed to store contact") from e
        logger.info("Contact stored", contact_id=created.id)
        return created

    async def find_all(self) -> list[Contact]:
        """Return every stored contact in insertion order."""
        try:
            return await run_in_threadpool(self._find_all)
        except SQLAlchemyError as e:
            raise StorageError("Failed to list contacts") from e

    def _create(self, contact: NormalizedContact) -> Contact:
        with self._database_service.session_scope() as session:
            return ContactRepository(session).create(contact)

    def _find_all(self) -> list[Contact]:
        with self._database_service.session_scope() as session:
            return ContactRepository(session).find_all()
