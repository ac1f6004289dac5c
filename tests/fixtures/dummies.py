from __future__ import annotations

from src.contact_form.core.services import ContactStore
from src.contact_form.core.validation import NormalizedContact
from src.contact_form.entities.contact import Contact


class RecordingContactStore(ContactStore):
    """ContactStore that remembers every contact passed to ``create``."""

    def __init__(self, database_service) -> None:
        super().__init__(database_service)
        self.created: list[NormalizedContact] = []

    async def create(self, contact: NormalizedContact) -> Contact:
        self.created.append(contact)
        return await super().create(contact)
