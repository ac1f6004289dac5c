"""Contact repository for data access operations."""

from sqlmodel import Session, col, select

from src.contact_form.core.validation import NormalizedContact

from .entity import Contact
from .table import ContactTable


class ContactRepository:
    """Data-access layer for contacts.

    The repository never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, contact: NormalizedContact) -> Contact:
        row = ContactTable(name=contact.name, email=contact.email, phone=contact.phone)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Contact.model_validate(row, from_attributes=True)

    def find_all(self) -> list[Contact]:
        statement = select(ContactTable).order_by(col(ContactTable.created_at))
        rows = self._session.exec(statement).all()
        return [Contact.model_validate(row, from_attributes=True) for row in rows]
