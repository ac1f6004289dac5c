"""Contact database table model."""

from src.contact_form.entities._base import EntityTable


class ContactTable(EntityTable, table=True):
    """Database persistence model for contacts.

    No uniqueness constraints: the same person may submit the form twice.
    """

    name: str
    email: str
    phone: str
