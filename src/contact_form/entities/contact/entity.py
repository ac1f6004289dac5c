"""Entity: Contact."""

from typing import Any

from pydantic import Field

from src.contact_form.entities._base import Entity


class Contact(Entity):
    """A stored contact as returned by the persistence layer.

    Field values are exactly what was submitted; validation happens before
    a Contact is ever built.
    """

    name: str = Field(description="Contact name")
    email: str = Field(description="Contact email address")
    phone: str = Field(description="Contact phone number")

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by identity and business attributes, ignoring timestamps."""
        if not isinstance(other, Contact):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.email == other.email
            and self.phone == other.phone
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.email, self.phone))
