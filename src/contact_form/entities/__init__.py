"""Domain entities.

Each entity package keeps its domain model (entity.py), persistence model
(table.py) and data access (repository.py) side by side.
"""

from .contact import Contact, ContactRepository, ContactTable

__all__ = ["Contact", "ContactRepository", "ContactTable"]
