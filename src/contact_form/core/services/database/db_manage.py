"""Table management for local development and tests."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel

from src.contact_form.entities.contact import ContactTable  # noqa: F401


def create_all(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized with tables.")
