"""Database initialization script."""

from src.contact_form.core.services.database import DbSessionService, create_all


def init_db() -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    try:
        create_all(database_service.engine)
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
