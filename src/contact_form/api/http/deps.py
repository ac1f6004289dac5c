"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.contact_form.api.http.app_data import ApplicationDependencies
from src.contact_form.core.services import ContactStore, DbSessionService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_contact_store(request: Request) -> ContactStore:
    """Get the contact store instance."""
    return get_app_dependencies(request).contact_store


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    return get_app_dependencies(request).database_service
