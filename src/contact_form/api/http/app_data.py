from dataclasses import dataclass

from src.contact_form.core.services import AccessLogWriter, ContactStore, DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    contact_store: ContactStore
    access_log: AccessLogWriter
