"""Wire settings, logging, store and service together."""

from __future__ import annotations

from dataclasses import dataclass

from roster.config import Settings, load_settings
from roster.logging import setup_logging
from roster.student_service import StudentService
from roster.student_store import SqlStudentStore


@dataclass(frozen=True)
class AppContainer:
    """Holds the wired application components."""

    settings: Settings
    store: SqlStudentStore
    service: StudentService

    def close(self) -> None:
        """Release the store's database connection."""
        self.store.close()


def bootstrap(settings: Settings | None = None) -> AppContainer:
    """Build the application from settings.

    Args:
        settings: Settings to use. Loaded from the environment when None.

    Returns:
        AppContainer with a ready StudentService.
    """
    if settings is None:
        settings = load_settings()

    setup_logging(
        log_dir=settings.log_dir,
        level=settings.log_level,
        console=settings.log_console,
    )

    store = SqlStudentStore(settings.db_path)
    return AppContainer(
        settings=settings,
        store=store,
        service=StudentService(store),
    )
