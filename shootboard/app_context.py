# shootboard application context
# Rev 0.1.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .models.entity_store import EntityStore
from .repositories.db import Database
from .repositories.gateway import DataGateway
from .repositories.sqlite_gateway import SQLiteGateway
from .services.mutation_service import MutationService
from .utils.config import load_settings, timing
from .utils.logging_setup import get_logger
from .utils.paths import DB_PATH
from .viewmodels.directory_viewmodel import DirectoryViewModel
from .viewmodels.next_shoot_autosave import NextShootAutosave
from .viewmodels.notifications import NotificationCenter
from .viewmodels.project_detail_viewmodel import ProjectDetailViewModel
from .viewmodels.projects_viewmodel import ProjectsViewModel


@dataclass
class AppContext:
    """Central container for the session state; each part owns its own slice.

    Timers need a running QCoreApplication/QApplication event loop.
    """
    gateway: DataGateway
    store: EntityStore
    notifications: NotificationCenter
    mutations: MutationService
    autosave: NextShootAutosave
    projects: ProjectsViewModel
    detail: ProjectDetailViewModel
    directory: DirectoryViewModel
    database: Optional[Database] = None

    @classmethod
    def create(
        cls,
        db_path: Optional[Path] = None,
        *,
        gateway: Optional[DataGateway] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> "AppContext":
        """Wire gateway, store, services and view models.

        Without an explicit gateway, a SQLite database is opened (and migrated)
        at `db_path`, the settings' database.path, or the default DB path.
        """
        log = get_logger("AppContext")
        settings = settings or load_settings()

        database = None
        if gateway is None:
            path = db_path or settings.get("database", {}).get("path") or DB_PATH
            database = Database(path)
            database.run_migrations()
            gateway = SQLiteGateway(database)
            log.info("AppContext using SQLite gateway at %s", path)

        store = EntityStore()
        notifications = NotificationCenter(timing(settings, "notification_ms"))
        mutations = MutationService(gateway, store, notify=notifications.show)
        autosave = NextShootAutosave(
            gateway,
            mutations,
            notify=notifications.show,
            debounce_ms=timing(settings, "autosave_debounce_ms"),
            saved_revert_ms=timing(settings, "saved_revert_ms"),
        )
        return cls(
            gateway=gateway,
            store=store,
            notifications=notifications,
            mutations=mutations,
            autosave=autosave,
            projects=ProjectsViewModel(mutations),
            detail=ProjectDetailViewModel(mutations, autosave),
            directory=DirectoryViewModel(mutations),
            database=database,
        )

    def start(self) -> bool:
        """Initial load of all four collections."""
        return self.mutations.load_all()

    def close(self) -> None:
        if self.database is not None:
            self.database.close()
