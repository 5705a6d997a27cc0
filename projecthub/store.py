"""Thread-safe in-memory project store."""
from __future__ import annotations
import threading
from datetime import datetime
from typing import Optional
from projecthub.models import Project

SEED_REFS = ["1", "2"]


class ProjectStore:
    """Mapping of project id to Project guarded by a single lock.

    Request handlers run in worker threads, so every access to the mapping,
    reads included, goes through the lock. The lock is held only while the
    mapping is touched; callers serialize and do I/O outside of it.
    """

    def __init__(self, projects: Optional[list[Project]] = None):
        self._lock = threading.Lock()
        self._db: dict[str, Project] = {}
        for proj in projects or []:
            self._db[proj.id] = proj

    @classmethod
    def seeded(cls, now: Optional[datetime] = None) -> ProjectStore:
        now = now or datetime.now().astimezone()
        return cls([
            Project(
                id=str(i),
                name=f"Project {i}",
                open_issues=list(SEED_REFS),
                open_prs=list(SEED_REFS),
                created_at=now,
                updated_at=now,
            )
            for i in (1, 2, 3)
        ])

    def insert(self, project: Project) -> None:
        """Add or overwrite the entry keyed by project.id."""
        with self._lock:
            self._db[project.id] = project

    def all(self) -> list[Project]:
        """Snapshot of every stored project, in no particular order."""
        with self._lock:
            return list(self._db.values())

    def get(self, project_id: str) -> Optional[Project]:
        with self._lock:
            return self._db.get(project_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._db)
