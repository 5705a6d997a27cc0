"""HTTP routes."""

from .admin import ADMIN_PATH, admin_portal
from .projects import router as projects_router

__all__ = [
    "ADMIN_PATH",
    "admin_portal",
    "projects_router",
]
