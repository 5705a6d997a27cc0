"""Data models for projecthub."""

from .project import CreateProjectRequest, Project

__all__ = [
    "CreateProjectRequest",
    "Project",
]
