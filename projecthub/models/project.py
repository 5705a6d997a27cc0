"""Data models for open source projects."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Project:
    id: str
    name: str = ""
    open_issues: list[str] = field(default_factory=list)
    open_prs: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)  # never refreshed, kept for the wire format

    @staticmethod
    def create(project_id: str, req: CreateProjectRequest, now: datetime | None = None) -> Project:
        now = now or _now()
        return Project(
            id=project_id,
            name=req.name,
            open_issues=list(req.open_issues),
            open_prs=list(req.open_prs),
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "open_issues": list(self.open_issues),
            "open_prs": list(self.open_prs),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class CreateProjectRequest(BaseModel):
    """Body of POST /opensource/projects."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    open_issues: list[str] = Field(default_factory=list)
    open_prs: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        # Keys match case-insensitively; an exact match wins over a folded one.
        if not isinstance(data, dict):
            return data
        folded: dict = {}
        for key, value in data.items():
            name = key if key in cls.model_fields else str(key).lower()
            if name not in cls.model_fields:
                continue
            if name in folded and key != name:
                continue
            folded[name] = value
        return folded

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("open_issues", "open_prs", mode="before")
    @classmethod
    def _null_refs(cls, v: Any) -> Any:
        return [] if v is None else v
