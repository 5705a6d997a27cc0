"""Shared state for API handlers, injected from app.state."""
from __future__ import annotations
from fastapi import Request
from starlette.requests import ClientDisconnect
from projecthub.config import Settings
from projecthub.store import ProjectStore


class BodyReadError(Exception):
    """The request body could not be read."""


def get_store(request: Request) -> ProjectStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_body(request: Request) -> bytes:
    # Read here so the sync handler thread never blocks on client I/O.
    try:
        return await request.body()
    except ClientDisconnect as exc:
        raise BodyReadError(str(exc) or "client disconnected while reading request body") from exc
