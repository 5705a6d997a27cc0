"""Open source project endpoints."""
from __future__ import annotations
import json
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError
from projecthub.api._state import get_store, read_body
from projecthub.models import CreateProjectRequest, Project
from projecthub.store import ProjectStore

logger = logging.getLogger(__name__)

router = APIRouter()

COLLECTION_PATH = "/opensource/projects"
ITEM_PATH = COLLECTION_PATH + "/{project_path:path}"
JSON_CONTENT_TYPE = "application/json"


def _json_response(payload) -> Response:
    try:
        body = json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        logger.exception("Failed to serialize response")
        return PlainTextResponse(str(exc), status_code=500)
    logger.debug("json bytes: %s", body)
    return Response(content=body, media_type=JSON_CONTENT_TYPE)


@router.get(COLLECTION_PATH)
def list_projects(store: ProjectStore = Depends(get_store)):
    """List every stored project."""
    projects = store.all()
    return _json_response([p.to_dict() for p in projects])


@router.post(COLLECTION_PATH)
def create_project(
    request: Request,
    raw: bytes = Depends(read_body),
    store: ProjectStore = Depends(get_store),
):
    """Create a project from a JSON body.

    The content type must be exactly ``application/json``. On success the
    response is 200 with an empty body.
    """
    ct = request.headers.get("content-type", "")
    if ct != JSON_CONTENT_TYPE:
        logger.warning("Rejected create with content-type %r", ct)
        return PlainTextResponse(
            f"need content-type application/json, but got {ct}", status_code=415
        )

    try:
        req = CreateProjectRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Rejected create with malformed body")
        return PlainTextResponse(str(exc), status_code=400)

    # len + 1 is not collision-safe under concurrent creates; ids stay compatible.
    proj = Project.create(str(len(store) + 1), req)
    store.insert(proj)
    logger.info("Created project %s (%s)", proj.id, proj.name)
    return Response(status_code=200)


@router.get(ITEM_PATH)
def get_project(project_path: str, store: ProjectStore = Depends(get_store)):
    """Get one project by id."""
    parts = project_path.split("/")
    if len(parts) != 1:
        return Response(status_code=400)

    proj = store.get(parts[0])
    if proj is None:
        return Response(status_code=404)
    return _json_response(proj.to_dict())
