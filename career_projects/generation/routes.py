# career_projects/generation/routes.py
import json
import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from career_projects.agents.llm.base import LLMClient
from career_projects.agents.schemas import CareerPath, Difficulty, ProjectSet
from career_projects.agents.workflow import fallback_project_set, generate_projects
from career_projects.db.documents import DocumentStore, DocumentStoreError
from career_projects.deps import get_document_store, get_llm_factory
from career_projects.generation.errors import (
    CareerPathNotFound,
    InvalidProjectRequest,
    ProjectRequestError,
)
from career_projects.settings import settings

logger = logging.getLogger(__name__)
router = APIRouter()

FALLBACK_WARNING = "AI generation failed, using fallback projects"


def error_payload(status_code: int, message: str) -> dict[str, Any]:
    return {"success": False, "error": message, "statusCode": status_code}


def _parse_request(raw_body: bytes) -> tuple[str, Difficulty]:
    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON input")
        raise InvalidProjectRequest("Invalid JSON input")

    if not isinstance(data, dict):
        data = {}

    career_path_id = data.get("careerPathId")
    difficulty = data.get("difficulty")
    if not career_path_id or not difficulty:
        logger.error("Missing required parameters")
        raise InvalidProjectRequest("Missing careerPathId or difficulty")

    try:
        level = Difficulty(difficulty)
    except ValueError:
        logger.error("Invalid difficulty level: %r", difficulty)
        raise InvalidProjectRequest("Invalid difficulty level")

    return str(career_path_id), level


def _fetch_career_path(store: DocumentStore, career_path_id: str) -> CareerPath:
    try:
        doc = store.get_document(
            settings.appwrite_database_id,
            settings.career_paths_collection_id,
            career_path_id,
        )
        career_path = CareerPath.from_document(doc)
    except (DocumentStoreError, ValidationError) as e:
        logger.error("Failed to fetch career path %s: %s", career_path_id, e)
        raise CareerPathNotFound("Career path not found")

    logger.info("Fetched career path: %s", career_path.title)
    return career_path


def build_success_payload(career_path: CareerPath, difficulty: Difficulty,
project_set: ProjectSet) -> dict[str, Any]:
    payload = {
        "success": True,
        "statusCode": 200,
        "projects": [p.to_json() for p in project_set.projects],
        "careerPath": {"id": career_path.id, "title": career_path.title},
        "difficulty": difficulty.value,
        "usedFallback": project_set.used_fallback,
    }
    if project_set.warning:
        payload["warning"] = project_set.warning
    return payload


def handle_generate_projects(raw_body: bytes, *, store: DocumentStore,
llm_factory: Callable[[], LLMClient]) -> dict[str, Any]:
    """
    Validate the request, fetch the career path, then generate projects.
    Raises ProjectRequestError for 400/404; past the lookup the caller
    always gets a success payload with three projects, even when the
    model client cannot be built.
    """
    career_path_id, difficulty = _parse_request(raw_body)
    career_path = _fetch_career_path(store, career_path_id)

    try:
        llm = llm_factory()
        project_set = generate_projects(llm, career_path.title, difficulty)
    except Exception as e:
        logger.error("AI Generation Error: %s", e, exc_info=True)
        project_set = fallback_project_set(career_path.title, difficulty, warning=FALLBACK_WARNING)

    logger.info(
        "Generated projects response",
        extra={"career_path_id": career_path.id, "difficulty": difficulty.value,
               "used_fallback": project_set.used_fallback},
    )
    return build_success_payload(career_path, difficulty, project_set)


@router.post("/generate-projects")
async def generate_projects_endpoint(
    request: Request,
    store: DocumentStore = Depends(get_document_store),
    llm_factory: Callable[[], LLMClient] = Depends(get_llm_factory),
):
    raw_body = await request.body()
    try:
        payload = await run_in_threadpool(handle_generate_projects, raw_body, store=store, llm_factory=llm_factory)
    except ProjectRequestError:
        raise
    except Exception as e:
        logger.exception("Unexpected Error: %s", e)
        return JSONResponse(error_payload(500, "Internal server error"), status_code=500)

    return JSONResponse(payload)
