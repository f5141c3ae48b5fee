## Validation and normalization of recovered project objects
import logging
from typing import Any, Iterable

from career_projects.agents.fallback import generate_fallback_projects, time_commitment_for
from career_projects.agents.recovery import RecoveryError
from career_projects.agents.schemas import (
    Difficulty,
    OBJECTIVE_COUNT,
    PROJECT_COUNT,
    RECORD_KEYS,
    STEP_COUNT,
    ProjectRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_OBJECTIVES = [
    "Learn relevant skills",
    "Build practical experience",
    "Develop problem-solving abilities",
]
DEFAULT_STEPS = [
    "Plan the project",
    "Set up environment",
    "Implement solution",
    "Test and refine",
    "Document results",
]


def _check_project(project: Any) -> None:
    if not isinstance(project, dict):
        raise ValueError(f"expected an object, got {type(project).__name__}")
    if not project.get("title"):
        raise ValueError("missing title")
    for key in ("objectives", "steps", "tools"):
        if not isinstance(project.get(key), list):
            raise ValueError(f"{key} is not an array")
    for key in ("timeCommitment", "realWorldRelevance"):
        if not project.get(key):
            raise ValueError(f"missing {key}")


def validate_projects(items: Iterable[Any]) -> list[dict[str, Any]]:
    """
    Keep the items that carry every required field with the right shape.
    Raises RecoveryError when nothing survives.
    """
    valid = []
    for i, item in enumerate(items, start=1):
        try:
            _check_project(item)
        except ValueError as e:
            logger.warning("Dropping project %d: %s", i, e)
            continue
        valid.append(item)

    if not valid:
        raise RecoveryError("No project in the response has the required fields")
    return valid


def _fit_list(values: Any, defaults: list[str], size: int) -> list[str]:
    if not isinstance(values, list) or not values:
        return list(defaults)
    items = [str(v) for v in values[:size]]
    # top up short lists so the record always has exactly `size` entries
    return items + defaults[len(items):size]


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def normalize_project(
    project: dict[str, Any] | ProjectRecord,
    index: int,
    career_title: str,
    difficulty: Difficulty | str,
) -> ProjectRecord:
    """
    Build a fully-shaped record for output slot `index` (0-based), filling
    anything missing or malformed with defaults. Keys outside the record
    schema are carried over untouched. Idempotent.
    """
    if isinstance(project, ProjectRecord):
        project = project.to_json()

    tools = project.get("tools")
    if isinstance(tools, list) and tools:
        tools = [str(t) for t in tools]
    else:
        tools = [f"{career_title} development tools", "Project management software"]

    extras = {k: v for k, v in project.items() if k not in RECORD_KEYS}

    return ProjectRecord(
        title=_text(project.get("title")) or f"{career_title} Project {index + 1}",
        objectives=_fit_list(project.get("objectives"), DEFAULT_OBJECTIVES, OBJECTIVE_COUNT),
        steps=_fit_list(project.get("steps"), DEFAULT_STEPS, STEP_COUNT),
        tools=tools,
        time_commitment=_text(project.get("timeCommitment")) or time_commitment_for(difficulty),
        real_world_relevance=(
            _text(project.get("realWorldRelevance"))
            or f"Builds practical skills relevant to {career_title} career"
        ),
        **extras,
    )


def reconcile_count(
    projects: list[Any],
    career_title: str,
    difficulty: Difficulty | str,
) -> list[Any]:
    """Pad with the fallback projects for the missing slots, or truncate, to PROJECT_COUNT."""
    if len(projects) < PROJECT_COUNT:
        fallback = generate_fallback_projects(career_title, difficulty)
        return list(projects) + fallback[len(projects):]
    return list(projects[:PROJECT_COUNT])


def normalize_projects(
    projects: list[Any],
    career_title: str,
    difficulty: Difficulty | str,
) -> list[ProjectRecord]:
    slots = reconcile_count(projects, career_title, difficulty)
    return [
        normalize_project(p, i, career_title, difficulty)
        for i, p in enumerate(slots)
    ]
