## Pydantic schemas for career paths and generated projects
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


TIME_COMMITMENTS = {
    Difficulty.BEGINNER: "1-2 weeks",
    Difficulty.INTERMEDIATE: "2-3 weeks",
    Difficulty.ADVANCED: "3-4 weeks",
}

PROJECT_COUNT = 3
OBJECTIVE_COUNT = 3
STEP_COUNT = 5


class CareerPath(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str = Field(min_length=1)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "CareerPath":
        # Appwrite exposes system attributes with a "$" prefix
        return cls(id=doc.get("$id") or doc.get("id") or "", title=doc.get("title") or "")


class ProjectRecord(BaseModel):
    """One project recommendation. Unknown keys from the model are kept."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    objectives: List[str] = Field(min_length=OBJECTIVE_COUNT, max_length=OBJECTIVE_COUNT)
    steps: List[str] = Field(min_length=STEP_COUNT, max_length=STEP_COUNT)
    tools: List[str] = Field(min_length=1)
    time_commitment: str = Field(alias="timeCommitment")
    real_world_relevance: str = Field(alias="realWorldRelevance")

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


RECORD_KEYS = frozenset(
    name
    for field_name, info in ProjectRecord.model_fields.items()
    for name in (field_name, info.alias)
    if name
)


class ProjectSet(BaseModel):
    projects: List[ProjectRecord] = Field(min_length=PROJECT_COUNT, max_length=PROJECT_COUNT)
    used_fallback: bool = False
    warning: Optional[str] = None
