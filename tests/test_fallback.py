import pytest

from career_projects.agents.fallback import generate_fallback_projects, time_commitment_for
from career_projects.agents.schemas import Difficulty


@pytest.mark.parametrize(
    "difficulty, expected",
    [("beginner", "1-2 weeks"), ("intermediate", "2-3 weeks"), (Difficulty.ADVANCED, "3-4 weeks")],
)
def test_time_commitment_follows_difficulty(difficulty, expected):
    projects = generate_fallback_projects("UX Designer", difficulty)
    assert len(projects) == 3
    assert {p.time_commitment for p in projects} == {expected}
    assert time_commitment_for(difficulty) == expected


def test_fallback_projects_are_deterministic():
    assert generate_fallback_projects("UX Designer", "beginner") == generate_fallback_projects(
        "UX Designer", "beginner"
    )


def test_fallback_projects_interpolate_title():
    first, second, third = generate_fallback_projects("UX Designer", "beginner")
    assert first.title == "UX Designer Foundation Project"
    assert second.title == "UX Designer Practical Application"
    assert third.title == "UX Designer Challenge Project"
    assert first.objectives[0] == "Learn core ux designer concepts"
    assert second.tools[0] == "UX Designer development tools"
    assert "professional ux designer work" in third.real_world_relevance


def test_fallback_projects_are_fully_shaped():
    for project in generate_fallback_projects("UX Designer", "advanced"):
        data = project.to_json()
        assert len(data["objectives"]) == 3
        assert len(data["steps"]) == 5
        assert data["tools"]
        assert data["timeCommitment"] and data["realWorldRelevance"]


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ValueError):
        generate_fallback_projects("UX Designer", "expert")
