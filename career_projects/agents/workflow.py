# career_projects/agents/workflow.py
import logging

from career_projects.agents.fallback import generate_fallback_projects
from career_projects.agents.llm.base import LLMClient
from career_projects.agents.normalize import normalize_projects, validate_projects
from career_projects.agents.recovery import extract_project_array
from career_projects.agents.schemas import Difficulty, ProjectSet
from career_projects.settings import settings

logger = logging.getLogger(__name__)


SYSTEM_PROJECT_PLANNER = """You design hands-on portfolio projects for people entering a career.

CRITICAL REQUIREMENTS:
1. Return ONLY a valid JSON array - no additional text, explanations, or formatting
2. Each project must have EXACTLY these fields: title, objectives, steps, tools, timeCommitment, realWorldRelevance
3. objectives: array of exactly 3 strings
4. steps: array of exactly 5 strings
5. tools: array of strings
6. Ensure all strings are properly escaped (use \\" for quotes, \\n for newlines)
7. No trailing commas in arrays or objects
"""


def build_projects_prompt(career_title: str, difficulty: Difficulty | str) -> str:
    level = Difficulty(difficulty).value
    return f"""
Generate exactly 3 {level} projects for "{career_title}" career path.

Example format:
[
  {{
    "title": "Project Name",
    "objectives": ["Goal 1", "Goal 2", "Goal 3"],
    "steps": ["Step 1", "Step 2", "Step 3", "Step 4", "Step 5"],
    "tools": ["Tool 1", "Tool 2"],
    "timeCommitment": "2-3 weeks",
    "realWorldRelevance": "Explanation of relevance"
  }}
]

Generate for {career_title} at {level} level:
""".strip()


def fallback_project_set(career_title: str, difficulty: Difficulty | str,
warning: str | None = None) -> ProjectSet:
    return ProjectSet(
        projects=generate_fallback_projects(career_title, difficulty),
        used_fallback=True,
        warning=warning,
    )


def generate_projects(llm: LLMClient, career_title: str, difficulty: Difficulty | str) -> ProjectSet:
    """
    Ask the model for projects once and always return exactly three.

    Any failure of the model call or of recovering usable projects from its
    output falls back to the template projects (used_fallback=True). A partial
    result is padded with template projects without setting the flag.
    """
    prompt = build_projects_prompt(career_title, difficulty)

    try:
        logger.info("Generating projects for %s (%s)", career_title, Difficulty(difficulty).value)
        raw_text = llm.generate_text(
            system=SYSTEM_PROJECT_PLANNER,
            user=prompt,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
        )
        logger.info("Received model response (%d chars)", len(raw_text or ""))

        projects = validate_projects(extract_project_array(raw_text))
        logger.info("Parsed and validated %d project(s)", len(projects))
    except Exception as e:
        logger.warning("AI generation failed: %s: %s, using fallback", type(e).__name__, e)
        return fallback_project_set(career_title, difficulty)

    return ProjectSet(
        projects=normalize_projects(projects, career_title, difficulty),
        used_fallback=False,
    )
