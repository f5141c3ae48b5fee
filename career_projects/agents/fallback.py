## Deterministic template projects used when the model output is unusable
from career_projects.agents.schemas import Difficulty, ProjectRecord, TIME_COMMITMENTS


def time_commitment_for(difficulty: Difficulty | str) -> str:
    return TIME_COMMITMENTS[Difficulty(difficulty)]


def generate_fallback_projects(career_title: str, difficulty: Difficulty | str) -> list[ProjectRecord]:
    """Always returns the same three projects for a given title and difficulty."""
    duration = time_commitment_for(difficulty)
    lower = career_title.lower()

    return [
        ProjectRecord(
            title=f"{career_title} Foundation Project",
            objectives=[
                f"Learn core {lower} concepts",
                "Build practical experience",
                "Develop problem-solving skills",
            ],
            steps=[
                "Research and plan the project",
                "Set up development environment",
                "Implement core functionality",
                "Test and debug",
                "Document and present results",
            ],
            tools=[f"Industry-standard {lower} tools", "Development environment", "Testing frameworks"],
            time_commitment=duration,
            real_world_relevance=(
                f"This project simulates real-world {lower} scenarios and builds "
                "relevant skills for the industry."
            ),
        ),
        ProjectRecord(
            title=f"{career_title} Practical Application",
            objectives=[
                "Apply theoretical knowledge",
                "Build a portfolio piece",
                "Demonstrate technical skills",
            ],
            steps=[
                "Define project requirements",
                "Create project architecture",
                "Develop and implement solution",
                "Perform quality assurance",
                "Deploy and maintain",
            ],
            tools=[f"{career_title} development tools", "Project management software", "Version control"],
            time_commitment=duration,
            real_world_relevance=f"Provides hands-on experience with real {lower} challenges and workflows.",
        ),
        ProjectRecord(
            title=f"{career_title} Challenge Project",
            objectives=[
                "Solve complex problems",
                "Demonstrate advanced skills",
                "Prepare for career opportunities",
            ],
            steps=[
                "Analyze problem requirements",
                "Design comprehensive solution",
                "Implement with best practices",
                "Optimize and refine",
                "Present and document",
            ],
            tools=[f"Advanced {lower} tools", "Analytics platforms", "Collaboration tools"],
            time_commitment=duration,
            real_world_relevance=f"Mirrors the complexity and requirements of professional {lower} work.",
        ),
    ]
