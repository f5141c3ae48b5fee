from career_projects.settings import settings
from career_projects.agents.llm.base import LLMClient
from career_projects.agents.llm.gemini import GeminiOpenAIClient
from career_projects.agents.llm.ollama import OllamaOpenAIClient
from career_projects.agents.llm.openai_compat import OpenAICompatClient

def get_llm_client() -> LLMClient:
    provider = settings.LLM_PROVIDER.lower()

    if provider == "gemini":
        return GeminiOpenAIClient(
            api_key=settings.GEMINI_API_KEY,
            base_url=settings.GEMINI_BASE_URL,
            model=settings.GEMINI_MODEL,
            thinking_budget=settings.GEMINI_THINKING_BUDGET,
        )

    if provider == "groq":
        return OpenAICompatClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
        )

    if provider == "ollama":
        return OllamaOpenAIClient(
            base_url = settings.ollama_base_url,
            model = settings.ollama_model,
        )

    raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")
