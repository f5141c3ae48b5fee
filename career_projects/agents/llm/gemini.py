from .openai_compat import OpenAICompatClient

class GeminiOpenAIClient(OpenAICompatClient):
    """Gemini through its OpenAI-compatible endpoint."""

    def __init__(self, * , api_key: str, base_url: str, model: str,
    thinking_budget: int | None = 0, timeout: float = 120):
        super().__init__(api_key=api_key, base_url=base_url, model=model, timeout=timeout)
        self.thinking_budget = thinking_budget

    def extra_body(self) -> dict | None:
        if self.thinking_budget is None:
            return None
        # Google-specific options travel under extra_body.google
        return {
            "extra_body": {
                "google": {"thinking_config": {"thinking_budget": self.thinking_budget}}
            }
        }
