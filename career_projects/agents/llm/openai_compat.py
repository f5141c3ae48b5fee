from openai import OpenAI
from .base import LLMClient

class OpenAICompatClient(LLMClient):
    """Any provider exposing the OpenAI chat completions API (Groq, Gemini)."""

    def __init__(self, * , api_key: str, base_url: str, model: str, timeout: float = 120):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model

    def extra_body(self) -> dict | None:
        return None

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2,
    max_tokens: int | None = None) -> str:
        kwargs = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        extra = self.extra_body()
        if extra:
            kwargs["extra_body"] = extra

        resp = self.client.chat.completions.create(
            model=self.model,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            **kwargs,
        )
        return (resp.choices[0].message.content or "").strip()
