import httpx
from career_projects.agents.llm.base import LLMClient

class OllamaOpenAIClient(LLMClient):
    def __init__(self, base_url: str, model: str, timeout: float = 120,
    transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2,
    max_tokens: int | None = None) -> str:
        # Ollama OpenAI-compatible endpoint
        # POST {base_url}/chat/completions with OpenAI message format

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        headers = {
            "Content-Type": "application/json",
            #OpenAI-compatible clients require an api key field; Ollama ignores it
            "Authorization": "Bearer ollama",
        }

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            r = client.post(url, json=payload, headers=headers)
            r.raise_for_status()
            data = r.json()
        
        return data["choices"][0]["message"]["content"] or ""
