## Base LLM Client Interface
from abc import ABC, abstractmethod

class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2,
    max_tokens: int | None = None) -> str:
        raise NotImplementedError
