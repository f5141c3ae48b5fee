import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from career_projects.agents.llm import client as client_module
from career_projects.agents.llm.client import get_llm_client
from career_projects.agents.llm.gemini import GeminiOpenAIClient
from career_projects.agents.llm.ollama import OllamaOpenAIClient
from career_projects.agents.llm.openai_compat import OpenAICompatClient


def completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def test_openai_compat_client_sends_chat_completion():
    llm = OpenAICompatClient(api_key="k", base_url="https://example.test/v1", model="m")
    llm.client = MagicMock()
    llm.client.chat.completions.create.return_value = completion("  [] \n")

    assert llm.generate_text(system="sys", user="usr", temperature=0.7, max_tokens=3000) == "[]"

    kwargs = llm.client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "m"
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 3000
    assert kwargs["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "usr"},
    ]
    assert "extra_body" not in kwargs


def test_gemini_client_passes_thinking_budget():
    llm = GeminiOpenAIClient(api_key="k", base_url="https://example.test/v1", model="gemini-2.0-flash")
    llm.client = MagicMock()
    llm.client.chat.completions.create.return_value = completion(None)

    assert llm.generate_text(system="s", user="u") == ""

    kwargs = llm.client.chat.completions.create.call_args.kwargs
    assert kwargs["extra_body"] == {
        "extra_body": {"google": {"thinking_config": {"thinking_budget": 0}}}
    }
    assert "max_tokens" not in kwargs


def test_gemini_client_can_omit_thinking_config():
    llm = GeminiOpenAIClient(api_key="k", base_url="https://example.test/v1", model="g", thinking_budget=None)
    assert llm.extra_body() is None


def test_ollama_client_posts_chat_completion():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["payload"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "[1]"}}]})

    llm = OllamaOpenAIClient("http://ollama.test/v1/", "llama3.1", transport=httpx.MockTransport(handler))
    assert llm.generate_text(system="s", user="u", temperature=0.5, max_tokens=100) == "[1]"
    assert seen["url"] == "http://ollama.test/v1/chat/completions"
    assert seen["payload"]["model"] == "llama3.1"
    assert seen["payload"]["temperature"] == 0.5
    assert seen["payload"]["max_tokens"] == 100


def test_ollama_client_raises_on_http_error():
    llm = OllamaOpenAIClient(
        "http://ollama.test/v1", "llama3.1", transport=httpx.MockTransport(lambda r: httpx.Response(503))
    )
    with pytest.raises(httpx.HTTPStatusError):
        llm.generate_text(system="s", user="u")


@pytest.mark.parametrize(
    "provider, expected",
    [("gemini", GeminiOpenAIClient), ("GROQ", OpenAICompatClient), ("ollama", OllamaOpenAIClient)],
)
def test_get_llm_client_selects_provider(monkeypatch, provider, expected):
    monkeypatch.setattr(client_module.settings, "LLM_PROVIDER", provider)
    monkeypatch.setattr(client_module.settings, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(client_module.settings, "GROQ_API_KEY", "test-key")
    assert type(get_llm_client()) is expected


def test_get_llm_client_rejects_unknown_provider(monkeypatch):
    monkeypatch.setattr(client_module.settings, "LLM_PROVIDER", "mystery")
    with pytest.raises(ValueError):
        get_llm_client()
