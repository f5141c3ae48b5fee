import pytest
from fastapi.testclient import TestClient

from career_projects.agents.llm.base import LLMClient
from career_projects.db.documents import DocumentNotFound, DocumentStore
from career_projects.deps import get_document_store, get_llm_factory
from career_projects.main import app


class FakeLLM(LLMClient):
    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_text(self, *, system, user, temperature=0.2, max_tokens=None):
        self.calls.append(
            {"system": system, "user": user, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.response


class FakeStore(DocumentStore):
    def __init__(self, documents=None, error: Exception | None = None):
        self.documents = documents or {}
        self.error = error
        self.calls = []

    def get_document(self, database_id, collection_id, document_id):
        self.calls.append((database_id, collection_id, document_id))
        if self.error is not None:
            raise self.error
        if document_id not in self.documents:
            raise DocumentNotFound(document_id)
        return self.documents[document_id]


def make_project(title="Build a Dashboard", **overrides):
    project = {
        "title": title,
        "objectives": ["Learn A", "Learn B", "Learn C"],
        "steps": ["One", "Two", "Three", "Four", "Five"],
        "tools": ["Python"],
        "timeCommitment": "2 weeks",
        "realWorldRelevance": "Used daily by analysts",
    }
    project.update(overrides)
    return project


@pytest.fixture
def store():
    return FakeStore({"cp-1": {"$id": "cp-1", "title": "Data Analyst", "category": "data"}})


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def client(store, llm):
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_llm_factory] = lambda: (lambda: llm)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
