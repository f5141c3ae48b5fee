## Dependency providers; tests replace them through app.dependency_overrides
from typing import Callable

from career_projects.agents.llm.base import LLMClient
from career_projects.agents.llm.client import get_llm_client
from career_projects.db.documents import AppwriteDocumentStore, DocumentStore
from career_projects.settings import settings


def get_document_store() -> DocumentStore:
    return AppwriteDocumentStore(
        endpoint=settings.appwrite_endpoint,
        project_id=settings.appwrite_project_id,
        api_key=settings.appwrite_api_key,
        timeout=settings.http_timeout_seconds,
    )


def get_llm_factory() -> Callable[[], LLMClient]:
    # The client is built inside the generation step, so a broken provider
    # setting ends in the fallback projects rather than a failed dependency
    return get_llm_client
