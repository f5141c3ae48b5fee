## Document store access (Appwrite REST API)
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class DocumentStoreError(Exception):
    pass


class DocumentNotFound(DocumentStoreError):
    pass


class DocumentStore(ABC):
    @abstractmethod
    def get_document(self, database_id: str, collection_id: str, document_id: str) -> dict[str, Any]:
        raise NotImplementedError


class AppwriteDocumentStore(DocumentStore):
    def __init__(self, *, endpoint: str, project_id: str, api_key: str,
    timeout: float = 30.0, transport: httpx.BaseTransport | None = None):
        self.endpoint = endpoint.rstrip("/")
        self.project_id = project_id
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def get_document(self, database_id: str, collection_id: str, document_id: str) -> dict[str, Any]:
        url = (
            f"{self.endpoint}/databases/{database_id}"
            f"/collections/{collection_id}/documents/{document_id}"
        )
        headers = {
            "Content-Type": "application/json",
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-Key": self.api_key,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.get(url, headers=headers)
                if r.status_code == 404:
                    raise DocumentNotFound(f"Document {document_id} not found in {collection_id}")
                r.raise_for_status()
                doc = r.json()
        except httpx.HTTPError as e:
            raise DocumentStoreError(f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise DocumentStoreError(f"Invalid document body for {document_id}: {e}") from e

        if not isinstance(doc, dict):
            raise DocumentStoreError(f"Expected a document object for {document_id}, got {type(doc).__name__}")
        return doc
