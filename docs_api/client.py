"""
docs_api/client.py — Google Docs / Drive REST client.

Environment variables:
  GDM_DOCS_ENDPOINT    base URL of the Docs API  (default https://docs.googleapis.com/v1)
  GDM_DRIVE_ENDPOINT   base URL of the Drive API (default https://www.googleapis.com/drive/v3)

One synchronous HTTP call per method; no retries. Any non-2xx response
raises DocsApiError carrying the status and the service's message.

Public API:
  DocumentService                  Protocol consumed by the CLI
  DocsClient(token, ...)           implementation over requests.Session
"""

from __future__ import annotations

import logging
import os
from typing import Any, Protocol

import requests

from data_model import DocsApiError, EditOperation, StructuredDocument, to_requests

log = logging.getLogger(__name__)

DEFAULT_DOCS_ENDPOINT  = "https://docs.googleapis.com/v1"
DEFAULT_DRIVE_ENDPOINT = "https://www.googleapis.com/drive/v3"
DEFAULT_TIMEOUT        = 30


class DocumentService(Protocol):
    def get_document(self, document_id: str) -> StructuredDocument:
        ...

    def batch_update(self, document_id: str, operations: list[EditOperation]) -> list[dict]:
        ...

    def create_document(self, title: str) -> StructuredDocument:
        ...


class DocsClient:
    """
    Thin client over the Docs and Drive REST APIs.

    Usage:
        client = DocsClient(get_access_token())
        doc    = client.get_document(doc_id)
        client.batch_update(doc_id, ops)
    """

    def __init__(
        self,
        token: str,
        *,
        docs_endpoint: str | None = None,
        drive_endpoint: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.docs_endpoint = (
            docs_endpoint or os.getenv("GDM_DOCS_ENDPOINT") or DEFAULT_DOCS_ENDPOINT
        ).rstrip("/")
        self.drive_endpoint = (
            drive_endpoint or os.getenv("GDM_DRIVE_ENDPOINT") or DEFAULT_DRIVE_ENDPOINT
        ).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["Authorization"] = f"Bearer {token}"

    # -- Docs ---------------------------------------------------------------

    def get_document_json(self, document_id: str) -> dict[str, Any]:
        return self._request("GET", f"{self.docs_endpoint}/documents/{document_id}")

    def get_document(self, document_id: str) -> StructuredDocument:
        return StructuredDocument.from_api(self.get_document_json(document_id))

    def batch_update(self, document_id: str, operations: list[EditOperation]) -> list[dict]:
        """Sends the whole batch in one call and returns the per-request replies."""
        if not operations:
            return []
        body = {"requests": to_requests(operations)}
        data = self._request(
            "POST", f"{self.docs_endpoint}/documents/{document_id}:batchUpdate", json=body,
        )
        return data.get("replies") or []

    def create_document(self, title: str) -> StructuredDocument:
        data = self._request("POST", f"{self.docs_endpoint}/documents", json={"title": title})
        return StructuredDocument.from_api(data)

    # -- Drive --------------------------------------------------------------

    def copy_document(self, document_id: str, title: str, folder_id: str | None = None) -> dict:
        """Copies a document; returns the Drive file resource (id, name)."""
        meta: dict[str, Any] = {"name": title}
        if folder_id:
            meta["parents"] = [folder_id]
        return self._request(
            "POST", f"{self.drive_endpoint}/files/{document_id}/copy", json=meta,
        )

    def move_to_folder(self, file_id: str, folder_id: str) -> dict:
        return self._request(
            "PATCH",
            f"{self.drive_endpoint}/files/{file_id}",
            params={"addParents": folder_id},
            json={},
        )

    # -- transport ----------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        log.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise DocsApiError(0, str(e)) from e
        if not resp.ok:
            raise DocsApiError(resp.status_code, _error_message(resp))
        if not resp.content:
            return {}
        return resp.json()


def _error_message(resp: requests.Response) -> str:
    """Extracts error.message from a Google API error body, falling back to the raw text."""
    try:
        payload = resp.json()
    except ValueError:
        return resp.text or resp.reason or ""
    err = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(err, dict) and err.get("message"):
        return err["message"]
    return resp.text
