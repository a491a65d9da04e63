"""Document service client for CLI commands — configured through environment variables."""

from __future__ import annotations

from docs_api import DocsClient, get_access_token


def get_client() -> DocsClient:
    return DocsClient(get_access_token())
