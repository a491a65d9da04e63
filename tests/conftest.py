"""Shared fixtures: API-shaped document builder and an in-memory document service."""

from __future__ import annotations

import pytest

from data_model import StructuredDocument


class DocBuilder:
    """
    Builds documents.get JSON with consistent indices.

    Body content starts with the implicit section break [0, 1); every
    paragraph gets its terminating newline appended to the last run.
    """

    def __init__(self, title: str = "Test doc", document_id: str = "doc-1") -> None:
        self.title = title
        self.document_id = document_id
        self.cursor = 1
        self.content: list[dict] = [{"endIndex": 1, "sectionBreak": {}}]
        self.headers: dict = {}
        self.footers: dict = {}

    def _paragraph_json(self, runs, style: str | None, start: int) -> tuple[dict, int]:
        elements = []
        runs = list(runs) or [""]
        cursor = start
        for i, run in enumerate(runs):
            text, text_style = (run, {}) if isinstance(run, str) else run
            if i == len(runs) - 1:
                text += "\n"
            elements.append({
                "startIndex": cursor,
                "endIndex": cursor + len(text),
                "textRun": {"content": text, "textStyle": text_style},
            })
            cursor += len(text)
        paragraph: dict = {"elements": elements}
        if style:
            paragraph["paragraphStyle"] = {"namedStyleType": style}
        return paragraph, cursor

    def paragraph(self, *runs, style: str | None = None) -> "DocBuilder":
        start = self.cursor
        paragraph, end = self._paragraph_json(runs, style, start)
        self.content.append({"startIndex": start, "endIndex": end, "paragraph": paragraph})
        self.cursor = end
        return self

    def heading(self, text: str, level: int) -> "DocBuilder":
        return self.paragraph(text, style=f"HEADING_{level}")

    def table(self, rows: list[list[str]]) -> "DocBuilder":
        start = self.cursor
        cursor = start + 1
        table_rows = []
        for row in rows:
            cursor += 1
            cells = []
            for text in row:
                cell_start = cursor
                cursor += 1
                paragraph, end = self._paragraph_json([text], None, cursor)
                cells.append({
                    "startIndex": cell_start,
                    "endIndex": end,
                    "content": [{"startIndex": cursor, "endIndex": end, "paragraph": paragraph}],
                })
                cursor = end
            table_rows.append({"tableCells": cells})
        end = cursor + 1
        self.content.append({
            "startIndex": start,
            "endIndex": end,
            "table": {"rows": len(rows), "columns": len(rows[0]) if rows else 0, "tableRows": table_rows},
        })
        self.cursor = end
        return self

    def header(self, header_id: str) -> "DocBuilder":
        self.headers[header_id] = {"headerId": header_id, "content": []}
        return self

    def footer(self, footer_id: str) -> "DocBuilder":
        self.footers[footer_id] = {"footerId": footer_id, "content": []}
        return self

    def json(self) -> dict:
        data = {
            "documentId": self.document_id,
            "title": self.title,
            "revisionId": "rev-1",
            "suggestionsViewMode": "SUGGESTIONS_INLINE",
            "body": {"content": self.content},
        }
        if self.headers:
            data["headers"] = self.headers
        if self.footers:
            data["footers"] = self.footers
        return data

    def build(self) -> StructuredDocument:
        return StructuredDocument.from_api(self.json())


class FakeDocsService:
    """In-memory DocumentService recording every batch it receives."""

    def __init__(self, doc_json: dict | None = None) -> None:
        self.doc_json = doc_json or DocBuilder().json()
        self.fetched: list[str] = []
        self.batches: list[tuple[str, list]] = []
        self.replies: list[list[dict]] = []
        self.created: list[str] = []
        self.copies: list[tuple[str, str, str | None]] = []
        self.moves: list[tuple[str, str]] = []

    def get_document(self, document_id: str) -> StructuredDocument:
        self.fetched.append(document_id)
        return StructuredDocument.from_api(self.doc_json)

    def batch_update(self, document_id: str, operations: list) -> list[dict]:
        self.batches.append((document_id, list(operations)))
        if self.replies:
            return self.replies.pop(0)
        return [{} for _ in operations]

    def create_document(self, title: str) -> StructuredDocument:
        self.created.append(title)
        return StructuredDocument(document_id="new-doc", title=title)

    def copy_document(self, document_id: str, title: str, folder_id: str | None = None) -> dict:
        self.copies.append((document_id, title, folder_id))
        return {"id": "copy-doc", "name": title}

    def move_to_folder(self, file_id: str, folder_id: str) -> dict:
        self.moves.append((file_id, folder_id))
        return {"id": file_id}


@pytest.fixture
def builder() -> DocBuilder:
    return DocBuilder()


@pytest.fixture
def sample_doc() -> DocBuilder:
    """Title, two sections (one nested), a plain paragraph and a 2x2 table."""
    return (
        DocBuilder(title="Handbook")
        .heading("Intro", 1)
        .paragraph("Welcome to the team.")
        .heading("intro details", 2)
        .paragraph("More details here.")
        .heading("Tools", 1)
        .table([["Name", "Use"], ["git", "vcs"]])
        .paragraph("Last line.")
    )


@pytest.fixture
def fake_service(monkeypatch, sample_doc) -> FakeDocsService:
    """Replaces the CLI's client factory with an in-memory service."""
    service = FakeDocsService(sample_doc.json())
    monkeypatch.setattr("gdm._client.get_client", lambda: service)
    return service
