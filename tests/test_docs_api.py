"""Tests for docs_api: REST client over a patched requests.Session, and token handling."""

from __future__ import annotations

import json
import stat
from datetime import datetime, timedelta, timezone

import pytest
import requests

from data_model import AuthError, DocsApiError, InsertText
from docs_api import DocsClient, get_access_token
from docs_api import auth


def _response(status: int, payload=None, text: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Error"
    resp._content = json.dumps(payload).encode() if payload is not None else text.encode()
    return resp


@pytest.fixture
def http(monkeypatch):
    """Records every Session.request call and answers from a queue."""
    calls: list[dict] = []
    answers: list = []

    def fake_request(self, method, url, **kwargs):
        calls.append({"method": method, "url": url, "headers": dict(self.headers), **kwargs})
        answer = answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    monkeypatch.setattr(requests.Session, "request", fake_request)
    monkeypatch.delenv("GDM_DOCS_ENDPOINT", raising=False)
    monkeypatch.delenv("GDM_DRIVE_ENDPOINT", raising=False)
    return calls, answers


class TestDocsClient:

    def test_get_document(self, http, sample_doc):
        calls, answers = http
        answers.append(_response(200, sample_doc.json()))
        doc = DocsClient("tok").get_document("doc-1")
        assert doc.title == "Handbook"
        assert calls[0]["method"] == "GET"
        assert calls[0]["url"] == "https://docs.googleapis.com/v1/documents/doc-1"
        assert calls[0]["headers"]["Authorization"] == "Bearer tok"
        assert calls[0]["timeout"] == 30

    def test_batch_update(self, http):
        calls, answers = http
        answers.append(_response(200, {"documentId": "doc-1", "replies": [{}]}))
        replies = DocsClient("tok").batch_update("doc-1", [InsertText(1, "hi")])
        assert replies == [{}]
        assert calls[0]["url"].endswith("/documents/doc-1:batchUpdate")
        assert calls[0]["json"] == {
            "requests": [{"insertText": {"location": {"index": 1}, "text": "hi"}}]
        }

    def test_empty_batch_is_not_sent(self, http):
        calls, _ = http
        assert DocsClient("tok").batch_update("doc-1", []) == []
        assert calls == []

    def test_create_document(self, http):
        calls, answers = http
        answers.append(_response(200, {"documentId": "new", "title": "Notes"}))
        doc = DocsClient("tok").create_document("Notes")
        assert (doc.document_id, doc.title) == ("new", "Notes")
        assert calls[0]["json"] == {"title": "Notes"}

    def test_copy_into_folder(self, http):
        calls, answers = http
        answers.append(_response(200, {"id": "copy", "name": "Copy"}))
        copied = DocsClient("tok").copy_document("src", "Copy", "folder-1")
        assert copied["id"] == "copy"
        assert calls[0]["url"] == "https://www.googleapis.com/drive/v3/files/src/copy"
        assert calls[0]["json"] == {"name": "Copy", "parents": ["folder-1"]}

    def test_move_to_folder(self, http):
        calls, answers = http
        answers.append(_response(200, {"id": "doc-1"}))
        DocsClient("tok").move_to_folder("doc-1", "folder-1")
        assert calls[0]["method"] == "PATCH"
        assert calls[0]["params"] == {"addParents": "folder-1"}

    def test_endpoint_from_environment(self, http, monkeypatch):
        calls, answers = http
        monkeypatch.setenv("GDM_DOCS_ENDPOINT", "http://localhost:8080/v1/")
        answers.append(_response(200, {"documentId": "x"}))
        DocsClient("tok").get_document("x")
        assert calls[0]["url"] == "http://localhost:8080/v1/documents/x"


class TestDocsClientErrors:
    """Non-2xx responses and transport failures become DocsApiError."""

    def test_google_error_body(self, http):
        _, answers = http
        answers.append(_response(400, {"error": {"code": 400, "message": "Invalid requests[0]"}}))
        with pytest.raises(DocsApiError) as exc:
            DocsClient("tok").batch_update("doc-1", [InsertText(999, "x")])
        assert exc.value.status == 400
        assert str(exc.value) == "HTTP 400: Invalid requests[0]"

    def test_plain_text_body(self, http):
        _, answers = http
        answers.append(_response(502, text="Bad gateway"))
        with pytest.raises(DocsApiError, match="HTTP 502: Bad gateway"):
            DocsClient("tok").get_document("doc-1")

    def test_connection_error(self, http):
        _, answers = http
        answers.append(requests.ConnectionError("connection refused"))
        with pytest.raises(DocsApiError) as exc:
            DocsClient("tok").get_document("doc-1")
        assert exc.value.status == 0


# ---------------------------------------------------------------------------
# auth
# ---------------------------------------------------------------------------

def _write_token(directory, **fields):
    path = directory / "token.json"
    path.write_text(json.dumps(fields), encoding="utf-8")
    return path


def _in(seconds: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(seconds=seconds)).isoformat()


@pytest.fixture
def no_env_token(monkeypatch):
    monkeypatch.delenv("GDM_ACCESS_TOKEN", raising=False)


class TestAccessToken:

    def test_environment_token_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GDM_ACCESS_TOKEN", "from-env")
        assert get_access_token(tmp_path) == "from-env"

    def test_missing_token_file(self, no_env_token, tmp_path):
        with pytest.raises(AuthError, match="No OAuth token"):
            get_access_token(tmp_path)

    def test_valid_token(self, no_env_token, tmp_path):
        _write_token(tmp_path, access_token="abc", expiry=_in(3600))
        assert get_access_token(tmp_path) == "abc"

    def test_token_without_expiry(self, no_env_token, tmp_path):
        _write_token(tmp_path, access_token="abc")
        assert get_access_token(tmp_path) == "abc"

    def test_credentials_dir_from_environment(self, no_env_token, monkeypatch, tmp_path):
        monkeypatch.setenv("GDM_CREDENTIALS_DIR", str(tmp_path))
        _write_token(tmp_path, access_token="abc")
        assert get_access_token() == "abc"

    def test_expired_without_refresh_token(self, no_env_token, tmp_path):
        _write_token(tmp_path, access_token="old", expiry=_in(-60))
        with pytest.raises(AuthError, match="no refresh_token"):
            get_access_token(tmp_path)

    def test_refresh(self, no_env_token, monkeypatch, tmp_path):
        token_path = _write_token(tmp_path, access_token="old", refresh_token="r1", expiry=_in(-60))
        (tmp_path / "credentials.json").write_text(json.dumps({
            "installed": {"client_id": "id", "client_secret": "secret", "token_uri": "https://oauth.test/token"},
        }))
        posted = []

        def fake_post(url, data=None, timeout=None):
            posted.append((url, data))
            return _response(200, {"access_token": "fresh", "expires_in": 3600, "token_type": "Bearer"})

        monkeypatch.setattr(auth.requests, "post", fake_post)

        assert get_access_token(tmp_path) == "fresh"
        assert posted[0][0] == "https://oauth.test/token"
        assert posted[0][1]["grant_type"] == "refresh_token"
        assert posted[0][1]["refresh_token"] == "r1"

        saved = json.loads(token_path.read_text())
        assert saved["access_token"] == "fresh"
        assert saved["refresh_token"] == "r1"
        assert stat.S_IMODE(token_path.stat().st_mode) == 0o600

    def test_refresh_rejected(self, no_env_token, monkeypatch, tmp_path):
        _write_token(tmp_path, access_token="old", refresh_token="r1", expiry=_in(-60))
        (tmp_path / "credentials.json").write_text(json.dumps({"client_id": "id", "client_secret": "s"}))
        monkeypatch.setattr(auth.requests, "post", lambda *a, **kw: _response(400, {"error": "invalid_grant"}))
        with pytest.raises(AuthError, match="Token refresh failed"):
            get_access_token(tmp_path)


class TestExpiryParsing:

    def test_nanosecond_fraction(self):
        parsed = auth._parse_expiry("2099-01-01T00:00:00.123456789+01:00")
        assert parsed.microsecond == 123456
        assert parsed.utcoffset() == timedelta(hours=1)

    def test_zulu(self):
        assert auth._parse_expiry("2020-01-01T00:00:00Z").tzinfo is not None

    def test_garbage(self):
        assert auth._parse_expiry("not a date") is None
