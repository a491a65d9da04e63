"""
docs_api/auth.py — OAuth access token for the Docs and Drive APIs.

Environment variables (also read from a .env file in the working directory):
  GDM_ACCESS_TOKEN      ready-to-use bearer token (skips token.json)
  GDM_CREDENTIALS_DIR   directory with credentials.json + token.json
                        (default: ~/.gdrive, shared with gdrive)

token.json is refreshed in place when it has expired and carries a
refresh_token. Obtaining the first token (browser consent) is left to gdrive
or any other OAuth tool writing the same file.

Public API:
  get_access_token(credentials_dir) -> str
"""

from __future__ import annotations

import json
import logging
import os
import pathlib
import re
from datetime import datetime, timedelta, timezone

import requests
from dotenv import load_dotenv

from data_model import AuthError

load_dotenv(override=False)

log = logging.getLogger(__name__)

CREDENTIALS_FILE = "credentials.json"
TOKEN_FILE       = "token.json"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"
_ENV_TOKEN       = "GDM_ACCESS_TOKEN"
_ENV_DIR         = "GDM_CREDENTIALS_DIR"
_TOKEN_FILE_PERM = 0o600
# refresh a little early so the token does not expire mid-command
_EXPIRY_SLACK    = timedelta(seconds=60)
_FRACTION_RE     = re.compile(r"\.(\d+)")


def credentials_dir() -> pathlib.Path:
    return pathlib.Path(os.getenv(_ENV_DIR) or pathlib.Path.home() / ".gdrive")


def get_access_token(cred_dir: pathlib.Path | None = None) -> str:
    """
    Returns a bearer token for the Docs/Drive APIs.

    Raises:
        AuthError: no token available or the refresh was rejected.
    """
    env_token = os.getenv(_ENV_TOKEN)
    if env_token:
        return env_token

    cred_dir = cred_dir or credentials_dir()
    token_path = cred_dir / TOKEN_FILE
    token = _read_json(token_path)
    if token is None:
        raise AuthError(
            f"No OAuth token at {token_path}. "
            f"Authorize once with gdrive (or set {_ENV_TOKEN})."
        )

    if not _is_expired(token):
        return token["access_token"]

    if not token.get("refresh_token"):
        raise AuthError(f"Token in {token_path} has expired and has no refresh_token.")

    client = _read_client_config(cred_dir / CREDENTIALS_FILE)
    token = _refresh(token, client)
    _save_token(token_path, token)
    return token["access_token"]


# ---------------------------------------------------------------------------
# token.json / credentials.json
# ---------------------------------------------------------------------------

def _read_json(path: pathlib.Path) -> dict | None:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as e:
        raise AuthError(f"Unreadable JSON in {path}: {e}") from e


def _read_client_config(path: pathlib.Path) -> dict:
    data = _read_json(path)
    if data is None:
        raise AuthError(f"Unable to read credentials file {path}.")
    # "installed" for desktop clients, "web" for web clients
    client = data.get("installed") or data.get("web") or data
    if not client.get("client_id") or not client.get("client_secret"):
        raise AuthError(f"{path} has no client_id/client_secret.")
    return client


def _parse_expiry(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        # Go writes nanoseconds; fromisoformat handles at most microseconds
        m = _FRACTION_RE.search(value)
        if m:
            value = value[:m.start()] + "." + m.group(1)[:6] + value[m.end():]
        expiry = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if expiry.tzinfo is None:
        expiry = expiry.replace(tzinfo=timezone.utc)
    return expiry


def _is_expired(token: dict) -> bool:
    if not token.get("access_token"):
        return True
    expiry = _parse_expiry(token.get("expiry"))
    if expiry is None:
        return False
    return datetime.now(timezone.utc) + _EXPIRY_SLACK >= expiry


def _refresh(token: dict, client: dict) -> dict:
    log.info("Refreshing expired OAuth token")
    resp = requests.post(
        client.get("token_uri") or DEFAULT_TOKEN_URI,
        data={
            "client_id":     client["client_id"],
            "client_secret": client["client_secret"],
            "refresh_token": token["refresh_token"],
            "grant_type":    "refresh_token",
        },
        timeout=30,
    )
    if not resp.ok:
        raise AuthError(f"Token refresh failed (HTTP {resp.status_code}): {resp.text}")
    payload = resp.json()
    expires_in = int(payload.get("expires_in", 3600))
    return {
        **token,
        "access_token": payload["access_token"],
        "token_type":   payload.get("token_type", token.get("token_type", "Bearer")),
        "expiry":       (datetime.now(timezone.utc) + timedelta(seconds=expires_in)).isoformat(),
    }


def _save_token(path: pathlib.Path, token: dict) -> None:
    try:
        path.write_text(json.dumps(token, indent=2), encoding="utf-8")
        path.chmod(_TOKEN_FILE_PERM)
    except OSError as e:
        # the refreshed token is still valid for this run
        log.warning("Unable to save token to %s: %s", path, e)
