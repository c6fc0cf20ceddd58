"""Download Markdown documents over HTTP."""

from __future__ import annotations

import logging

import requests

from TreeMD.url_parser import DocumentSource

logger = logging.getLogger(__name__)

USER_AGENT = "TreeMD/1.0"
TIMEOUT = 30


class FetchError(Exception):
    """Raised when a document cannot be downloaded."""


def create_session(token: str | None = None) -> requests.Session:
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    if token:
        session.headers["Authorization"] = f"Bearer {token}"
    return session


def fetch_document(
    source: DocumentSource,
    token: str | None = None,
    session: requests.Session | None = None,
) -> str:
    """Fetch the text of *source*.

    The token is only sent to GitHub hosts.
    """
    if session is None:
        session = create_session(token if source.is_github else None)

    logger.info("Fetching %s", source.raw_url)
    try:
        resp = session.get(source.raw_url, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise FetchError(f"Could not reach {source.host}: {exc}") from exc

    if resp.status_code == 404:
        raise FetchError(
            "Document not found. Check the URL, or provide a token for private repos."
        )
    if resp.status_code in (401, 403):
        raise FetchError("Access denied. Check your token and its permissions.")
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise FetchError(str(exc)) from exc

    # Without an explicit charset requests falls back to ISO-8859-1,
    # which mangles box-drawing characters.
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text
