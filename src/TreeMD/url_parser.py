"""Resolve document URLs to directly downloadable addresses."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse


class URLParseError(Exception):
    """Raised when a URL cannot be parsed."""


@dataclass
class DocumentSource:
    raw_url: str
    host: str
    display_name: str
    is_github: bool = False


GITHUB_HOST = "github.com"
RAW_GITHUB_HOST = "raw.githubusercontent.com"


def parse_document_url(url: str) -> DocumentSource:
    """Parse a Markdown document URL and return where to download it from.

    Supported formats:
      - https://github.com/owner/repo/blob/branch/path/README.md
      - https://raw.githubusercontent.com/owner/repo/branch/path/README.md
      - any other http(s) URL, fetched as-is
    """
    url = url.strip()
    if not url:
        raise URLParseError("URL is empty.")

    parsed = urlparse(url)
    if not parsed.scheme:
        raise URLParseError(f"Invalid URL (no scheme): {url}")
    if parsed.scheme not in ("http", "https"):
        raise URLParseError(f"Unsupported scheme: {parsed.scheme}")

    host = parsed.hostname or ""
    if not host:
        raise URLParseError(f"Invalid URL (no host): {url}")
    path = parsed.path.strip("/")

    if host == GITHUB_HOST:
        return _parse_github_blob(path, url)

    display_name = path.rsplit("/", maxsplit=1)[-1] or host
    return DocumentSource(
        raw_url=url,
        host=host,
        display_name=display_name,
        is_github=host == RAW_GITHUB_HOST,
    )


def _parse_github_blob(path: str, raw_url: str) -> DocumentSource:
    """Parse a GitHub URL path: owner/repo/blob/ref/path/to/file"""
    parts = path.split("/")
    if len(parts) < 5 or parts[2] != "blob":
        raise URLParseError(
            f"GitHub URL must point to a file (owner/repo/blob/ref/path): {raw_url}"
        )

    owner, repo, ref = parts[0], parts[1], parts[3]
    file_path = "/".join(parts[4:])

    return DocumentSource(
        raw_url=f"https://{RAW_GITHUB_HOST}/{owner}/{repo}/{ref}/{file_path}",
        host=RAW_GITHUB_HOST,
        display_name=parts[-1],
        is_github=True,
    )
