from __future__ import annotations

import base64
import os
import re
from pathlib import Path, PurePosixPath
from typing import Tuple
from urllib.parse import unquote, urlsplit, urlunsplit

import requests

from common.errors import InvalidImportError
from common.logger import get_logger
from realm_import.document_models import RawDoc

log = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_local(path: Path) -> RawDoc:
    """Read a local realm file as UTF-8 text."""
    try:
        text = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidImportError(f"Cannot read import file {path}: {e}") from e
    return RawDoc(filename=Path(path).name, text=text)


def remote_filename(url: str) -> str:
    """Last path segment of a URL, e.g. realm.json for http://host/a/realm.json."""
    return PurePosixPath(unquote(urlsplit(url).path)).name


def basic_auth_header(userinfo: str) -> str:
    token = base64.b64encode(userinfo.encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def split_userinfo(url: str) -> Tuple[str, str | None]:
    """
    Strip `user:pass@` from a URL.
    Returns the bare URL and the percent-decoded user-info (None when absent).
    """
    parts = urlsplit(url)
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    if not sep:
        return url, None
    bare = urlunsplit(parts._replace(netloc=hostport))
    return bare, unquote(userinfo)


def _join_lines(text: str) -> str:
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return os.linesep.join(lines)


def _fetch(
    url: str, timeout: float | None = None, user_agent: str | None = None
) -> requests.Response:
    """Single GET, no retries. Credentials embedded in the URL become a Basic auth header."""
    bare_url, userinfo = split_userinfo(url)
    headers = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    if userinfo is not None:
        headers["Authorization"] = basic_auth_header(userinfo)

    resp = requests.get(bare_url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp


def read_remote(
    url: str, timeout: float | None = None, user_agent: str | None = None
) -> RawDoc:
    """Fetch a remote realm file; lines are re-joined with the platform separator."""
    try:
        resp = _fetch(url, timeout=timeout, user_agent=user_agent)
        text = resp.content.decode("utf-8")
    except (requests.RequestException, UnicodeDecodeError) as e:
        # never echo credentials back into logs or error messages
        safe_url, _ = split_userinfo(url)
        raise InvalidImportError(f"Cannot fetch import from {safe_url}: {e}") from e

    log.info("Fetched %d bytes from %s", len(resp.content), split_userinfo(url)[0])
    return RawDoc(filename=remote_filename(url), text=_join_lines(text))
