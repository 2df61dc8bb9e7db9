"""
URL helpers for building feed links and proxied enclosure URLs.
"""
from typing import Union
from urllib.parse import quote

import httpx

from ..core.errors import InvalidUrlError

URLTypes = Union[str, httpx.URL]

AUDIO_PATH = "/audio"

def _to_url(value: URLTypes) -> httpx.URL:
    return value if isinstance(value, httpx.URL) else httpx.URL(value)

def parse_absolute_url(value: str) -> httpx.URL:
    """
    Parse a string that must hold an absolute URL.

    Args:
        value: Candidate URL

    Returns:
        The parsed URL

    Raises:
        InvalidUrlError: If the value is malformed, relative or has no host
    """
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as e:
        raise InvalidUrlError(str(e)) from e

    if not url.scheme:
        raise InvalidUrlError("relative URL without a base")
    if url.scheme in ("http", "https") and not url.host:
        raise InvalidUrlError("empty host")
    return url

def absolutize(base: URLTypes, path: str) -> str:
    """
    Replace the path of base with path and return the full URL.

    This overwrites the base path instead of resolving against it:
    absolutize("https://host/a/b", "/c/d") gives "https://host/c/d".
    """
    if not path.startswith("/"):
        path = f"/{path}"
    return str(_to_url(base).copy_with(path=path))

def join_path(base: URLTypes, subpath: str) -> httpx.URL:
    """
    Append subpath to the path of base with exactly one slash between them.

    One trailing slash is dropped from the base path and one leading slash
    from subpath before joining.
    """
    url = _to_url(base)
    base_path = url.path
    if base_path.endswith("/"):
        base_path = base_path[:-1]
    if subpath.startswith("/"):
        subpath = subpath[1:]
    return url.copy_with(path=f"{base_path}/{subpath}")

def build_proxied_audio_url(public_base: URLTypes, raw_audio_url: str) -> str:
    """
    Build the enclosure URL that routes an audio file through /audio.

    The raw URL becomes the ``url`` query parameter. Characters that would
    break the query string (``&``, ``?``, ``=``, ``#``, ``+``, ``%`` and
    anything outside the unreserved set) are percent-encoded, while ``:`` and
    ``/`` are left alone so an ordinary URL reads unchanged:
    https://feeds.example/audio?url=https://cdn.example/ep1.mp3
    """
    url = join_path(public_base, AUDIO_PATH)
    query = f"url={quote(raw_audio_url, safe=':/')}"
    return str(url.copy_with(query=query.encode("ascii")))
