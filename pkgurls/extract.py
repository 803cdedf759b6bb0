# pkgurls/extract.py
"""
Pull URL-like strings out of the known fields of a package.json mapping.

Every field is normalized on its own; a missing or oddly shaped field yields
None and never affects the others.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from .models import ExtractedUrls, UrlObject, coerce_raw_field

_FRAGMENT_RE = re.compile(r"#.*", re.DOTALL)
_GIT_SUFFIX_RE = re.compile(r"\.git\Z")
# "Name <email> (https://example.com)"
_AUTHOR_URL_RE = re.compile(r"\((http.*)\)")
_GIT_PLUS_PREFIX = "git+"


def strip_url_suffixes(url: str) -> str:
    """Drop a `#fragment` and then a trailing `.git`."""
    return _GIT_SUFFIX_RE.sub("", _FRAGMENT_RE.sub("", url))


def _field_url(manifest: Mapping, name: str) -> Optional[str]:
    raw = coerce_raw_field(manifest.get(name))
    if raw is None:
        return None
    url = raw.url if isinstance(raw, UrlObject) else raw
    return strip_url_suffixes(url) or None


def _author_url(manifest: Mapping) -> Optional[str]:
    raw = coerce_raw_field(manifest.get("author"))
    if not isinstance(raw, str):
        return _field_url(manifest, "author")

    match = _AUTHOR_URL_RE.search(raw)
    candidate = match.group(1) if match else raw
    return strip_url_suffixes(candidate) or None


def _repository_url(manifest: Mapping) -> Optional[str]:
    url = _field_url(manifest, "repository")
    if url and url.startswith(_GIT_PLUS_PREFIX):
        url = url[len(_GIT_PLUS_PREFIX) :]
    return url or None


def extract_urls(manifest: Any) -> ExtractedUrls:
    """
    Build the ExtractedUrls record for a parsed package.json.

    Args:
        manifest: The parsed manifest. Anything that is not a mapping is
            treated as an empty manifest.

    Returns:
        ExtractedUrls with homepage, author, repository, bugs and funding set
        to a normalized URL or None. git_remote_url is left unset.
    """
    if not isinstance(manifest, Mapping):
        manifest = {}

    return ExtractedUrls(
        homepage=_field_url(manifest, "homepage"),
        author=_author_url(manifest),
        repository=_repository_url(manifest),
        bugs=_field_url(manifest, "bugs"),
        funding=_field_url(manifest, "funding"),
    )
