# pkgurls/models.py
"""Data models for pkgurls."""

from collections.abc import Mapping
from typing import Any, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict

from .constants import GIT_REMOTE_URL_KEY, MANIFEST_URL_FIELDS


class UrlObject(BaseModel):
    """Object form of a manifest URL field, e.g. `"bugs": {"url": "..."}`."""

    model_config = ConfigDict(frozen=True)

    url: str


# A manifest URL field is either a bare string or an object carrying `url`
RawUrlField = Union[str, UrlObject]


def coerce_raw_field(value: Any) -> Optional[RawUrlField]:
    """Map an arbitrary JSON value onto RawUrlField, or None for any other shape."""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        url = value.get("url")
        if isinstance(url, str) and url:
            return UrlObject(url=url)
    return None


class ExtractedUrls(BaseModel):
    """Normalized URLs found in the manifest, plus the optional git remote URL."""

    model_config = ConfigDict(frozen=True)

    homepage: Optional[str] = None
    author: Optional[str] = None
    repository: Optional[str] = None
    bugs: Optional[str] = None
    funding: Optional[str] = None
    git_remote_url: Optional[str] = None

    def items(self) -> list[tuple[str, Optional[str]]]:
        """All (key, url) pairs in scan order. The git remote URL comes last."""
        pairs = [(name, getattr(self, name)) for name in MANIFEST_URL_FIELDS]
        pairs.append((GIT_REMOTE_URL_KEY, self.git_remote_url))
        return pairs

    def present(self) -> Iterator[tuple[str, str]]:
        """Yield only the (key, url) pairs that carry a URL."""
        for key, url in self.items():
            if url:
                yield key, url

    def with_git_remote_url(self, url: Optional[str]) -> "ExtractedUrls":
        return self.model_copy(update={"git_remote_url": url or None})


class GitHubUrlInference(BaseModel):
    """GitHub user, repository and Pages URLs guessed from the extracted URLs."""

    model_config = ConfigDict(frozen=True)

    user_name: Optional[str] = None
    repository_name: Optional[str] = None
    github_user_url: Optional[str] = None
    github_repository_url: Optional[str] = None
    has_github_pages: bool = False  # True only when a github.io URL was actually seen
    github_pages_url: Optional[str] = None


class Choice(BaseModel):
    """A labeled entry of the selection prompt. `url` is None for Cancel."""

    model_config = ConfigDict(frozen=True)

    label: str
    url: Optional[str] = None

    @property
    def is_cancel(self) -> bool:
        return self.url is None
