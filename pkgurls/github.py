# pkgurls/github.py
"""
Infer GitHub user, repository and Pages URLs from a set of extracted URLs.

The scan walks the URLs in field order and the first URL that yields a value
wins. Inference is best-effort: anything that does not look like a GitHub or
GitHub Pages URL is skipped.
"""

import re
from typing import Optional

from .models import ExtractedUrls, GitHubUrlInference

GITHUB_BASE_URL = "https://github.com"

_USER_RE = re.compile(r"github\.com/(.*?)(?:/|\?|#|\Z)")
_REPOSITORY_RE = re.compile(r"github\.com/(.*?)/(.*?)(?:/|\?|#|\Z)")
# Subdomain, optional first path segment, and the character that ended it
_PAGES_RE = re.compile(r"://(.+?)\.github\.io(/.*?)?(/|\?|#|\Z)")


def github_pages_base_url(user_name: str) -> str:
    return f"https://{user_name}.github.io"


def infer_github_urls(urls: ExtractedUrls) -> GitHubUrlInference:
    """
    Scan the extracted URLs and build a GitHubUrlInference.

    github.com URLs provide the user and repository names. A github.io URL
    marks GitHub Pages as confirmed and may provide the user name and,
    through its first path segment, the repository name. When no Pages URL
    was seen, one is synthesized from the user name and has_github_pages
    stays False.
    """
    user_name: Optional[str] = None
    repository_name: Optional[str] = None
    has_github_pages = False
    github_pages_url: Optional[str] = None

    for _, url in urls.present():
        if "github.com" in url:
            if not user_name:
                match = _USER_RE.search(url)
                if match and match.group(1):
                    user_name = match.group(1)
            if not repository_name:
                match = _REPOSITORY_RE.search(url)
                if match and match.group(2):
                    repository_name = match.group(2)
        elif "github.io" in url and not github_pages_url:
            match = _PAGES_RE.search(url)
            if not match:
                continue

            subdomain, path, terminator = match.group(1), match.group(2), match.group(3)
            has_github_pages = True
            github_pages_url = github_pages_base_url(subdomain)
            if not user_name:
                user_name = subdomain

            if path and len(path) > 1:
                # Repository site, or possibly a file of a user site such as /index.html
                github_pages_url += path
                if terminator == "/":
                    github_pages_url += "/"
                # FIXME: repository names may contain dots too, so this check is inexact
                if not repository_name:
                    candidate = path[1:]
                    if "." not in candidate:
                        repository_name = candidate
            elif not repository_name:
                # Only "/" or nothing after the host: a user site
                repository_name = f"{subdomain}.github.io"

    github_user_url = f"{GITHUB_BASE_URL}/{user_name}" if user_name else None
    github_repository_url = (
        f"{GITHUB_BASE_URL}/{user_name}/{repository_name}" if user_name and repository_name else None
    )
    if not github_pages_url and user_name:
        github_pages_url = github_pages_base_url(user_name)
        if repository_name:
            github_pages_url += f"/{repository_name}"

    return GitHubUrlInference(
        user_name=user_name,
        repository_name=repository_name,
        github_user_url=github_user_url,
        github_repository_url=github_repository_url,
        has_github_pages=has_github_pages,
        github_pages_url=github_pages_url,
    )
