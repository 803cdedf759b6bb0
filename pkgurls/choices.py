# pkgurls/choices.py
"""Build the ordered list of choices shown by the selection prompt."""

from .constants import GIT_REMOTE_URL_KEY, MANIFEST_FILENAME
from .models import Choice, ExtractedUrls, GitHubUrlInference

CANCEL_LABEL = "Cancel"


def _label(position: int, text: str) -> str:
    return f"[{position}]  {text}"


def make_choices(urls: ExtractedUrls, inference: GitHubUrlInference) -> list[Choice]:
    """
    Order the inferred GitHub URLs and the extracted URLs into labeled choices.

    Order: GitHub repository, GitHub user, GitHub Pages, then every extracted
    URL in field order. A Cancel entry closes the list, but only when at
    least one URL was found; an empty list means nothing was detected.
    """
    entries: list[tuple[str, str]] = []

    if inference.github_repository_url:
        entries.append(
            (
                inference.github_repository_url,
                f"GitHub Repository Page ({inference.user_name}/{inference.repository_name})",
            )
        )
    if inference.github_user_url:
        entries.append((inference.github_user_url, f"GitHub User Page ({inference.user_name})"))
    if inference.github_pages_url:
        suffix = "" if inference.has_github_pages else " (Maybe Not Found)"
        entries.append((inference.github_pages_url, f"GitHub Pages{suffix}"))

    for key, url in urls.present():
        if key == GIT_REMOTE_URL_KEY:
            entries.append((url, "Git Remote URL"))
        else:
            entries.append((url, f"{MANIFEST_FILENAME} {key}"))

    choices = [
        Choice(label=_label(position, f"{url} ... {description}"), url=url)
        for position, (url, description) in enumerate(entries, start=1)
    ]
    if choices:
        choices.append(Choice(label=_label(len(choices) + 1, CANCEL_LABEL)))
    return choices
