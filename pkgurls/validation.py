"""Input validation for pkgurls.

Checks the project directory before anything is read so that a typo fails
fast with a helpful message.
"""

import pathlib
from difflib import get_close_matches

from rich.console import Console
from rich.markup import escape


class ValidationError(Exception):
    """Raised when user input validation fails."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)


def validate_project_dir(directory: str) -> pathlib.Path:
    """
    Validate that the project directory exists.

    Args:
        directory: Path given on the command line.

    Returns:
        The resolved directory path.

    Raises:
        ValidationError: If the path doesn't exist or isn't a directory.
    """
    path = pathlib.Path(directory)

    if not path.exists():
        suggestion = _find_similar_dirs(path)
        raise ValidationError(f"Directory '{directory}' not found.", suggestion=suggestion)

    if not path.is_dir():
        raise ValidationError(
            f"'{directory}' is a file, not a directory.",
            suggestion="Pass the directory that contains package.json, e.g., 'packages/app'",
        )

    return path.resolve()


def _find_similar_dirs(path: pathlib.Path) -> str | None:
    """Find similarly named directories next to `path` to suggest as alternatives."""
    parent = path.parent if path.parent.exists() else pathlib.Path(".")

    try:
        candidates = [d.name for d in parent.iterdir() if d.is_dir()]
        matches = get_close_matches(path.name, candidates, n=3, cutoff=0.4)
        if matches:
            return f"Did you mean: {', '.join(matches)}?"
    except OSError:
        pass

    return None


def print_validation_error(error: ValidationError, console: Console) -> None:
    """Print a validation error in a user-friendly format."""
    console.print(f"[bold red]Error:[/] {escape(error.message)}")
    if error.suggestion:
        console.print(f"[dim]{escape(error.suggestion)}[/]")
