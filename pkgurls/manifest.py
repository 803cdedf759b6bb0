# pkgurls/manifest.py
"""Read package.json from a project directory."""

import json
import pathlib
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape

from .constants import MANIFEST_FILENAME


def read_manifest(directory: pathlib.Path, console: Console) -> Dict[str, Any]:
    """
    Load the manifest of the project in `directory`.

    Problems are reported as warnings on the console and an empty mapping is
    returned, so the caller can still fall back to the git remote URL.
    """
    manifest_path = directory / MANIFEST_FILENAME

    if not manifest_path.is_file():
        console.print(f"[yellow]Warning:[/] {MANIFEST_FILENAME} not found")
        return {}

    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[yellow]Warning:[/] Cannot read {MANIFEST_FILENAME}: {escape(str(e))}")
        return {}

    try:
        manifest = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[yellow]Warning:[/] Failed to parse {MANIFEST_FILENAME}: {escape(str(e))}")
        return {}

    if not isinstance(manifest, dict):
        console.print(f"[yellow]Warning:[/] {MANIFEST_FILENAME} does not contain a JSON object")
        return {}
    return manifest
