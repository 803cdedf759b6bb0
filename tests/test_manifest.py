"""Tests for reading package.json."""

import io
import json

import pytest
from rich.console import Console

from pkgurls.manifest import read_manifest


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def _output(console):
    return console.file.getvalue()


def test_reads_manifest_object(tmp_path, console):
    manifest = {"name": "widget", "homepage": "https://widget.dev"}
    (tmp_path / "package.json").write_text(json.dumps(manifest))

    assert read_manifest(tmp_path, console) == manifest
    assert _output(console) == ""


def test_missing_manifest_warns_and_returns_empty(tmp_path, console):
    assert read_manifest(tmp_path, console) == {}
    assert "package.json not found" in _output(console)


def test_invalid_json_warns_and_returns_empty(tmp_path, console):
    (tmp_path / "package.json").write_text("{ not json")

    assert read_manifest(tmp_path, console) == {}
    assert "Failed to parse package.json" in _output(console)


def test_non_object_manifest_warns_and_returns_empty(tmp_path, console):
    (tmp_path / "package.json").write_text('["https://widget.dev"]')

    assert read_manifest(tmp_path, console) == {}
    assert "does not contain a JSON object" in _output(console)


def test_undecodable_manifest_warns_and_returns_empty(tmp_path, console):
    (tmp_path / "package.json").write_bytes(b"\xff\xfe\x00{")

    assert read_manifest(tmp_path, console) == {}
    assert "Cannot read package.json" in _output(console)
