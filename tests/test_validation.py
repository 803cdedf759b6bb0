"""Tests for project directory validation."""

import io

import pytest
from rich.console import Console

from pkgurls.validation import ValidationError, print_validation_error, validate_project_dir


def test_existing_directory_is_resolved(tmp_path):
    assert validate_project_dir(str(tmp_path)) == tmp_path.resolve()


def test_missing_directory_suggests_similar_names(tmp_path):
    (tmp_path / "widget-app").mkdir()

    with pytest.raises(ValidationError) as excinfo:
        validate_project_dir(str(tmp_path / "widget-ap"))

    assert "not found" in excinfo.value.message
    assert excinfo.value.suggestion == "Did you mean: widget-app?"


def test_file_is_rejected(tmp_path):
    manifest = tmp_path / "package.json"
    manifest.write_text("{}")

    with pytest.raises(ValidationError) as excinfo:
        validate_project_dir(str(manifest))

    assert "is a file" in excinfo.value.message


def test_print_validation_error_includes_suggestion():
    console = Console(file=io.StringIO(), width=200)

    print_validation_error(ValidationError("Directory 'x' not found.", suggestion="Did you mean: y?"), console)

    output = console.file.getvalue()
    assert "Error: Directory 'x' not found." in output
    assert "Did you mean: y?" in output


def test_print_validation_error_escapes_markup():
    console = Console(file=io.StringIO(), width=200)

    print_validation_error(ValidationError("Directory 'x[/]y' not found.", suggestion="Did you mean: [bold]y?"), console)

    output = console.file.getvalue()
    assert "Directory 'x[/]y' not found." in output
    assert "Did you mean: [bold]y?" in output
