import argparse
import pathlib
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.traceback import install

from . import __pkg_version__
from .browser import open_browser
from .choices import make_choices
from .config import Settings, load_settings
from .constants import DEFAULT_GIT_REMOTE, OUTPUT_MODES
from .extract import extract_urls
from .git import get_remote_url, validate_remote_name
from .github import infer_github_urls
from .manifest import read_manifest
from .models import Choice
from .ui import print_debug, print_plain, prompt_choice, show_links
from .utils import check_for_cli_updates
from .validation import ValidationError, print_validation_error, validate_project_dir


install(show_locals=True)
console = Console()
# Warnings and errors go to stderr so plain output stays clean for piping
err_console = Console(stderr=True)


def configure_parser(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory containing package.json. Defaults to the current directory.",
    )
    parser.add_argument(
        "-r",
        "--remote",
        type=str,
        default=settings.remote,
        help=f"Git remote whose URL is offered. Defaults to `{DEFAULT_GIT_REMOTE}` (env: PKGURLS_REMOTE).",
    )
    parser.add_argument("--no-git", action="store_true", help="Do not read the git remote URL.")
    parser.add_argument(
        "--output",
        type=str,
        choices=list(OUTPUT_MODES),
        default=settings.output,
        help="Output mode: 'rich' to pick a URL and open it (default), 'plain' to print the URLs one per line.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log the extracted and inferred URLs.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__pkg_version__}")


def collect_choices(directory: pathlib.Path, remote: Optional[str], verbose: bool = False) -> List[Choice]:
    """Run the read → extract → infer pipeline for `directory`.

    Args:
        directory: Project directory.
        remote: Git remote to merge in, or None to skip git entirely.
        verbose: Log the intermediate records.
    """
    manifest = read_manifest(directory, err_console)
    urls = extract_urls(manifest)

    if remote is not None:
        urls = urls.with_git_remote_url(get_remote_url(directory, remote))

    inference = infer_github_urls(urls)
    if verbose:
        print_debug(urls, inference, err_console)

    return make_choices(urls, inference)


def execute_open_command(args: argparse.Namespace) -> int:
    """Pick a URL for the project and open it. Returns the exit code."""
    try:
        directory = validate_project_dir(args.path)
    except ValidationError as e:
        print_validation_error(e, err_console)
        return 1

    remote = None
    if not args.no_git:
        try:
            validate_remote_name(args.remote)
        except ValueError as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            return 1
        remote = args.remote

    choices = collect_choices(directory, remote, verbose=args.verbose)
    if not choices:
        err_console.print("[bold red]No URLs detected[/]")
        return 1

    if args.output == "plain":
        print_plain(choices, console)
        return 0

    url = prompt_choice(choices, console)
    console.print()
    show_links(choices, console)
    if url is None:
        return 0

    if not open_browser(url):
        err_console.print("[yellow]Could not automatically open the browser. Please open the link manually.[/]")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main function for the pkgurls CLI."""
    try:
        _main(argv)
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C without traceback
        err_console.print("\n[yellow]Interrupted.[/]")
        sys.exit(130)  # Standard exit code for SIGINT


def _main(argv: Optional[List[str]] = None) -> None:
    """Internal main function containing the CLI logic."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="pkgurls",
        description="Pick one of the URLs of a package.json project and open it in the browser.",
    )
    configure_parser(parser, settings)
    args = parser.parse_args(argv)

    if settings.update_check and args.output == "rich":
        check_for_cli_updates(err_console)

    sys.exit(execute_open_command(args))
