"""
Terminal presentation for pkgurls.

Renders the choice list, asks which URL to open and prints clickable links.
"""

from typing import List, Optional, TextIO

from rich.console import Console
from rich.prompt import IntPrompt
from rich.style import Style
from rich.text import Text

from .models import Choice, ExtractedUrls, GitHubUrlInference

PROMPT_MESSAGE = "Which URL do you want to open?"


def prompt_choice(choices: List[Choice], console: Console, stream: Optional[TextIO] = None) -> Optional[str]:
    """
    Show the numbered choices and ask for one.

    Returns:
        The URL of the chosen entry, or None if Cancel was chosen.
    """
    console.print()
    for choice in choices:
        console.print(Text(choice.label, style="dim" if choice.is_cancel else ""))

    positions = [str(position) for position in range(1, len(choices) + 1)]
    position = IntPrompt.ask(
        PROMPT_MESSAGE, choices=positions, show_choices=False, default=1, console=console, stream=stream
    )
    return choices[position - 1].url


def show_links(choices: List[Choice], console: Console) -> None:
    """Print every URL choice as a terminal hyperlink. Cancel is skipped."""
    for choice in choices:
        if choice.is_cancel:
            continue
        console.print(Text(choice.label, style=Style(link=choice.url)))


def print_plain(choices: List[Choice], console: Console) -> None:
    """Print one URL per line, suitable for piping."""
    for choice in choices:
        if choice.url:
            console.print(choice.url, markup=False, highlight=False, soft_wrap=True)


def print_debug(urls: ExtractedUrls, inference: GitHubUrlInference, console: Console) -> None:
    console.log("Extracted URLs", urls.model_dump())
    console.log("GitHub inference", inference.model_dump())
