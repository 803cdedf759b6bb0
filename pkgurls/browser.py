"""Opening the chosen project URL in the browser."""

import webbrowser


def open_browser(url: str) -> bool:
    """
    Open a project URL picked from the choice list in the default web browser.

    A failure only means the user has to follow the printed link instead.

    Args:
        url: The URL to open in the browser.

    Returns:
        True if the browser was opened successfully, False otherwise.
    """
    try:
        return webbrowser.open(url)
    except (webbrowser.Error, OSError):
        return False
