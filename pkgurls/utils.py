# pkgurls/utils.py
import requests
from packaging.version import InvalidVersion, parse as parse_version
from rich.console import Console

from . import __pkg_version__, __pypi_url__
from .constants import UPDATE_CHECK_TIMEOUT


def check_for_cli_updates(console: Console) -> bool:
    """Checks PyPI for a newer version of pkgurls and notifies the user.

    Returns:
        True if a newer version was found and reported.
    """
    try:
        response = requests.get(__pypi_url__, timeout=UPDATE_CHECK_TIMEOUT)
        response.raise_for_status()
        latest_version_str = response.json()["info"]["version"]

        current_version = parse_version(__pkg_version__)
        latest_version = parse_version(latest_version_str)
    except requests.exceptions.RequestException:
        # Network errors must not disrupt the user
        return False
    except (KeyError, TypeError, ValueError, InvalidVersion):
        # Unexpected PyPI response format
        return False

    if latest_version > current_version:
        console.print(
            f"[yellow]WARNING: New pkgurls version ({latest_version_str}) available "
            f"(you have {__pkg_version__}). Run: pip install --upgrade pkgurls[/]"
        )
        return True
    return False
