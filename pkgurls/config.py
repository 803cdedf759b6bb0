# pkgurls/config.py
"""Runtime settings for pkgurls.

Settings come from environment variables; command-line flags override them:
- PKGURLS_REMOTE: git remote whose URL is offered (default: origin)
- PKGURLS_OUTPUT: default output mode, 'rich' or 'plain'
- PKGURLS_DISABLE_UPDATE_CHECK: set to "1", "true" or "yes" to skip the PyPI check
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .constants import DEFAULT_GIT_REMOTE, OUTPUT_MODES

REMOTE_ENV_VAR = "PKGURLS_REMOTE"
OUTPUT_ENV_VAR = "PKGURLS_OUTPUT"
DISABLE_UPDATE_CHECK_ENV_VAR = "PKGURLS_DISABLE_UPDATE_CHECK"

_TRUTHY = {"1", "true", "yes"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    remote: str = DEFAULT_GIT_REMOTE
    output: str = "rich"
    update_check: bool = True


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, ignoring empty or unknown values."""
    env = os.environ if environ is None else environ

    remote = env.get(REMOTE_ENV_VAR, "").strip() or DEFAULT_GIT_REMOTE
    output = env.get(OUTPUT_ENV_VAR, "").strip().lower()
    if output not in OUTPUT_MODES:
        output = "rich"
    update_check = env.get(DISABLE_UPDATE_CHECK_ENV_VAR, "").strip().lower() not in _TRUTHY

    return Settings(remote=remote, output=output, update_check=update_check)
