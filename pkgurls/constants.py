# pkgurls/constants.py
"""
Constants for the pkgurls package.
"""

MANIFEST_FILENAME = "package.json"

# Manifest fields that may carry a URL, in the order they are scanned
MANIFEST_URL_FIELDS = ("homepage", "author", "repository", "bugs", "funding")

# Key used for the git remote URL when it is merged with the manifest URLs
GIT_REMOTE_URL_KEY = "gitRemoteUrl"

DEFAULT_GIT_REMOTE = "origin"
GIT_COMMAND_TIMEOUT = 5  # Seconds to wait for `git config`

UPDATE_CHECK_TIMEOUT = 5  # Seconds, non-critical check

OUTPUT_MODES = ("rich", "plain")
