"""Configuration utilities for bloglikes.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

APP_NAME = "bloglikes"
ENV_PREFIX = "BLOGLIKES"
USERS_FILE_ENV = f"{ENV_PREFIX}_USERS_FILE"


class UsersFileNotSetError(Exception):
    """Raised when the BLOGLIKES_USERS_FILE environment variable is not set."""


def get_users_path() -> Path:
    """Get the users file path from the environment.

    Returns:
        The value of the `BLOGLIKES_USERS_FILE` environment variable as a path.

    Raises:
        UsersFileNotSetError: If `BLOGLIKES_USERS_FILE` is not set or empty.
    """
    if not (path := os.environ.get(USERS_FILE_ENV)):
        raise UsersFileNotSetError
    return Path(path)
