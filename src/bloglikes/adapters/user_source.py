"""Build ``User`` collections from plain records and JSON files.

A user record is a mapping shaped like::

    {
        "username": "user1",
        "blogs": [
            {"title": "Entry 1", "likes": 130, "content": "Blog 1 Content..."}
        ]
    }

Unknown keys are ignored and a missing ``blogs`` key means the user has no
blogs. A JSON file may hold a list of such records or a single record.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from bloglikes.domain.models import User
from bloglikes.domain.utils import dict_to_dataclass

logger = logging.getLogger(__name__)


class UserSourceError(Exception):
    """Raised when user records cannot be read or do not have the expected shape."""


def user_from_record(record: Mapping[str, Any]) -> User:
    """Build a ``User`` (and its blogs) from a plain mapping.

    Raises:
        UserSourceError: If the record is not a mapping, misses a required field,
            or holds a value of the wrong shape (e.g. ``"blogs": "ab"`` or
            ``"likes": "5"``).
    """
    if not isinstance(record, Mapping):
        raise UserSourceError(
            f"Expected a user record (mapping), got {type(record).__name__}."
        )
    try:
        return dict_to_dataclass(User, record)
    except (KeyError, TypeError, ValueError) as e:
        name = record.get("username", "<unknown>")
        raise UserSourceError(f"Invalid record for user '{name}': {e}") from e


def users_from_records(records: Iterable[Mapping[str, Any]]) -> list[User]:
    """Build users from ``records``, preserving their order."""
    return [user_from_record(record) for record in records]


def load_users(path: Path) -> list[User]:
    """Read users from a UTF-8 JSON file.

    Args:
        path: JSON file holding a list of user records or a single record.

    Returns:
        The users in file order.

    Raises:
        UserSourceError: If the file cannot be read, is not valid JSON, or does
            not contain user records.
    """
    logger.debug("Loading users from %s", path)
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise UserSourceError(f"Cannot read users file '{path}': {e}") from e
    except ValueError as e:
        raise UserSourceError(f"Users file '{path}' is not valid JSON: {e}") from e

    if isinstance(document, Mapping):
        document = [document]
    if not isinstance(document, list):
        raise UserSourceError(
            f"Users file '{path}' must contain a user record or a list of them."
        )

    users = users_from_records(document)
    logger.debug("Loaded %d user(s) from %s", len(users), path)
    return users
