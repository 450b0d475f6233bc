"""Username Validation — single source of truth for the username rule.

Invariants:
    - 3 to 16 characters from [a-zA-Z0-9_-]
    - Applied to every path- and body-supplied username (and search fragments)
"""

import re

from wasaphoto.core.errors import BadRequestError

USERNAME_PATTERN = r"^[a-zA-Z0-9_-]{3,16}$"
_USERNAME_RE = re.compile(USERNAME_PATTERN)


def is_valid_username(username: str) -> bool:
    return bool(_USERNAME_RE.fullmatch(username))


def check_username(username: str, field: str = "username") -> str:
    """Return username unchanged, or raise BadRequestError."""
    if not isinstance(username, str) or not is_valid_username(username):
        raise BadRequestError("Error matching Username regex", field=field)
    return username
