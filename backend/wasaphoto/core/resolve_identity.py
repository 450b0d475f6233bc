"""Identity Resolver — turns an Authorization header into a candidate UserId.

Invariants:
    - Pure: no Store lookup; existence is checked by the access guard
    - Header must split into exactly two parts on "Bearer "
    - Remainder must be a base-10 integer (optional sign, no whitespace)
"""

import re

from wasaphoto.core.domain_types import UserId
from wasaphoto.core.errors import MalformedCredentialError

BEARER_PREFIX = "Bearer "
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def resolve_identity(authorization: str | None) -> UserId:
    """Extract the candidate identity from a raw Authorization header value."""
    if not authorization:
        raise MalformedCredentialError("no token found")

    parts = authorization.split(BEARER_PREFIX)
    if len(parts) != 2:
        raise MalformedCredentialError("invalid token format")

    # int() alone would accept " 7" and "1_0"
    if not _INTEGER_RE.fullmatch(parts[1]):
        raise MalformedCredentialError("invalid token value")
    return UserId(int(parts[1]))
