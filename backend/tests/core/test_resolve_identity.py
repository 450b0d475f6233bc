"""Identity Resolver — tests for parsing the Authorization header.

Tests cover:
    - "Bearer <n>" yields n
    - Missing, empty, prefix-less and doubled headers are malformed
    - Non-integer remainders are malformed
    - Malformed credentials are UnauthenticatedError (401)
"""

import pytest

from wasaphoto.core.errors import MalformedCredentialError, UnauthenticatedError
from wasaphoto.core.resolve_identity import resolve_identity


def test_bearer_integer_resolves():
    assert resolve_identity("Bearer 7") == 7


def test_negative_integer_resolves():
    # Existence is the guard's concern, not the resolver's
    assert resolve_identity("Bearer -3") == -3


@pytest.mark.parametrize("header", [None, ""])
def test_missing_header_is_malformed(header):
    with pytest.raises(MalformedCredentialError) as exc_info:
        resolve_identity(header)
    assert exc_info.value.reason == "no token found"


@pytest.mark.parametrize("header", ["7", "Token 7", "Bearer 7 Bearer 8"])
def test_wrong_shape_is_malformed(header):
    with pytest.raises(MalformedCredentialError) as exc_info:
        resolve_identity(header)
    assert exc_info.value.reason == "invalid token format"


@pytest.mark.parametrize("header", ["Bearer abc", "Bearer ", "Bearer 1.5", "Bearer  7", "Bearer 1_0"])
def test_non_integer_value_is_malformed(header):
    with pytest.raises(MalformedCredentialError) as exc_info:
        resolve_identity(header)
    assert exc_info.value.reason == "invalid token value"


def test_malformed_credential_is_unauthenticated():
    with pytest.raises(UnauthenticatedError) as exc_info:
        resolve_identity(None)
    assert exc_info.value.http_status == 401
    assert exc_info.value.code == "MALFORMED_CREDENTIAL"
    assert exc_info.value.to_response() == {
        "message": "No Token in the Header: no token found",
    }
