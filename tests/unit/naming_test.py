"""Unit tests for canonical identifier naming."""

import pytest

from isucon_restruct.core.naming import canonical_name


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("User", "user"),
        ("SessionStore", "session_store"),
        ("HTTPServer", "http_server"),
        ("get_users", "get_users"),
        ("Vec<User>", "vec_user"),
        ("MAX_SIZE", "max_size"),
    ],
)
def test_canonical_name(identifier: str, expected: str) -> None:
    assert canonical_name(identifier) == expected
