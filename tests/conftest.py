from __future__ import annotations

import pytest

REFERENCE_SIGNING_INPUT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
)


@pytest.fixture
def reference_header() -> dict:
    return {"alg": "HS256", "typ": "JWT"}


@pytest.fixture
def reference_payload() -> dict:
    return {"sub": "1234567890", "name": "John Doe", "iat": 1516239022}


@pytest.fixture
def reference_token() -> str:
    """Reference token signed with the secret ``secret``."""
    return REFERENCE_SIGNING_INPUT + ".XbPfbIHMI6arZ3Y922BhjWgQzWXcXNrz0ogtVhfEd2o"
