"""Root test fixtures.

Environment overrides are set BEFORE any client imports so that the
configuration module picks up test values.
"""

import os

# ---------------------------------------------------------------------------
# Environment overrides: MUST be set before importing account_client
# ---------------------------------------------------------------------------
os.environ["ACCOUNT_API_BASE_URL"] = "http://localhost:8000"
os.environ["ACCOUNT_API_TIMEOUT_SECONDS"] = "5"

import pytest

BASE = "http://localhost:8000"


@pytest.fixture
def user_json() -> dict:
    return {
        "email": "user@example.com",
        "fullName": "Test User",
        "currentEducation": "Undergraduate",
        "institution": "Institut Teknologi Bandung",
        "phoneNumber": "+628123456789",
        "dateJoined": 1690000000,
        "birthDate": "2001-02-03",
        "address": None,
    }


@pytest.fixture
def login_json(user_json) -> dict:
    return {"token": "bearer-abc123", "exp": 1700000000, "user": user_json}
