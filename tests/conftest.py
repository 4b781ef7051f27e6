"""
- Keep CIPHERMIND_* env vars from leaking into tests
- Provide the classic rules and a session with a known secret
- Provide pin_secret: temporarily replace the generator so the secret is predictable
"""
import os
import pytest

from ciphermind.config import Rules
from ciphermind.session import Session

CLASSIC = Rules(code_length=4, alphabet=("R", "G", "B", "Y", "M", "C"), max_attempts=10)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """A developer's local .env must not change what the tests see."""
    for name in list(os.environ):
        if name.startswith("CIPHERMIND_"):
            monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def rules() -> Rules:
    return CLASSIC


@pytest.fixture
def session(rules) -> Session:
    # Secret is hardcoded so we know what outcome should be
    return Session(secret=["R", "G", "B", "Y"], rules=rules)


@pytest.fixture
def pin_secret(monkeypatch):
    """
    Call pin_secret(["R", "G", "B", "Y"]) and every Session.start() after that
    uses this secret. Patches the name session.py actually calls.
    """
    def _pin(secret):
        def fake_generate_code(length, alphabet, rng=None):
            return list(secret)
        monkeypatch.setattr("ciphermind.session.generate_code", fake_generate_code)
    return _pin
