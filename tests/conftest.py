import pytest

from sedol import config


@pytest.fixture(autouse=True)
def clean_flags(monkeypatch: pytest.MonkeyPatch):
    """Restore runtime flags around every test."""
    monkeypatch.setattr(config, "SKIP_CHECKSUM_VALIDATION", False)
    monkeypatch.setattr(config, "ENFORCE_OLD_FORMAT", False)
