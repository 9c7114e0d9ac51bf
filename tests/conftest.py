import logging

import pytest

from tests.factories import RecordingExecutor


# ── Isolate settings from the developer's environment ───────────────────────
@pytest.fixture(autouse=True)
def _patch_settings(monkeypatch):
    for var in ("BAMBOOHR_API_KEY", "BAMBOOHR_SUBDOMAIN", "BAMBOOHR_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    from bamboohr.core.config import settings
    monkeypatch.setattr(settings, "bamboohr_api_key", "test-api-key")
    monkeypatch.setattr(settings, "bamboohr_subdomain", "acme")
    monkeypatch.setattr(settings, "bamboohr_base_url", "")
    monkeypatch.setattr(settings, "bamboohr_max_retries", 3)


@pytest.fixture
def directory_payload():
    return {
        "Employees": [
            {"ID": "7", "WorkEmail": "a@x.com", "DisplayName": "Ada"},
            {"ID": "8", "WorkEmail": "b@x.com", "DisplayName": "Bob"},
            {"ID": "9", "WorkEmail": "a@x.com", "DisplayName": "Ada (duplicate)"},
        ],
    }


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
