from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RIO_SESSIONS_HOST",
        "RIO_SESSIONS_PORT",
        "RIO_SESSIONS_TABLE",
        "RIO_SESSIONS_LOG_LEVEL",
        "K_SERVICE",
        "KUBERNETES_SERVICE_HOST",
    ):
        monkeypatch.delenv(name, raising=False)
