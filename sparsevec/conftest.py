from __future__ import annotations

import ibis
import pytest


@pytest.fixture
def backend() -> ibis.BaseBackend:
    return ibis.duckdb.connect()


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    # reset interactive mode to False for doctests
    monkeypatch.setattr(ibis.options, "interactive", False)
