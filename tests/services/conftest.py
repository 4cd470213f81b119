# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from dlnaprofile.services.api.app import create_app
from dlnaprofile.services.api.deps import get_profile_registry, get_stream_probe


@pytest.fixture()
def fake_probe():
    """Stands in for ffprobe; set `.descriptor` or `.error` per test."""
    class _Probe:
        descriptor = None
        error = None
        paths = []

        def probe(self, path):
            self.paths.append(path)
            if self.error is not None:
                raise self.error
            return self.descriptor

    return _Probe()


@pytest.fixture()
def api_client(registry, fake_probe):
    """
    A TestClient whose registry and stream probe dependencies are overridden,
    so no settings file or ffprobe binary is needed.
    """
    app = create_app()
    app.dependency_overrides[get_profile_registry] = lambda: registry
    app.dependency_overrides[get_stream_probe] = lambda: fake_probe
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
