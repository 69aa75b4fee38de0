# tests/conftest.py
from __future__ import annotations

from typing import List

import pytest
from starlette.testclient import TestClient

from graphlearn.common import settings as settings_mod
from graphlearn.domain.entities.material import Material
from graphlearn.services.identity.static_identity import StaticIdentity
from graphlearn.services.notifications.log_sink import LoggingNotificationSink
from graphlearn.services.reviews.memory_backend import InMemoryReviewBackend

from _support import RecordingViewport, ScriptedReviewBackend, make_material


@pytest.fixture(autouse=True)
def _fresh_settings():
    # settings are cached process-wide; every test starts from the environment it sets up
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def backend() -> ScriptedReviewBackend:
    return ScriptedReviewBackend()


@pytest.fixture()
def identity() -> StaticIdentity:
    return StaticIdentity("Tester")


@pytest.fixture()
def notifier() -> LoggingNotificationSink:
    return LoggingNotificationSink()


@pytest.fixture()
def viewport() -> RecordingViewport:
    return RecordingViewport()


@pytest.fixture()
def sample_materials() -> List[Material]:
    return [
        make_material("m1", title="Graph basics", category="basics", rating=4.8),
        make_material("m2", title="BFS", description="Breadth-first traversal", category="algorithms", rating=4.9),
        make_material("m3", title="DFS", description="Depth-first traversal", category="algorithms", rating=4.7),
        make_material("m4", title="Flows", description="Max flow and min cut", category="advanced", rating=4.2),
    ]


@pytest.fixture()
def app_and_backend():
    """
    FastAPI app whose review store is a fresh in-memory backend per test,
    installed through dependency overrides.
    """
    from graphlearn.services.api.app import create_app
    from graphlearn.services.api.deps import get_materials_by_id, get_review_backend

    app = create_app()
    review_backend = InMemoryReviewBackend(material_ids=list(get_materials_by_id()))
    app.dependency_overrides[get_review_backend] = lambda: review_backend
    try:
        yield app, review_backend
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(app_and_backend):
    app, _ = app_and_backend
    with TestClient(app) as client:
        yield client
