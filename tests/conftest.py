from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeGenerator, FakeTransliterator


@pytest.fixture
def app():
    from legalhub.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def use_generator(app):
    """Install a FakeGenerator as the app's text generator."""
    from legalhub.main import get_generator

    def install(generator: FakeGenerator) -> FakeGenerator:
        app.dependency_overrides[get_generator] = lambda: generator
        return generator

    return install


@pytest.fixture
def use_transliterator(app):
    from legalhub.main import get_transliterator

    def install(transliterator: FakeTransliterator) -> FakeTransliterator:
        app.dependency_overrides[get_transliterator] = lambda: transliterator
        return transliterator

    return install
