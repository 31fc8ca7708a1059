from contextlib import ExitStack

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def make_client():
    from gif_search.config import Settings
    from gif_search.main import create_app

    with ExitStack() as stack:

        def _make(snapshot: int) -> TestClient:
            return stack.enter_context(TestClient(create_app(Settings(snapshot=snapshot))))

        yield _make


@pytest.fixture
def client(make_client):
    return make_client(3)
