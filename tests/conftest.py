from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies.completion import get_completion_client
from app.main import app


def make_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeCompletionClient:
    def __init__(self, content="# Recipe\n", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def complete(self, messages, model, max_tokens):
        self.calls.append({"messages": messages, "model": model, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        if callable(self.content):
            return make_completion(self.content(messages))
        return make_completion(self.content)


@pytest.fixture
def fake_completion():
    fake = FakeCompletionClient()
    app.dependency_overrides[get_completion_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(fake_completion):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def static_dir(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<html>entry</html>")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "app.js").write_text("console.log('app');")
    monkeypatch.setattr("app.routes.root.STATIC_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def anyio_backend():
    return "asyncio"
