import io
import base64

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from seogen.config import settings
from seogen.main import app
from seogen.services.llm import get_llm


class FakeLLM:
    """Stands in for GeminiClient: returns a canned reply or raises."""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_text(self, prompt, **kwargs):
        self.calls.append((prompt, kwargs))
        if self.error is not None:
            raise self.error
        return self.reply


def png_b64(size=(32, 24), color=(200, 30, 30), fmt="PNG") -> str:
    buf = io.BytesIO()
    Image.new("RGB", size, color=color).save(buf, format=fmt)
    return base64.b64encode(buf.getvalue()).decode()


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "mock_delay_seconds", 0.0)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_llm():
    """Route requests to a FakeLLM: `fake = use_llm(reply='...')`."""
    def _install(reply=None, error=None):
        fake = FakeLLM(reply=reply, error=error)
        app.dependency_overrides[get_llm] = lambda: fake
        return fake
    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def make_image():
    return png_b64
