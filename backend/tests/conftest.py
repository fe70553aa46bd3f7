# backend/tests/conftest.py
import io
import os

import pytest
from PIL import Image
from starlette.testclient import TestClient

# keep test runs from writing rotating log files into the repo
os.environ.setdefault("APP_LOG_ERRORS_TO_FILE", "0")
os.environ.setdefault("APP_LOG_SERVICES_TO_FILE", "0")

from showcase_api.api.deps import get_provider
from showcase_api.providers.base import InferenceProvider

IMAGE_OUTPUT = [
    {"label": "tabby cat", "score": 0.41},
    {"label": "tiger cat", "score": 0.22},
    {"label": "Egyptian cat", "score": 0.17},
    {"label": "lynx", "score": 0.08},
    {"label": "remote control", "score": 0.05},
    {"label": "carton", "score": 0.03},
    {"label": "tiger", "score": 0.02},
]


class FakeProvider(InferenceProvider):
    name = "fake"

    def __init__(self, outputs=None, error=None):
        self.outputs = {
            "image-classification": list(reversed(IMAGE_OUTPUT)),
            "sentiment-analysis": [{"label": "POSITIVE", "score": 0.98}],
            "summarization": [{"summary_text": "AI lets machines learn from experience."}],
        }
        self.outputs.update(outputs or {})
        self.error = error
        self.calls = []

    async def invoke(self, task, model, data, **options):
        self.calls.append((task, model, data, options))
        if self.error is not None:
            raise self.error
        out = self.outputs[task]
        return out(data) if callable(out) else out


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(provider):
    from showcase_api.main import app

    app.dependency_overrides[get_provider] = lambda: provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), "red").save(buf, format="PNG")
    return buf.getvalue()
