# frontend/tests/conftest.py
import asyncio

import pytest

from showcase_ui.core.provider import InferenceProvider, Prediction

SENTIMENT = [Prediction("POSITIVE", 0.98), Prediction("NEGATIVE", 0.02)]
IMAGE = [Prediction(f"label-{i}", s) for i, s in enumerate([0.02, 0.41, 0.05, 0.22, 0.17, 0.08, 0.03])]


class FakeProvider(InferenceProvider):
    """In-memory provider; `gate` (an asyncio.Event) holds calls open until set."""

    def __init__(self, error=None, summary="Short summary."):
        self.error = error
        self.summary = summary
        self.gate = None
        self.calls = []

    async def _maybe_wait(self):
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error

    async def classify_image(self, content, mime, filename="image"):
        self.calls.append(("image", filename))
        await self._maybe_wait()
        return list(IMAGE)

    async def analyze_sentiment(self, text):
        self.calls.append(("sentiment", text))
        await self._maybe_wait()
        return list(SENTIMENT)

    async def summarize(self, text):
        self.calls.append(("summary", text))
        await self._maybe_wait()
        return self.summary


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def run():
    return asyncio.run
