# showcase_ui/core/provider.py
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List

import requests

from showcase_ui.core import http
from showcase_ui.core.constants import (
    API_TIMEOUT, IMAGE_CLASSIFICATION, SENTIMENT_ANALYSIS, SUMMARIZATION
)


@dataclass(frozen=True)
class Prediction:
    label: str
    score: float


class ProviderUnavailable(RuntimeError):
    """The inference provider could not produce a result."""


class InferenceProvider(ABC):
    """One asynchronous method per task kind. Failures raise; nothing is retried."""

    @abstractmethod
    async def classify_image(self, content: bytes, mime: str, filename: str = "image") -> List[Prediction]:
        ...

    @abstractmethod
    async def analyze_sentiment(self, text: str) -> List[Prediction]:
        ...

    @abstractmethod
    async def summarize(self, text: str) -> str:
        ...


def _predictions(rows: Any) -> List[Prediction]:
    if not isinstance(rows, list):
        raise ProviderUnavailable("malformed predictions")
    return [Prediction(label=str(r["label"]), score=float(r["score"])) for r in rows]


class HttpInferenceProvider(InferenceProvider):
    """Talks to the showcase API; blocking requests calls run in a worker thread."""

    def __init__(self, base_url: str, timeout: float = API_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def _post(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = http.request("POST", self.base_url, path, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ProviderUnavailable(f"{path}: {exc}") from exc
        if not resp.ok:
            raise ProviderUnavailable(f"{path}: {http.error_message(resp)}")
        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderUnavailable(f"{path}: invalid JSON") from exc
        if not isinstance(data, dict) or not data.get("ok", False):
            raise ProviderUnavailable(f"{path}: {data!r}"[:300])
        return data

    async def _call(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        return await asyncio.to_thread(self._post, path, **kwargs)

    async def classify_image(self, content: bytes, mime: str, filename: str = "image") -> List[Prediction]:
        data = await self._call(
            f"/inference/{IMAGE_CLASSIFICATION}",
            files={"file": (filename, content, mime)},
        )
        return _predictions(data.get("predictions"))

    async def analyze_sentiment(self, text: str) -> List[Prediction]:
        data = await self._call(f"/inference/{SENTIMENT_ANALYSIS}", json={"text": text})
        return _predictions(data.get("predictions"))

    async def summarize(self, text: str) -> str:
        data = await self._call(f"/inference/{SUMMARIZATION}", json={"text": text})
        summary = data.get("summary")
        if not isinstance(summary, str):
            raise ProviderUnavailable("summary missing from response")
        return summary
