# showcase_api/providers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class InferenceProvider(ABC):
    """
    Opaque inference capability: one asynchronous call per (task, model, input).

    Implementations raise on any failure; callers translate to ProviderError.
    There is no cancellation token and no retry.
    """

    name: str = "base"

    @abstractmethod
    async def invoke(self, task: str, model: str, data: Any, **options: Any) -> Any:
        raise NotImplementedError

    def preload(self, task: str, model: str) -> None:
        # Optional: warm a (task, model) pair ahead of the first request
        return

    def sweep_idle(self, max_idle_seconds: float) -> int:
        # Optional: release resources unused for longer than max_idle_seconds
        return 0

    def loaded(self) -> list[dict[str, Any]]:
        return []
