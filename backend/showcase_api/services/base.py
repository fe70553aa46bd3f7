# showcase_api/services/base.py
from __future__ import annotations

import logging
from typing import Any, Dict

from showcase_api.core.config import Settings, get_settings
from showcase_api.core.errors import AppError, ProviderError
from showcase_api.providers.base import InferenceProvider

logger = logging.getLogger(__name__)


class BaseService:
    # Service name and the provider task id it answers to
    name: str = "base"
    task: str = ""

    def __init__(self, provider: InferenceProvider, settings: Settings | None = None) -> None:
        self.provider = provider
        self.settings = settings or get_settings()
        self.model = self.settings.model_for(self.task)

    def load(self) -> None:
        # Warm the provider for this task's model
        self.provider.preload(self.task, self.model)

    def prepare(self, payload: Dict[str, Any]) -> Any:
        """Validate the payload and return the provider input; raise AppError subclasses."""
        raise NotImplementedError

    def options(self) -> Dict[str, Any]:
        return {}

    def shape(self, raw: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    async def infer(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        payload = payload or {}
        data = self.prepare(payload)
        try:
            raw = await self.provider.invoke(self.task, self.model, data, **self.options())
        except AppError:
            raise
        except Exception as exc:
            logger.exception("%s failed (model=%s)", self.task, self.model)
            raise ProviderError(f"{self.task} failed: {exc}") from exc
        result = self.shape(raw, payload)
        logger.debug("%s ok (model=%s)", self.task, self.model)
        return {"ok": True, "task": self.task, "model": self.model, **result}
