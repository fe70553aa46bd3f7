from __future__ import annotations
from typing import Any

from showcase_api.core.config import SENTIMENT_ANALYSIS
from showcase_api.services._utils import ranked, require_text
from showcase_api.services.base import BaseService


class Service(BaseService):
    name = "sentiment"
    task = SENTIMENT_ANALYSIS

    def prepare(self, payload: dict[str, Any]) -> str:
        return require_text(payload)

    def shape(self, raw: Any, payload: dict[str, Any]) -> dict[str, Any]:
        top = ranked(raw, self.settings.SENTIMENT_TOP_K)
        best = top[0] if top else {"label": "", "score": 0.0}
        return {"label": best["label"], "score": best["score"], "predictions": top}
