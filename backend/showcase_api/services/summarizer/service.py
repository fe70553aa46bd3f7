from __future__ import annotations
from typing import Any

from showcase_api.core.config import SUMMARIZATION
from showcase_api.core.errors import InvalidArtifact, ProviderError
from showcase_api.services._utils import reduction_percent, require_text
from showcase_api.services.base import BaseService

# Returned when the pipeline output carries neither summary_text nor generated_text
DEFAULT_SUMMARY = "Summary generated successfully."


class Service(BaseService):
    name = "summarizer"
    task = SUMMARIZATION

    def prepare(self, payload: dict[str, Any]) -> str:
        text = require_text(payload)
        if len(text) < self.settings.SUMMARY_MIN_CHARS:
            raise InvalidArtifact(
                f"text must be at least {self.settings.SUMMARY_MIN_CHARS} characters"
            )
        return text

    def shape(self, raw: Any, payload: dict[str, Any]) -> dict[str, Any]:
        first = raw[0] if isinstance(raw, list) and raw else raw
        if not isinstance(first, dict):
            raise ProviderError(f"unexpected provider output: {type(raw).__name__}")
        summary = first.get("summary_text") or first.get("generated_text") or DEFAULT_SUMMARY

        original_chars = len(payload["text"])
        summary_chars = len(summary)
        return {
            "summary": summary,
            "original_chars": original_chars,
            "summary_chars": summary_chars,
            "reduction_pct": reduction_percent(original_chars, summary_chars),
        }
