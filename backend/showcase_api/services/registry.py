# showcase_api/services/registry.py
from __future__ import annotations

from typing import Any

from showcase_api.core.config import Settings, get_settings
from showcase_api.core.errors import UnknownTask
from showcase_api.providers.base import InferenceProvider
from showcase_api.services.base import BaseService
from showcase_api.services.image_classifier import Service as ImageClassifierService
from showcase_api.services.sentiment import Service as SentimentService
from showcase_api.services.summarizer import Service as SummarizerService

SERVICE_CLASSES: tuple[type[BaseService], ...] = (
    ImageClassifierService,
    SentimentService,
    SummarizerService,
)

_BY_TASK: dict[str, type[BaseService]] = {cls.task: cls for cls in SERVICE_CLASSES}


def get_service_class(task: str) -> type[BaseService]:
    cls = _BY_TASK.get(task)
    if cls is None:
        raise UnknownTask(f"unknown task: {task!r} (expected one of {sorted(_BY_TASK)})")
    return cls


def get_service_instance(
    task: str, provider: InferenceProvider, settings: Settings | None = None
) -> BaseService:
    return get_service_class(task)(provider, settings)


def list_services(settings: Settings | None = None) -> list[dict[str, Any]]:
    s = settings or get_settings()
    limits = {
        ImageClassifierService.task: {"top_k": s.IMAGE_TOP_K, "max_mb": s.UPLOAD_MAX_MB},
        SentimentService.task: {"top_k": s.SENTIMENT_TOP_K},
        SummarizerService.task: {"min_chars": s.SUMMARY_MIN_CHARS},
    }
    return [
        {"name": cls.name, "task": cls.task, "model": s.model_for(cls.task), "limits": limits[cls.task]}
        for cls in SERVICE_CLASSES
    ]
