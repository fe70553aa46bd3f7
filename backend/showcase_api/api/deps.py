# showcase_api/api/deps.py
from __future__ import annotations

from functools import lru_cache

from showcase_api.core.config import get_settings
from showcase_api.providers import InferenceProvider, TransformersProvider


@lru_cache
def _default_provider() -> InferenceProvider:
    return TransformersProvider(device=get_settings().DEVICE)


def get_provider() -> InferenceProvider:
    # Overridden in tests via app.dependency_overrides
    return _default_provider()
