# showcase_api/providers/__init__.py
from .base import InferenceProvider
from .transformers_provider import TransformersProvider

__all__ = [
    "InferenceProvider",
    "TransformersProvider",
]
