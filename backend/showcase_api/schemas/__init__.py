# showcase_api/schemas/__init__.py
from .inference import (
    InferenceRequest,
    TextIn,
    Prediction,
    ClassificationOut,
    SentimentOut,
    SummaryOut,
    TaskList,
)

__all__ = [
    "InferenceRequest",
    "TextIn",
    "Prediction",
    "ClassificationOut",
    "SentimentOut",
    "SummaryOut",
    "TaskList",
]
