# showcase_api/schemas/inference.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class InferenceRequest(BaseModel):
    task: str = Field(..., description="image-classification | sentiment-analysis | summarization")
    payload: Dict[str, Any] = Field(default_factory=dict)


class TextIn(BaseModel):
    text: str


class Prediction(BaseModel):
    label: str
    score: float = Field(..., ge=0.0, le=1.0)


class ImageMeta(BaseModel):
    mime: str
    size: int
    sha256: str
    width: int
    height: int


class ClassificationOut(BaseModel):
    ok: bool = True
    task: str
    model: str
    predictions: List[Prediction] = []
    image: Optional[ImageMeta] = None


class SentimentOut(BaseModel):
    ok: bool = True
    task: str
    model: str
    label: str
    score: float
    predictions: List[Prediction] = []


class SummaryOut(BaseModel):
    ok: bool = True
    task: str
    model: str
    summary: str
    original_chars: int
    summary_chars: int
    reduction_pct: int


class TaskInfo(BaseModel):
    name: str
    task: str
    model: str
    limits: Dict[str, int] = {}


class TaskList(BaseModel):
    ok: bool = True
    tasks: List[TaskInfo] = []
    loaded: List[Dict[str, Any]] = []
