# showcase_api/api/router_inference.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, File, UploadFile

from showcase_api.core.config import (
    IMAGE_CLASSIFICATION, SENTIMENT_ANALYSIS, SUMMARIZATION, get_settings
)
from showcase_api.api.deps import get_provider
from showcase_api.providers import InferenceProvider
from showcase_api.schemas.inference import (
    ClassificationOut, InferenceRequest, SentimentOut, SummaryOut, TaskList, TextIn
)
from showcase_api.services import get_service_instance, list_services

router = APIRouter(prefix="/inference", tags=["inference"])


async def _run(task: str, payload: Dict[str, Any], provider: InferenceProvider) -> Dict[str, Any]:
    service = get_service_instance(task, provider, get_settings())
    return await service.infer(payload)


@router.get("/tasks", response_model=TaskList, summary="List tasks and their models")
def tasks(provider: InferenceProvider = Depends(get_provider)):
    return {"ok": True, "tasks": list_services(get_settings()), "loaded": provider.loaded()}


# ---------- Unified ----------
@router.post("", summary="Run any task (unified)")
@router.post("/run", summary="Run any task (unified)")
async def run(req: InferenceRequest, provider: InferenceProvider = Depends(get_provider)):
    return await _run(req.task, dict(req.payload), provider)


# ---------- Per task ----------
@router.post(
    "/image-classification",
    response_model=ClassificationOut,
    summary="Classify an uploaded image (top-5)",
)
async def image_classification(
    file: UploadFile = File(...),
    provider: InferenceProvider = Depends(get_provider),
):
    content = await file.read()
    payload = {"content": content, "mime": file.content_type, "filename": file.filename}
    return await _run(IMAGE_CLASSIFICATION, payload, provider)


@router.post("/sentiment-analysis", response_model=SentimentOut, summary="Sentiment of a text")
async def sentiment_analysis(body: TextIn, provider: InferenceProvider = Depends(get_provider)):
    return await _run(SENTIMENT_ANALYSIS, {"text": body.text}, provider)


@router.post("/summarization", response_model=SummaryOut, summary="Summarize a text")
async def summarization(body: TextIn, provider: InferenceProvider = Depends(get_provider)):
    return await _run(SUMMARIZATION, {"text": body.text}, provider)
