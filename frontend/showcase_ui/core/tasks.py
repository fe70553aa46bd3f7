# showcase_ui/core/tasks.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from showcase_ui.core.artifacts import ImageArtifact, image_ready, sentiment_ready, summary_ready
from showcase_ui.core.constants import IMAGE_TOP_K, SENTIMENT_TOP_K, SUMMARY_FALLBACK
from showcase_ui.core.lifecycle import AsyncTask
from showcase_ui.core.presenters import top_predictions
from showcase_ui.core.provider import InferenceProvider, Prediction, ProviderUnavailable


@dataclass(frozen=True)
class SummaryResult:
    original: str
    summary: str


def make_image_task(provider: InferenceProvider) -> AsyncTask[ImageArtifact, List[Prediction]]:
    async def invoke(artifact: ImageArtifact) -> List[Prediction]:
        preds = await provider.classify_image(artifact.content, artifact.mime, artifact.name)
        return top_predictions(preds, IMAGE_TOP_K)

    return AsyncTask("image-classification", image_ready, invoke)


def make_sentiment_task(provider: InferenceProvider) -> AsyncTask[str, Prediction]:
    async def invoke(text: str) -> Prediction:
        preds = top_predictions(await provider.analyze_sentiment(text), SENTIMENT_TOP_K)
        if not preds:
            raise ProviderUnavailable("no sentiment returned")
        return preds[0]

    return AsyncTask("sentiment-analysis", sentiment_ready, invoke)


def make_summary_task(provider: InferenceProvider) -> AsyncTask[str, SummaryResult]:
    async def invoke(text: str) -> SummaryResult:
        return SummaryResult(original=text, summary=await provider.summarize(text))

    # Only the summarizer shows a message on failure; the other two stay silent.
    def fallback(text: str, exc: Exception) -> Optional[SummaryResult]:
        return SummaryResult(original=text, summary=SUMMARY_FALLBACK)

    return AsyncTask("summarization", summary_ready, invoke, on_failure=fallback)
