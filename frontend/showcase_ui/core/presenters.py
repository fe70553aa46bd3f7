# showcase_ui/core/presenters.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from showcase_ui.core.constants import IMAGE_TOP_K
from showcase_ui.core.provider import Prediction

SENTIMENT_CATEGORIES = ("positive", "neutral", "negative")

_ICONS = {"positive": "❤️", "negative": "☹️"}
_COLORS = {"positive": "#22c55e", "negative": "#ef4444"}
NEUTRAL_ICON = "😐"
NEUTRAL_COLOR = "#eab308"


def top_predictions(predictions: Iterable[Prediction], limit: int = IMAGE_TOP_K) -> List[Prediction]:
    """Descending by score, at most `limit` rows."""
    return sorted(predictions, key=lambda p: p.score, reverse=True)[: max(0, limit)]


def bar_width(score: float) -> float:
    return max(0.0, min(100.0, score * 100))


def percent_label(score: float) -> str:
    return f"{score * 100:.1f}%"


def confidence_badge(score: float) -> str:
    return f"{percent_label(score)} confident"


# ---------- sentiment ----------

def sentiment_icon(label: str) -> str:
    return _ICONS.get(label.lower(), NEUTRAL_ICON)


def sentiment_color(label: str) -> str:
    return _COLORS.get(label.lower(), NEUTRAL_COLOR)


def sentiment_bars(prediction: Prediction) -> List[Tuple[str, float]]:
    """Fixed positive/neutral/negative bars; only the returned label gets a width."""
    label = prediction.label.lower()
    return [
        (category, bar_width(prediction.score) if category == label else 0.0)
        for category in SENTIMENT_CATEGORIES
    ]


# ---------- summary ----------

@dataclass(frozen=True)
class SummaryMetrics:
    original_chars: int
    summary_chars: int
    reduction_pct: int


def reduction_percent(original_chars: int, summary_chars: int) -> int:
    # round half up
    if original_chars <= 0:
        return 0
    return int(math.floor((1 - summary_chars / original_chars) * 100 + 0.5))


def summary_metrics(original: str, summary: str) -> SummaryMetrics:
    return SummaryMetrics(
        original_chars=len(original),
        summary_chars=len(summary),
        reduction_pct=reduction_percent(len(original), len(summary)),
    )
