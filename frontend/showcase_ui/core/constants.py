# showcase_ui/core/constants.py
from __future__ import annotations
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parents[1]
CSS_PATH = PACKAGE_DIR / "static" / "showcase.css"

DEFAULT_API_URL = os.getenv("SHOWCASE_API_URL", "http://127.0.0.1:8000")
API_TIMEOUT = float(os.getenv("SHOWCASE_API_TIMEOUT", "120"))

# Tasks / models (the API decides the actual model; these are shown in the UI)
IMAGE_CLASSIFICATION = "image-classification"
SENTIMENT_ANALYSIS = "sentiment-analysis"
SUMMARIZATION = "summarization"

IMAGE_TOP_K = 5
SENTIMENT_TOP_K = 1
MIN_SUMMARY_CHARS = 50
COPY_FEEDBACK_MS = 2000

SUMMARY_FALLBACK = "Sorry, there was an error processing your text. Please try with a shorter text."

SENTIMENT_EXAMPLES = (
    "I absolutely love this new AI technology!",
    "This is really disappointing and frustrating.",
    "The weather is okay today, nothing special.",
)

SUMMARY_EXAMPLE = (
    "Artificial intelligence (AI) refers to the simulation of human intelligence in machines "
    "that are programmed to think and learn like humans. The term may also be applied to any "
    "machine that exhibits traits associated with a human mind such as learning and "
    "problem-solving. The ideal characteristic of artificial intelligence is its ability to "
    "rationalize and take actions that have the best chance of achieving a specific goal. "
    "Machine learning is a subset of artificial intelligence that provides systems the ability "
    "to automatically learn and improve from experience without being explicitly programmed. "
    "Deep learning is a subset of machine learning that uses neural networks with three or more "
    "layers to simulate the behavior of the human brain, allowing it to learn from large "
    "amounts of data."
)
