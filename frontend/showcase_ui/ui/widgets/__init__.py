# showcase_ui/ui/widgets/__init__.py
from . import image_classifier, sentiment, summarizer

__all__ = ["image_classifier", "sentiment", "summarizer"]
