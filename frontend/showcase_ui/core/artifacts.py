# showcase_ui/core/artifacts.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from showcase_ui.core.constants import MIN_SUMMARY_CHARS


@dataclass(frozen=True)
class ImageArtifact:
    """An uploaded image held in memory only; dropped when replaced or reset."""
    name: str
    mime: str
    content: bytes = field(repr=False)
    file_id: Optional[str] = None


def is_image_mime(mime: Optional[str]) -> bool:
    return bool(mime) and str(mime).lower().startswith("image/")


def image_from_upload(uploaded: Any) -> Optional[ImageArtifact]:
    """
    Build an ImageArtifact from a Streamlit UploadedFile (or anything with
    .name/.type/.getvalue()). Non-image files are dropped silently (None).
    """
    if uploaded is None or not is_image_mime(getattr(uploaded, "type", None)):
        return None
    return ImageArtifact(
        name=str(getattr(uploaded, "name", "image")),
        mime=str(uploaded.type),
        content=uploaded.getvalue(),
        file_id=getattr(uploaded, "file_id", None),
    )


# ---------- validity predicates ----------

def image_ready(artifact: Optional[ImageArtifact]) -> bool:
    return artifact is not None and bool(artifact.content) and is_image_mime(artifact.mime)


def sentiment_ready(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def summary_ready(text: Optional[str]) -> bool:
    return bool(text and text.strip()) and len(text) >= MIN_SUMMARY_CHARS
