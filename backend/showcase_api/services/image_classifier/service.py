from __future__ import annotations

import io
from typing import Any, Optional

from PIL import Image, UnidentifiedImageError

from showcase_api.core.config import IMAGE_CLASSIFICATION
from showcase_api.core.errors import ArtifactTooLarge, InvalidArtifact, UnsupportedMedia
from showcase_api.services._utils import (
    b64_to_bytes, data_url_mime, guess_mime, is_image_mime, ranked, sha256_hex
)
from showcase_api.services.base import BaseService

"""
Image classification.

payload:
  - content: raw bytes (multipart route)  | content_b64: base64 or data URL
  - mime: optional, falls back to the data URL prefix, then the filename
  - filename: optional

Only MIME types starting with "image/" are accepted. Results are the top
IMAGE_TOP_K (label, score) pairs by descending score.
"""


class Service(BaseService):
    name = "image_classifier"
    task = IMAGE_CLASSIFICATION

    def _content(self, payload: dict[str, Any]) -> tuple[bytes, Optional[str]]:
        raw = payload.get("content")
        if isinstance(raw, (bytes, bytearray)):
            return bytes(raw), None
        b64 = payload.get("content_b64")
        if not b64:
            raise InvalidArtifact("content_b64 is required")
        try:
            return b64_to_bytes(str(b64)), data_url_mime(str(b64))
        except Exception as exc:
            raise InvalidArtifact(f"invalid base64: {exc}") from exc

    def prepare(self, payload: dict[str, Any]) -> Image.Image:
        data, url_mime = self._content(payload)
        mime = payload.get("mime") or url_mime or guess_mime(payload.get("filename"))
        if not is_image_mime(mime):
            raise UnsupportedMedia(f"expected an image/* file, got {mime or 'unknown'}")

        size = len(data)
        if size == 0:
            raise InvalidArtifact("empty file")
        if size > self.settings.upload_max_bytes:
            raise ArtifactTooLarge(f"image too large (> {self.settings.UPLOAD_MAX_MB} MB)")

        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise InvalidArtifact(f"invalid or unsupported {mime} content") from exc

        payload["_meta"] = {
            "mime": mime,
            "size": size,
            "sha256": sha256_hex(data),
            "width": img.width,
            "height": img.height,
        }
        return img.convert("RGB")

    def options(self) -> dict[str, Any]:
        return {"top_k": self.settings.IMAGE_TOP_K}

    def shape(self, raw: Any, payload: dict[str, Any]) -> dict[str, Any]:
        return {
            "predictions": ranked(raw, self.settings.IMAGE_TOP_K),
            "image": payload.get("_meta"),
        }
