# showcase_api/services/_utils.py
from __future__ import annotations

import base64
import hashlib
import math
import mimetypes
from typing import Any, Optional

from showcase_api.core.errors import InvalidArtifact, ProviderError


def strip_data_url(b64: str) -> str:
    if "," in b64 and ";base64" in b64[:128]:
        return b64.split(",", 1)[1]
    return b64


def data_url_mime(b64: str) -> Optional[str]:
    # "data:image/png;base64,...." -> "image/png"
    if b64.startswith("data:") and ";base64" in b64[:128]:
        return b64[5:].split(";", 1)[0] or None
    return None


def b64_to_bytes(b64: str) -> bytes:
    return base64.b64decode(strip_data_url(b64), validate=False)


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def guess_mime(filename: Optional[str]) -> Optional[str]:
    if not filename:
        return None
    guessed, _ = mimetypes.guess_type(str(filename))
    return guessed


def is_image_mime(mime: Optional[str]) -> bool:
    return bool(mime) and str(mime).lower().startswith("image/")


def require_text(payload: dict[str, Any]) -> str:
    text = payload.get("text")
    if not isinstance(text, str):
        raise InvalidArtifact("text is required (string)")
    if not text.strip():
        raise InvalidArtifact("text must not be empty")
    return text


def ranked(raw: Any, limit: int) -> list[dict[str, Any]]:
    """
    Normalize pipeline classification output to [{label, score}] sorted by
    descending score and truncated to `limit`.

    Accepts a dict, a list of dicts, or a single-item list of such lists.
    """
    rows = raw
    if isinstance(rows, dict):
        rows = [rows]
    if isinstance(rows, list) and rows and isinstance(rows[0], list):
        rows = rows[0]
    if not isinstance(rows, list):
        raise ProviderError(f"unexpected provider output: {type(raw).__name__}")

    out: list[dict[str, Any]] = []
    for row in rows:
        if not isinstance(row, dict) or "label" not in row or "score" not in row:
            raise ProviderError("unexpected provider output: missing label/score")
        # softmax output can overshoot [0, 1] by float error
        score = min(1.0, max(0.0, float(row["score"])))
        out.append({"label": str(row["label"]), "score": score})
    out.sort(key=lambda r: r["score"], reverse=True)
    return out[: max(0, int(limit))]


def reduction_percent(original_chars: int, summary_chars: int) -> int:
    # Half-up rounding of (1 - summary/original) * 100
    if original_chars <= 0:
        return 0
    return int(math.floor((1 - summary_chars / original_chars) * 100 + 0.5))
