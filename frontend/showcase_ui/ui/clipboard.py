# showcase_ui/ui/clipboard.py
from __future__ import annotations
import html
import json

import streamlit.components.v1 as components

from showcase_ui.core.constants import COPY_FEEDBACK_MS


def copy_button_html(text: str, label: str = "📋 Copy", done_label: str = "✅ Copied",
                     feedback_ms: int = COPY_FEEDBACK_MS) -> str:
    """
    Browser-side copy button: writes `text` to the clipboard, shows `done_label`
    for `feedback_ms` milliseconds, then reverts to `label`.
    """
    payload = json.dumps(text).replace("</", "<\\/")
    return f"""
<button id="sc-copy" class="sc-copy" style="font:inherit;padding:4px 10px;border-radius:6px;
        border:1px solid #d1d5db;background:#fff;cursor:pointer">{html.escape(label)}</button>
<script>
  const btn = document.getElementById("sc-copy");
  btn.addEventListener("click", async () => {{
    await navigator.clipboard.writeText({payload});
    btn.textContent = {json.dumps(done_label)};
    setTimeout(() => {{ btn.textContent = {json.dumps(label)}; }}, {int(feedback_ms)});
  }});
</script>
"""


def copy_button(text: str) -> None:
    components.html(copy_button_html(text), height=44)
