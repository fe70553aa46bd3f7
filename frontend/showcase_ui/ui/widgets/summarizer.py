# showcase_ui/ui/widgets/summarizer.py
from __future__ import annotations
import html
import streamlit as st

from showcase_ui.core.constants import MIN_SUMMARY_CHARS, SUMMARY_EXAMPLE
from showcase_ui.core.lifecycle import AsyncTask, Phase
from showcase_ui.core.presenters import summary_metrics
from showcase_ui.ui.clipboard import copy_button
from showcase_ui.ui.css import badge

TEXT_KEY = "sum-text"


def _load_example() -> None:
    st.session_state[TEXT_KEY] = SUMMARY_EXAMPLE


def render(task: AsyncTask) -> None:
    with st.container(border=True):
        st.subheader("📄 Text Summarizer")
        st.caption("Paste a long article or text and our AI will create a concise summary")

        text = st.text_area("Text", key=TEXT_KEY, placeholder="Paste your long text here...",
                            height=160, label_visibility="collapsed")
        if (text or None) != task.artifact:
            task.supply(text or None)

        c1, c2 = st.columns([3, 1])
        c1.button("Load Example Text", key="sum-example", on_click=_load_example)
        c2.markdown(badge(f"{len(text or '')} characters"), unsafe_allow_html=True)

        if st.button("Generate Summary", key="sum-run", type="primary",
                     disabled=not task.can_submit(), use_container_width=True):
            with st.spinner("Summarizing..."):
                task.run()

        if text and len(text) < MIN_SUMMARY_CHARS:
            st.caption(f"Please enter at least {MIN_SUMMARY_CHARS} characters for better summarization")

        result = task.result
        if task.phase is Phase.FAILURE and result is not None:
            st.error(result.summary)
        elif task.phase is Phase.SUCCESS and result is not None:
            head, action = st.columns([3, 1])
            head.markdown("#### Summary")
            with action:
                copy_button(result.summary)
            st.markdown(f"<p class=\"sc-summary\">{html.escape(result.summary)}</p>", unsafe_allow_html=True)
            m = summary_metrics(result.original, result.summary)
            st.markdown(
                " ".join([
                    badge(f"Original: {m.original_chars} chars", "outline"),
                    badge(f"Summary: {m.summary_chars} chars", "outline"),
                    badge(f"{m.reduction_pct}% shorter"),
                ]),
                unsafe_allow_html=True,
            )

        with st.expander("How it works"):
            st.write(
                "This AI uses DistilBART, a transformer model specialized in text summarization. "
                "It identifies the most important sentences and ideas, then rewrites them in a "
                "concise way while preserving the core meaning."
            )
