# showcase_ui/ui/widgets/sentiment.py
from __future__ import annotations
import streamlit as st

from showcase_ui.core.constants import SENTIMENT_EXAMPLES
from showcase_ui.core.lifecycle import AsyncTask, Phase
from showcase_ui.core.presenters import (
    bar_width, confidence_badge, sentiment_bars, sentiment_color, sentiment_icon
)
from showcase_ui.ui.css import badge, bar

TEXT_KEY = "sent-text"


def _use_example(example: str) -> None:
    st.session_state[TEXT_KEY] = example


def render(task: AsyncTask) -> None:
    with st.container(border=True):
        st.subheader("❤️ Sentiment Analyzer")
        st.caption("Enter any text and our AI will determine if the sentiment is positive, negative, or neutral")

        text = st.text_area("Text", key=TEXT_KEY, placeholder="Type or paste your text here...",
                            label_visibility="collapsed")
        if (text or None) != task.artifact:
            task.supply(text or None)

        st.caption("Try examples:")
        cols = st.columns(len(SENTIMENT_EXAMPLES))
        for i, (col, example) in enumerate(zip(cols, SENTIMENT_EXAMPLES)):
            col.button(f'"{example[:30]}..."', key=f"sent-ex-{i}", on_click=_use_example, args=(example,))

        if st.button("Analyze Sentiment", key="sent-run", type="primary",
                     disabled=not task.can_submit(), use_container_width=True):
            with st.spinner("Analyzing..."):
                task.run()

        if task.phase is Phase.SUCCESS and task.result is not None:
            p = task.result
            c1, c2 = st.columns([3, 1])
            c1.markdown(f"{sentiment_icon(p.label)} **{p.label.capitalize()}**")
            c2.markdown(badge(confidence_badge(p.score)), unsafe_allow_html=True)
            st.markdown(bar(bar_width(p.score), sentiment_color(p.label)), unsafe_allow_html=True)

            for col, (category, width) in zip(st.columns(3), sentiment_bars(p)):
                col.caption(category.capitalize())
                col.markdown(bar(width, sentiment_color(category)), unsafe_allow_html=True)

        with st.expander("How it works"):
            st.write(
                "This AI uses DistilBERT, a transformer model that understands language context "
                "and emotion. It was trained on thousands of movie reviews to learn the subtle "
                "patterns that indicate positive or negative feelings."
            )
