# frontend/app.py
from __future__ import annotations
import logging
import streamlit as st

from showcase_ui.core.state import IMAGE_TASK, SENTIMENT_TASK, SUMMARY_TASK, get_task, init_state
from showcase_ui.ui.css import apply_css
from showcase_ui.ui.sections import render_demos_header, render_hero, render_how_it_works
from showcase_ui.ui.sidebar import render_sidebar
from showcase_ui.ui.widgets import image_classifier, sentiment, summarizer

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

st.set_page_config(page_title="AI Showcase", page_icon="✨", layout="wide")
apply_css()
init_state()

with st.sidebar:
    render_sidebar()

render_hero()
render_demos_header()

image_classifier.render(get_task(IMAGE_TASK))

left, right = st.columns(2)
with left:
    sentiment.render(get_task(SENTIMENT_TASK))
with right:
    summarizer.render(get_task(SUMMARY_TASK))

render_how_it_works()
