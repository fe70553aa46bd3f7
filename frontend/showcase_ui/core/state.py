# showcase_ui/core/state.py
from __future__ import annotations
from typing import Optional
import streamlit as st

from showcase_ui.core.constants import DEFAULT_API_URL
from showcase_ui.core.lifecycle import AsyncTask
from showcase_ui.core.provider import HttpInferenceProvider, InferenceProvider
from showcase_ui.core.tasks import make_image_task, make_sentiment_task, make_summary_task

# session keys of the three widget tasks
IMAGE_TASK = "task_image"
SENTIMENT_TASK = "task_sentiment"
SUMMARY_TASK = "task_summary"

_FACTORIES = {
    IMAGE_TASK: make_image_task,
    SENTIMENT_TASK: make_sentiment_task,
    SUMMARY_TASK: make_summary_task,
}


# -----------------------------
# Session State Initialization
# -----------------------------
def init_state(provider: Optional[InferenceProvider] = None) -> None:
    if "api_url" not in st.session_state:
        st.session_state.api_url = DEFAULT_API_URL
    if "provider" not in st.session_state:
        st.session_state.provider = provider or HttpInferenceProvider(st.session_state.api_url)
    for key, factory in _FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory(st.session_state.provider)


def get_task(key: str) -> AsyncTask:
    return st.session_state[key]


# -----------------------------
# Server helpers
# -----------------------------
def get_current_base_url() -> str:
    return st.session_state.api_url


def set_base_url(url: str) -> None:
    st.session_state.api_url = url
    provider = st.session_state.get("provider")
    if isinstance(provider, HttpInferenceProvider):
        provider.base_url = url
