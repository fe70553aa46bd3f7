# showcase_ui/ui/sections.py
from __future__ import annotations
import streamlit as st

HOW_IT_WORKS = (
    ("🧠", "Neural Networks",
     "AI models are like digital brains with millions of connections that learn patterns "
     "from data, similar to how humans learn from experience."),
    ("⚡", "Training Process",
     "These models are trained on massive datasets (millions of images, texts, and examples) "
     "to recognize patterns and make predictions."),
    ("✨", "Real-time Inference",
     "Once trained, these models can analyze new data instantly, making intelligent "
     "predictions and generating useful insights."),
)


def render_hero() -> None:
    st.caption("✨ Try AI in Your Browser")
    st.title("Experience AI in Action")
    st.write(
        "Discover the power of artificial intelligence with our interactive demos. "
        "Upload images, analyze text sentiment, and create summaries with "
        "cutting-edge pre-trained models."
    )


def render_demos_header() -> None:
    st.header("Interactive AI Demos")
    st.write("Each demo sends your input to a pre-trained model and shows exactly what it returns.")


def render_how_it_works() -> None:
    st.divider()
    st.header("How Does AI Work?")
    cols = st.columns(len(HOW_IT_WORKS))
    for col, (icon, title, text) in zip(cols, HOW_IT_WORKS):
        with col:
            st.markdown(f"### {icon} {title}")
            st.write(text)
