# showcase_ui/ui/widgets/image_classifier.py
from __future__ import annotations
from typing import Any
import streamlit as st

from showcase_ui.core.artifacts import ImageArtifact, image_from_upload
from showcase_ui.core.lifecycle import AsyncTask, Phase
from showcase_ui.core.presenters import bar_width, percent_label
from showcase_ui.ui.css import badge, bar

NONCE_KEY = "img-nonce"


def _upload_id(uploaded: Any) -> Any:
    return getattr(uploaded, "file_id", None) or (uploaded.name, uploaded.size)


def _same_upload(artifact: ImageArtifact | None, uploaded: Any) -> bool:
    if artifact is None:
        return False
    return (artifact.file_id or (artifact.name, len(artifact.content))) == _upload_id(uploaded)


def _reset(task: AsyncTask) -> None:
    task.reset()
    # a fresh uploader key drops the file Streamlit is still holding
    st.session_state[NONCE_KEY] = st.session_state.get(NONCE_KEY, 0) + 1


def render(task: AsyncTask) -> None:
    with st.container(border=True):
        st.subheader("🖼️ Image Classifier")
        st.caption("Upload an image and our AI will identify what's in it using computer vision")

        nonce = st.session_state.get(NONCE_KEY, 0)
        uploaded = st.file_uploader("Drop an image here, or click to select", key=f"img-upload-{nonce}")

        if uploaded is None and task.artifact is not None:
            task.reset()
        elif uploaded is not None and not _same_upload(task.artifact, uploaded):
            artifact = image_from_upload(uploaded)
            if artifact is not None:
                task.supply(artifact)
                with st.spinner("Analyzing image..."):
                    task.run()

        if task.artifact is not None:
            st.image(task.artifact.content, caption=task.artifact.name, width=320)
            st.button("Upload Different Image", key="img-reset", on_click=_reset, args=(task,))

        if task.phase is Phase.SUCCESS and task.result:
            st.markdown("#### Predictions")
            for p in task.result:
                c1, c2, c3 = st.columns([3, 1, 2])
                c1.markdown(f"**{p.label}**")
                c2.markdown(badge(percent_label(p.score)), unsafe_allow_html=True)
                c3.markdown(bar(bar_width(p.score)), unsafe_allow_html=True)

        with st.expander("How it works"):
            st.write(
                "This AI uses a MobileNetV4 neural network trained on millions of images. "
                "It analyzes patterns in pixels to recognize objects, animals, and scenes "
                "with remarkable accuracy."
            )
