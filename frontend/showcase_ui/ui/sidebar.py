# showcase_ui/ui/sidebar.py
from __future__ import annotations
import streamlit as st
from showcase_ui.core.state import set_base_url, get_current_base_url
from showcase_ui.core.http import health

def render_sidebar():
    st.subheader("Inference API")

    current = get_current_base_url()
    new_url = st.text_input("Base URL", value=current, help="e.g. http://127.0.0.1:8000")
    if new_url and new_url != current:
        set_base_url(new_url)

    c1, c2 = st.columns(2)
    if c1.button("Test"):
        ok, msg = health(get_current_base_url())
        if ok:
            st.success(f"OK ✅ ({msg})")
        else:
            st.error(f"Unreachable ❌ {msg}")

    if c2.button("Docs"):
        st.markdown(f"[Open Docs]({get_current_base_url().rstrip('/')}/docs)")

    st.caption("Models run on the API server; nothing you upload is stored.")
