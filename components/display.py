"""Reusable display pieces shared by the screens."""

import streamlit as st
import json


def card(title: str, body: str, icon: str = ""):
    """Static card: bold title line plus a muted description."""
    heading = f"{icon} {title}".strip()
    st.markdown(
        f'<div class="card"><h4>{heading}</h4><p>{body}</p></div>',
        unsafe_allow_html=True,
    )


def empty_state(message: str, icon: str = ""):
    """Centered placeholder shown before a screen has anything to display."""
    with st.container(border=True):
        st.markdown(
            f'<div class="empty"><div class="empty-icon">{icon}</div>'
            f"<p>{message}</p></div>",
            unsafe_allow_html=True,
        )


def numbered_list(items):
    for i, item in enumerate(items, start=1):
        st.markdown(f'<span class="badge">{i}</span> {item}', unsafe_allow_html=True)


def download_json_button(payload: dict, filename: str, key: str, label: str = "⬇️ Download JSON"):
    """Export one result as pretty-printed UTF-8 JSON."""
    body = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    st.download_button(
        label,
        data=body.encode("utf-8"),
        file_name=filename,
        mime="application/json",
        key=key,
        use_container_width=True,
    )
