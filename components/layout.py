import streamlit as st

from core.models import Tab

NAV_KEY = "nav_tab"

CSS = """
<style>
:root { --card-bg: rgba(255,255,255,0.06); --border: rgba(128,128,128,0.25); }
.block-container { padding-top: 1.2rem; padding-bottom: 2rem; max-width: 960px; }
.card {
  border: 1px solid var(--border);
  background: var(--card-bg);
  border-radius: 16px;
  padding: 14px;
}
.card h4 { margin: 0 0 6px 0; }
.card p { font-size: 14px; opacity: 0.85; margin: 0; }
.badge {
  display:inline-block; min-width: 22px; text-align: center;
  padding: 2px 8px; border-radius: 999px;
  border: 1px solid var(--border); font-size: 12px;
}
.empty { text-align: center; padding: 24px 0; opacity: 0.7; }
.empty-icon { font-size: 40px; margin-bottom: 8px; }
.score { font-size: 56px; font-weight: 800; text-align: center; line-height: 1.1; }
.small { font-size: 12px; opacity: 0.85; }
</style>
"""


def apply_theme():
    st.markdown(CSS, unsafe_allow_html=True)


def render_header():
    st.title("Investment Research Assistant")
    st.caption("Analyze investments, summarize documents, and assess risk scores")


def render_tab_bar(key: str, on_change) -> None:
    """Horizontal tab selector; the selected Tab lives in st.session_state[key]."""
    st.radio(
        "Navigation",
        list(Tab),
        format_func=lambda t: t.label,
        horizontal=True,
        key=key,
        on_change=on_change,
        label_visibility="collapsed",
    )
