"""Home — search box plus shortcuts to the other screens."""

import streamlit as st

from components.display import card

QUERY_KEY = "home_query"
WIDGET_KEYS = (QUERY_KEY,)


def _submit(on_search):
    query = st.session_state.get(QUERY_KEY, "").strip()
    if query:
        on_search(query)


def render(on_search, on_navigate_to_document, on_navigate_to_risk):
    # ── Search ───────────────────────────────────────────────────────────────
    with st.container(border=True):
        st.subheader("🔍 Investment Search")
        st.caption("Ask questions about investing, market trends, and financial analysis")
        col_q, col_btn = st.columns([5, 1], vertical_alignment="bottom")
        with col_q:
            st.text_input(
                "Question",
                placeholder="Ask a question about investing...",
                key=QUERY_KEY,
                on_change=_submit,
                args=(on_search,),
                label_visibility="collapsed",
            )
        with col_btn:
            st.button(
                "Search",
                key="home_search_btn",
                type="primary",
                disabled=not st.session_state.get(QUERY_KEY, "").strip(),
                on_click=_submit,
                args=(on_search,),
                use_container_width=True,
            )

    # ── Quick actions ────────────────────────────────────────────────────────
    c1, c2 = st.columns(2)
    with c1:
        card(
            "Summarize Document",
            "Upload or paste investment documents for quick analysis and key insights",
            icon="📄",
        )
        st.button(
            "Start Document Analysis",
            key="home_to_document",
            on_click=on_navigate_to_document,
            use_container_width=True,
        )
    with c2:
        card(
            "Risk Score Calculator",
            "Assess investment risks based on political, currency, and legal factors",
            icon="📊",
        )
        st.button(
            "Calculate Risk Score",
            key="home_to_risk",
            on_click=on_navigate_to_risk,
            use_container_width=True,
        )

    st.divider()
    st.markdown("##### Recent Activity")
    st.caption("Your recent searches and analyses will appear here")
    st.info("No recent activity yet. Start by asking a question or analyzing a document.")


def unmount():
    for key in WIDGET_KEYS:
        st.session_state.pop(key, None)
