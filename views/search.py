"""Search — question box with a simulated research lookup."""

import streamlit as st

from core.mock_api import mock_search
from core.state import SearchState, LOADING
from core.models import Tab
from components.display import empty_state, download_json_button
from components.layout import NAV_KEY

STATE_KEY = "search_screen"
QUERY_KEY = "search_query"
WIDGET_KEYS = (QUERY_KEY,)


def mount(initial_query: str = ""):
    """Fresh screen state; a non-empty initial query starts searching at once."""
    state = SearchState(query=initial_query)
    st.session_state[STATE_KEY] = state
    st.session_state[QUERY_KEY] = initial_query
    if initial_query:
        state.begin()


def _state() -> SearchState:
    if STATE_KEY not in st.session_state:
        mount()
    return st.session_state[STATE_KEY]


def _submit():
    # Leaving the tab blurs the input; only search while Search stays selected.
    if st.session_state.get(NAV_KEY, Tab.SEARCH) != Tab.SEARCH:
        return
    _state().begin(st.session_state.get(QUERY_KEY, ""))


def _show_result(result, key: str):
    with st.container(border=True):
        st.markdown("#### 🔍 Answer")
        for paragraph in result.paragraphs():
            st.write(paragraph)

    with st.container(border=True):
        st.markdown("#### Sources")
        st.caption("Information compiled from the following sources")
        for i, source in enumerate(result.sources, start=1):
            st.markdown(
                f'<span class="badge">{i}</span> **{source.title}**',
                unsafe_allow_html=True,
            )
            st.caption(source.excerpt)
            st.markdown(f"[View Source ↗]({source.url})")
            if i < len(result.sources):
                st.divider()

    download_json_button(result.to_dict(), filename="search_result.json", key=f"dl_search_{key}")


def render(settings):
    state = _state()

    with st.container(border=True):
        col_q, col_btn = st.columns([5, 1], vertical_alignment="bottom")
        with col_q:
            st.text_input(
                "Question",
                placeholder="Ask a question about investing...",
                key=QUERY_KEY,
                on_change=_submit,
                label_visibility="collapsed",
            )
        with col_btn:
            st.button(
                "Searching..." if state.is_loading else "Search",
                key="search_btn",
                type="primary",
                disabled=not state.can_search(st.session_state.get(QUERY_KEY, "")),
                on_click=_submit,
                use_container_width=True,
            )

    # The previous answer stays on screen while a new search runs.
    if state.result is not None:
        _show_result(state.result, key=str(state.token))

    if state.render_state == LOADING:
        token = state.token
        with st.spinner("Searching for investment insights..."):
            result = mock_search(state.pending_query, latency=settings.search_latency)
        state.complete(token, result)
        st.rerun()

    if state.result is None:
        empty_state("Enter a question about investing to get started", icon="🔍")


def unmount():
    for key in (STATE_KEY, *WIDGET_KEYS):
        st.session_state.pop(key, None)
