"""Documents — upload or paste a document and get a (canned) investment summary."""

import streamlit as st

from core.errors import DocumentReadError
from core.mock_api import mock_summarize
from core.state import DocumentState, EMPTY, LOADING
from components.display import empty_state, numbered_list, download_json_button

STATE_KEY = "document_screen"
TEXT_KEY = "doc_text"
UPLOAD_PREFIX = "doc_upload"
# No file-type check beyond what the browser picker offers.
UPLOAD_TYPES = ["txt", "pdf", "doc", "docx"]


def _upload_key(state: DocumentState) -> str:
    return f"{UPLOAD_PREFIX}_{state.upload_nonce}"


def mount():
    st.session_state[STATE_KEY] = DocumentState()
    st.session_state[TEXT_KEY] = ""


def unmount():
    state = st.session_state.pop(STATE_KEY, None)
    st.session_state.pop(TEXT_KEY, None)
    if state is not None:
        st.session_state.pop(_upload_key(state), None)


def _state() -> DocumentState:
    if STATE_KEY not in st.session_state:
        mount()
    return st.session_state[STATE_KEY]


# ── Callbacks ─────────────────────────────────────────────────────────────────

def load_upload(state: DocumentState, uploaded) -> bool:
    """Copy an uploaded file into the buffer; False if nothing was loaded.

    A removed file keeps the buffer as is. An unreadable one leaves
    ``state.read_error`` set for the next render.
    """
    if uploaded is None:
        return False
    try:
        state.load_file(uploaded.getvalue(), uploaded.name)
    except DocumentReadError:
        return False
    return True


def _on_file_selected():
    state = _state()
    if load_upload(state, st.session_state.get(_upload_key(state))):
        st.session_state[TEXT_KEY] = state.text


def _on_text_changed():
    _state().set_text(st.session_state.get(TEXT_KEY, ""))


def _on_summarize():
    _state().begin()


def _on_clear():
    _state().clear()
    st.session_state[TEXT_KEY] = ""


def _show_summary(summary, key: str):
    with st.container(border=True):
        st.markdown("#### Key Investment Insights")
        st.caption("Main points extracted from your document")
        numbered_list(summary.bullet_points)

    with st.container(border=True):
        st.markdown("#### ✅ Investment Verdict")
        st.info(summary.verdict)

    download_json_button(summary.to_dict(), filename="document_summary.json", key=f"dl_doc_{key}")


def render(settings):
    state = _state()

    with st.container(border=True):
        st.subheader("📄 Document Analysis")
        st.caption("Upload a file or paste text to get a concise investment analysis")

        st.file_uploader(
            "Upload a document file",
            type=UPLOAD_TYPES,
            key=_upload_key(state),
            on_change=_on_file_selected,
        )
        if state.read_error:
            st.error(state.read_error)
        elif state.source_name:
            st.caption(f"Loaded from {state.source_name}")

        st.markdown("<p style='text-align:center' class='small'>or</p>", unsafe_allow_html=True)

        st.text_area(
            "Paste document text:",
            placeholder="Paste your investment document, earnings report, or financial analysis here...",
            height=200,
            key=TEXT_KEY,
            on_change=_on_text_changed,
        )

        col_run, col_clear = st.columns([4, 1])
        with col_run:
            st.button(
                "Analyzing..." if state.is_loading else "Summarize Document",
                key="btn_summarize",
                type="primary",
                disabled=not state.can_summarize(),
                on_click=_on_summarize,
                use_container_width=True,
            )
        with col_clear:
            if state.text:
                st.button(
                    "Clear", key="btn_clear", on_click=_on_clear,
                    use_container_width=True,
                )

    if state.render_state == LOADING:
        token = state.token
        with st.spinner("Analyzing document and extracting key insights..."):
            summary = mock_summarize(state.text, latency=settings.summary_latency)
        state.complete(token, summary)
        st.rerun()

    if state.summary is not None:
        _show_summary(state.summary, key=str(state.token))
    elif state.render_state == EMPTY:
        empty_state("Upload a document or paste text to get started with analysis", icon="📄")
