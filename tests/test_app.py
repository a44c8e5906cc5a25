"""End-to-end screen flows through Streamlit's AppTest."""

from unittest.mock import patch

from core.mock_api import SUMMARY
from core.models import Tab
from core.state import DocumentState
from views.document import load_upload


class FakeUpload:
    """Stands in for Streamlit's UploadedFile."""

    def __init__(self, name, data):
        self.name = name
        self._data = data

    def getvalue(self):
        return self._data


def _markdown(at):
    return "\n".join(m.value for m in at.markdown)


def test_starts_on_home(app):
    assert not app.exception
    assert app.title[0].value == "Investment Research Assistant"
    assert app.radio(key="nav_tab").value == Tab.HOME
    assert app.button(key="home_search_btn").disabled


def test_home_search_opens_search_tab_with_results(app):
    app.text_input(key="home_query").input("inflation").run()

    assert not app.exception
    assert app.session_state["shell"].active_tab == Tab.SEARCH
    assert app.radio(key="nav_tab").value == Tab.SEARCH
    assert app.text_input(key="search_query").value == "inflation"

    state = app.session_state["search_screen"]
    assert not state.is_loading
    assert "inflation" in state.result.answer
    assert len(state.result.sources) == 3
    assert "View Source" in _markdown(app)


def test_home_search_trims_query(app):
    app.text_input(key="home_query").input("  Dividend stocks  ").run()
    assert app.session_state["shell"].search_query == "Dividend stocks"


def test_blank_home_query_stays_home(app):
    app.text_input(key="home_query").input("   ").run()
    assert app.session_state["shell"].active_tab == Tab.HOME
    assert app.button(key="home_search_btn").disabled


def test_home_cards_navigate(app):
    app.button(key="home_to_document").click().run()
    assert app.radio(key="nav_tab").value == Tab.DOCUMENT

    app.radio(key="nav_tab").set_value(Tab.HOME).run()
    app.button(key="home_to_risk").click().run()
    assert app.radio(key="nav_tab").value == Tab.RISK


def test_search_tab_starts_empty_and_disabled(app):
    app.radio(key="nav_tab").set_value(Tab.SEARCH).run()
    assert app.button(key="search_btn").disabled
    assert app.session_state["search_screen"].result is None
    assert "Enter a question about investing" in _markdown(app)


def test_search_screen_runs_its_own_query(app):
    app.radio(key="nav_tab").set_value(Tab.SEARCH).run()
    app.text_input(key="search_query").input("Emerging Markets").run()
    result = app.session_state["search_screen"].result
    assert "emerging markets involves" in result.answer


def test_leaving_a_screen_discards_its_state(app):
    app.text_input(key="home_query").input("bonds").run()
    assert app.session_state["search_screen"].result is not None

    app.radio(key="nav_tab").set_value(Tab.RISK).run()
    assert "search_screen" not in app.session_state
    assert "risk_screen" in app.session_state


def test_document_summary_flow(app):
    app.radio(key="nav_tab").set_value(Tab.DOCUMENT).run()
    assert app.button(key="btn_summarize").disabled
    assert "Upload a document or paste text" in _markdown(app)

    app.text_area(key="doc_text").input("FY24 10-K: revenue up, margins down.").run()
    assert not app.button(key="btn_summarize").disabled

    app.button(key="btn_summarize").click().run()
    assert not app.exception
    summary = app.session_state["document_screen"].summary
    assert summary == SUMMARY
    assert len(summary.bullet_points) == 5
    assert "Key Investment Insights" in _markdown(app)

    app.button(key="btn_clear").click().run()
    state = app.session_state["document_screen"]
    assert state.text == ""
    assert state.summary is None
    assert app.text_area(key="doc_text").value == ""


def test_whitespace_document_keeps_summarize_disabled(app):
    app.radio(key="nav_tab").set_value(Tab.DOCUMENT).run()
    app.text_area(key="doc_text").input("   \n ").run()
    assert app.button(key="btn_summarize").disabled


def test_risk_calculation_flow(app):
    app.radio(key="nav_tab").set_value(Tab.RISK).run()
    assert 'click "Calculate Risk Score"' in _markdown(app)

    app.slider(key="risk_political_stability").set_value(90).run()
    app.slider(key="risk_currency_stability").set_value(80).run()
    app.slider(key="risk_legal_environment").set_value(70).run()
    app.button(key="btn_calc_risk").click().run()

    state = app.session_state["risk_screen"]
    assert state.composite_score == 81
    assert "Low Risk" in _markdown(app)

    app.slider(key="risk_currency_stability").set_value(20).run()
    state = app.session_state["risk_screen"]
    assert not state.is_calculated
    assert state.composite_score is None


def test_risk_reset(app):
    app.radio(key="nav_tab").set_value(Tab.RISK).run()
    app.slider(key="risk_legal_environment").set_value(10).run()
    app.button(key="btn_calc_risk").click().run()
    app.button(key="btn_reset_risk").click().run()

    state = app.session_state["risk_screen"]
    assert not state.is_calculated
    assert app.slider(key="risk_legal_environment").value == 50
    assert state.factors.legal_environment == 50


def test_tab_pick_beats_home_query_committed_on_blur(app):
    # Typing then clicking a tab commits the input and the tab in one rerun.
    app.text_input(key="home_query").set_value("abc")
    app.radio(key="nav_tab").set_value(Tab.RISK)
    app.run()

    assert not app.exception
    assert app.session_state["shell"].active_tab == Tab.RISK
    assert app.session_state["shell"].search_query == ""
    assert "search_screen" not in app.session_state
    assert "risk_screen" in app.session_state


def test_search_query_committed_while_leaving_tab_does_not_search(app):
    app.radio(key="nav_tab").set_value(Tab.SEARCH).run()
    screen = app.session_state["search_screen"]
    app.text_input(key="search_query").set_value("gold")
    app.radio(key="nav_tab").set_value(Tab.DOCUMENT)
    app.run()

    assert app.session_state["shell"].active_tab == Tab.DOCUMENT
    assert "search_screen" not in app.session_state
    # the discarded screen never started a lookup
    assert screen.token == 0
    assert not screen.is_loading


def test_previous_answer_stays_visible_while_searching(app):
    app.text_input(key="home_query").input("bonds").run()
    assert "bonds involves" in _markdown(app)

    # Interrupt the next lookup so the loading render is what remains.
    with patch("views.search.mock_search", side_effect=RuntimeError("lookup interrupted")):
        app.text_input(key="search_query").input("gold").run()

    assert app.exception
    assert "bonds involves" in _markdown(app)
    assert app.session_state["search_screen"].is_loading


# --- Document uploads ---


def test_load_upload_copies_text_into_buffer():
    state = DocumentState()
    assert load_upload(state, FakeUpload("q3.txt", b"Revenue grew 9%"))
    assert state.text == "Revenue grew 9%"
    assert state.source_name == "q3.txt"


def test_load_upload_without_file_keeps_buffer():
    state = DocumentState()
    state.set_text("keep me")
    assert not load_upload(state, None)
    assert state.text == "keep me"


def test_unreadable_upload_shows_error_on_screen(app):
    app.radio(key="nav_tab").set_value(Tab.DOCUMENT).run()
    state = app.session_state["document_screen"]
    assert not load_upload(state, FakeUpload("scan.pdf", b"%PDF-1.7\xff\xfe\x81"))
    app.session_state["document_screen"] = state
    app.run()

    assert not app.exception
    assert len(app.error) == 1
    assert "Could not read scan.pdf as text" in app.error[0].value
    assert app.button(key="btn_summarize").disabled


def test_loaded_upload_shows_file_name(app):
    app.radio(key="nav_tab").set_value(Tab.DOCUMENT).run()
    state = app.session_state["document_screen"]
    assert load_upload(state, FakeUpload("memo.txt", b"Guidance raised for FY25"))
    app.session_state["document_screen"] = state
    app.run()

    assert not app.error
    assert "Loaded from memo.txt" in [c.value for c in app.caption]
    assert not app.button(key="btn_summarize").disabled
