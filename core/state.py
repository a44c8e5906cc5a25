"""
Per-screen state holders.

Each screen keeps one of these in ``st.session_state``; the shell keeps a
``ShellState``. They hold no Streamlit objects so the transitions can be
exercised without a running app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from core.errors import DocumentReadError
from core.models import SearchResult, SummaryResult, Tab
from core.risk import RiskFactors, RiskBand, classify, composite_score

logger = logging.getLogger(__name__)

EMPTY = "empty"
LOADING = "loading"
RESULT = "result"
EDITING = "editing"


# ── Shell ─────────────────────────────────────────────────────────────────────

@dataclass
class ShellState:
    """Active tab plus the query relayed from Home to Search."""
    active_tab: Tab = Tab.HOME
    search_query: str = ""
    mounted_tab: Optional[Tab] = None

    def select_tab(self, tab: Tab):
        tab = Tab(tab)
        if tab != self.active_tab:
            logger.info("Tab %s -> %s", self.active_tab.value, tab.value)
        self.active_tab = tab

    def on_search_from_home(self, query: str) -> bool:
        """Relay `query` to Search; ignored once another tab has been picked.

        Callers filter out blank queries.
        """
        if self.active_tab != Tab.HOME:
            logger.info("Ignoring home search %r, tab is already %s", query, self.active_tab.value)
            return False
        self.search_query = str(query)
        self.select_tab(Tab.SEARCH)
        return True

    def navigate_to_document(self):
        self.select_tab(Tab.DOCUMENT)

    def navigate_to_risk(self):
        self.select_tab(Tab.RISK)

    def needs_remount(self) -> bool:
        return self.mounted_tab != self.active_tab


# ── Simulated calls ───────────────────────────────────────────────────────────

@dataclass
class _PendingCall:
    """In-flight flag plus a request token so late completions can be dropped."""
    is_loading: bool = False
    token: int = 0

    def _start(self) -> int:
        self.token += 1
        self.is_loading = True
        return self.token

    def _accepts(self, token: int) -> bool:
        if not self.is_loading or token != self.token:
            logger.info("Dropping stale completion (token %s, current %s)", token, self.token)
            return False
        return True

    def _cancel(self):
        if self.is_loading:
            self.token += 1
            self.is_loading = False


@dataclass
class SearchState(_PendingCall):
    """idle -> loading -> result, back to loading on every new search."""
    query: str = ""
    pending_query: str = ""
    result: Optional[SearchResult] = None

    def can_search(self, query: Optional[str] = None) -> bool:
        text = self.query if query is None else query
        return bool(text.strip()) and not self.is_loading

    def begin(self, query: Optional[str] = None) -> Optional[int]:
        """Start a search; returns the request token, or None if it was a no-op."""
        if query is not None:
            self.query = query
        if not self.can_search():
            return None
        token = self._start()
        self.pending_query = self.query.strip()
        logger.info("Search #%d started: %r", token, self.pending_query)
        return token

    def complete(self, token: int, result: SearchResult) -> bool:
        if not self._accepts(token):
            return False
        self.result = result
        self.is_loading = False
        logger.info("Search #%d finished with %d sources", token, len(result.sources))
        return True

    @property
    def render_state(self) -> str:
        if self.is_loading:
            return LOADING
        if self.result is not None:
            return RESULT
        return EMPTY


@dataclass
class DocumentState(_PendingCall):
    text: str = ""
    summary: Optional[SummaryResult] = None
    source_name: Optional[str] = None
    read_error: Optional[str] = None
    # bumped to give the uploader a fresh widget key after Clear
    upload_nonce: int = 0

    def set_text(self, text: str):
        self.text = text or ""
        self.read_error = None

    def load_file(self, data: bytes, filename: str):
        """Replace the buffer with the file decoded as UTF-8 text.

        The extension is not checked against the content. Undecodable bytes
        raise DocumentReadError and leave the buffer as it was.
        """
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            self.read_error = f"Could not read {filename} as text. Paste the content instead."
            logger.warning("Failed to decode %s: %s", filename, e)
            raise DocumentReadError(self.read_error, filename=filename) from e
        self.text = text
        self.source_name = filename
        self.read_error = None
        logger.info("Loaded %s (%d chars)", filename, len(text))

    def can_summarize(self) -> bool:
        return bool(self.text.strip()) and not self.is_loading

    def begin(self) -> Optional[int]:
        if not self.can_summarize():
            return None
        token = self._start()
        logger.info("Summary #%d started (%d chars)", token, len(self.text))
        return token

    def complete(self, token: int, summary: SummaryResult) -> bool:
        if not self._accepts(token):
            return False
        self.summary = summary
        self.is_loading = False
        logger.info("Summary #%d finished", token)
        return True

    def clear(self):
        self._cancel()
        self.text = ""
        self.summary = None
        self.source_name = None
        self.read_error = None
        self.upload_nonce += 1

    @property
    def render_state(self) -> str:
        if self.is_loading:
            return LOADING
        if self.summary is not None:
            return RESULT
        if not self.text:
            return EMPTY
        return EDITING


@dataclass
class RiskState:
    factors: RiskFactors = field(default_factory=RiskFactors)
    composite_score: Optional[int] = None
    is_calculated: bool = False

    def set_factor(self, name: str, value: int) -> bool:
        """Update one factor; a real change invalidates the last score."""
        updated = self.factors.with_factor(name, value)
        if updated == self.factors:
            return False
        self.factors = updated
        self.composite_score = None
        self.is_calculated = False
        return True

    def calculate(self) -> int:
        self.composite_score = composite_score(self.factors)
        self.is_calculated = True
        logger.info(
            "Composite risk score %d for %s", self.composite_score, self.factors.to_dict()
        )
        return self.composite_score

    def reset(self):
        self.factors = RiskFactors()
        self.composite_score = None
        self.is_calculated = False

    @property
    def band(self) -> Optional[RiskBand]:
        if not self.is_calculated or self.composite_score is None:
            return None
        return classify(self.composite_score)
