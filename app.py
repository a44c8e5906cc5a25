# app.py
# Streamlit shell for the Investment Research Assistant demo
# - Tab bar: Home / Search / Documents / Risk
# - Home forwards a search query to the Search screen
# - Each screen keeps its own state; switching tabs discards the screen left behind
# - Search and document summaries are canned responses behind a simulated delay

import logging

import streamlit as st

from core.models import Tab
from core.settings import get_settings
from core.state import ShellState
from components.layout import NAV_KEY, apply_theme, render_header, render_tab_bar
from views import home, search, document, risk

st.set_page_config(page_title="Investment Research Assistant", page_icon="📈", layout="wide")

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)

SHELL_KEY = "shell"

SCREENS = {
    Tab.HOME: home,
    Tab.SEARCH: search,
    Tab.DOCUMENT: document,
    Tab.RISK: risk,
}

if SHELL_KEY not in st.session_state:
    st.session_state[SHELL_KEY] = ShellState()
shell: ShellState = st.session_state[SHELL_KEY]


# ----------------------------
# Callbacks (run before the script body on the next rerun)
# ----------------------------
def _on_tab_selected():
    shell.select_tab(st.session_state[NAV_KEY])


def _on_search_from_home(query: str):
    # A tab picked in the same rerun wins over a query committed on blur,
    # whichever callback Streamlit runs first.
    if st.session_state.get(NAV_KEY, Tab.HOME) != Tab.HOME:
        logger.info("Tab bar changed in this rerun; dropping home search %r", query)
        return
    shell.on_search_from_home(query)


# ----------------------------
# Screen lifecycle
# ----------------------------
if shell.needs_remount():
    if shell.mounted_tab is not None:
        logger.debug("Unmounting %s", shell.mounted_tab.value)
        SCREENS[shell.mounted_tab].unmount()
    if shell.active_tab == Tab.SEARCH:
        search.mount(initial_query=shell.search_query)
    elif shell.active_tab == Tab.DOCUMENT:
        document.mount()
    elif shell.active_tab == Tab.RISK:
        risk.mount()
    shell.mounted_tab = shell.active_tab

# Keep the tab bar in step with tab changes made by callbacks.
st.session_state[NAV_KEY] = shell.active_tab

apply_theme()
render_header()
render_tab_bar(NAV_KEY, on_change=_on_tab_selected)
st.write("")

if shell.active_tab == Tab.HOME:
    home.render(
        on_search=_on_search_from_home,
        on_navigate_to_document=shell.navigate_to_document,
        on_navigate_to_risk=shell.navigate_to_risk,
    )
elif shell.active_tab == Tab.SEARCH:
    search.render(settings)
elif shell.active_tab == Tab.DOCUMENT:
    document.render(settings)
else:
    risk.render()
