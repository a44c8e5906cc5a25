"""Risk — three environment sliders blended into a composite risk score."""

import streamlit as st

from core.risk import (
    WEIGHTS, FACTOR_LABELS, FACTOR_HELP, FACTOR_MIN, FACTOR_MAX, DEFAULT_FACTOR,
    build_assessment,
)
from core.state import RiskState
from components.display import empty_state, download_json_button

STATE_KEY = "risk_screen"
SLIDER_KEYS = {name: f"risk_{name}" for name in WEIGHTS}
WIDGET_KEYS = tuple(SLIDER_KEYS.values())


def mount():
    st.session_state[STATE_KEY] = RiskState()
    for key in WIDGET_KEYS:
        st.session_state[key] = DEFAULT_FACTOR


def _state() -> RiskState:
    if STATE_KEY not in st.session_state:
        mount()
    return st.session_state[STATE_KEY]


def _on_slider(name: str):
    _state().set_factor(name, int(st.session_state[SLIDER_KEYS[name]]))


def _on_calculate():
    _state().calculate()


def _on_reset():
    _state().reset()
    for key in WIDGET_KEYS:
        st.session_state[key] = DEFAULT_FACTOR


def _show_score(state: RiskState):
    score = state.composite_score
    band = state.band
    with st.container(border=True):
        st.markdown("#### Composite Risk Score")
        st.caption("Overall investment risk assessment based on your inputs")

        st.markdown(f'<div class="score">{score}</div>', unsafe_allow_html=True)
        st.markdown(
            "<p style='text-align:center' class='small'>out of 100</p>",
            unsafe_allow_html=True,
        )
        st.progress(score)
        lo, hi = st.columns(2)
        lo.caption("High Risk")
        hi.markdown("<p style='text-align:right' class='small'>Low Risk</p>", unsafe_allow_html=True)

        st.markdown(f"### {band.icon} :{band.color}[{band.label}]")

        st.markdown("##### Score Breakdown")
        for name, label in FACTOR_LABELS.items():
            value = getattr(state.factors, name)
            c_label, c_bar, c_val = st.columns([3, 4, 1])
            c_label.write(label)
            c_bar.progress(value)
            c_val.write(str(value))

        st.markdown("##### Risk Assessment Interpretation")
        st.info(band.interpretation)

    download_json_button(
        build_assessment(state.factors, score),
        filename="risk_assessment.json",
        key=f"dl_risk_{score}",
        label="⬇️ Download Assessment",
    )


def render():
    state = _state()

    with st.container(border=True):
        st.subheader("⚠️ Investment Risk Assessment")
        st.caption(
            "Evaluate investment risk based on key environmental factors "
            "(0 = Very Poor, 100 = Excellent)"
        )
        for name, label in FACTOR_LABELS.items():
            st.slider(
                label,
                min_value=FACTOR_MIN,
                max_value=FACTOR_MAX,
                step=1,
                key=SLIDER_KEYS[name],
                on_change=_on_slider,
                args=(name,),
            )
            st.caption(FACTOR_HELP[name])

        col_calc, col_reset = st.columns([4, 1])
        with col_calc:
            st.button(
                "Calculate Risk Score", key="btn_calc_risk", type="primary",
                on_click=_on_calculate, use_container_width=True,
            )
        with col_reset:
            st.button(
                "Reset", key="btn_reset_risk", on_click=_on_reset,
                use_container_width=True,
            )

    if state.is_calculated:
        _show_score(state)
    else:
        empty_state(
            'Adjust the risk factors above and click "Calculate Risk Score" to see your assessment',
            icon="⚠️",
        )


def unmount():
    for key in (STATE_KEY, *WIDGET_KEYS):
        st.session_state.pop(key, None)
