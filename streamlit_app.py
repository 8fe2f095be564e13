"""
Streamlit application for the B2C Tokenomics Calculator.

This is the web front end: it holds the input state, calls the engine on
every change and renders the returned record. All economics live in the
tokencalc package.

Run locally with: streamlit run streamlit_app.py
"""

from typing import Any, Dict

import streamlit as st

from tokencalc.config.loader import load_config
from tokencalc.config.schema import MarketAssumptions, SystemParams, UserInputs
from tokencalc.engine.calculator import Results, compute
from tokencalc.reporting.charts import (
    create_bonding_curve_chart,
    create_burn_split_chart,
    create_emission_chart,
)
from tokencalc.reporting.series import bonding_curve_series, burn_split_series, emission_series
from tokencalc.validation.inputs import correct_input, validate_input
from tokencalc.validation.sanity_checks import SanityChecker

# Page config
st.set_page_config(
    page_title="B2C Tokenomics Calculator",
    page_icon="🪙",
    layout="wide",
)

if 'config' not in st.session_state:
    st.session_state.config = load_config()


@st.cache_data(show_spinner=False)
def _compute_cached(inputs_dict: Dict[str, Any], params_dict: Dict[str, Any], market_dict: Dict[str, Any]) -> Results:
    """Recompute only when inputs or parameters change."""
    return compute(UserInputs(**inputs_dict), SystemParams(**params_dict), MarketAssumptions(**market_dict))


def _number_input(field: str, label: str, default: float, **kwargs) -> float:
    """Number widget that reports range errors and applies the correction rule."""
    value = st.number_input(label, value=default, key=field, **kwargs)
    error = validate_input(field, value)
    if error:
        st.caption(f":red[{error}]")
        value = correct_input(field, value)
    return value


def render_inputs(defaults: UserInputs) -> UserInputs:
    st.subheader("Your activity")
    purchase_price = _number_input(
        "purchase_price", "Purchase price", float(defaults.purchase_price), step=100.0,
        help="Average cost of one purchase"
    )
    number_of_purchases = _number_input(
        "number_of_purchases", "Number of purchases", int(defaults.number_of_purchases), step=1,
        help="How many purchases you plan to make"
    )
    period = _number_input(
        "period", "Period since launch", float(defaults.period), step=1.0,
        help="Time since platform launch, in periods"
    )
    review_quality = _number_input(
        "review_quality", "Review quality (0-1)", float(defaults.review_quality), step=0.1,
        help="0 = poor, 1 = excellent"
    )
    return_probability = _number_input(
        "return_probability", "Return probability (0-1)", float(defaults.return_probability), step=0.1,
        help="0 = never return, 1 = always return"
    )
    return UserInputs(
        purchase_price=purchase_price,
        number_of_purchases=int(number_of_purchases),
        period=period,
        review_quality=review_quality,
        return_probability=return_probability,
    )


def render_results(results: Results) -> None:
    st.subheader("Results")
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Minted tokens", f"{results.total_minted_user:,.2f}")
    col2.metric("Token price", f"{results.token_price:,.4f}")
    col3.metric("Burned tokens", f"{results.total_burned:,.2f}")
    col4.metric("Net tokens", f"{results.net_tokens:,.2f}")

    col1, col2 = st.columns(2)
    col1.metric("Destroyed (70%)", f"{results.burn_destroyed:,.2f}")
    col2.metric("Redistributed to sellers (30%)", f"{results.burn_redistributed:,.2f}")

    with st.expander("Breakdown"):
        breakdown = results.to_dict()['breakdown']
        breakdown['mint'].pop('purchases')
        st.json(breakdown)


def main() -> None:
    config = st.session_state.config
    st.title("B2C Tokenomics Calculator")
    st.caption("Tokens you earn on purchases (emission) and spend on discounts (burn).")

    left, right = st.columns([1, 2])
    with left:
        inputs = render_inputs(config.inputs)
        for warning in SanityChecker(config).check_params():
            st.caption(f":orange[{warning.message}]")

    results = _compute_cached(inputs.model_dump(), config.system.model_dump(), config.market.model_dump())
    with right:
        render_results(results)

    st.subheader("Charts")
    st.plotly_chart(
        create_emission_chart(emission_series(inputs, config.system, config.market)),
        use_container_width=True
    )
    col1, col2 = st.columns(2)
    col1.plotly_chart(create_bonding_curve_chart(bonding_curve_series(config.system)), use_container_width=True)
    col2.plotly_chart(create_burn_split_chart(burn_split_series(results)), use_container_width=True)


main()
