"""
UI layer
Purpose: Streamlit-only glue. Renders widgets/tabs, collects user inputs, and delegates
all work to the controller. Keeps UI concerns (layout/state widgets) separate from
the estimate so the math can be unit tested without Streamlit.
"""

import streamlit as st

from tokencost.config import get_settings
from tokencost.controller import EstimatorController
from tokencost.labels import footnotes, scenario_label, t
from tokencost.models import SCENARIO_DEFAULTS, Locale, Scenario, Variant
from tokencost.services.estimator import estimate_tokens_from_text
from tokencost.services.pricing import StaticPricingCatalog
from tokencost.services.variants import variant_config
from tokencost.utils.logging import setup_logging
from tokencost.utils.numbers import (
    format_input,
    format_jpy,
    format_tokens,
    format_usd,
)

settings = get_settings()
setup_logging(settings.log_level)

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Gemini Cost Calculator",
    page_icon="💴",
    layout="wide",
    initial_sidebar_state="expanded",
)
# ---------------------------
# UI constants
# ---------------------------
CATALOG = StaticPricingCatalog(default_id=settings.default_tier)
LOCALES = [Locale.JA.value, Locale.EN.value]
LOCALE_NAMES = {Locale.JA.value: "日本語", Locale.EN.value: "English"}
VARIANTS = [Variant.JAPANESE.value, Variant.DUAL.value, Variant.SIMPLE.value]

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("locale", settings.default_locale.value)
st_session.setdefault("variant", settings.default_variant.value)
st_session.setdefault("tier_id", CATALOG.default_id)
st_session.setdefault("controller", None)
st_session.setdefault("sample_text", "")


# ---------------------------
# Helpers
# ---------------------------
def field_key(scenario: Scenario, field: str) -> str:
    """Widget key for one usage field."""
    return f"{scenario.value}__{field}"


def build_controller() -> EstimatorController:
    """Fresh controller for the selected variant, keeping the selected tier."""
    return EstimatorController(
        variant_config(st_session.variant, settings),
        catalog=CATALOG,
        tier_id=st_session.tier_id,
    )


def get_controller() -> EstimatorController:
    """Return the session controller, creating it on first use."""
    if st_session.controller is None:
        st_session.controller = build_controller()
    return st_session.controller


def sync_field_widgets(controller: EstimatorController) -> None:
    """Overwrite every field widget with the controller's current text."""
    for scenario, defaults in SCENARIO_DEFAULTS.items():
        for field in defaults.field_names():
            st_session[field_key(scenario, field)] = (
                controller.field_text(scenario, field)
                if scenario in controller.scenarios
                else ""
            )


def on_field_change(scenario: Scenario, field: str) -> None:
    """Push typed text into the controller; revert the widget on junk input."""
    controller = get_controller()
    key = field_key(scenario, field)
    if not controller.set_field(scenario, field, st_session[key]):
        st_session[key] = controller.field_text(scenario, field)


def on_tier_change() -> None:
    get_controller().select_tier(st_session.tier_id)


def on_variant_change() -> None:
    """Switching variant starts the new scenario set from blank inputs."""
    st_session.controller = build_controller()
    sync_field_widgets(st_session.controller)


def reset_inputs() -> None:
    """Clear every usage field back to its default; keep tier and variant."""
    controller = get_controller()
    controller.reset()
    sync_field_widgets(controller)
    st_session.sample_text = ""


def render_inputs(controller: EstimatorController, scenario: Scenario, locale: str):
    """Text fields for one scenario, placeholders showing the defaults."""
    defaults = controller.defaults_for(scenario)
    st.subheader(t(locale, "inputs.title"))
    st.caption(t(locale, "inputs.caption"))
    for field in controller.field_names(scenario):
        st.text_input(
            t(locale, field),
            key=field_key(scenario, field),
            placeholder=format_input(getattr(defaults, field)),
            on_change=on_field_change,
            args=(scenario, field),
        )


def render_results(controller: EstimatorController, scenario: Scenario, locale: str):
    """Read-only metrics for one scenario's estimate."""
    est = controller.estimate_for(scenario)
    config = controller.config

    st.subheader(t(locale, "results.title"))
    st.caption(t(locale, "results.caption"))

    st.metric(t(locale, "monthly_input_tokens"), format_tokens(est.monthly_input_tokens))
    st.metric(
        t(locale, "monthly_output_tokens"), format_tokens(est.monthly_output_tokens)
    )
    st.metric(t(locale, "monthly_cost_usd"), format_usd(est.monthly_cost_usd))
    if est.monthly_cost_jpy is not None:
        st.metric(t(locale, "monthly_cost_jpy"), format_jpy(est.monthly_cost_jpy))

    with st.expander(t(locale, "breakdown")):
        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric(
                t(locale, "interactions_per_month"),
                format_tokens(est.interactions_per_month),
            )
        with c2:
            st.metric(
                t(locale, "monthly_input_cost_usd"),
                format_usd(est.monthly_input_cost_usd),
            )
        with c3:
            st.metric(
                t(locale, "monthly_output_cost_usd"),
                format_usd(est.monthly_output_cost_usd),
            )

    notes = footnotes(
        locale,
        config.chars_per_token,
        config.usd_to_jpy_rate if config.show_jpy else None,
        japanese_text=config.variant != Variant.SIMPLE,
    )
    for note in notes:
        st.caption(note)


def render_scenario(controller: EstimatorController, scenario: Scenario, locale: str):
    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            render_inputs(controller, scenario, locale)
    with right:
        with st.container(border=True):
            render_results(controller, scenario, locale)


def render_sample_counter(controller: EstimatorController, locale: str) -> None:
    """Paste a representative prompt to see its character and token count."""
    with st.expander(t(locale, "sample.title")):
        text = st.text_area(t(locale, "sample.input"), key="sample_text", height=150)
        chars = len((text or "").strip())
        tokens = estimate_tokens_from_text(text, controller.config.chars_per_token)
        c1, c2, _ = st.columns([1, 1, 2])
        with c1:
            st.metric(t(locale, "sample.chars"), f"{chars:,}")
        with c2:
            st.metric(t(locale, "sample.tokens"), f"{tokens:,}")


# ---------------------------
# SIDEBAR: settings
# ---------------------------
controller = get_controller()
locale = st_session.locale

with st.sidebar:
    st.markdown(f"# {t(locale, 'settings')}")

    st.radio(
        t(locale, "language"),
        LOCALES,
        key="locale",
        format_func=LOCALE_NAMES.get,
        horizontal=True,
    )
    st.selectbox(
        t(locale, "variant"),
        VARIANTS,
        key="variant",
        format_func=lambda v: t(locale, f"variant.{v}"),
        on_change=on_variant_change,
    )
    st.selectbox(
        t(locale, "tier"),
        CATALOG.ids(),
        key="tier_id",
        format_func=CATALOG.display_name,
        on_change=on_tier_change,
    )
    st.divider()
    st.button(t(locale, "reset"), on_click=reset_inputs)

# ---------------------------
# MAIN
# ---------------------------
st.title(t(locale, "title"))

if len(controller.scenarios) > 1:
    tabs = st.tabs([scenario_label(locale, s) for s in controller.scenarios])
    for scenario, tab in zip(controller.scenarios, tabs):
        with tab:
            render_scenario(controller, scenario, locale)
else:
    render_scenario(controller, controller.scenarios[0], locale)

render_sample_counter(controller, locale)
