"""Smoke tests for the Streamlit page, driven through Streamlit's AppTest."""

from streamlit.testing.v1 import AppTest

from tokencost.labels import t
from tokencost.models import Locale

APP = "../app/app.py"
TIMEOUT = 30


def run_app() -> AppTest:
    at = AppTest.from_file(APP, default_timeout=TIMEOUT)
    return at.run()


def metric_values(at: AppTest) -> dict[str, str]:
    return {m.label: m.value for m in at.metric}


def test_default_page_shows_default_estimate():
    at = run_app()
    assert not at.exception

    values = metric_values(at)
    assert values[t(Locale.JA, "monthly_input_tokens")] == "399,900,000"
    assert values[t(Locale.JA, "monthly_output_tokens")] == "399,900,000"
    assert values[t(Locale.JA, "monthly_cost_usd")] == "$199.95"
    assert values[t(Locale.JA, "monthly_cost_jpy")] == "¥29,993"


def test_typing_users_recomputes_and_junk_is_reverted():
    at = run_app()
    users = "internal__number_of_users"

    at.text_input(key=users).input("2000").run()
    assert metric_values(at)[t(Locale.JA, "monthly_cost_usd")] == "$399.90"

    at.text_input(key=users).input("abc").run()
    assert at.text_input(key=users).value == "2000"
    assert metric_values(at)[t(Locale.JA, "monthly_cost_usd")] == "$399.90"


def test_tier_switch_updates_cost():
    at = run_app()
    at.selectbox(key="tier_id").select("gemini-1.5-flash").run()
    assert not at.exception
    assert metric_values(at)[t(Locale.JA, "monthly_cost_usd")] == "$149.96"


def test_dual_variant_renders_two_tabs():
    at = run_app()
    at.selectbox(key="variant").select("dual").run()
    assert not at.exception
    assert len(at.tabs) == 2
    assert at.text_input(key="customer__ai_handled_fraction").value == ""


def test_huge_user_count_renders():
    at = run_app()
    at.text_input(key="internal__number_of_users").input("1e20").run()
    assert not at.exception
    assert metric_values(at)[t(Locale.JA, "monthly_input_tokens")] == "3.999E+25"
