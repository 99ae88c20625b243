# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for display frames and formatting helpers

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from app.components.config_form import form_key_prefix
from app.tables import cost_breakdown_frame, incremental_frame, portfolio_frame, scenario_summary_frame
from app.utils import NOT_DEFINED, fmt_currency, fmt_ratio, to_usd
from config.constants import STATUS_REQUIRES_EXPANSION
from config.scenarios import SCENARIOS
from core.incremental import compare_to_baseline
from core.models import Configuration, Settings
from core.portfolio import evaluate_portfolio
from core.scenario import evaluate_scenario


@pytest.fixture
def portfolio():
    return evaluate_portfolio([Configuration.from_dict(raw) for raw in SCENARIOS.values()], Settings())


def test_fmt_ratio_distinguishes_undefined_from_zero():
    assert fmt_ratio(None) == NOT_DEFINED
    assert fmt_ratio(0.0) == "0.00"


def test_fmt_currency_units():
    assert fmt_currency(25_000_000) == "₹2.50 Cr"
    assert fmt_currency(350_000) == "₹3.50 L"
    assert fmt_currency(-900) == "-₹900"


def test_to_usd():
    assert to_usd(830.0, 83.0) == pytest.approx(10.0)
    assert to_usd(830.0, 0) == 0.0


def test_portfolio_frame_has_total_row(portfolio):
    df = portfolio_frame(portfolio)
    assert list(df["Tier"]) == ["Frontline", "Intermediate", "Advanced", "Total"]
    total = df.iloc[-1]
    assert total["Cost"] == pytest.approx(portfolio.total_cost)
    assert total["BCR"] == pytest.approx(portfolio.bcr)


def test_portfolio_frame_flags_shortfall():
    cfg = Configuration(tier="advanced", mentorship_intensity="high", trainees_per_cohort=12,
                        cohorts=2, available_mentors_national=1, cost_per_trainee_per_month=1.0)
    df = portfolio_frame(evaluate_portfolio([cfg], Settings()))
    assert df.iloc[-1]["Capacity"] == STATUS_REQUIRES_EXPANSION


def test_cost_breakdown_frame_ends_with_total():
    result = evaluate_scenario(Configuration.from_dict(SCENARIOS["Intermediate Certificate (In-Person)"]),
                               Settings())
    df = cost_breakdown_frame(result)
    assert df.iloc[-1]["Per cohort"] == pytest.approx(result.cost.total_economic_cost_per_cohort)
    assert df.iloc[-1]["All cohorts"] == pytest.approx(result.total_cost)


def test_summary_and_incremental_frames(portfolio):
    result = portfolio.breakdown[next(iter(portfolio.breakdown))]
    summary = scenario_summary_frame(result, 83.0)
    assert "Net benefit" in set(summary["Metric"])
    inc = incremental_frame(compare_to_baseline(portfolio, portfolio))
    assert list(inc["Change"]) == [0.0, 0.0, 0.0]


def test_each_start_from_choice_gets_its_own_widget_keys():
    keys = {form_key_prefix("sb", name) for name in ["(new)", *SCENARIOS]}
    assert len(keys) == len(SCENARIOS) + 1
    assert form_key_prefix("bl", "advanced") != form_key_prefix("sb", "advanced")
