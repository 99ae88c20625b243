# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for the epidemiological benefit model

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from core.epidemiology import completion_rate, evaluate_benefits, present_value_factor, response_multiplier
from core.models import Configuration, ResponseTime, Settings


# ─────────────────────────────────────────────────────────────────────────────
# 1. Present value factor
# ─────────────────────────────────────────────────────────────────────────────
def test_pv_zero_rate_is_years():
    assert present_value_factor(0, 5) == 5


def test_pv_zero_years_is_zero():
    for rate in (0.0, 0.03, 0.5):
        assert present_value_factor(rate, 0) == 0


def test_pv_annuity():
    assert present_value_factor(0.03, 10) == pytest.approx(8.530, abs=1e-3)


def test_pv_negative_rate_treated_as_undiscounted():
    assert present_value_factor(-0.02, 4) == 4


# ─────────────────────────────────────────────────────────────────────────────
# 2. Benefits
# ─────────────────────────────────────────────────────────────────────────────
def _undiscounted():
    return Settings().with_general(discount_rate=0.0, planning_horizon_years=5.0)


def test_frontline_benefit_components():
    cfg = Configuration(tier="frontline", trainees_per_cohort=20, cohorts=2)
    b = evaluate_benefits(cfg, _undiscounted(), endorsement_pct=50.0)
    assert b.completed_per_cohort == pytest.approx(18.0)
    assert b.effective_graduates_per_cohort == pytest.approx(9.0)
    assert b.outbreak_responses_per_year_per_cohort == pytest.approx(9.0 * 0.3 * 1.5)
    assert b.graduate_benefit_per_cohort == pytest.approx(9.0 * 500_000.0 * 5)
    assert b.outbreak_benefit_per_cohort == pytest.approx(9.0 * 0.3 * 1.5 * 4_000_000.0 * 5)
    assert b.epi_benefit_all_cohorts == pytest.approx(2 * b.epi_benefit_per_cohort)
    assert b.graduates_all_cohorts == pytest.approx(18.0)


def test_zero_endorsement_means_zero_benefit():
    b = evaluate_benefits(Configuration(tier="advanced"), Settings(), endorsement_pct=0.0)
    assert b.epi_benefit_all_cohorts == 0.0


def test_completion_override_replaces_setting():
    cfg = Configuration(tier="intermediate", completion_rate_override=0.5)
    assert completion_rate(cfg, Settings()) == 0.5
    assert completion_rate(Configuration(tier="intermediate"), Settings()) == 0.85


def test_completion_override_accepts_percent():
    assert Configuration(tier="frontline", completion_rate_override=85).completion_rate_override == 0.85


def test_cross_sector_multiplier_scales_and_clamps():
    settings = _undiscounted()
    base = evaluate_benefits(Configuration(tier="frontline"), settings, 60.0)
    boosted = evaluate_benefits(Configuration(tier="frontline", cross_sector_benefit_multiplier=1.5), settings, 60.0)
    assert boosted.epi_benefit_per_cohort == pytest.approx(1.5 * base.epi_benefit_per_cohort)
    assert Configuration(tier="frontline", cross_sector_benefit_multiplier=5).cross_sector_benefit_multiplier == 2.0
    assert Configuration(tier="frontline", cross_sector_benefit_multiplier=0.1).cross_sector_benefit_multiplier == 0.8


def test_response_multiplier_table():
    assert response_multiplier(ResponseTime.DAYS_7) == 1.5
    assert response_multiplier(ResponseTime.DAYS_15) == 1.2
    assert response_multiplier("next_week") == 1.0


def test_discounting_reduces_benefit():
    cfg = Configuration(tier="advanced", trainees_per_cohort=10)
    flat = evaluate_benefits(cfg, _undiscounted(), 70.0)
    discounted = evaluate_benefits(cfg, Settings().with_general(discount_rate=0.08), 70.0)
    assert discounted.epi_benefit_per_cohort < flat.epi_benefit_per_cohort
