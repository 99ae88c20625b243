# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for the dual-method cost model

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from core.costing import (
    contact_days,
    evaluate_costs,
    get_cost_template,
    salary_opportunity_costs,
)
from config.cost_templates import COST_TEMPLATES
from core.models import Configuration, DeliveryMode, Settings, Tier
from core.scenario import evaluate_scenario

SALARIES = dict(faculty_monthly_salary=180_000.0, coordinator_monthly_salary=90_000.0,
                participant_monthly_salary=60_000.0)


def _intermediate(**overrides):
    values = dict(tier="intermediate", mentorship_intensity="medium", delivery_mode="in_person",
                  cost_per_trainee_per_month=100_000.0, trainees_per_cohort=20, cohorts=1,
                  mentor_support_cost_base=600_000.0, **SALARIES)
    values.update(overrides)
    return Configuration(**values)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Salary-based opportunity cost
# ─────────────────────────────────────────────────────────────────────────────
def test_in_person_charges_full_duration_per_role():
    opp = salary_opportunity_costs(_intermediate())
    assert opp["participant"] == 60_000.0 * 12 * 20
    assert opp["coordinator"] == 90_000.0 * 12 * 1
    assert opp["faculty"] == 180_000.0 * 12 * 6
    assert opp["contact_days"] == 360
    assert opp["total"] == opp["participant"] + opp["coordinator"] + opp["faculty"]


def test_online_delivery_leaves_only_faculty_supervision():
    cfg = Configuration(tier="frontline", delivery_mode="online", trainees_per_cohort=20, **SALARIES)
    opp = salary_opportunity_costs(cfg)
    assert opp["contact_days"] == 0
    faculty_count = 4
    assert opp["participant"] == 0.0
    assert opp["coordinator"] == 0.0
    assert opp["faculty"] == pytest.approx(0.5 * 180_000.0 * (90 / 30) * faculty_count)


def test_blended_uses_tier_contact_days():
    cfg = Configuration(tier="frontline", delivery_mode="blended", trainees_per_cohort=20, **SALARIES)
    opp = salary_opportunity_costs(cfg)
    assert opp["contact_days"] == 20
    assert opp["participant"] == pytest.approx(60_000.0 * (20 / 30) * 20)


def test_contact_days_by_delivery():
    assert contact_days(Tier.ADVANCED, DeliveryMode.IN_PERSON) == 720
    assert contact_days(Tier.ADVANCED, DeliveryMode.ONLINE) == 0
    assert contact_days(Tier.ADVANCED, DeliveryMode.BLENDED) == 90
    assert contact_days(Tier.ADVANCED, "hybrid") == 90


# ─────────────────────────────────────────────────────────────────────────────
# 2. Economic cost
# ─────────────────────────────────────────────────────────────────────────────
def test_direct_cost():
    cost, warnings = evaluate_costs(_intermediate())
    assert warnings == []
    assert cost.programme_cost_per_cohort == 100_000.0 * 12 * 20
    assert cost.mentor_cost_per_cohort == pytest.approx(600_000.0 * 1.3)
    assert cost.direct_cost_per_cohort == pytest.approx(24_000_000.0 + 780_000.0)


def test_both_opportunity_methods_are_added():
    cost, _ = evaluate_costs(_intermediate())
    assert cost.existing_opportunity_cost_per_cohort == pytest.approx(24_000_000.0 * 0.22)
    assert cost.total_economic_cost_per_cohort == pytest.approx(
        cost.direct_cost_per_cohort
        + cost.existing_opportunity_cost_per_cohort
        + cost.salary_opportunity_cost_per_cohort
    )
    assert cost.reconciled is True


def test_switch_off_excludes_opportunity_cost_but_keeps_diagnostics():
    cost, _ = evaluate_costs(_intermediate(opportunity_cost_included=False))
    assert cost.total_economic_cost_per_cohort == pytest.approx(cost.direct_cost_per_cohort)
    assert cost.existing_opportunity_cost_per_cohort == 0.0
    assert cost.salary_opportunity_cost_per_cohort == 0.0
    assert cost.salary_opportunity_cost_raw > 0
    assert cost.existing_opportunity_cost_raw > 0


def test_components_split_direct_cost():
    cost, _ = evaluate_costs(_intermediate())
    assert sum(c.amount_per_cohort for c in cost.components) == pytest.approx(cost.direct_cost_per_cohort)
    assert [c.id for c in cost.components] == [c.id for c in get_cost_template(Tier.INTERMEDIATE).components]


def test_all_cohort_totals_scale_with_cohorts():
    one, _ = evaluate_costs(_intermediate(cohorts=1))
    three, _ = evaluate_costs(_intermediate(cohorts=3))
    assert three.total_economic_cost_all_cohorts == pytest.approx(3 * one.total_economic_cost_per_cohort)


def test_zero_cohorts_cost_nothing():
    cost, _ = evaluate_costs(_intermediate(cohorts=0))
    assert cost.total_economic_cost_all_cohorts == 0.0


# ─────────────────────────────────────────────────────────────────────────────
# 3. Reconciliation
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def unbalanced_frontline_template(monkeypatch):
    staff = COST_TEMPLATES["frontline"]["components"][0]
    monkeypatch.setitem(staff, "share", staff["share"] + 0.1)
    get_cost_template.cache_clear()
    yield
    get_cost_template.cache_clear()


def test_reconciliation_mismatch_warns_without_aborting(unbalanced_frontline_template, caplog):
    cfg = Configuration(tier="frontline", cost_per_trainee_per_month=1000, cohorts=2)

    with caplog.at_level("WARNING", logger="core.costing"):
        cost, warnings = evaluate_costs(cfg)
    assert cost.reconciled is False
    assert len(warnings) == 1
    assert "reconciliation mismatch for frontline" in warnings[0]
    assert "reconciliation mismatch" in caplog.text

    result = evaluate_scenario(cfg, Settings(), use_cache=False)
    assert list(result.warnings) == warnings
    assert result.total_cost == pytest.approx(cost.total_economic_cost_all_cohorts)
    assert result.total_benefit > 0
