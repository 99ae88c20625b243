# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for the scenario aggregator and its cache

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config.scenarios import SCENARIOS
from core.models import Configuration, Settings
from core.scenario import benefit_cost_ratio, clear_cache, evaluate_scenario


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


def _preset(name="Intermediate Certificate (In-Person)"):
    return Configuration.from_dict(SCENARIOS[name])


def test_bcr_undefined_when_cost_is_zero():
    assert benefit_cost_ratio(1_000.0, 0.0) is None
    assert benefit_cost_ratio(1_000.0, -5.0) is None
    assert benefit_cost_ratio(0.0, 10.0) == 0.0


def test_zero_cost_configuration_has_no_ratio():
    result = evaluate_scenario(Configuration(tier="frontline"), Settings())
    assert result.total_cost == 0.0
    assert result.bcr is None


def test_result_totals_are_consistent():
    result = evaluate_scenario(_preset(), Settings())
    assert result.net_benefit == pytest.approx(result.total_benefit - result.total_cost)
    assert result.bcr == pytest.approx(result.total_benefit / result.total_cost)
    assert result.endorsement_pct + result.optout_pct == pytest.approx(100.0)
    assert result.trainees == 20 * 5


def test_wtp_scales_with_duration_and_trainees():
    result = evaluate_scenario(_preset(), Settings())
    assert result.wtp_per_cohort == pytest.approx(result.preference.wtp_per_trainee_month * 12 * 20)
    assert result.wtp_all_cohorts == pytest.approx(result.wtp_per_cohort * 5)


def test_evaluation_is_deterministic():
    cfg, settings = _preset(), Settings()
    first = evaluate_scenario(cfg, settings, use_cache=False)
    second = evaluate_scenario(cfg, settings, use_cache=False)
    assert first == second
    assert first is not second


def test_cache_returns_same_object_until_cleared():
    cfg, settings = _preset(), Settings()
    first = evaluate_scenario(cfg, settings)
    assert evaluate_scenario(cfg, settings) is first
    clear_cache()
    assert evaluate_scenario(cfg, settings) is not first


def test_settings_change_is_not_served_from_cache():
    cfg = _preset()
    before = evaluate_scenario(cfg, Settings())
    after = evaluate_scenario(cfg, Settings().with_general(discount_rate=0.09))
    assert after.total_benefit < before.total_benefit
    assert after.total_cost == before.total_cost


def test_results_are_immutable():
    result = evaluate_scenario(_preset(), Settings())
    with pytest.raises(AttributeError):
        result.bcr = 99.0
