# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for input coercion and the configuration registries

import math
import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config.cost_templates import COST_TEMPLATES
from config.scenarios import DEFAULT_BASELINE_CONFIGS, SCENARIOS
from core.models import (
    Configuration,
    DeliveryMode,
    GeneralSettings,
    ResponseTime,
    Settings,
    Tier,
    TierSettings,
)
from core.validation import count, normalise_fraction, safe_number


# ─────────────────────────────────────────────────────────────────────────────
# 1. Numeric helpers
# ─────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("value", [None, "abc", float("nan"), float("inf"), True])
def test_safe_number_falls_back(value):
    assert safe_number(value, 7.0) == 7.0


def test_safe_number_parses_strings():
    assert safe_number("12.5") == 12.5


def test_normalise_fraction():
    assert normalise_fraction(0.85) == 0.85
    assert normalise_fraction(85) == 0.85
    assert normalise_fraction(250) == 1.0
    assert normalise_fraction(-0.2) == 0.0
    assert normalise_fraction(None) is None
    assert normalise_fraction("n/a") is None


def test_count_below_minimum_uses_default():
    assert count(0, 20, minimum=1) == 20
    assert count(7.9, 20, minimum=1) == 7


# ─────────────────────────────────────────────────────────────────────────────
# 2. Configuration
# ─────────────────────────────────────────────────────────────────────────────
def test_unknown_tier_rejected():
    with pytest.raises(ValueError):
        Configuration(tier="expert")


def test_choice_strings_are_normalised():
    cfg = Configuration(tier="Advanced", delivery_mode="In-Person")
    assert cfg.tier is Tier.ADVANCED
    assert cfg.delivery_mode is DeliveryMode.IN_PERSON


def test_response_time_is_pinned():
    assert Configuration(tier="frontline", response_time="30_day").response_time is ResponseTime.DAYS_7


def test_invalid_numbers_fall_back():
    cfg = Configuration(tier="frontline", cost_per_trainee_per_month=float("nan"),
                        trainees_per_cohort=-4, cohorts="many", faculty_monthly_salary=-1)
    assert cfg.cost_per_trainee_per_month == 0.0
    assert cfg.trainees_per_cohort == 20
    assert cfg.cohorts == 1
    assert cfg.faculty_monthly_salary == 0.0


def test_from_dict_ignores_unknown_keys():
    raw = dict(SCENARIOS["Frontline Scale-Up (Blended)"])
    cfg = Configuration.from_dict(raw)
    assert cfg.tier is Tier.FRONTLINE
    assert Configuration.from_dict(cfg.to_dict()) == cfg


def test_configuration_is_hashable():
    a = Configuration(tier="frontline", cohorts=2)
    b = Configuration(tier="frontline", cohorts=2)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


# ─────────────────────────────────────────────────────────────────────────────
# 3. Settings
# ─────────────────────────────────────────────────────────────────────────────
def test_general_settings_bounds():
    g = GeneralSettings(planning_horizon_years=-1, discount_rate=1.5, currency_rate=0)
    assert g.planning_horizon_years == 5.0
    assert g.discount_rate == 0.03
    assert g.currency_rate == 83.0


def test_tier_settings_clamp_completion():
    assert TierSettings(1.4, 0.3, 1.0, 1.0).completion_rate == 1.0


def test_settings_round_trip_and_partial_dict():
    s = Settings().with_tier(Tier.ADVANCED, value_per_graduate=1.0)
    assert Settings.from_dict(s.to_dict()) == s
    partial = Settings.from_dict({"general": {"discount_rate": 0.05}})
    assert partial.general.discount_rate == 0.05
    assert partial.frontline == TierSettings.default(Tier.FRONTLINE)


# ─────────────────────────────────────────────────────────────────────────────
# 4. Registries
# ─────────────────────────────────────────────────────────────────────────────
def test_templates_sum_to_one():
    for tier, template in COST_TEMPLATES.items():
        assert math.isclose(sum(c["share"] for c in template["components"]), 1.0), tier


def test_registry_entries_build():
    for raw in list(SCENARIOS.values()) + list(DEFAULT_BASELINE_CONFIGS.values()):
        Configuration.from_dict(raw)
    assert set(DEFAULT_BASELINE_CONFIGS) == {t.value for t in Tier}
