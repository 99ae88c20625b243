# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for mentor and site capacity

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config.constants import STATUS_REQUIRES_EXPANSION, STATUS_WITHIN_CAPACITY
from core.capacity import clamp_cohorts, evaluate_capacity, max_feasible_cohorts, mentors_per_cohort
from core.models import Configuration, MentorshipIntensity, Settings, Tier


def test_mentors_per_cohort_rounds_up():
    assert mentors_per_cohort(20, MentorshipIntensity.LOW) == 4
    assert mentors_per_cohort(20, MentorshipIntensity.MEDIUM) == 6
    assert mentors_per_cohort(20, MentorshipIntensity.HIGH) == 10
    assert mentors_per_cohort(21, MentorshipIntensity.LOW) == 5


def test_unknown_mentorship_uses_low_ratio():
    assert mentors_per_cohort(20, "other") == 4


def test_cohort_ceiling():
    assert max_feasible_cohorts(Tier.FRONTLINE, 1.0, 4) == 16
    assert max_feasible_cohorts(Tier.ADVANCED, 5.0, 2) == 5


def test_cohort_ceiling_is_at_least_one():
    assert max_feasible_cohorts(Tier.ADVANCED, 1.0, 0) == 1
    assert max_feasible_cohorts(Tier.INTERMEDIATE, 0.0, 3) == 1


def test_shortfall_and_status():
    cfg = Configuration(tier="intermediate", mentorship_intensity="medium",
                        trainees_per_cohort=20, cohorts=3, available_mentors_national=10)
    cap = evaluate_capacity(cfg, Settings())
    assert cap.total_mentors_required == 18
    assert cap.mentor_shortfall == 8
    assert cap.within_capacity is False
    assert cap.status == STATUS_REQUIRES_EXPANSION


def test_within_capacity():
    cfg = Configuration(tier="frontline", trainees_per_cohort=20, cohorts=2, available_mentors_national=8)
    cap = evaluate_capacity(cfg, Settings())
    assert cap.mentor_shortfall == 0
    assert cap.status == STATUS_WITHIN_CAPACITY


def test_site_gap_only_when_sites_declared():
    no_sites = evaluate_capacity(Configuration(tier="frontline", cohorts=5), Settings())
    assert no_sites.site_capacity is None and no_sites.site_gap is None

    cfg = Configuration(tier="frontline", cohorts=5, available_training_sites=2,
                        max_cohorts_per_site_per_year=2)
    cap = evaluate_capacity(cfg, Settings())
    assert cap.site_capacity == 4
    assert cap.site_gap == 1


def test_clamp_cohorts():
    cfg = Configuration(tier="frontline", cohorts=20, available_training_sites=4, planning_horizon_years=1.0)
    clamped, changed = clamp_cohorts(cfg, Settings())
    assert changed is True
    assert clamped.cohorts == 16
    assert cfg.cohorts == 20


def test_clamp_cohorts_skipped_without_sites():
    cfg = Configuration(tier="advanced", cohorts=50)
    same, changed = clamp_cohorts(cfg, Settings())
    assert changed is False
    assert same is cfg


def test_configuration_horizon_overrides_settings():
    cfg = Configuration(tier="frontline", available_training_sites=1, planning_horizon_years=1.0)
    long_settings = Settings().with_general(planning_horizon_years=10.0)
    assert evaluate_capacity(cfg, long_settings).max_feasible_cohorts == 4
