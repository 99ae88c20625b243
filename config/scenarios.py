# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Scenario & Baseline Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for:
#   • SCENARIOS                 — preset programme configurations
#   • DEFAULT_BASELINE_CONFIGS  — business-as-usual configuration per tier
#
# Entries are plain dicts in the shape accepted by
# core.models.Configuration.from_dict(); missing keys take the defaults in
# config/constants.py.
#
# This file has ZERO Streamlit and ZERO network imports.
# It is safe to import in unit tests and CLI contexts.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from config.constants import (
    CAREER_CERTIFICATE,
    CAREER_PATHWAY,
    CAREER_UNIVERSITY,
    DELIVERY_BLENDED,
    DELIVERY_IN_PERSON,
    MENTORSHIP_HIGH,
    MENTORSHIP_LOW,
    MENTORSHIP_MEDIUM,
    RESPONSE_7_DAY,
    TIER_ADVANCED,
    TIER_DURATION_MONTHS,
    TIER_FRONTLINE,
    TIER_INTERMEDIATE,
)

# Shared salary assumptions (INR / month)
_SALARIES: dict[str, float] = {
    "faculty_monthly_salary":     180_000.0,
    "coordinator_monthly_salary":  90_000.0,
    "participant_monthly_salary":  60_000.0,
}

# ─────────────────────────────────────────────────────────────────────────────
# PRESET SCENARIOS
# Keys must be stable: saved sensitivity batches refer to them.
# ─────────────────────────────────────────────────────────────────────────────

SCENARIOS: dict[str, dict] = {
    "Frontline Scale-Up (Blended)": {
        "description":                   "Short district-level course delivered at scale with light mentoring.",
        "tier":                          TIER_FRONTLINE,
        "career_incentive":              CAREER_CERTIFICATE,
        "mentorship_intensity":          MENTORSHIP_LOW,
        "delivery_mode":                 DELIVERY_BLENDED,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    25_000.0,
        "trainees_per_cohort":           25,
        "cohorts":                       20,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      150_000.0,
        "available_mentors_national":    120,
        "available_training_sites":      10,
        "max_cohorts_per_site_per_year": 4,
        **_SALARIES,
    },
    "Intermediate Certificate (In-Person)": {
        "description":                   "State-level twelve-month programme with medium mentorship.",
        "tier":                          TIER_INTERMEDIATE,
        "career_incentive":              CAREER_UNIVERSITY,
        "mentorship_intensity":          MENTORSHIP_MEDIUM,
        "delivery_mode":                 DELIVERY_IN_PERSON,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    100_000.0,
        "trainees_per_cohort":           20,
        "cohorts":                       5,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      600_000.0,
        "available_mentors_national":    40,
        "available_training_sites":      5,
        "max_cohorts_per_site_per_year": 1,
        **_SALARIES,
    },
    "Advanced Fellowship (Career Pathway)": {
        "description":                   "Two-year national fellowship with high-intensity mentorship.",
        "tier":                          TIER_ADVANCED,
        "career_incentive":              CAREER_PATHWAY,
        "mentorship_intensity":          MENTORSHIP_HIGH,
        "delivery_mode":                 DELIVERY_IN_PERSON,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    200_000.0,
        "trainees_per_cohort":           12,
        "cohorts":                       2,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      1_500_000.0,
        "available_mentors_national":    15,
        "available_training_sites":      2,
        "max_cohorts_per_site_per_year": 1,
        **_SALARIES,
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# BUSINESS-AS-USUAL BASELINE
# One configuration per tier; edited through the Baseline tab only.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_BASELINE_CONFIGS: dict[str, dict] = {
    TIER_FRONTLINE: {
        "tier":                          TIER_FRONTLINE,
        "career_incentive":              CAREER_CERTIFICATE,
        "mentorship_intensity":          MENTORSHIP_LOW,
        "delivery_mode":                 DELIVERY_BLENDED,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    25_000.0,
        "trainees_per_cohort":           25,
        "cohorts":                       8,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      150_000.0,
        "available_mentors_national":    60,
        "available_training_sites":      6,
        "max_cohorts_per_site_per_year": 2,
        **_SALARIES,
    },
    TIER_INTERMEDIATE: {
        "tier":                          TIER_INTERMEDIATE,
        "career_incentive":              CAREER_CERTIFICATE,
        "mentorship_intensity":          MENTORSHIP_MEDIUM,
        "delivery_mode":                 DELIVERY_IN_PERSON,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    100_000.0,
        "trainees_per_cohort":           20,
        "cohorts":                       2,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      600_000.0,
        "available_mentors_national":    20,
        "available_training_sites":      3,
        "max_cohorts_per_site_per_year": 1,
        **_SALARIES,
    },
    TIER_ADVANCED: {
        "tier":                          TIER_ADVANCED,
        "career_incentive":              CAREER_CERTIFICATE,
        "mentorship_intensity":          MENTORSHIP_HIGH,
        "delivery_mode":                 DELIVERY_IN_PERSON,
        "response_time":                 RESPONSE_7_DAY,
        "cost_per_trainee_per_month":    200_000.0,
        "trainees_per_cohort":           12,
        "cohorts":                       1,
        "opportunity_cost_included":     True,
        "mentor_support_cost_base":      1_500_000.0,
        "available_mentors_national":    10,
        "available_training_sites":      1,
        "max_cohorts_per_site_per_year": 1,
        **_SALARIES,
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# INTEGRITY ASSERTION (runs at import time)
# Raises AssertionError immediately if an entry references an unknown tier.
# ─────────────────────────────────────────────────────────────────────────────

def _assert_registry_integrity() -> None:
    for name, cfg in SCENARIOS.items():
        assert cfg.get("tier") in TIER_DURATION_MONTHS, (
            f"config/scenarios.py integrity error: "
            f"scenario '{name}' references unknown tier '{cfg.get('tier')}'"
        )
    for tier, cfg in DEFAULT_BASELINE_CONFIGS.items():
        assert tier in TIER_DURATION_MONTHS, (
            f"config/scenarios.py integrity error: unknown baseline tier '{tier}'"
        )
        assert cfg.get("tier") == tier, (
            f"config/scenarios.py integrity error: "
            f"baseline entry '{tier}' declares tier '{cfg.get('tier')}'"
        )


_assert_registry_integrity()
