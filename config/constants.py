# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Canonical Constants Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for all preference-model, costing, capacity and
# epidemiological constants. All modules MUST import from here — never
# redefine constants locally.
#
# Sources:
#   Discrete choice experiment with national and state health officials
#   (mixed logit, preference-space estimates, cost in '000 INR / month)
#   Programme budget templates for frontline / intermediate / advanced tiers
#
# This file has ZERO Streamlit, ZERO network, and ZERO side-effect imports.
# It is safe to import in any context, including unit tests without a
# running Streamlit server.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# ENUM VALUES
# String values shared by core.models enums and the UI option lists.
# ─────────────────────────────────────────────────────────────────────────────

TIER_FRONTLINE: str    = "frontline"
TIER_INTERMEDIATE: str = "intermediate"
TIER_ADVANCED: str     = "advanced"

CAREER_CERTIFICATE: str = "certificate"
CAREER_UNIVERSITY: str  = "university_qualification"
CAREER_PATHWAY: str     = "career_pathway"

MENTORSHIP_LOW: str    = "low"
MENTORSHIP_MEDIUM: str = "medium"
MENTORSHIP_HIGH: str   = "high"

DELIVERY_BLENDED: str   = "blended"
DELIVERY_IN_PERSON: str = "in_person"
DELIVERY_ONLINE: str    = "online"

RESPONSE_30_DAY: str = "30_day"
RESPONSE_15_DAY: str = "15_day"
RESPONSE_7_DAY: str  = "7_day"


# ─────────────────────────────────────────────────────────────────────────────
# TIER DURATIONS
# ─────────────────────────────────────────────────────────────────────────────

TIER_DURATION_MONTHS: dict[str, int] = {
    TIER_FRONTLINE:    3,
    TIER_INTERMEDIATE: 12,
    TIER_ADVANCED:     24,
}

DAYS_PER_MONTH: int = 30


# ─────────────────────────────────────────────────────────────────────────────
# PREFERENCE MODEL COEFFICIENTS
# Reference levels carry a zero coefficient.
# ─────────────────────────────────────────────────────────────────────────────

ASC_PROGRAM: float = 0.168
ASC_OPTOUT: float  = -0.601

# Utility per 1,000 currency units of cost per trainee per month
COST_COEFFICIENT: float = -0.005
COST_SCALE: float       = 1000.0

TIER_EFFECTS: dict[str, float] = {
    TIER_FRONTLINE:    0.0,
    TIER_INTERMEDIATE: 0.220,
    TIER_ADVANCED:     0.487,
}

CAREER_EFFECTS: dict[str, float] = {
    CAREER_CERTIFICATE: 0.0,
    CAREER_UNIVERSITY:  0.017,
    CAREER_PATHWAY:     0.497,
}

MENTORSHIP_EFFECTS: dict[str, float] = {
    MENTORSHIP_LOW:    0.0,
    MENTORSHIP_MEDIUM: 0.453,
    MENTORSHIP_HIGH:   0.640,
}

DELIVERY_EFFECTS: dict[str, float] = {
    DELIVERY_BLENDED:   0.0,
    DELIVERY_IN_PERSON: -0.232,
    DELIVERY_ONLINE:    -1.073,
}

RESPONSE_EFFECTS: dict[str, float] = {
    RESPONSE_30_DAY: 0.0,
    RESPONSE_15_DAY: 0.546,
    RESPONSE_7_DAY:  0.610,
}

# Response-time policy lock: every configuration is evaluated at this value
RESPONSE_TIME_PINNED: str = RESPONSE_7_DAY


# ─────────────────────────────────────────────────────────────────────────────
# CAPACITY MODEL
# ─────────────────────────────────────────────────────────────────────────────

FELLOWS_PER_MENTOR: dict[str, float] = {
    MENTORSHIP_HIGH:   2.0,
    MENTORSHIP_MEDIUM: 3.5,
    MENTORSHIP_LOW:    5.0,
}
FELLOWS_PER_MENTOR_FALLBACK: float = 5.0

STATUS_WITHIN_CAPACITY: str    = "Within capacity"
STATUS_REQUIRES_EXPANSION: str = "Requires expansion"


# ─────────────────────────────────────────────────────────────────────────────
# COST MODEL
# ─────────────────────────────────────────────────────────────────────────────

MENTOR_COST_MULTIPLIER: dict[str, float] = {
    MENTORSHIP_LOW:    1.0,
    MENTORSHIP_MEDIUM: 1.3,
    MENTORSHIP_HIGH:   1.7,
}
MENTOR_COST_MULTIPLIER_FALLBACK: float = 1.0

# Contact days for blended delivery (in-person days inside the programme)
BLENDED_CONTACT_DAYS: dict[str, int] = {
    TIER_FRONTLINE:    20,
    TIER_INTERMEDIATE: 60,
    TIER_ADVANCED:     90,
}

# Share of non-contact time faculty still divert to supervision
FACULTY_NON_CONTACT_SHARE: float = 0.5

COORDINATORS_PER_COHORT: int = 1

# Cost identity check: |lhs - rhs| <= max(ABS, REL * |rhs|)
RECONCILIATION_TOLERANCE_REL: float = 1e-6
RECONCILIATION_TOLERANCE_ABS: float = 0.01


# ─────────────────────────────────────────────────────────────────────────────
# EPIDEMIOLOGICAL BENEFIT MODEL
# ─────────────────────────────────────────────────────────────────────────────

RESPONSE_MULTIPLIER: dict[str, float] = {
    RESPONSE_30_DAY: 1.0,
    RESPONSE_15_DAY: 1.2,
    RESPONSE_7_DAY:  1.5,
}
RESPONSE_MULTIPLIER_FALLBACK: float = 1.0

CROSS_SECTOR_MULTIPLIER_MIN: float = 0.8
CROSS_SECTOR_MULTIPLIER_MAX: float = 2.0


# ─────────────────────────────────────────────────────────────────────────────
# DEFAULT SETTINGS
# Values are in local currency (INR) unless stated otherwise.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_PLANNING_HORIZON_YEARS: float = 5.0
DEFAULT_DISCOUNT_RATE: float          = 0.03
DEFAULT_CURRENCY_RATE: float          = 83.0   # INR per USD

DEFAULT_TIER_SETTINGS: dict[str, dict[str, float]] = {
    TIER_FRONTLINE: {
        "completion_rate":                0.90,
        "outbreaks_per_graduate_per_year": 0.30,
        "value_per_outbreak":             4_000_000.0,
        "value_per_graduate":             500_000.0,
    },
    TIER_INTERMEDIATE: {
        "completion_rate":                0.85,
        "outbreaks_per_graduate_per_year": 0.50,
        "value_per_outbreak":             4_000_000.0,
        "value_per_graduate":             1_500_000.0,
    },
    TIER_ADVANCED: {
        "completion_rate":                0.80,
        "outbreaks_per_graduate_per_year": 0.80,
        "value_per_outbreak":             4_000_000.0,
        "value_per_graduate":             3_000_000.0,
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# DEFAULT CONFIGURATION FIELD VALUES
# Fallbacks used when an input is missing, non-finite or out of range.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_CONFIGURATION: dict[str, float] = {
    "cost_per_trainee_per_month":    0.0,
    "trainees_per_cohort":           20,
    "cohorts":                       1,
    "mentor_support_cost_base":      0.0,
    "available_mentors_national":    0,
    "available_training_sites":      0,
    "max_cohorts_per_site_per_year": 0,
    "cross_sector_benefit_multiplier": 1.0,
    "faculty_monthly_salary":        0.0,
    "coordinator_monthly_salary":    0.0,
    "participant_monthly_salary":    0.0,
}


# ─────────────────────────────────────────────────────────────────────────────
# TARGET-GAP ALLOCATION
# Fixed proportional shares of a graduate gap by tier (not an optimiser).
# ─────────────────────────────────────────────────────────────────────────────

TARGET_GAP_SHARES: dict[str, float] = {
    TIER_FRONTLINE:    0.6,
    TIER_INTERMEDIATE: 0.3,
    TIER_ADVANCED:     0.1,
}
