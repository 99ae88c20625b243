# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Epidemiological Benefit Model
# © 2026 Aparajita Parihar. All rights reserved.
#
#   completed            = trainees_per_cohort × completion_rate
#   effective_graduates  = completed × endorsement_fraction   (uptake filter)
#   outbreak_responses   = effective_graduates × outbreaks/grad/yr × response multiplier
#   benefit              = (grads × value/grad + responses × value/outbreak)
#                          × PV factor × cross-sector multiplier
#
# PV factor (annuity): years ≤ 0 → 0 · rate ≤ 0 → years · else (1 − (1+r)^−n) / r
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from typing import Union

from config.constants import (
    CROSS_SECTOR_MULTIPLIER_MAX,
    CROSS_SECTOR_MULTIPLIER_MIN,
    RESPONSE_MULTIPLIER,
    RESPONSE_MULTIPLIER_FALLBACK,
)
from core.capacity import planning_horizon
from core.models import BenefitBreakdown, Configuration, ResponseTime, Settings
from core.validation import clamp, safe_number


def present_value_factor(rate: float, years: float) -> float:
    """Discount factor turning a recurring annual value into a horizon total."""
    rate = safe_number(rate, 0.0)
    years = safe_number(years, 0.0)
    if years <= 0:
        return 0.0
    if rate <= 0:
        return years
    return (1.0 - (1.0 + rate) ** (-years)) / rate


def response_multiplier(response: Union[ResponseTime, str]) -> float:
    if isinstance(response, ResponseTime):
        return RESPONSE_MULTIPLIER[response.value]
    return RESPONSE_MULTIPLIER_FALLBACK


def completion_rate(config: Configuration, settings: Settings) -> float:
    if config.completion_rate_override is not None:
        return config.completion_rate_override
    return settings.for_tier(config.tier).completion_rate


def evaluate_benefits(config: Configuration, settings: Settings, endorsement_pct: float) -> BenefitBreakdown:
    tier_settings = settings.for_tier(config.tier)
    rate = completion_rate(config, settings)
    endorsement = clamp(safe_number(endorsement_pct, 0.0), 0.0, 100.0) / 100.0

    completed = config.trainees_per_cohort * rate
    graduates = completed * endorsement
    multiplier = response_multiplier(config.response_time)
    responses = graduates * tier_settings.outbreaks_per_graduate_per_year * multiplier

    horizon = planning_horizon(config, settings)
    discount = settings.general.discount_rate
    pv = present_value_factor(discount, horizon)
    cross_sector = clamp(
        config.cross_sector_benefit_multiplier, CROSS_SECTOR_MULTIPLIER_MIN, CROSS_SECTOR_MULTIPLIER_MAX
    )

    graduate_benefit = graduates * tier_settings.value_per_graduate * pv * cross_sector
    outbreak_benefit = responses * tier_settings.value_per_outbreak * pv * cross_sector
    per_cohort = graduate_benefit + outbreak_benefit

    return BenefitBreakdown(
        completion_rate=rate,
        completed_per_cohort=completed,
        endorsement_fraction=endorsement,
        effective_graduates_per_cohort=graduates,
        graduates_all_cohorts=graduates * config.cohorts,
        response_multiplier=multiplier,
        outbreak_responses_per_year_per_cohort=responses,
        outbreak_responses_per_year_all_cohorts=responses * config.cohorts,
        horizon_years=horizon,
        discount_rate=discount,
        pv_factor=pv,
        cross_sector_multiplier=cross_sector,
        graduate_benefit_per_cohort=graduate_benefit,
        outbreak_benefit_per_cohort=outbreak_benefit,
        epi_benefit_per_cohort=per_cohort,
        epi_benefit_all_cohorts=per_cohort * config.cohorts,
    )
