# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Mentor & Site Capacity Model
# © 2026 Aparajita Parihar. All rights reserved.
#
#   mentors_per_cohort     = ceil(trainees_per_cohort / fellows_per_mentor)
#   total_mentors_required = mentors_per_cohort × cohorts
#   max_feasible_cohorts   = max(1, floor(horizon_months / duration × sites))
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from config.constants import (
    FELLOWS_PER_MENTOR,
    FELLOWS_PER_MENTOR_FALLBACK,
    STATUS_REQUIRES_EXPANSION,
    STATUS_WITHIN_CAPACITY,
    TIER_DURATION_MONTHS,
)
from core.models import CapacityBreakdown, Configuration, MentorshipIntensity, Settings, Tier, parse_tier

logger = logging.getLogger(__name__)


def fellows_per_mentor(intensity: Union[MentorshipIntensity, str]) -> float:
    if isinstance(intensity, MentorshipIntensity):
        return FELLOWS_PER_MENTOR[intensity.value]
    return FELLOWS_PER_MENTOR_FALLBACK


def mentors_per_cohort(trainees_per_cohort: int, intensity: Union[MentorshipIntensity, str]) -> int:
    return math.ceil(max(0, trainees_per_cohort) / fellows_per_mentor(intensity))


def max_feasible_cohorts(tier: Union[Tier, str], horizon_years: float, sites: int) -> int:
    """Cohort ceiling implied by programme duration, horizon and site count."""
    duration = TIER_DURATION_MONTHS[parse_tier(tier).value]
    horizon_months = max(0.0, horizon_years) * 12.0
    return max(1, math.floor((horizon_months / duration) * max(0, sites)))


def planning_horizon(config: Configuration, settings: Settings) -> float:
    """Configuration horizon if set, otherwise the general setting."""
    if config.planning_horizon_years is not None:
        return config.planning_horizon_years
    return settings.general.planning_horizon_years


def evaluate_capacity(config: Configuration, settings: Settings) -> CapacityBreakdown:
    per_cohort = mentors_per_cohort(config.trainees_per_cohort, config.mentorship_intensity)
    required = per_cohort * config.cohorts
    available = config.available_mentors_national
    within = required <= available

    site_capacity: Optional[int] = None
    site_gap: Optional[int] = None
    if config.available_training_sites > 0 and config.max_cohorts_per_site_per_year > 0:
        site_capacity = config.available_training_sites * config.max_cohorts_per_site_per_year
        site_gap = max(0, config.cohorts - site_capacity)

    return CapacityBreakdown(
        fellows_per_mentor=fellows_per_mentor(config.mentorship_intensity),
        mentors_per_cohort=per_cohort,
        total_mentors_required=required,
        available_mentors=available,
        mentor_shortfall=max(0, required - available),
        within_capacity=within,
        status=STATUS_WITHIN_CAPACITY if within else STATUS_REQUIRES_EXPANSION,
        site_capacity=site_capacity,
        site_gap=site_gap,
        max_feasible_cohorts=max_feasible_cohorts(
            config.tier, planning_horizon(config, settings), config.available_training_sites
        ),
    )


def clamp_cohorts(config: Configuration, settings: Settings) -> tuple[Configuration, bool]:
    """Clamp ``config.cohorts`` to the cohort ceiling.

    Applies only when training sites are declared; returns the (possibly
    unchanged) configuration and whether it was clamped.
    """
    if config.available_training_sites <= 0:
        return config, False
    ceiling = max_feasible_cohorts(
        config.tier, planning_horizon(config, settings), config.available_training_sites
    )
    if config.cohorts <= ceiling:
        return config, False
    logger.info("Cohorts for %s clamped from %d to %d", config.tier.value, config.cohorts, ceiling)
    return config.replace(cohorts=ceiling), True
