# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Scenario Aggregator
# © 2026 Aparajita Parihar. All rights reserved.
#
# Composes the preference, capacity, cost and benefit models into one
# tier-level ScenarioResult. Pure given (Configuration, Settings); results
# are memoised on that pair and the cache is cleared whenever settings change.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import functools
import logging
from typing import Optional

from core.capacity import evaluate_capacity
from core.costing import evaluate_costs, tier_duration_months
from core.epidemiology import evaluate_benefits
from core.models import Configuration, ScenarioResult, Settings
from core.preference import evaluate_preference

logger = logging.getLogger(__name__)


def benefit_cost_ratio(benefit: float, cost: float) -> Optional[float]:
    """``benefit / cost`` when cost > 0, otherwise ``None`` (no ratio)."""
    if cost > 0:
        return benefit / cost
    return None


def _evaluate_scenario_impl(config: Configuration, settings: Settings) -> ScenarioResult:
    preference = evaluate_preference(config)
    capacity = evaluate_capacity(config, settings)
    cost, warnings = evaluate_costs(config)
    benefit = evaluate_benefits(config, settings, preference.endorsement_pct)

    wtp_per_cohort = (
        preference.wtp_per_trainee_month
        * tier_duration_months(config.tier)
        * config.trainees_per_cohort
    )

    if not capacity.within_capacity:
        logger.debug(
            "%s requires %d mentors, %d available",
            config.tier.value, capacity.total_mentors_required, capacity.available_mentors,
        )

    return ScenarioResult(
        configuration=config,
        preference=preference,
        capacity=capacity,
        cost=cost,
        benefit=benefit,
        wtp_per_cohort=wtp_per_cohort,
        wtp_all_cohorts=wtp_per_cohort * config.cohorts,
        net_benefit_per_cohort=benefit.epi_benefit_per_cohort - cost.total_economic_cost_per_cohort,
        net_benefit_all_cohorts=benefit.epi_benefit_all_cohorts - cost.total_economic_cost_all_cohorts,
        bcr=benefit_cost_ratio(benefit.epi_benefit_all_cohorts, cost.total_economic_cost_all_cohorts),
        warnings=tuple(warnings),
    )


@functools.lru_cache(maxsize=512)
def _evaluate_scenario_cached(config: Configuration, settings: Settings) -> ScenarioResult:
    return _evaluate_scenario_impl(config, settings)


def evaluate_scenario(config: Configuration, settings: Settings, use_cache: bool = True) -> ScenarioResult:
    """
    Public entry point for tier-level evaluation.

    Settings must be passed explicitly; the engine never reads session or
    global state. Results are immutable and safe to share between callers.
    """
    if use_cache:
        return _evaluate_scenario_cached(config, settings)
    return _evaluate_scenario_impl(config, settings)


def clear_cache() -> None:
    """Drop memoised results (call after any settings edit)."""
    _evaluate_scenario_cached.cache_clear()
