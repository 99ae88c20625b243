# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Portfolio Aggregator
# © 2026 Aparajita Parihar. All rights reserved.
#
# Combines up to three tier-level results into one national result:
#   endorsement  — trainee-weighted mean (weight = cohorts × trainees/cohort)
#   money/counts — tier-wise sums
#   BCR          — Σ benefit / Σ cost (never the mean of tier BCRs)
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from typing import Iterable, Mapping, Union

from core.models import Configuration, PortfolioResult, ScenarioResult, Settings, Tier
from core.scenario import benefit_cost_ratio, evaluate_scenario


def _weighted_endorsement(results: Iterable[ScenarioResult]) -> float:
    results = list(results)
    if not results:
        return 0.0
    weights = [r.trainees for r in results]
    total_weight = sum(weights)
    if total_weight <= 0:
        # No trainees anywhere: fall back to an unweighted mean
        return sum(r.endorsement_pct for r in results) / len(results)
    return sum(r.endorsement_pct * w for r, w in zip(results, weights)) / total_weight


def combine_results(results: Mapping[Tier, ScenarioResult]) -> PortfolioResult:
    """Aggregate already-evaluated tier results into a PortfolioResult."""
    ordered = {tier: results[tier] for tier in Tier if tier in results}
    values = list(ordered.values())

    endorsement = _weighted_endorsement(values)
    total_cost = sum(r.total_cost for r in values)
    total_benefit = sum(r.total_benefit for r in values)

    warnings: list[str] = []
    for r in values:
        warnings.extend(r.warnings)

    return PortfolioResult(
        breakdown=ordered,
        endorsement_pct=endorsement,
        optout_pct=100.0 - endorsement,
        trainees=sum(r.trainees for r in values),
        total_cost=total_cost,
        total_benefit=total_benefit,
        net_benefit=sum(r.net_benefit for r in values),
        bcr=benefit_cost_ratio(total_benefit, total_cost),
        graduates=sum(r.graduates for r in values),
        outbreak_responses_per_year=sum(r.outbreak_responses_per_year for r in values),
        wtp_all_cohorts=sum(r.wtp_all_cohorts for r in values),
        total_mentors_required=sum(r.capacity.total_mentors_required for r in values),
        mentor_shortfall=sum(r.capacity.mentor_shortfall for r in values),
        warnings=tuple(warnings),
    )


def evaluate_portfolio(
    configs: Union[Mapping[Tier, Configuration], Iterable[Configuration]],
    settings: Settings,
) -> PortfolioResult:
    """
    Evaluate each tier independently and aggregate.

    Accepts a tier → Configuration mapping or an iterable of configurations.
    Raises ValueError if two configurations target the same tier.
    """
    items = configs.values() if isinstance(configs, Mapping) else configs
    by_tier: dict[Tier, ScenarioResult] = {}
    for config in items:
        if config.tier in by_tier:
            raise ValueError(f"Portfolio already contains a {config.tier.value} configuration.")
        by_tier[config.tier] = evaluate_scenario(config, settings)
    return combine_results(by_tier)
