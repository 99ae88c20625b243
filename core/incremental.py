# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Baseline / Incremental Comparator
# © 2026 Aparajita Parihar. All rights reserved.
#
#   Δcost = candidate.cost − baseline.cost      Δbenefit likewise
#   Δnet  = Δbenefit − Δcost
#   incremental BCR = Δbenefit / Δcost only when Δcost > 0, else None
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from typing import Mapping, Optional, Union

from core.models import Configuration, IncrementalResult, PortfolioResult, ScenarioResult, Settings, Tier
from core.portfolio import evaluate_portfolio

Result = Union[ScenarioResult, PortfolioResult]


def build_baseline(configs: Mapping[Tier, Configuration], settings: Settings) -> PortfolioResult:
    """Baseline portfolio from the persisted business-as-usual configurations."""
    return evaluate_portfolio(configs, settings)


def incremental_bcr(delta_benefit: float, delta_cost: float) -> Optional[float]:
    if delta_cost > 0:
        return delta_benefit / delta_cost
    return None


def compare_to_baseline(candidate: Result, baseline: PortfolioResult) -> IncrementalResult:
    delta_cost = candidate.total_cost - baseline.total_cost
    delta_benefit = candidate.total_benefit - baseline.total_benefit
    return IncrementalResult(
        baseline_cost=baseline.total_cost,
        baseline_benefit=baseline.total_benefit,
        candidate_cost=candidate.total_cost,
        candidate_benefit=candidate.total_benefit,
        delta_cost=delta_cost,
        delta_benefit=delta_benefit,
        delta_net=delta_benefit - delta_cost,
        incremental_bcr=incremental_bcr(delta_benefit, delta_cost),
        delta_graduates=candidate.graduates - baseline.graduates,
        delta_outbreak_responses_per_year=(
            candidate.outbreak_responses_per_year - baseline.outbreak_responses_per_year
        ),
        delta_endorsement_pct=candidate.endorsement_pct - baseline.endorsement_pct,
    )
