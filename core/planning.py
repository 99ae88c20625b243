"""
Target-gap allocation across tiers.

A graduate target is split over tiers by the fixed shares in
``config.constants.TARGET_GAP_SHARES`` and each share is turned into
additional cohorts using the tier's current graduates per cohort. This is a
proportional rule, not an optimiser.
"""

from __future__ import annotations

import math
from typing import Optional

from config.constants import TARGET_GAP_SHARES
from core.models import PortfolioResult, Tier
from core.validation import non_negative


def graduate_gap(portfolio: PortfolioResult, target_graduates: float) -> float:
    return max(0.0, non_negative(target_graduates) - portfolio.graduates)


def allocate_target_gap(portfolio: PortfolioResult, target_graduates: float) -> dict[Tier, dict]:
    """
    Split the gap between ``target_graduates`` and the portfolio's graduates.

    Returns, per tier, the graduates assigned, the graduates per cohort used,
    and the additional cohorts required. ``additional_cohorts`` is ``None``
    when the tier is absent from the portfolio or yields no graduates per
    cohort, since no number of cohorts closes the gap.
    """
    gap = graduate_gap(portfolio, target_graduates)
    allocation: dict[Tier, dict] = {}
    for tier in Tier:
        share = TARGET_GAP_SHARES[tier.value]
        needed = gap * share
        result = portfolio.breakdown.get(tier)
        per_cohort = result.benefit.effective_graduates_per_cohort if result is not None else 0.0

        cohorts: Optional[int]
        if needed <= 0:
            cohorts = 0
        elif per_cohort > 0:
            cohorts = math.ceil(needed / per_cohort)
        else:
            cohorts = None

        allocation[tier] = {
            "share":                share,
            "graduates_needed":     needed,
            "graduates_per_cohort": per_cohort,
            "additional_cohorts":   cohorts,
        }
    return allocation
