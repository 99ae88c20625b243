# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Preference / Choice Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Two-alternative logit: programme vs. opt-out.
#   U_program = ASC_program + Σ attribute effects + β_cost × (cost / 1000)
#   U_optout  = ASC_optout
#   P(endorse) = exp(U_p − m) / (exp(U_p − m) + exp(U_o − m)),  m = max(U_p, U_o)
#   WTP (per trainee per month) = Σ non-cost effects / |β_cost| × 1000
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import enum
import logging
import math
from typing import Mapping, Union

from config.constants import (
    ASC_OPTOUT,
    ASC_PROGRAM,
    CAREER_EFFECTS,
    COST_COEFFICIENT,
    COST_SCALE,
    DELIVERY_EFFECTS,
    MENTORSHIP_EFFECTS,
    RESPONSE_EFFECTS,
    TIER_EFFECTS,
)
from core.models import (
    CareerIncentive,
    Configuration,
    DeliveryMode,
    MentorshipIntensity,
    PreferenceResult,
    ResponseTime,
    Tier,
)
from core.validation import clamp, non_negative

logger = logging.getLogger(__name__)


def attribute_effect(
    table: Mapping[str, float],
    enum_cls: type[enum.Enum],
    value: Union[enum.Enum, str],
) -> float:
    """Look up a coefficient; values outside ``enum_cls`` contribute zero."""
    if not isinstance(value, enum_cls):
        logger.debug("No %s effect for %r, using 0.0", enum_cls.__name__, value)
        return 0.0
    return table.get(value.value, 0.0)


def non_cost_utility(
    tier: Union[Tier, str],
    career: Union[CareerIncentive, str],
    mentorship: Union[MentorshipIntensity, str],
    delivery: Union[DeliveryMode, str],
    response: Union[ResponseTime, str],
) -> float:
    """ASC_program plus every attribute effect, excluding the cost term."""
    return (
        ASC_PROGRAM
        + attribute_effect(TIER_EFFECTS, Tier, tier)
        + attribute_effect(CAREER_EFFECTS, CareerIncentive, career)
        + attribute_effect(MENTORSHIP_EFFECTS, MentorshipIntensity, mentorship)
        + attribute_effect(DELIVERY_EFFECTS, DeliveryMode, delivery)
        + attribute_effect(RESPONSE_EFFECTS, ResponseTime, response)
    )


def endorsement_probability(utility_program: float, utility_optout: float) -> float:
    """Numerically stable two-alternative softmax; returns a fraction in [0, 1]."""
    m = max(utility_program, utility_optout)
    e_program = math.exp(utility_program - m)
    e_optout = math.exp(utility_optout - m)
    return e_program / (e_program + e_optout)


def willingness_to_pay(non_cost: float) -> float:
    """Money-metric transform of non-cost utility (per trainee per month)."""
    return non_cost / abs(COST_COEFFICIENT) * COST_SCALE


def evaluate_preference(config: Configuration) -> PreferenceResult:
    non_cost = non_cost_utility(
        config.tier,
        config.career_incentive,
        config.mentorship_intensity,
        config.delivery_mode,
        config.response_time,
    )
    cost = non_negative(config.cost_per_trainee_per_month)
    utility_program = non_cost + COST_COEFFICIENT * (cost / COST_SCALE)
    utility_optout = ASC_OPTOUT

    p = endorsement_probability(utility_program, utility_optout)
    endorsement_pct = clamp(p * 100.0, 0.0, 100.0)

    return PreferenceResult(
        utility_program=utility_program,
        utility_optout=utility_optout,
        endorsement_pct=endorsement_pct,
        optout_pct=clamp(100.0 - endorsement_pct, 0.0, 100.0),
        wtp_per_trainee_month=willingness_to_pay(non_cost),
    )
