# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Dual-Method Cost Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Direct cost:
#   programme_cost = cost_per_trainee_month × months × trainees_per_cohort
#   mentor_cost    = mentor_support_cost_base × multiplier(intensity)
#
# Opportunity cost: two independent methods, both gated by one switch:
#   1. Template rate:  programme_cost × tier opportunity_cost_rate
#   2. Salary / time:  role salary × time diverted × head count
#        in-person       → full programme months for every role
#        blended/online  → contact days for participants and coordinators;
#                          faculty also carry half the non-contact time
#
# total_economic_cost = direct + template opp (if on) + salary opp (if on)
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import functools
import logging
from typing import Union

from config.constants import (
    BLENDED_CONTACT_DAYS,
    COORDINATORS_PER_COHORT,
    DAYS_PER_MONTH,
    FACULTY_NON_CONTACT_SHARE,
    MENTOR_COST_MULTIPLIER,
    MENTOR_COST_MULTIPLIER_FALLBACK,
    RECONCILIATION_TOLERANCE_ABS,
    RECONCILIATION_TOLERANCE_REL,
    TIER_DURATION_MONTHS,
)
from config.cost_templates import COST_TEMPLATES
from core.capacity import mentors_per_cohort
from core.models import (
    ComponentCost,
    Configuration,
    CostBreakdown,
    CostComponent,
    CostTemplate,
    DeliveryMode,
    MentorshipIntensity,
    Tier,
    parse_tier,
)

logger = logging.getLogger(__name__)


def tier_duration_months(tier: Union[Tier, str]) -> int:
    return TIER_DURATION_MONTHS[parse_tier(tier).value]


@functools.lru_cache(maxsize=None)
def get_cost_template(tier: Tier) -> CostTemplate:
    tier = parse_tier(tier)
    raw = COST_TEMPLATES[tier.value]
    return CostTemplate(
        tier=tier,
        label=raw["label"],
        components=tuple(
            CostComponent(id=c["id"], label=c["label"], share=float(c["share"]))
            for c in raw["components"]
        ),
        opportunity_cost_rate=float(raw["opportunity_cost_rate"]),
    )


def mentor_cost_multiplier(intensity: Union[MentorshipIntensity, str]) -> float:
    if isinstance(intensity, MentorshipIntensity):
        return MENTOR_COST_MULTIPLIER[intensity.value]
    return MENTOR_COST_MULTIPLIER_FALLBACK


def programme_cost_per_cohort(config: Configuration) -> float:
    return (
        config.cost_per_trainee_per_month
        * tier_duration_months(config.tier)
        * config.trainees_per_cohort
    )


def mentor_cost_per_cohort(config: Configuration) -> float:
    return config.mentor_support_cost_base * mentor_cost_multiplier(config.mentorship_intensity)


def contact_days(tier: Union[Tier, str], delivery: Union[DeliveryMode, str]) -> float:
    """In-person days per cohort. Unrecognised delivery modes count as blended."""
    total_days = tier_duration_months(tier) * DAYS_PER_MONTH
    if delivery is DeliveryMode.IN_PERSON:
        return float(total_days)
    if delivery is DeliveryMode.ONLINE:
        return 0.0
    return float(BLENDED_CONTACT_DAYS[parse_tier(tier).value])


def salary_opportunity_costs(config: Configuration) -> dict:
    """Salary-based opportunity cost for one cohort, by role."""
    months = tier_duration_months(config.tier)
    total_days = months * DAYS_PER_MONTH
    participants = config.trainees_per_cohort
    coordinators = COORDINATORS_PER_COHORT
    faculty = mentors_per_cohort(config.trainees_per_cohort, config.mentorship_intensity)

    if config.delivery_mode is DeliveryMode.IN_PERSON:
        days = float(total_days)
        participant = config.participant_monthly_salary * months * participants
        coordinator = config.coordinator_monthly_salary * months * coordinators
        faculty_cost = config.faculty_monthly_salary * months * faculty
    else:
        days = contact_days(config.tier, config.delivery_mode)
        contact_months = days / DAYS_PER_MONTH
        non_contact_months = (total_days - days) / DAYS_PER_MONTH
        participant = config.participant_monthly_salary * contact_months * participants
        coordinator = config.coordinator_monthly_salary * contact_months * coordinators
        faculty_cost = (
            config.faculty_monthly_salary
            * (contact_months + FACULTY_NON_CONTACT_SHARE * non_contact_months)
            * faculty
        )

    return {
        "total_days":  total_days,
        "contact_days": days,
        "participant": participant,
        "coordinator": coordinator,
        "faculty":     faculty_cost,
        "total":       participant + coordinator + faculty_cost,
    }


def _reconciles(lhs: float, rhs: float) -> bool:
    return abs(lhs - rhs) <= max(RECONCILIATION_TOLERANCE_ABS, RECONCILIATION_TOLERANCE_REL * abs(rhs))


def evaluate_costs(config: Configuration) -> tuple[CostBreakdown, list[str]]:
    """Cost breakdown plus any reconciliation warnings (never raises)."""
    warnings: list[str] = []
    template = get_cost_template(config.tier)
    months = tier_duration_months(config.tier)

    programme = programme_cost_per_cohort(config)
    mentor = mentor_cost_per_cohort(config)
    direct = programme + mentor

    components = tuple(
        ComponentCost(id=c.id, label=c.label, share=c.share, amount_per_cohort=direct * c.share)
        for c in template.components
    )

    existing_raw = programme * template.opportunity_cost_rate
    salary = salary_opportunity_costs(config)
    included = config.opportunity_cost_included
    existing_applied = existing_raw if included else 0.0
    salary_applied = salary["total"] if included else 0.0

    total_per_cohort = direct + existing_applied + salary_applied
    cohorts = config.cohorts

    component_total = sum(c.amount_per_cohort for c in components)
    reconciled = _reconciles(component_total + existing_applied + salary_applied, total_per_cohort)
    if not reconciled:
        message = (
            f"Cost reconciliation mismatch for {config.tier.value}: components "
            f"{component_total + existing_applied + salary_applied:,.2f} vs total {total_per_cohort:,.2f}"
        )
        logger.warning(message)
        warnings.append(message)

    breakdown = CostBreakdown(
        duration_months=months,
        cohorts=cohorts,
        programme_cost_per_cohort=programme,
        mentor_cost_per_cohort=mentor,
        direct_cost_per_cohort=direct,
        components=components,
        opportunity_cost_included=included,
        opportunity_cost_rate=template.opportunity_cost_rate,
        existing_opportunity_cost_raw=existing_raw,
        existing_opportunity_cost_per_cohort=existing_applied,
        total_days=salary["total_days"],
        contact_days=salary["contact_days"],
        participant_opportunity_cost=salary["participant"],
        coordinator_opportunity_cost=salary["coordinator"],
        faculty_opportunity_cost=salary["faculty"],
        salary_opportunity_cost_raw=salary["total"],
        salary_opportunity_cost_per_cohort=salary_applied,
        total_economic_cost_per_cohort=total_per_cohort,
        programme_cost_all_cohorts=programme * cohorts,
        direct_cost_all_cohorts=direct * cohorts,
        opportunity_cost_all_cohorts=(existing_applied + salary_applied) * cohorts,
        total_economic_cost_all_cohorts=total_per_cohort * cohorts,
        reconciled=reconciled,
    )
    return breakdown, warnings
