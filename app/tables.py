"""
pandas frames built from engine result objects.

Shared by the tabs for display and CSV download. Frames hold raw numbers;
formatting is applied by the caller through ``DataFrame.style.format``.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from app.utils import to_usd
from config.constants import STATUS_REQUIRES_EXPANSION, STATUS_WITHIN_CAPACITY
from core.models import IncrementalResult, PortfolioResult, ScenarioResult


def scenario_summary_frame(result: ScenarioResult, currency_rate: float) -> pd.DataFrame:
    rows = [
        ("Endorsement (%)",                 result.endorsement_pct),
        ("Opt-out (%)",                     result.optout_pct),
        ("WTP per trainee per month",       result.preference.wtp_per_trainee_month),
        ("WTP (all cohorts)",               result.wtp_all_cohorts),
        ("Economic cost (all cohorts)",     result.total_cost),
        ("Epidemiological benefit",         result.total_benefit),
        ("Net benefit",                     result.net_benefit),
        ("Graduates (all cohorts)",         result.graduates),
        ("Outbreak responses per year",     result.outbreak_responses_per_year),
        ("Mentors required",                result.capacity.total_mentors_required),
        ("Mentor shortfall",                result.capacity.mentor_shortfall),
    ]
    df = pd.DataFrame(rows, columns=["Metric", "Value"])
    money = {"WTP (all cohorts)", "Economic cost (all cohorts)", "Epidemiological benefit", "Net benefit"}
    df["USD"] = [to_usd(v, currency_rate) if m in money else None for m, v in rows]
    return df


def cost_breakdown_frame(result: ScenarioResult) -> pd.DataFrame:
    c = result.cost
    rows = [{"Component": comp.label, "Share": comp.share, "Per cohort": comp.amount_per_cohort}
            for comp in c.components]
    rows += [
        {"Component": "Opportunity cost (template rate)", "Share": None,
         "Per cohort": c.existing_opportunity_cost_per_cohort},
        {"Component": "Opportunity cost (salary & time)", "Share": None,
         "Per cohort": c.salary_opportunity_cost_per_cohort},
        {"Component": "Total economic cost", "Share": None,
         "Per cohort": c.total_economic_cost_per_cohort},
    ]
    df = pd.DataFrame(rows)
    df["All cohorts"] = df["Per cohort"] * c.cohorts
    return df


def salary_opportunity_frame(result: ScenarioResult) -> pd.DataFrame:
    """Per-role salary opportunity cost, shown even when the switch is off."""
    c = result.cost
    return pd.DataFrame([
        {"Role": "Participants", "Per cohort": c.participant_opportunity_cost},
        {"Role": "Coordinator",  "Per cohort": c.coordinator_opportunity_cost},
        {"Role": "Faculty",      "Per cohort": c.faculty_opportunity_cost},
        {"Role": "Total",        "Per cohort": c.salary_opportunity_cost_raw},
    ])


def portfolio_frame(portfolio: PortfolioResult) -> pd.DataFrame:
    rows = []
    for tier, r in portfolio.breakdown.items():
        rows.append({
            "Tier":            tier.value.title(),
            "Trainees":        r.trainees,
            "Endorsement (%)": r.endorsement_pct,
            "Cost":            r.total_cost,
            "Benefit":         r.total_benefit,
            "Net benefit":     r.net_benefit,
            "BCR":             r.bcr,
            "Graduates":       r.graduates,
            "Capacity":        r.capacity.status,
        })
    rows.append({
        "Tier":            "Total",
        "Trainees":        portfolio.trainees,
        "Endorsement (%)": portfolio.endorsement_pct,
        "Cost":            portfolio.total_cost,
        "Benefit":         portfolio.total_benefit,
        "Net benefit":     portfolio.net_benefit,
        "BCR":             portfolio.bcr,
        "Graduates":       portfolio.graduates,
        "Capacity":        (STATUS_WITHIN_CAPACITY if portfolio.mentor_shortfall == 0
                            else STATUS_REQUIRES_EXPANSION),
    })
    return pd.DataFrame(rows)


def incremental_frame(inc: IncrementalResult) -> pd.DataFrame:
    return pd.DataFrame([
        {"Metric": "Cost",                        "Baseline": inc.baseline_cost,
         "Candidate": inc.candidate_cost,         "Change": inc.delta_cost},
        {"Metric": "Benefit",                     "Baseline": inc.baseline_benefit,
         "Candidate": inc.candidate_benefit,      "Change": inc.delta_benefit},
        {"Metric": "Net benefit",                 "Baseline": inc.baseline_benefit - inc.baseline_cost,
         "Candidate": inc.candidate_benefit - inc.candidate_cost, "Change": inc.delta_net},
    ])


def sensitivity_frame(rows: Iterable[dict]) -> pd.DataFrame:
    columns = ["scenario", "tier", "parameter", "value", "total_cost",
               "total_benefit", "net_benefit", "bcr", "endorsement_pct"]
    return pd.DataFrame(list(rows), columns=columns)
