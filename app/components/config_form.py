"""
Configuration form component for the FETP Scenario Planner.

Exports one public function: render_configuration_form()
Used by the Scenario Builder tab and the Baseline editor.
"""

from __future__ import annotations

from typing import Any, Optional

import streamlit as st

from config.constants import DEFAULT_CONFIGURATION, RESPONSE_TIME_PINNED
from core.models import CareerIncentive, Configuration, DeliveryMode, MentorshipIntensity, Tier

_LABELS: dict[str, str] = {
    "frontline":                "Frontline (3 months)",
    "intermediate":             "Intermediate (12 months)",
    "advanced":                 "Advanced (24 months)",
    "certificate":              "Certificate",
    "university_qualification": "University qualification",
    "career_pathway":           "Government career pathway",
    "low":                      "Low",
    "medium":                   "Medium",
    "high":                     "High",
    "blended":                  "Blended",
    "in_person":                "In-person",
    "online":                   "Fully online",
    "7_day":                    "Within 7 days",
}


def _label(value: str) -> str:
    return _LABELS.get(value, value)


def _select(label: str, enum_cls, current: Any, key: str, disabled: bool = False) -> str:
    options = [m.value for m in enum_cls]
    current_value = getattr(current, "value", current)
    index = options.index(current_value) if current_value in options else 0
    return st.selectbox(label, options, index=index, format_func=_label, key=key, disabled=disabled)


def form_key_prefix(scope: str, source: str) -> str:
    """Widget key prefix for one form instance.

    Streamlit ignores ``value=`` once a key is in session_state, so each
    source configuration gets its own keys and loads its own values.
    """
    return f"{scope}_{source}"


def render_configuration_form(
    key_prefix: str,
    initial: Optional[dict] = None,
    locked_tier: Optional[Tier] = None,
) -> Configuration:
    """Render the inputs for one tier configuration and return it."""
    init = Configuration.from_dict({"tier": locked_tier or Tier.FRONTLINE, **(initial or {})})
    if locked_tier is not None:
        init = init.replace(tier=locked_tier)
    d = DEFAULT_CONFIGURATION

    c1, c2, c3 = st.columns(3)
    with c1:
        tier = _select("Programme tier", Tier, init.tier, f"{key_prefix}_tier",
                       disabled=locked_tier is not None)
        career = _select("Career incentive", CareerIncentive, init.career_incentive, f"{key_prefix}_career")
        mentorship = _select("Mentorship intensity", MentorshipIntensity, init.mentorship_intensity,
                             f"{key_prefix}_mentorship")
        delivery = _select("Delivery mode", DeliveryMode, init.delivery_mode, f"{key_prefix}_delivery")
        st.caption(f"Response time fixed by policy: {_label(RESPONSE_TIME_PINNED)}")

    with c2:
        cost = st.number_input("Cost per trainee per month (₹)", min_value=0.0,
                               value=float(init.cost_per_trainee_per_month), step=5_000.0,
                               key=f"{key_prefix}_cost")
        trainees = st.number_input("Trainees per cohort", min_value=1,
                                   value=int(init.trainees_per_cohort), step=1,
                                   key=f"{key_prefix}_trainees")
        cohorts = st.number_input("Number of cohorts", min_value=0,
                                  value=int(init.cohorts), step=1, key=f"{key_prefix}_cohorts")
        mentor_base = st.number_input("Mentor support cost per cohort (₹, base)", min_value=0.0,
                                      value=float(init.mentor_support_cost_base), step=10_000.0,
                                      key=f"{key_prefix}_mentor_base")
        override = st.number_input(
            "Completion rate override (%; 0 = use settings)", min_value=0.0, max_value=100.0,
            value=float((init.completion_rate_override or 0.0) * 100.0), step=1.0,
            key=f"{key_prefix}_completion",
        )

    with c3:
        mentors = st.number_input("Available mentors (national)", min_value=0,
                                  value=int(init.available_mentors_national), step=1,
                                  key=f"{key_prefix}_mentors")
        sites = st.number_input("Available training sites", min_value=0,
                                value=int(init.available_training_sites), step=1,
                                key=f"{key_prefix}_sites")
        per_site = st.number_input("Max cohorts per site per year", min_value=0,
                                   value=int(init.max_cohorts_per_site_per_year), step=1,
                                   key=f"{key_prefix}_per_site")
        cross_sector = st.slider("Cross-sector benefit multiplier", 0.8, 2.0,
                                 value=float(init.cross_sector_benefit_multiplier), step=0.05,
                                 key=f"{key_prefix}_cross_sector")
        include_opp = st.checkbox("Include opportunity cost", value=init.opportunity_cost_included,
                                  key=f"{key_prefix}_opp")

    with st.expander("Monthly salaries (salary-based opportunity cost)"):
        s1, s2, s3 = st.columns(3)
        faculty = s1.number_input("Faculty (₹)", min_value=0.0, value=float(init.faculty_monthly_salary),
                                  step=5_000.0, key=f"{key_prefix}_sal_fac")
        coordinator = s2.number_input("Coordinator (₹)", min_value=0.0,
                                      value=float(init.coordinator_monthly_salary),
                                      step=5_000.0, key=f"{key_prefix}_sal_coord")
        participant = s3.number_input("Participant (₹)", min_value=0.0,
                                      value=float(init.participant_monthly_salary),
                                      step=5_000.0, key=f"{key_prefix}_sal_part")

    return Configuration(
        tier=tier,
        career_incentive=career,
        mentorship_intensity=mentorship,
        delivery_mode=delivery,
        response_time=RESPONSE_TIME_PINNED,
        cost_per_trainee_per_month=cost,
        trainees_per_cohort=trainees or d["trainees_per_cohort"],
        cohorts=cohorts,
        planning_horizon_years=init.planning_horizon_years,
        opportunity_cost_included=include_opp,
        completion_rate_override=override / 100.0 if override > 0 else None,
        mentor_support_cost_base=mentor_base,
        available_mentors_national=mentors,
        available_training_sites=sites,
        max_cohorts_per_site_per_year=per_site,
        cross_sector_benefit_multiplier=cross_sector,
        faculty_monthly_salary=faculty,
        coordinator_monthly_salary=coordinator,
        participant_monthly_salary=participant,
        label=init.label,
    )
