"""
Renders the Scenario Builder tab.

One tier-level configuration is evaluated against the current settings
snapshot and compared with the business-as-usual baseline.
"""
from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from app.components.config_form import form_key_prefix, render_configuration_form
from app.tables import cost_breakdown_frame, incremental_frame, salary_opportunity_frame, scenario_summary_frame
from app.utils import fmt_currency, fmt_pct, fmt_ratio, fmt_usd, to_usd
from core.capacity import clamp_cohorts
from core.incremental import compare_to_baseline
from core.models import PortfolioResult, Settings
from core.scenario import evaluate_scenario
import services.audit as audit

CHART_LAYOUT = dict(
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Nunito Sans, sans-serif", size=11, color="#071A2F"),
    margin=dict(t=20, b=10, l=0, r=0),
    height=320,
    yaxis=dict(gridcolor="#E8EEF4", zerolinecolor="#D0DAE4", tickfont=dict(size=10)),
    xaxis=dict(tickfont=dict(size=10)),
    showlegend=False,
)


def _cost_benefit_chart(result) -> go.Figure:
    c = result.cost
    fig = go.Figure(go.Bar(
        x=["Direct cost", "Opportunity cost", "Epidemiological benefit"],
        y=[c.direct_cost_all_cohorts, c.opportunity_cost_all_cohorts, result.total_benefit],
        marker_color=["#4A6FA5", "#F0B429", "#1DB87A"],
    ))
    fig.update_layout(**CHART_LAYOUT)
    return fig


def render(settings: Settings, baseline: PortfolioResult) -> None:
    """Render the Scenario Builder tab."""
    st.header("Scenario Builder")

    saved: dict = st.session_state.saved_scenarios
    names = ["(new)"] + list(saved.keys())
    chosen = st.selectbox("Start from", names, key="sb_start_from")
    initial = saved.get(chosen, {}) if chosen != "(new)" else {}

    with st.container(border=True):
        config = render_configuration_form(form_key_prefix("sb", chosen), initial)

    config, clamped = clamp_cohorts(config, settings)
    if clamped:
        st.warning(
            f"Cohorts reduced to {config.cohorts}: the planning horizon and training sites "
            f"cannot host more {config.tier.value} cohorts."
        )

    result = evaluate_scenario(config, settings)
    for message in result.warnings:
        st.warning(message)

    # ── Headline metrics ──────────────────────────────────────────────────
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Endorsement", fmt_pct(result.endorsement_pct))
    m2.metric("Economic cost", fmt_currency(result.total_cost),
              fmt_usd(to_usd(result.total_cost, settings.general.currency_rate)), delta_color="off")
    m3.metric("Benefit", fmt_currency(result.total_benefit))
    m4.metric("BCR", fmt_ratio(result.bcr))

    cap = result.capacity
    if cap.within_capacity:
        st.success(f"{cap.status}: {cap.total_mentors_required} mentors required, "
                   f"{cap.available_mentors} available.")
    else:
        st.error(f"{cap.status}: shortfall of {cap.mentor_shortfall} mentors.")
    if cap.site_gap:
        st.warning(f"Site capacity is {cap.site_capacity} cohorts per year, {cap.site_gap} over.")

    c1, c2 = st.columns([3, 2])
    with c1:
        st.markdown("**Summary**")
        st.dataframe(scenario_summary_frame(result, settings.general.currency_rate),
                     use_container_width=True, hide_index=True)
        st.markdown("**Cost breakdown**")
        st.dataframe(cost_breakdown_frame(result).style.format(
            {"Share": "{:.0%}", "Per cohort": "₹{:,.0f}", "All cohorts": "₹{:,.0f}"}, na_rep="—"),
            use_container_width=True, hide_index=True)
        with st.expander("Salary-based opportunity cost by role"):
            if not result.cost.opportunity_cost_included:
                st.caption("Opportunity cost is switched off (shown for transparency only).")
            st.dataframe(salary_opportunity_frame(result), use_container_width=True, hide_index=True)
    with c2:
        st.plotly_chart(_cost_benefit_chart(result), use_container_width=True)

    # ── Versus baseline ───────────────────────────────────────────────────
    with st.container(border=True):
        st.markdown("**Versus business-as-usual baseline**")
        inc = compare_to_baseline(result, baseline)
        st.dataframe(incremental_frame(inc).style.format("₹{:,.0f}", subset=["Baseline", "Candidate", "Change"]),
                     use_container_width=True, hide_index=True)
        st.caption(f"Incremental BCR: {fmt_ratio(inc.incremental_bcr)}")

    # ── Save ──────────────────────────────────────────────────────────────
    s1, s2 = st.columns([3, 1])
    name = s1.text_input("Scenario name", value=chosen if chosen != "(new)" else "", key="sb_name")
    if s2.button("💾 Save scenario", use_container_width=True) and name.strip():
        saved[name.strip()] = config.replace(label=name.strip()).to_dict()
        audit.log_event("SCENARIO_SAVED", f"{name.strip()} ({config.tier.value})")
        st.toast(f"Saved '{name.strip()}'")
