"""
Renders the National Portfolio tab.

Up to one saved scenario per tier is combined into a portfolio, compared
with the baseline, and used to size the cohorts needed to reach a graduate
target.
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from app.tables import incremental_frame, portfolio_frame
from app.utils import fmt_count, fmt_currency, fmt_pct, fmt_ratio
from core.incremental import compare_to_baseline
from core.models import Configuration, PortfolioResult, Settings, Tier
from core.planning import allocate_target_gap
from core.portfolio import evaluate_portfolio


def render(settings: Settings, baseline: PortfolioResult) -> None:
    """Render the National Portfolio tab."""
    st.header("National Portfolio")

    saved: dict = st.session_state.saved_scenarios
    selection: dict = st.session_state.portfolio_selection

    configs: dict[Tier, Configuration] = {}
    cols = st.columns(3)
    for col, tier in zip(cols, Tier):
        options = ["(none)"] + [n for n, cfg in saved.items() if cfg.get("tier") == tier.value]
        current = selection.get(tier.value) or "(none)"
        with col:
            pick = st.selectbox(tier.value.title(), options,
                                index=options.index(current) if current in options else 0,
                                key=f"pf_{tier.value}")
        selection[tier.value] = None if pick == "(none)" else pick
        if pick != "(none)":
            configs[tier] = Configuration.from_dict(saved[pick])

    if not configs:
        st.info("Select at least one saved scenario to build a portfolio.")
        return

    portfolio = evaluate_portfolio(configs, settings)
    for message in portfolio.warnings:
        st.warning(message)

    m1, m2, m3, m4, m5 = st.columns(5)
    m1.metric("Endorsement (weighted)", fmt_pct(portfolio.endorsement_pct))
    m2.metric("Total cost", fmt_currency(portfolio.total_cost))
    m3.metric("Total benefit", fmt_currency(portfolio.total_benefit))
    m4.metric("Portfolio BCR", fmt_ratio(portfolio.bcr))
    m5.metric("Workforce stock", fmt_count(portfolio.workforce_stock_graduates),
              help="Intermediate plus advanced graduates")

    st.dataframe(
        portfolio_frame(portfolio).style.format(
            {"Endorsement (%)": "{:.1f}", "Cost": "₹{:,.0f}", "Benefit": "₹{:,.0f}",
             "Net benefit": "₹{:,.0f}", "BCR": "{:.2f}", "Graduates": "{:,.1f}"},
            na_rep="Not defined",
        ),
        use_container_width=True, hide_index=True,
    )

    fig = go.Figure()
    tiers = [t.value.title() for t in portfolio.breakdown]
    fig.add_trace(go.Bar(x=tiers, y=[r.total_cost for r in portfolio.breakdown.values()], name="Cost"))
    fig.add_trace(go.Bar(x=tiers, y=[r.total_benefit for r in portfolio.breakdown.values()], name="Benefit"))
    fig.update_layout(barmode="group", height=320, paper_bgcolor="rgba(0,0,0,0)",
                      plot_bgcolor="rgba(0,0,0,0)", margin=dict(t=20, b=40))
    st.plotly_chart(fig, use_container_width=True)

    # ── Versus baseline ───────────────────────────────────────────────────
    with st.container(border=True):
        st.markdown("**Versus business-as-usual baseline**")
        inc = compare_to_baseline(portfolio, baseline)
        st.dataframe(incremental_frame(inc).style.format("₹{:,.0f}", subset=["Baseline", "Candidate", "Change"]),
                     use_container_width=True, hide_index=True)
        c1, c2, c3 = st.columns(3)
        c1.metric("Incremental BCR", fmt_ratio(inc.incremental_bcr))
        c2.metric("Additional graduates", fmt_count(inc.delta_graduates))
        c3.metric("Additional outbreak responses / yr", fmt_count(inc.delta_outbreak_responses_per_year))

    # ── Target gap ────────────────────────────────────────────────────────
    with st.container(border=True):
        st.markdown("**Graduate target gap**")
        target = st.number_input("National graduate target", min_value=0.0, step=50.0,
                                 key="target_graduates")
        allocation = allocate_target_gap(portfolio, target)
        st.dataframe(pd.DataFrame([
            {"Tier": tier.value.title(),
             "Share": row["share"],
             "Graduates needed": row["graduates_needed"],
             "Graduates per cohort": row["graduates_per_cohort"],
             "Additional cohorts": row["additional_cohorts"]}
            for tier, row in allocation.items()
        ]).style.format({"Share": "{:.0%}", "Graduates needed": "{:,.1f}",
                         "Graduates per cohort": "{:,.2f}"}, na_rep="Cannot close"),
            use_container_width=True, hide_index=True)
