"""
Renders the Baseline tab: the business-as-usual configuration per tier.

Edits are saved through services.baseline_store and mirrored to the ``b``
query param so the baseline survives a page reload.
"""
from __future__ import annotations

import streamlit as st

from app.components.config_form import form_key_prefix, render_configuration_form
from app.tables import portfolio_frame
from app.utils import fmt_currency, fmt_ratio
from core.capacity import clamp_cohorts
from core.models import PortfolioResult, Settings, Tier
import services.audit as audit
import services.baseline_store as baseline_store


def _sync_query_param() -> None:
    st.query_params["b"] = baseline_store.export_token(baseline_store.load_baseline())


def render(settings: Settings, baseline: PortfolioResult) -> None:
    """Render the Baseline tab."""
    st.header("Business-as-Usual Baseline")
    st.caption("Every incremental comparison in the planner is made against this baseline.")

    m1, m2, m3 = st.columns(3)
    m1.metric("Baseline cost", fmt_currency(baseline.total_cost))
    m2.metric("Baseline benefit", fmt_currency(baseline.total_benefit))
    m3.metric("Baseline BCR", fmt_ratio(baseline.bcr))
    st.dataframe(portfolio_frame(baseline), use_container_width=True, hide_index=True)

    stored = baseline_store.load_baseline()
    tier = st.radio("Edit tier", list(Tier), format_func=lambda t: t.value.title(),
                    horizontal=True, key="bl_tier")
    current = stored.get(tier)

    with st.container(border=True):
        config = render_configuration_form(form_key_prefix("bl", tier.value),
                                           current.to_dict() if current else None,
                                           locked_tier=tier)

    config, clamped = clamp_cohorts(config, settings)
    if clamped:
        st.warning(
            f"Cohorts reduced to {config.cohorts}: the planning horizon and training sites "
            f"cannot host more {tier.value} cohorts. The reduced count is what gets saved."
        )

    c1, c2 = st.columns(2)
    if c1.button("💾 Save baseline tier", use_container_width=True):
        baseline_store.save_baseline_tier(config, settings)
        _sync_query_param()
        audit.log_event("BASELINE_SAVED", f"{tier.value} baseline updated")
        st.rerun()
    if c2.button("↺ Reset to defaults", type="secondary", use_container_width=True):
        baseline_store.reset_baseline()
        _sync_query_param()
        audit.log_event("BASELINE_RESET", "All tiers restored to defaults")
        st.rerun()

    with st.expander("Share or restore baseline"):
        st.code(baseline_store.export_token(stored), language=None)
        token = st.text_input("Paste a baseline token", key="bl_import_token")
        if st.button("Import", key="bl_import") and token.strip():
            try:
                configs = baseline_store.import_token(token.strip())
            except ValueError as e:
                st.error(str(e))
            else:
                baseline_store.save_baseline(configs)
                _sync_query_param()
                audit.log_event("BASELINE_IMPORTED", f"{len(configs)} tier(s) imported")
                st.rerun()
