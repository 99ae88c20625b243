"""
Renders the Settings tab: general and per-tier benefit assumptions, plus the
in-session audit log.

Any edit clears the evaluation cache and bumps ``settings_version`` so that
no result computed under the old values is reused.
"""
from __future__ import annotations

import streamlit as st

from app.session import default_settings_dict
from core.models import Settings, Tier
from core.scenario import clear_cache
import services.audit as audit


def _apply(new: Settings, what: str) -> None:
    st.session_state.settings = new.to_dict()
    st.session_state.settings_version += 1
    clear_cache()
    audit.log_event("SETTINGS_CHANGED", what)


def render(settings: Settings) -> None:
    """Render the Settings tab content."""
    st.header("Settings & Governance")

    # Section 1 — General
    with st.container(border=True):
        st.subheader("General")
        c1, c2, c3 = st.columns(3)
        horizon = c1.number_input("Planning horizon (years)", min_value=0.5, max_value=50.0,
                                  value=float(settings.general.planning_horizon_years), step=0.5)
        rate = c2.number_input("Discount rate", min_value=0.0, max_value=0.99,
                               value=float(settings.general.discount_rate), step=0.005, format="%.3f")
        fx = c3.number_input("INR per USD", min_value=1.0,
                             value=float(settings.general.currency_rate), step=1.0)
        if (horizon, rate, fx) != (settings.general.planning_horizon_years,
                                   settings.general.discount_rate, settings.general.currency_rate):
            _apply(settings.with_general(planning_horizon_years=horizon, discount_rate=rate, currency_rate=fx),
                   f"general: horizon={horizon}, discount={rate}, fx={fx}")
            st.rerun()

    # Section 2 — Per tier
    with st.container(border=True):
        st.subheader("Tier assumptions")
        for col, tier in zip(st.columns(3), Tier):
            ts = settings.for_tier(tier)
            with col:
                st.markdown(f"**{tier.value.title()}**")
                completion = st.number_input("Completion rate", 0.0, 1.0, float(ts.completion_rate), 0.01,
                                             key=f"set_{tier.value}_completion")
                outbreaks = st.number_input("Outbreaks / graduate / year", 0.0, None,
                                            float(ts.outbreaks_per_graduate_per_year), 0.05,
                                            key=f"set_{tier.value}_outbreaks")
                per_outbreak = st.number_input("Value per outbreak (₹)", 0.0, None,
                                               float(ts.value_per_outbreak), 100_000.0,
                                               key=f"set_{tier.value}_vpo")
                per_graduate = st.number_input("Value per graduate (₹)", 0.0, None,
                                               float(ts.value_per_graduate), 100_000.0,
                                               key=f"set_{tier.value}_vpg")
            changes = dict(completion_rate=completion, outbreaks_per_graduate_per_year=outbreaks,
                           value_per_outbreak=per_outbreak, value_per_graduate=per_graduate)
            if any(getattr(ts, k) != v for k, v in changes.items()):
                _apply(settings.with_tier(tier, **changes), f"{tier.value}: {changes}")
                st.rerun()

    # Section 3 — Audit log
    with st.container(border=True):
        st.subheader("Activity Log")
        entries = audit.get_log(20)
        if not entries:
            st.caption("No activity logged.")
        for entry in entries:
            st.text(f"{entry['ts']}  {entry['action']:<18} {entry['details']}")

    # Section 4 — Data controls
    c1, c2 = st.columns(2)
    if c1.button("Restore default settings", type="secondary", use_container_width=True):
        for key in [k for k in st.session_state.keys() if str(k).startswith("set_")]:
            del st.session_state[key]
        _apply(Settings.from_dict(default_settings_dict()), "restored defaults")
        st.rerun()
    if c2.button("Clear activity log", type="secondary", use_container_width=True):
        audit.clear_log()
        st.rerun()
