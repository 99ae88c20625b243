"""
Renders the Sensitivity tab: one-way sweeps of a settings parameter over
the saved scenarios.
"""
from __future__ import annotations

import plotly.express as px
import streamlit as st

from app.tables import sensitivity_frame
from core.models import Configuration, Settings
from core.sensitivity import DEFAULT_GRIDS, PARAMETERS, run_sensitivity

_PARAMETER_LABELS = {
    "discount_rate":            "Discount rate",
    "planning_horizon_years":   "Planning horizon (years)",
    "value_per_outbreak_scale": "Value per outbreak (× current)",
    "value_per_graduate_scale": "Value per graduate (× current)",
    "completion_rate_delta":    "Completion rate (± points)",
}


def render(settings: Settings) -> None:
    """Render the Sensitivity tab."""
    st.header("Sensitivity Analysis")

    saved: dict = st.session_state.saved_scenarios
    if not saved:
        st.info("Save at least one scenario to run a sensitivity sweep.")
        return

    c1, c2 = st.columns([2, 1])
    names = c1.multiselect("Scenarios", list(saved.keys()), default=list(saved.keys())[:3], key="sa_names")
    parameter = c2.selectbox("Parameter", list(PARAMETERS), format_func=lambda p: _PARAMETER_LABELS.get(p, p),
                             key="sa_parameter")
    metric = st.radio("Metric", ["bcr", "net_benefit", "total_benefit"], horizontal=True,
                      format_func={"bcr": "BCR", "net_benefit": "Net benefit",
                                   "total_benefit": "Benefit"}.get, key="sa_metric")
    if not names:
        return

    configs = {name: Configuration.from_dict(saved[name]) for name in names}
    df = sensitivity_frame(run_sensitivity(configs, settings, parameter, DEFAULT_GRIDS[parameter]))

    fig = px.line(df, x="value", y=metric, color="scenario", markers=True,
                  labels={"value": _PARAMETER_LABELS.get(parameter, parameter), metric: metric.replace("_", " ")})
    fig.update_layout(height=360, paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
                      margin=dict(t=20, b=40), legend=dict(orientation="h", y=-0.25))
    st.plotly_chart(fig, use_container_width=True)
    st.caption("BCR points are omitted where cost is zero.")

    st.download_button("⬇ Download CSV", df.to_csv(index=False).encode("utf-8"),
                       file_name=f"fetp_sensitivity_{parameter}.csv", mime="text/csv")
