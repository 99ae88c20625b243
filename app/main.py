# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Field Epidemiology Training Programme Decision Support
# © 2026 Aparajita Parihar. All rights reserved.
#
# Streamlit entry point. Owns page configuration, session initialisation,
# baseline restore from the URL, and tab routing. All numbers come from the
# engine in core/; this file only wires the settings snapshot through.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

# Load .env from project root (parent directory of app/)
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
load_dotenv(_env_path)

import streamlit as st

# ─────────────────────────────────────────────────────────────────────────────
# PATH SETUP — Ensure config, core and services modules are accessible
# ─────────────────────────────────────────────────────────────────────────────
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import services.audit as audit
import services.baseline_store as baseline_store
from app.session import current_settings, init_session
from app.tabs import baseline as baseline_tab
from app.tabs import portfolio as portfolio_tab
from app.tabs import scenario as scenario_tab
from app.tabs import sensitivity as sensitivity_tab
from app.tabs import settings as settings_tab
from core.incremental import build_baseline

logging.basicConfig(
    level=os.getenv("FETP_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# PAGE CONFIGURATION
# ─────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title   = "FETP Scenario Planner",
    page_icon    = "🩺",
    layout       = "wide",
    initial_sidebar_state = "collapsed",
)

st.markdown("""
<style>
@import url('https://fonts.googleapis.com/css2?family=Rajdhani:wght@500;600;700&family=Nunito+Sans:wght@300;400;600;700&display=swap');
html, body, [class*="css"] { font-family: 'Nunito Sans', sans-serif !important; }
h1,h2,h3,h4 { font-family: 'Rajdhani', sans-serif !important; letter-spacing: 0.3px; }
[data-testid="stAppViewContainer"] > .main { background: #F0F4F8; }
.stTabs [data-baseweb="tab-list"] { background: #ffffff !important; border-bottom: 2px solid #E0EBF4 !important; }
.stTabs [data-baseweb="tab"] { color: #3A576B !important; font-family: 'Rajdhani', sans-serif !important; font-weight: 600 !important; padding: 10px 20px !important; }
.stTabs [aria-selected="true"] { color: #071A2F !important; border-bottom: 3px solid #00C2A8 !important; }
[data-testid="stMetric"] { background: #ffffff; border: 1px solid #E0EBF4; border-top: 3px solid #00C2A8; border-radius: 8px; padding: 12px 16px; }
</style>
""", unsafe_allow_html=True)

# ─────────────────────────────────────────────────────────────────────────────
# STATE INITIALIZATION
# ─────────────────────────────────────────────────────────────────────────────
init_session()

# Restore baseline from URL query params (F5 survival)
_qp = st.query_params
if "b" in _qp and not st.session_state.baseline_restored:
    try:
        baseline_store.save_baseline(baseline_store.import_token(_qp["b"]))
        audit.log_event("BASELINE_RESTORED", "Baseline restored from URL")
    except ValueError as e:
        logger.warning("Ignoring invalid baseline token in URL: %s", e)
    st.session_state.baseline_restored = True

# One immutable settings snapshot per run; every tab evaluates against it.
settings = current_settings()
baseline = build_baseline(baseline_store.load_baseline(), settings)

st.title("FETP Scenario Planner")
st.caption(
    f"Planning horizon {settings.general.planning_horizon_years:g} years · "
    f"discount rate {settings.general.discount_rate:.1%} · "
    f"₹{settings.general.currency_rate:g} per USD"
)

# ─────────────────────────────────────────────────────────────────────────────
# TABS
# ─────────────────────────────────────────────────────────────────────────────
_tab_scenario, _tab_portfolio, _tab_baseline, _tab_sensitivity, _tab_settings = st.tabs([
    "🧪 Scenario Builder", "🗺️ National Portfolio", "📌 Baseline", "📈 Sensitivity", "⚙️ Settings",
])

with _tab_scenario:
    scenario_tab.render(settings, baseline)
with _tab_portfolio:
    portfolio_tab.render(settings, baseline)
with _tab_baseline:
    baseline_tab.render(settings, baseline)
with _tab_sensitivity:
    sensitivity_tab.render(settings)
with _tab_settings:
    settings_tab.render(settings)
