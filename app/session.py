# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Session State Management
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single responsibility: own the complete st.session_state initialisation
# contract for the entire application, and the one place where the mutable
# "current settings" are turned into an immutable Settings snapshot.
#
# Rules:
#   • init_session() is idempotent; call it every run(), it never overwrites
#     existing values (uses setdefault exclusively).
#   • No module outside this file may write a NEW top-level session key
#     without first registering it here.
#   • The engine never reads st.session_state; tabs call current_settings()
#     once per run and pass the snapshot down explicitly.
#   • _get_secret() is the sole secrets access point for the application.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import copy
import os

import streamlit as st

from config.constants import (
    DEFAULT_CURRENCY_RATE,
    DEFAULT_DISCOUNT_RATE,
    DEFAULT_PLANNING_HORIZON_YEARS,
    DEFAULT_TIER_SETTINGS,
)
from config.scenarios import SCENARIOS
from core.models import Settings
from core.validation import positive


# ─────────────────────────────────────────────────────────────────────────────
# SECRETS ACCESS POINT
# ─────────────────────────────────────────────────────────────────────────────

def _get_secret(key: str, default: str = "") -> str:
    """Read a secret from Streamlit Secrets, falling back to environment variable.

    Priority: st.secrets[key]  →  os.getenv(key, default)

    Never raises; returns ``default`` if the key is absent from both sources.
    """
    try:
        return st.secrets[key]
    except (KeyError, AttributeError, FileNotFoundError):
        return os.getenv(key, default)


def default_settings_dict() -> dict:
    currency = positive(_get_secret("FETP_CURRENCY_RATE", ""), DEFAULT_CURRENCY_RATE)
    return {
        "general": {
            "planning_horizon_years": DEFAULT_PLANNING_HORIZON_YEARS,
            "discount_rate":          DEFAULT_DISCOUNT_RATE,
            "currency_rate":          currency,
        },
        **copy.deepcopy(DEFAULT_TIER_SETTINGS),
    }


# ─────────────────────────────────────────────────────────────────────────────
# SESSION STATE INITIALISATION
# ─────────────────────────────────────────────────────────────────────────────

def init_session() -> None:
    """Idempotently initialise all application session state keys.

    Session key registry (authoritative):

    Settings
    ────────
    settings                 dict         general + per-tier settings (editable)
    settings_version         int          bumped on every settings edit

    Scenarios
    ─────────
    saved_scenarios          dict         name → Configuration.to_dict()
    portfolio_selection      dict         tier value → saved scenario name | None
    target_graduates         float        national graduate target for gap allocation
    baseline_restored        bool         URL baseline token already applied this session

    Baseline & audit (owned by services/, registered here)
    ────────────────────────────────────────────────────────
    _fetp_baseline_configs   dict         tier value → Configuration.to_dict()
    _fetp_audit_log          list[dict]   in-session audit entries
    """
    ss = st.session_state

    # ── Settings ──────────────────────────────────────────────────────────────
    ss.setdefault("settings",         default_settings_dict())
    ss.setdefault("settings_version", 0)

    # ── Scenarios ─────────────────────────────────────────────────────────────
    ss.setdefault("saved_scenarios", {
        name: {k: v for k, v in cfg.items() if k != "description"}
        for name, cfg in SCENARIOS.items()
    })
    ss.setdefault("portfolio_selection", {"frontline": None, "intermediate": None, "advanced": None})
    ss.setdefault("target_graduates", 500.0)
    ss.setdefault("baseline_restored", False)


def current_settings() -> Settings:
    """Immutable Settings snapshot of the session's current values."""
    return Settings.from_dict(st.session_state.get("settings", default_settings_dict()))
