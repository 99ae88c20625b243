# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — In-Session Audit Log
# © 2026 Aparajita Parihar. All rights reserved.
#
# Logs assumption changes (settings edits, baseline saves/resets, imports).
# Storage: st.session_state ONLY, never persisted to disk or any database.
#
# Governance requirement: every change to the figures behind an incremental
# comparison must be traceable with a timestamp.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import MutableMapping, Optional

import streamlit as st

logger = logging.getLogger(__name__)

_LOG_KEY  = "_fetp_audit_log"
_MAX_SIZE = 50   # cap entries to prevent unbounded memory growth
_MAX_DETAIL_CHARS = 300


def _state(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def _ensure_log(ss: MutableMapping) -> None:
    if _LOG_KEY not in ss:
        ss[_LOG_KEY] = []


def _sanitise(text: str) -> str:
    """Collapse line breaks (log-injection guard) and cap the length."""
    flat = " ".join(str(text).split())
    return flat[:_MAX_DETAIL_CHARS]


def log_event(action: str, details: str, state: Optional[MutableMapping] = None) -> None:
    """
    Append an audit event to the in-session log.

    Parameters
    ----------
    action  : Short action label, e.g. "SETTINGS_CHANGED", "BASELINE_SAVED"
    details : Human-readable description of what changed.
    """
    ss = _state(state)
    _ensure_log(ss)

    entry: dict = {
        "ts":      datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        "action":  _sanitise(action),
        "details": _sanitise(details),
    }
    ss[_LOG_KEY].append(entry)
    if len(ss[_LOG_KEY]) > _MAX_SIZE:
        ss[_LOG_KEY] = ss[_LOG_KEY][-_MAX_SIZE:]
    logger.info("%s: %s", entry["action"], entry["details"])


def get_log(n: int = 10, state: Optional[MutableMapping] = None) -> list[dict]:
    """Return the last *n* audit log entries, most recent first."""
    ss = _state(state)
    _ensure_log(ss)
    return list(reversed(ss[_LOG_KEY][-n:]))


def clear_log(state: Optional[MutableMapping] = None) -> None:
    """Wipe the entire in-session log (e.g. on explicit admin action)."""
    _state(state)[_LOG_KEY] = []
