# © 2026 Aparajita Parihar. All rights reserved.
# FETP Scenario Planner — Tests for baseline persistence and the audit log

import base64
import json
import sys
import os
import zlib
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import services.audit as audit
import services.baseline_store as store
from core.capacity import max_feasible_cohorts
from core.models import Settings, Tier


@pytest.fixture
def state():
    return {}


# ─────────────────────────────────────────────────────────────────────────────
# 1. Baseline store
# ─────────────────────────────────────────────────────────────────────────────
def test_first_load_seeds_defaults(state):
    configs = store.load_baseline(state)
    assert set(configs) == set(Tier)
    assert configs == store.default_baseline_configs()


def test_save_single_tier(state):
    configs = store.load_baseline(state)
    edited = configs[Tier.ADVANCED].replace(trainees_per_cohort=12)
    assert store.save_baseline_tier(edited, Settings(), state) == edited

    reloaded = store.load_baseline(state)
    assert reloaded[Tier.ADVANCED].trainees_per_cohort == 12
    assert reloaded[Tier.FRONTLINE] == configs[Tier.FRONTLINE]


def test_saved_tier_is_clamped_to_cohort_ceiling(state):
    advanced = store.load_baseline(state)[Tier.ADVANCED].replace(cohorts=50, available_training_sites=1)
    stored = store.save_baseline_tier(advanced, Settings(), state)

    ceiling = max_feasible_cohorts(Tier.ADVANCED, Settings().general.planning_horizon_years, 1)
    assert ceiling == 2
    assert stored.cohorts == ceiling
    assert store.load_baseline(state)[Tier.ADVANCED].cohorts == ceiling


def test_reset_restores_defaults(state):
    configs = store.load_baseline(state)
    store.save_baseline_tier(configs[Tier.FRONTLINE].replace(cohorts=99), Settings(), state)
    store.reset_baseline(state)
    assert store.load_baseline(state) == store.default_baseline_configs()


def test_token_survives_reload(state):
    configs = store.load_baseline(state)
    configs[Tier.INTERMEDIATE] = configs[Tier.INTERMEDIATE].replace(trainees_per_cohort=30)
    assert store.import_token(store.export_token(configs)) == configs


def _token(payload) -> str:
    return base64.urlsafe_b64encode(zlib.compress(json.dumps(payload).encode())).decode()


@pytest.mark.parametrize("token", [
    "not-a-token",
    base64.urlsafe_b64encode(b"plain bytes").decode(),
    _token(["frontline"]),
    _token({"expert": {"cohorts": 1}}),
])
def test_bad_tokens_raise_value_error(token):
    with pytest.raises(ValueError):
        store.import_token(token)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Audit log
# ─────────────────────────────────────────────────────────────────────────────
def test_log_newest_first(state):
    audit.log_event("SETTINGS_CHANGED", "discount 0.03 -> 0.05", state)
    audit.log_event("BASELINE_SAVED", "frontline", state)
    entries = audit.get_log(10, state)
    assert [e["action"] for e in entries] == ["BASELINE_SAVED", "SETTINGS_CHANGED"]
    assert "ts" in entries[0]


def test_log_is_capped(state):
    for i in range(80):
        audit.log_event("EVENT", str(i), state)
    entries = audit.get_log(100, state)
    assert len(entries) == 50
    assert entries[0]["details"] == "79"


def test_log_flattens_line_breaks(state):
    audit.log_event("EVENT", "line one\nFAKE ENTRY", state)
    assert "\n" not in audit.get_log(1, state)[0]["details"]


def test_clear_log(state):
    audit.log_event("EVENT", "x", state)
    audit.clear_log(state)
    assert audit.get_log(10, state) == []
