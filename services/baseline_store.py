# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Business-as-Usual Baseline Store
# © 2026 Aparajita Parihar. All rights reserved.
#
# Persists the baseline tier configurations separately from ad-hoc scenarios.
# Storage: st.session_state (or any MutableMapping passed in by the caller).
# Survives page reloads through a compact query-param token:
#   JSON → zlib → urlsafe base64
#
# No durability or transaction guarantees: the baseline is an editable
# reference point, not a record of truth.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import base64
import binascii
import json
import zlib
from typing import Mapping, MutableMapping, Optional

import streamlit as st

from config.scenarios import DEFAULT_BASELINE_CONFIGS
from core.capacity import clamp_cohorts
from core.models import Configuration, Settings, Tier, parse_tier

_BASELINE_KEY = "_fetp_baseline_configs"


def _state(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def default_baseline_configs() -> dict[Tier, Configuration]:
    return {parse_tier(t): Configuration.from_dict(cfg) for t, cfg in DEFAULT_BASELINE_CONFIGS.items()}


def _serialise(configs: Mapping[Tier, Configuration]) -> dict[str, dict]:
    return {parse_tier(t).value: cfg.to_dict() for t, cfg in configs.items()}


def _deserialise(raw: Mapping[str, Mapping]) -> dict[Tier, Configuration]:
    configs: dict[Tier, Configuration] = {}
    for key, cfg in raw.items():
        tier = parse_tier(key)
        config = Configuration.from_dict({**cfg, "tier": tier})
        configs[tier] = config
    return configs


def load_baseline(state: Optional[MutableMapping] = None) -> dict[Tier, Configuration]:
    """Return the stored baseline, seeding it with the defaults on first use."""
    ss = _state(state)
    if _BASELINE_KEY not in ss:
        ss[_BASELINE_KEY] = _serialise(default_baseline_configs())
    return _deserialise(ss[_BASELINE_KEY])


def save_baseline(configs: Mapping[Tier, Configuration], state: Optional[MutableMapping] = None) -> None:
    """Replace the stored baseline. Each configuration is filed under its own tier."""
    by_tier = {cfg.tier: cfg for cfg in configs.values()}
    _state(state)[_BASELINE_KEY] = _serialise(by_tier)


def save_baseline_tier(
    config: Configuration,
    settings: Settings,
    state: Optional[MutableMapping] = None,
) -> Configuration:
    """Store one tier, clamping its cohorts to the ceiling. Returns what was stored."""
    config, _ = clamp_cohorts(config, settings)
    configs = load_baseline(state)
    configs[config.tier] = config
    save_baseline(configs, state)
    return config


def reset_baseline(state: Optional[MutableMapping] = None) -> None:
    _state(state)[_BASELINE_KEY] = _serialise(default_baseline_configs())


def export_token(configs: Mapping[Tier, Configuration]) -> str:
    payload = json.dumps(_serialise(configs), sort_keys=True)
    return base64.urlsafe_b64encode(zlib.compress(payload.encode())).decode()


def import_token(token: str) -> dict[Tier, Configuration]:
    """
    Decode an exported baseline token.

    Raises:
        ValueError: If the token is not valid base64, zlib or JSON, or names
                    an unknown tier.
    """
    try:
        payload = zlib.decompress(base64.urlsafe_b64decode(token.encode())).decode()
        raw = json.loads(payload)
    except (binascii.Error, zlib.error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Baseline token could not be decoded: {e}")
    if not isinstance(raw, dict) or not all(isinstance(v, dict) for v in raw.values()):
        raise ValueError("Baseline token does not contain a tier mapping.")
    return _deserialise(raw)
