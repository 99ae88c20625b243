# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Sensitivity Sweeps
# © 2026 Aparajita Parihar. All rights reserved.
#
# Re-evaluates a batch of saved scenarios across a grid of settings values.
# The base Settings snapshot is captured once for the whole batch, so every
# row in a sweep is computed against the same assumptions apart from the
# swept parameter.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Optional

import numpy as np

from core.models import Configuration, Settings, Tier
from core.scenario import evaluate_scenario
from core.validation import clamp

logger = logging.getLogger(__name__)


def _scale_tier_value(field_name: str) -> Callable[[Settings, float], Settings]:
    def apply(settings: Settings, factor: float) -> Settings:
        for tier in Tier:
            current = getattr(settings.for_tier(tier), field_name)
            settings = settings.with_tier(tier, **{field_name: current * factor})
        return settings
    return apply


def _shift_completion(settings: Settings, delta: float) -> Settings:
    for tier in Tier:
        current = settings.for_tier(tier).completion_rate
        settings = settings.with_tier(tier, completion_rate=clamp(current + delta, 0.0, 1.0))
    return settings


PARAMETERS: dict[str, Callable[[Settings, float], Settings]] = {
    "discount_rate":            lambda s, v: s.with_general(discount_rate=v),
    "planning_horizon_years":   lambda s, v: s.with_general(planning_horizon_years=v),
    "value_per_outbreak_scale": _scale_tier_value("value_per_outbreak"),
    "value_per_graduate_scale": _scale_tier_value("value_per_graduate"),
    "completion_rate_delta":    _shift_completion,
}

# Configuration fields that would shadow the swept setting.
CONFIG_OVERRIDES: dict[str, dict] = {
    "planning_horizon_years": {"planning_horizon_years": None},
}

DEFAULT_GRIDS: dict[str, list[float]] = {
    "discount_rate":            np.round(np.linspace(0.0, 0.10, 11), 4).tolist(),
    "planning_horizon_years":   np.arange(1, 11, dtype=float).tolist(),
    "value_per_outbreak_scale": np.round(np.linspace(0.5, 1.5, 5), 4).tolist(),
    "value_per_graduate_scale": np.round(np.linspace(0.5, 1.5, 5), 4).tolist(),
    "completion_rate_delta":    np.round(np.linspace(-0.2, 0.1, 7), 4).tolist(),
}


def derive_settings(settings: Settings, parameter: str, value: float) -> Settings:
    if parameter not in PARAMETERS:
        raise ValueError(f"Unknown sensitivity parameter {parameter!r}. Options: {sorted(PARAMETERS)}")
    return PARAMETERS[parameter](settings, float(value))


def run_sensitivity(
    configs: Mapping[str, Configuration],
    settings: Settings,
    parameter: str,
    values: Optional[Iterable[float]] = None,
) -> list[dict]:
    """
    Evaluate every named configuration at every value of ``parameter``.

    Returns one row per (scenario, value) with cost, benefit, net benefit,
    BCR (``None`` when undefined) and endorsement. Sweeping the planning
    horizon drops any horizon a configuration carries, so the grid value
    applies to every scenario.
    """
    if parameter not in PARAMETERS:
        raise ValueError(f"Unknown sensitivity parameter {parameter!r}. Options: {sorted(PARAMETERS)}")
    grid = list(DEFAULT_GRIDS[parameter]) if values is None else [float(v) for v in values]
    derived = [(value, derive_settings(settings, parameter, value)) for value in grid]
    logger.debug("Sensitivity sweep on %s: %d scenarios × %d values", parameter, len(configs), len(grid))

    rows: list[dict] = []
    for name, config in configs.items():
        if parameter in CONFIG_OVERRIDES:
            config = config.replace(**CONFIG_OVERRIDES[parameter])
        for value, s in derived:
            result = evaluate_scenario(config, s, use_cache=False)
            rows.append({
                "scenario":        name,
                "tier":            config.tier.value,
                "parameter":       parameter,
                "value":           value,
                "total_cost":      result.total_cost,
                "total_benefit":   result.total_benefit,
                "net_benefit":     result.net_benefit,
                "bcr":             result.bcr,
                "endorsement_pct": result.endorsement_pct,
            })
    return rows
