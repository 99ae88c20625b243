# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Cost Template Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for:
#   • COST_TEMPLATES — per-tier direct cost components and the aggregate
#                      opportunity-cost rate applied to programme cost
#
# Component shares split the per-cohort direct cost for reporting; they must
# sum to 1.0 per tier. Templates are fixed and not user-editable.
#
# This file has ZERO Streamlit and ZERO network imports.
# It is safe to import in unit tests and CLI contexts.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from config.constants import TIER_ADVANCED, TIER_FRONTLINE, TIER_INTERMEDIATE

COST_TEMPLATES: dict[str, dict] = {
    TIER_FRONTLINE: {
        "label": "Frontline (3 months)",
        "opportunity_cost_rate": 0.15,
        "components": [
            {"id": "staff",       "label": "In-country programme staff",     "share": 0.35},
            {"id": "training",    "label": "Training workshops & materials", "share": 0.25},
            {"id": "travel",      "label": "Field travel & per diem",        "share": 0.20},
            {"id": "mentoring",   "label": "Mentor supervision",             "share": 0.12},
            {"id": "overheads",   "label": "Office & management overheads",  "share": 0.08},
        ],
    },
    TIER_INTERMEDIATE: {
        "label": "Intermediate (12 months)",
        "opportunity_cost_rate": 0.22,
        "components": [
            {"id": "staff",       "label": "In-country programme staff",     "share": 0.32},
            {"id": "training",    "label": "Training workshops & materials", "share": 0.20},
            {"id": "travel",      "label": "Field travel & per diem",        "share": 0.18},
            {"id": "mentoring",   "label": "Mentor supervision",             "share": 0.15},
            {"id": "projects",    "label": "Field investigation projects",   "share": 0.07},
            {"id": "overheads",   "label": "Office & management overheads",  "share": 0.08},
        ],
    },
    TIER_ADVANCED: {
        "label": "Advanced (24 months)",
        "opportunity_cost_rate": 0.30,
        "components": [
            {"id": "staff",       "label": "In-country programme staff",     "share": 0.30},
            {"id": "training",    "label": "Training workshops & materials", "share": 0.15},
            {"id": "travel",      "label": "Field travel & per diem",        "share": 0.15},
            {"id": "mentoring",   "label": "Mentor supervision",             "share": 0.18},
            {"id": "projects",    "label": "Field investigation projects",   "share": 0.10},
            {"id": "conferences", "label": "Scientific conferences",         "share": 0.04},
            {"id": "overheads",   "label": "Office & management overheads",  "share": 0.08},
        ],
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# INTEGRITY ASSERTION (runs at import time)
# ─────────────────────────────────────────────────────────────────────────────

def _assert_template_integrity() -> None:
    for tier in (TIER_FRONTLINE, TIER_INTERMEDIATE, TIER_ADVANCED):
        assert tier in COST_TEMPLATES, (
            f"config/cost_templates.py integrity error: missing template for '{tier}'"
        )
    for tier, template in COST_TEMPLATES.items():
        rate = template["opportunity_cost_rate"]
        assert 0.0 <= rate <= 1.0, (
            f"config/cost_templates.py integrity error: "
            f"'{tier}' opportunity_cost_rate {rate} outside [0, 1]"
        )
        ids = [c["id"] for c in template["components"]]
        assert len(ids) == len(set(ids)), (
            f"config/cost_templates.py integrity error: '{tier}' has duplicate component ids"
        )
        total = sum(c["share"] for c in template["components"])
        assert abs(total - 1.0) < 1e-9, (
            f"config/cost_templates.py integrity error: "
            f"'{tier}' component shares sum to {total}, expected 1.0"
        )


_assert_template_integrity()
