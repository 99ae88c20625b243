"""Formatting helpers used across the FETP Scenario Planner tabs.

Keeping non-Streamlit logic in a separate module makes it easier to test
without spinning up a full Streamlit runtime.
"""

from __future__ import annotations

from typing import Any, Optional

from core.validation import safe_number

NOT_DEFINED = "Not defined"


# ─────────────────────────────────────────────────────────────────────────────
# CURRENCY
# ─────────────────────────────────────────────────────────────────────────────

def to_usd(amount: Any, currency_rate: float) -> float:
    """Convert local currency to USD at ``currency_rate`` local units per USD."""
    rate = safe_number(currency_rate, 0.0)
    if rate <= 0:
        return 0.0
    return safe_number(amount) / rate


def fmt_currency(amount: Any, symbol: str = "₹") -> str:
    value = safe_number(amount)
    sign = "-" if value < 0 else ""
    value = abs(value)
    if value >= 1e7:
        return f"{sign}{symbol}{value / 1e7:,.2f} Cr"
    if value >= 1e5:
        return f"{sign}{symbol}{value / 1e5:,.2f} L"
    return f"{sign}{symbol}{value:,.0f}"


def fmt_usd(amount: Any) -> str:
    value = safe_number(amount)
    if abs(value) >= 1e6:
        return f"${value / 1e6:,.2f}M"
    return f"${value:,.0f}"


# ─────────────────────────────────────────────────────────────────────────────
# RATIOS & PERCENTAGES
# ─────────────────────────────────────────────────────────────────────────────

def fmt_pct(value: Any, digits: int = 1) -> str:
    return f"{safe_number(value):.{digits}f}%"


def fmt_ratio(value: Optional[float], digits: int = 2) -> str:
    """BCR display: ``None`` means no ratio exists, which is not the same as 0."""
    if value is None:
        return NOT_DEFINED
    return f"{value:.{digits}f}"


def fmt_count(value: Any) -> str:
    return f"{safe_number(value):,.1f}"
