# ═══════════════════════════════════════════════════════════════════════════════
# FETP Scenario Planner — Engine Data Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Immutable value objects passed into and returned from the evaluation
# engine. Inputs are coerced on construction so that every Configuration and
# Settings instance is finite, in range, and hashable (usable as a cache key).
#
# This file has ZERO Streamlit and ZERO network imports.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import dataclasses
import enum
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from config.constants import (
    CAREER_CERTIFICATE,
    CAREER_PATHWAY,
    CAREER_UNIVERSITY,
    CROSS_SECTOR_MULTIPLIER_MAX,
    CROSS_SECTOR_MULTIPLIER_MIN,
    DEFAULT_CONFIGURATION,
    DEFAULT_CURRENCY_RATE,
    DEFAULT_DISCOUNT_RATE,
    DEFAULT_PLANNING_HORIZON_YEARS,
    DEFAULT_TIER_SETTINGS,
    DELIVERY_BLENDED,
    DELIVERY_IN_PERSON,
    DELIVERY_ONLINE,
    MENTORSHIP_HIGH,
    MENTORSHIP_LOW,
    MENTORSHIP_MEDIUM,
    RESPONSE_15_DAY,
    RESPONSE_30_DAY,
    RESPONSE_7_DAY,
    RESPONSE_TIME_PINNED,
    TIER_ADVANCED,
    TIER_FRONTLINE,
    TIER_INTERMEDIATE,
)
from core.validation import clamp, count, non_negative, normalise_fraction, positive, safe_number

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# ENUMS
# ─────────────────────────────────────────────────────────────────────────────

class Tier(str, enum.Enum):
    FRONTLINE = TIER_FRONTLINE
    INTERMEDIATE = TIER_INTERMEDIATE
    ADVANCED = TIER_ADVANCED


class CareerIncentive(str, enum.Enum):
    CERTIFICATE = CAREER_CERTIFICATE
    UNIVERSITY_QUALIFICATION = CAREER_UNIVERSITY
    CAREER_PATHWAY = CAREER_PATHWAY


class MentorshipIntensity(str, enum.Enum):
    LOW = MENTORSHIP_LOW
    MEDIUM = MENTORSHIP_MEDIUM
    HIGH = MENTORSHIP_HIGH


class DeliveryMode(str, enum.Enum):
    BLENDED = DELIVERY_BLENDED
    IN_PERSON = DELIVERY_IN_PERSON
    ONLINE = DELIVERY_ONLINE


class ResponseTime(str, enum.Enum):
    DAYS_30 = RESPONSE_30_DAY
    DAYS_15 = RESPONSE_15_DAY
    DAYS_7 = RESPONSE_7_DAY


def _normalise_token(value: Any) -> str:
    return str(value).strip().lower().replace("-", "_").replace(" ", "_")


def coerce_choice(enum_cls: type[enum.Enum], value: Any) -> Union[enum.Enum, str]:
    """Return the matching enum member, or the raw token if unrecognised.

    Unrecognised tokens are kept rather than rejected: every effect table
    maps a non-member to its zero/fallback entry.
    """
    if isinstance(value, enum_cls):
        return value
    token = _normalise_token(value)
    try:
        return enum_cls(token)
    except ValueError:
        logger.debug("Unrecognised %s value %r kept as legacy token", enum_cls.__name__, value)
        return token


def parse_tier(value: Any) -> Tier:
    if isinstance(value, Tier):
        return value
    try:
        return Tier(_normalise_token(value))
    except ValueError:
        raise ValueError(
            f"Unknown tier {value!r}. Expected one of: {[t.value for t in Tier]}"
        )


def _value_of(choice: Union[enum.Enum, str]) -> str:
    return choice.value if isinstance(choice, enum.Enum) else choice


# ─────────────────────────────────────────────────────────────────────────────
# CONFIGURATION
# ─────────────────────────────────────────────────────────────────────────────

Choice = Union[enum.Enum, str]


@dataclass(frozen=True)
class Configuration:
    """One tier-level programme configuration.

    Numeric fields are coerced in ``__post_init__``: non-finite or out-of-range
    values fall back to ``DEFAULT_CONFIGURATION``; the completion-rate override
    accepts a fraction or a percentage; the cross-sector multiplier is clamped
    to [0.8, 2.0]. The response time is replaced by the policy-pinned value.
    """

    tier: Tier
    career_incentive: Choice = CareerIncentive.CERTIFICATE
    mentorship_intensity: Choice = MentorshipIntensity.LOW
    delivery_mode: Choice = DeliveryMode.BLENDED
    response_time: Choice = ResponseTime.DAYS_7
    cost_per_trainee_per_month: float = DEFAULT_CONFIGURATION["cost_per_trainee_per_month"]
    trainees_per_cohort: int = DEFAULT_CONFIGURATION["trainees_per_cohort"]
    cohorts: int = DEFAULT_CONFIGURATION["cohorts"]
    planning_horizon_years: Optional[float] = None
    opportunity_cost_included: bool = True
    completion_rate_override: Optional[float] = None
    mentor_support_cost_base: float = DEFAULT_CONFIGURATION["mentor_support_cost_base"]
    available_mentors_national: int = DEFAULT_CONFIGURATION["available_mentors_national"]
    available_training_sites: int = DEFAULT_CONFIGURATION["available_training_sites"]
    max_cohorts_per_site_per_year: int = DEFAULT_CONFIGURATION["max_cohorts_per_site_per_year"]
    cross_sector_benefit_multiplier: float = DEFAULT_CONFIGURATION["cross_sector_benefit_multiplier"]
    faculty_monthly_salary: float = DEFAULT_CONFIGURATION["faculty_monthly_salary"]
    coordinator_monthly_salary: float = DEFAULT_CONFIGURATION["coordinator_monthly_salary"]
    participant_monthly_salary: float = DEFAULT_CONFIGURATION["participant_monthly_salary"]
    label: str = ""

    def __post_init__(self) -> None:
        d = DEFAULT_CONFIGURATION
        setattr_ = object.__setattr__

        setattr_(self, "tier", parse_tier(self.tier))
        setattr_(self, "career_incentive", coerce_choice(CareerIncentive, self.career_incentive))
        setattr_(self, "mentorship_intensity", coerce_choice(MentorshipIntensity, self.mentorship_intensity))
        setattr_(self, "delivery_mode", coerce_choice(DeliveryMode, self.delivery_mode))

        pinned = ResponseTime(RESPONSE_TIME_PINNED)
        if coerce_choice(ResponseTime, self.response_time) is not pinned:
            logger.debug("Response time %r replaced by policy value %s", self.response_time, pinned.value)
        setattr_(self, "response_time", pinned)

        setattr_(self, "cost_per_trainee_per_month",
                 non_negative(self.cost_per_trainee_per_month, d["cost_per_trainee_per_month"]))
        setattr_(self, "trainees_per_cohort",
                 count(self.trainees_per_cohort, d["trainees_per_cohort"], minimum=1))
        setattr_(self, "cohorts", count(self.cohorts, d["cohorts"], minimum=0))

        if self.planning_horizon_years is not None:
            horizon = safe_number(self.planning_horizon_years, 0.0)
            setattr_(self, "planning_horizon_years", horizon if horizon > 0 else None)

        setattr_(self, "opportunity_cost_included", bool(self.opportunity_cost_included))
        setattr_(self, "completion_rate_override", normalise_fraction(self.completion_rate_override))

        setattr_(self, "mentor_support_cost_base",
                 non_negative(self.mentor_support_cost_base, d["mentor_support_cost_base"]))
        for name in ("available_mentors_national", "available_training_sites",
                     "max_cohorts_per_site_per_year"):
            setattr_(self, name, count(getattr(self, name), d[name], minimum=0))

        multiplier = safe_number(self.cross_sector_benefit_multiplier, d["cross_sector_benefit_multiplier"])
        setattr_(self, "cross_sector_benefit_multiplier",
                 clamp(multiplier, CROSS_SECTOR_MULTIPLIER_MIN, CROSS_SECTOR_MULTIPLIER_MAX))

        for name in ("faculty_monthly_salary", "coordinator_monthly_salary",
                     "participant_monthly_salary"):
            setattr_(self, name, non_negative(getattr(self, name), d[name]))

        setattr_(self, "label", str(self.label or ""))

    def replace(self, **changes: Any) -> "Configuration":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Plain JSON-safe dict; enum members are written as their values."""
        out = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            out[f.name] = _value_of(value) if isinstance(value, (enum.Enum, str)) else value
        return out

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Configuration":
        """Build from a dict, ignoring keys that are not configuration fields."""
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in raw.items() if k in names})


# ─────────────────────────────────────────────────────────────────────────────
# SETTINGS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GeneralSettings:
    planning_horizon_years: float = DEFAULT_PLANNING_HORIZON_YEARS
    discount_rate: float = DEFAULT_DISCOUNT_RATE
    currency_rate: float = DEFAULT_CURRENCY_RATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "planning_horizon_years",
                           positive(self.planning_horizon_years, DEFAULT_PLANNING_HORIZON_YEARS))
        rate = safe_number(self.discount_rate, DEFAULT_DISCOUNT_RATE)
        object.__setattr__(self, "discount_rate", rate if 0.0 <= rate < 1.0 else DEFAULT_DISCOUNT_RATE)
        object.__setattr__(self, "currency_rate", positive(self.currency_rate, DEFAULT_CURRENCY_RATE))


@dataclass(frozen=True)
class TierSettings:
    completion_rate: float
    outbreaks_per_graduate_per_year: float
    value_per_outbreak: float
    value_per_graduate: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "completion_rate",
                           clamp(safe_number(self.completion_rate, 0.0), 0.0, 1.0))
        for name in ("outbreaks_per_graduate_per_year", "value_per_outbreak", "value_per_graduate"):
            object.__setattr__(self, name, non_negative(getattr(self, name), 0.0))

    @classmethod
    def default(cls, tier: Tier) -> "TierSettings":
        return cls(**DEFAULT_TIER_SETTINGS[parse_tier(tier).value])


@dataclass(frozen=True)
class Settings:
    """Immutable settings snapshot captured once per evaluation batch."""

    general: GeneralSettings = field(default_factory=GeneralSettings)
    frontline: TierSettings = field(default_factory=lambda: TierSettings.default(Tier.FRONTLINE))
    intermediate: TierSettings = field(default_factory=lambda: TierSettings.default(Tier.INTERMEDIATE))
    advanced: TierSettings = field(default_factory=lambda: TierSettings.default(Tier.ADVANCED))

    def for_tier(self, tier: Tier) -> TierSettings:
        return getattr(self, parse_tier(tier).value)

    def with_general(self, **changes: Any) -> "Settings":
        return dataclasses.replace(self, general=dataclasses.replace(self.general, **changes))

    def with_tier(self, tier: Tier, **changes: Any) -> "Settings":
        name = parse_tier(tier).value
        return dataclasses.replace(self, **{name: dataclasses.replace(getattr(self, name), **changes)})

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Settings":
        general = GeneralSettings(**dict(raw.get("general", {})))
        tiers = {}
        for tier in Tier:
            values = dict(DEFAULT_TIER_SETTINGS[tier.value])
            values.update(raw.get(tier.value, {}))
            tiers[tier.value] = TierSettings(**values)
        return cls(general=general, **tiers)


# ─────────────────────────────────────────────────────────────────────────────
# COST TEMPLATE
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CostComponent:
    id: str
    label: str
    share: float


@dataclass(frozen=True)
class CostTemplate:
    tier: Tier
    label: str
    components: tuple[CostComponent, ...]
    opportunity_cost_rate: float


# ─────────────────────────────────────────────────────────────────────────────
# RESULT OBJECTS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PreferenceResult:
    utility_program: float
    utility_optout: float
    endorsement_pct: float
    optout_pct: float
    wtp_per_trainee_month: float


@dataclass(frozen=True)
class CapacityBreakdown:
    fellows_per_mentor: float
    mentors_per_cohort: int
    total_mentors_required: int
    available_mentors: int
    mentor_shortfall: int
    within_capacity: bool
    status: str
    site_capacity: Optional[int]
    site_gap: Optional[int]
    max_feasible_cohorts: int


@dataclass(frozen=True)
class ComponentCost:
    id: str
    label: str
    share: float
    amount_per_cohort: float


@dataclass(frozen=True)
class CostBreakdown:
    duration_months: int
    cohorts: int
    programme_cost_per_cohort: float
    mentor_cost_per_cohort: float
    direct_cost_per_cohort: float
    components: tuple[ComponentCost, ...]
    opportunity_cost_included: bool
    opportunity_cost_rate: float
    existing_opportunity_cost_raw: float
    existing_opportunity_cost_per_cohort: float
    total_days: int
    contact_days: float
    participant_opportunity_cost: float
    coordinator_opportunity_cost: float
    faculty_opportunity_cost: float
    salary_opportunity_cost_raw: float
    salary_opportunity_cost_per_cohort: float
    total_economic_cost_per_cohort: float
    programme_cost_all_cohorts: float
    direct_cost_all_cohorts: float
    opportunity_cost_all_cohorts: float
    total_economic_cost_all_cohorts: float
    reconciled: bool


@dataclass(frozen=True)
class BenefitBreakdown:
    completion_rate: float
    completed_per_cohort: float
    endorsement_fraction: float
    effective_graduates_per_cohort: float
    graduates_all_cohorts: float
    response_multiplier: float
    outbreak_responses_per_year_per_cohort: float
    outbreak_responses_per_year_all_cohorts: float
    horizon_years: float
    discount_rate: float
    pv_factor: float
    cross_sector_multiplier: float
    graduate_benefit_per_cohort: float
    outbreak_benefit_per_cohort: float
    epi_benefit_per_cohort: float
    epi_benefit_all_cohorts: float


@dataclass(frozen=True)
class ScenarioResult:
    """Tier-level evaluation. ``bcr`` is ``None`` when cost is zero."""

    configuration: Configuration
    preference: PreferenceResult
    capacity: CapacityBreakdown
    cost: CostBreakdown
    benefit: BenefitBreakdown
    wtp_per_cohort: float
    wtp_all_cohorts: float
    net_benefit_per_cohort: float
    net_benefit_all_cohorts: float
    bcr: Optional[float]
    warnings: tuple[str, ...] = ()

    @property
    def tier(self) -> Tier:
        return self.configuration.tier

    @property
    def endorsement_pct(self) -> float:
        return self.preference.endorsement_pct

    @property
    def optout_pct(self) -> float:
        return self.preference.optout_pct

    @property
    def trainees(self) -> int:
        return self.configuration.trainees_per_cohort * self.configuration.cohorts

    @property
    def total_cost(self) -> float:
        return self.cost.total_economic_cost_all_cohorts

    @property
    def total_benefit(self) -> float:
        return self.benefit.epi_benefit_all_cohorts

    @property
    def net_benefit(self) -> float:
        return self.net_benefit_all_cohorts

    @property
    def graduates(self) -> float:
        return self.benefit.graduates_all_cohorts

    @property
    def outbreak_responses_per_year(self) -> float:
        return self.benefit.outbreak_responses_per_year_all_cohorts


@dataclass(frozen=True)
class PortfolioResult:
    """Aggregate over up to three tiers; ``breakdown`` is a read-only mapping."""

    breakdown: Mapping[Tier, ScenarioResult]
    endorsement_pct: float
    optout_pct: float
    trainees: int
    total_cost: float
    total_benefit: float
    net_benefit: float
    bcr: Optional[float]
    graduates: float
    outbreak_responses_per_year: float
    wtp_all_cohorts: float
    total_mentors_required: int
    mentor_shortfall: int
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.breakdown, MappingProxyType):
            object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return tuple(self.breakdown.keys())

    @property
    def workforce_stock_graduates(self) -> float:
        """Intermediate plus advanced graduates (the senior workforce stock)."""
        return sum(
            result.graduates
            for tier, result in self.breakdown.items()
            if tier in (Tier.INTERMEDIATE, Tier.ADVANCED)
        )


@dataclass(frozen=True)
class IncrementalResult:
    """Candidate minus baseline. ``incremental_bcr`` is ``None`` unless Δcost > 0."""

    baseline_cost: float
    baseline_benefit: float
    candidate_cost: float
    candidate_benefit: float
    delta_cost: float
    delta_benefit: float
    delta_net: float
    incremental_bcr: Optional[float]
    delta_graduates: float
    delta_outbreak_responses_per_year: float
    delta_endorsement_pct: float

    @property
    def incremental_bcr_defined(self) -> bool:
        return self.incremental_bcr is not None
