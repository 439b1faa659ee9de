"""Reference tables for the generic compensation calculator.

The tables are read-only mappings shared by the calculator, the reference
endpoints and the tests. Industry, company type, career level and location
keys are stored lowercased; lookups normalise the caller's input before use.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from compensation.compensation_models import (
    CareerLevelProfile,
    CompanyTypeProfile,
    ExperienceBracket,
    IndustryProfile,
)

DEFAULT_BASE_SALARY = 100000
"""Base salary used when the caller does not supply one."""

DEFAULT_INDUSTRY = "technology"
"""Industry profile used when the requested industry is unknown."""

DEFAULT_COMPANY_TYPE = "mid-size company"
"""Company type profile used when the requested company type is unknown."""

DEFAULT_CAREER_LEVEL = "mid"
"""Career level profile used when the requested level is unknown."""

DEFAULT_LOCATION_MULTIPLIER = 1.0
"""Cost-of-living multiplier for cities outside the location table."""

DEFAULT_EXPERIENCE_MULTIPLIER = 1.0
"""Multiplier when no experience bracket threshold is satisfied."""

SKILL_PREMIUM_PER_SKILL = 0.05
SKILL_PREMIUM_CAP = 0.25
"""Each listed skill adds 5 points of premium, capped at 25%."""

BASE_RANGE_MIN_FACTOR = 0.9
BASE_RANGE_MAX_FACTOR = 1.2
"""Spread of the base range around the adjusted base salary."""

INDUSTRIES: Mapping[str, IndustryProfile] = MappingProxyType({
    "technology": IndustryProfile(1.2, 20, 15, 12),
    "finance": IndustryProfile(1.3, 15, 40, 8),
    "healthcare": IndustryProfile(1.1, 5, 10, 7),
    "retail": IndustryProfile(0.9, 5, 8, 5),
    "manufacturing": IndustryProfile(1.0, 8, 12, 6),
    "consulting": IndustryProfile(1.25, 10, 25, 10),
    "media": IndustryProfile(1.1, 12, 10, 8),
    "telecommunications": IndustryProfile(1.15, 10, 15, 7),
})

COMPANY_TYPES: Mapping[str, CompanyTypeProfile] = MappingProxyType({
    "startup": CompanyTypeProfile(0.9, 2.0, 0.5, 3),
    "small business": CompanyTypeProfile(0.85, 0.5, 0.7, 2),
    "mid-size company": CompanyTypeProfile(1.0, 1.0, 1.0, 4),
    "large enterprise": CompanyTypeProfile(1.2, 1.2, 1.3, 5),
    "fortune 500": CompanyTypeProfile(1.3, 1.5, 1.5, 5),
    "multinational": CompanyTypeProfile(1.25, 1.4, 1.4, 5),
    "public sector": CompanyTypeProfile(0.8, 0, 0.3, 4),
    "non-profit": CompanyTypeProfile(0.75, 0, 0.2, 3),
})

CAREER_LEVELS: Mapping[str, CareerLevelProfile] = MappingProxyType({
    "entry": CareerLevelProfile(1.0, equity_eligible=False, bonus_eligible=True, management_track=False),
    "mid": CareerLevelProfile(1.5, equity_eligible=True, bonus_eligible=True, management_track=False),
    "senior": CareerLevelProfile(2.0, equity_eligible=True, bonus_eligible=True, management_track=True),
    "lead": CareerLevelProfile(2.5, equity_eligible=True, bonus_eligible=True, management_track=True),
    "director": CareerLevelProfile(3.0, equity_eligible=True, bonus_eligible=True, management_track=True),
    "executive": CareerLevelProfile(4.0, equity_eligible=True, bonus_eligible=True, management_track=True),
})

EXPERIENCE_BRACKETS: Tuple[ExperienceBracket, ...] = (
    ExperienceBracket(0, 1.0),   # fresh
    ExperienceBracket(2, 1.2),   # early career
    ExperienceBracket(5, 1.5),   # established
    ExperienceBracket(8, 1.8),   # experienced
    ExperienceBracket(10, 2.0),  # senior
    ExperienceBracket(15, 2.5),  # expert
)
"""Ordered by ``min_years``; the highest satisfied threshold wins."""

LOCATION_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "san francisco": 1.95,
    "new york": 1.8,
    "seattle": 1.65,
    "boston": 1.5,
    "austin": 1.3,
    "bangalore": 1.0,
    "london": 1.7,
    "singapore": 1.6,
    "tokyo": 1.75,
    "berlin": 1.4,
})
