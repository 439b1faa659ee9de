"""Amazon India leveling data.

Compensation bands are absolute amounts in INR per level code. Level codes
are matched exactly; cities are stored lowercased. Skill names are
case-sensitive.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from amazon_compensation.amazon_models import (
    AmazonLevelBand,
    AmazonLocation,
    BandRange,
    ExperienceBucket,
)

DEFAULT_LOCATION_MULTIPLIER = 0.9
"""Applied to cities outside the tier-1 table."""

DEFAULT_EXPERIENCE_MULTIPLIER = 1.0
"""Applied when the years of experience fall in no bucket."""

AMAZON_LEVELS: Mapping[str, AmazonLevelBand] = MappingProxyType({
    "sde1": AmazonLevelBand(
        level="L4",
        title="SDE I",
        base_salary_range=BandRange(1500000, 2500000),
        rsu_range=BandRange(2000000, 4000000),
        signing_bonus_range=BandRange(300000, 700000),
    ),
    "sde2": AmazonLevelBand(
        level="L5",
        title="SDE II",
        base_salary_range=BandRange(2500000, 4000000),
        rsu_range=BandRange(4000000, 8000000),
        signing_bonus_range=BandRange(500000, 1200000),
    ),
    "senior": AmazonLevelBand(
        level="L6",
        title="Senior SDE",
        base_salary_range=BandRange(4000000, 7000000),
        rsu_range=BandRange(8000000, 15000000),
        signing_bonus_range=BandRange(1000000, 2000000),
    ),
    "principal": AmazonLevelBand(
        level="L7",
        title="Principal SDE",
        base_salary_range=BandRange(7000000, 12000000),
        rsu_range=BandRange(15000000, 30000000),
        signing_bonus_range=BandRange(2000000, 4000000),
    ),
})

AMAZON_LOCATIONS: Tuple[AmazonLocation, ...] = (
    AmazonLocation("bangalore", 1.0, "1"),
    AmazonLocation("hyderabad", 0.95, "1"),
    AmazonLocation("delhi", 0.95, "1"),
    AmazonLocation("mumbai", 0.95, "1"),
    AmazonLocation("pune", 0.90, "1"),
    AmazonLocation("chennai", 0.90, "1"),
)

EXPERIENCE_BUCKETS: Tuple[ExperienceBucket, ...] = (
    ExperienceBucket("entry", 0, 2, 1.0),
    ExperienceBucket("mid", 3, 5, 1.2),
    ExperienceBucket("senior", 6, 8, 1.4),
    ExperienceBucket("staff", 9, 12, 1.6),
    ExperienceBucket("principal", 13, 100, 1.8),
)
"""Inclusive on both ends. Fractional years between buckets match none."""

SKILL_PREMIUMS: Mapping[str, int] = MappingProxyType({
    "System Design": 15,
    "Distributed Systems": 12,
    "AWS": 10,
    "Machine Learning": 15,
    "Leadership": 10,
    "Architecture": 12,
})
"""Percentage points per recognised skill. The sum is not capped."""
