"""Amazon-specific compensation calculator.

Unlike the generic calculator, a level resolves to a fixed band of absolute
amounts, and every band endpoint is scaled by
``location × experience × (1 + skill premium)``. There is no fallback level:
an unknown level code raises :class:`UnknownLevelError`.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from amazon_compensation.amazon_levels import (
    AMAZON_LEVELS,
    AMAZON_LOCATIONS,
    DEFAULT_EXPERIENCE_MULTIPLIER,
    DEFAULT_LOCATION_MULTIPLIER,
    EXPERIENCE_BUCKETS,
    SKILL_PREMIUMS,
)
from amazon_compensation.amazon_models import (
    AmazonCompensationEstimate,
    AmazonLevelBand,
    AmazonLocation,
    AmazonMultipliers,
    AmountRange,
    BandRange,
)
from compensation.rounding import round_half_up
from compensation.errors import UnknownLevelError

logger = logging.getLogger(__name__)


def get_amazon_level_info(level: str) -> Optional[AmazonLevelBand]:
    return AMAZON_LEVELS.get(level)


def get_location_info(location: str) -> Optional[AmazonLocation]:
    city = (location or "").lower()
    return next((entry for entry in AMAZON_LOCATIONS if entry.city == city), None)


def get_location_multiplier(location: str) -> float:
    entry = get_location_info(location)
    return entry.multiplier if entry else DEFAULT_LOCATION_MULTIPLIER


def get_experience_multiplier(years: float) -> float:
    bucket = next((b for b in EXPERIENCE_BUCKETS if b.contains(years)), None)
    return bucket.multiplier if bucket else DEFAULT_EXPERIENCE_MULTIPLIER


def get_skill_premiums() -> Dict[str, int]:
    return dict(SKILL_PREMIUMS)


def compute_skill_premium(skills: Sequence[str]) -> float:
    return sum(SKILL_PREMIUMS.get(skill, 0) for skill in skills) / 100


def _scale(band: BandRange, multiplier: float) -> AmountRange:
    return AmountRange(
        min=round_half_up(band.min * multiplier),
        max=round_half_up(band.max * multiplier),
    )


def calculate_amazon_compensation(
    level: str,
    location: str,
    experience_years: float,
    skills: Sequence[str],
) -> AmazonCompensationEstimate:
    band = get_amazon_level_info(level)
    if band is None:
        logger.warning("amazon_level_unknown", extra={"level": level})
        raise UnknownLevelError(level, AMAZON_LEVELS.keys())

    location_multiplier = get_location_multiplier(location)
    exp_multiplier = get_experience_multiplier(experience_years)
    skill_premium = compute_skill_premium(skills)
    total_multiplier = location_multiplier * exp_multiplier * (1 + skill_premium)

    return AmazonCompensationEstimate(
        base_salary=_scale(band.base_salary_range, total_multiplier),
        rsu=_scale(band.rsu_range, total_multiplier),
        signing_bonus=_scale(band.signing_bonus_range, total_multiplier),
        multipliers=AmazonMultipliers(
            location=location_multiplier,
            experience=exp_multiplier,
            skills=skill_premium,
        ),
    )
