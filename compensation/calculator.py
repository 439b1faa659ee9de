"""Generic multi-factor compensation calculator.

The estimate is a plain pipeline of table lookups and multiplications:

    base × industry × company type × career level × experience × location × (1 + skill premium)

Unknown industry, company type, career level and location values fall back to
the defaults declared in ``reference_tables`` instead of failing.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from compensation.compensation_models import (
    CareerLevelProfile,
    CompanyTypeProfile,
    CompensationEstimate,
    CompensationMetadata,
    CompensationMultipliers,
    CompensationRange,
    IndustryProfile,
)
from compensation.errors import UnknownLevelError
from compensation.reference_tables import (
    BASE_RANGE_MAX_FACTOR,
    BASE_RANGE_MIN_FACTOR,
    CAREER_LEVELS,
    COMPANY_TYPES,
    DEFAULT_BASE_SALARY,
    DEFAULT_CAREER_LEVEL,
    DEFAULT_COMPANY_TYPE,
    DEFAULT_EXPERIENCE_MULTIPLIER,
    DEFAULT_INDUSTRY,
    DEFAULT_LOCATION_MULTIPLIER,
    EXPERIENCE_BRACKETS,
    INDUSTRIES,
    LOCATION_MULTIPLIERS,
    SKILL_PREMIUM_CAP,
    SKILL_PREMIUM_PER_SKILL,
)
from compensation.rounding import round_half_up

logger = logging.getLogger(__name__)


def _normalize_key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def get_industry_info(industry: str) -> Optional[IndustryProfile]:
    return INDUSTRIES.get(_normalize_key(industry))


def get_company_type_info(company_type: str) -> Optional[CompanyTypeProfile]:
    return COMPANY_TYPES.get(_normalize_key(company_type))


def get_career_level_info(level: str) -> Optional[CareerLevelProfile]:
    return CAREER_LEVELS.get(_normalize_key(level))


def get_location_multiplier(location: str) -> float:
    return LOCATION_MULTIPLIERS.get(_normalize_key(location), DEFAULT_LOCATION_MULTIPLIER)


def get_experience_multiplier(years: float) -> float:
    """Multiplier of the bracket with the largest threshold not above ``years``."""
    multiplier = DEFAULT_EXPERIENCE_MULTIPLIER
    for bracket in EXPERIENCE_BRACKETS:
        if years >= bracket.min_years:
            multiplier = bracket.multiplier
    return multiplier


def compute_skill_premium(skills: Sequence[str]) -> float:
    """Flat premium per listed skill; which skills are listed does not matter."""
    return min(SKILL_PREMIUM_CAP, len(skills) * SKILL_PREMIUM_PER_SKILL)


def calculate_compensation(
    role: str,
    industry: str,
    company_type: str,
    level: str,
    location: str,
    experience_years: float,
    skills: Sequence[str],
    base_salary: float = DEFAULT_BASE_SALARY,
    *,
    strict: bool = False,
) -> CompensationEstimate:
    """Estimate base, equity, bonus and total compensation for a role.

    ``role`` is carried for the caller's context only; it does not influence
    the numbers. With ``strict=True`` an unknown career level raises
    :class:`UnknownLevelError` instead of falling back to ``mid``.
    Negative salaries or experience are not validated and flow through the
    arithmetic unchanged; values large enough to overflow to infinity raise
    ``ValueError`` when the ranges are rounded.
    """
    industry_info = get_industry_info(industry) or INDUSTRIES[DEFAULT_INDUSTRY]
    company_info = get_company_type_info(company_type) or COMPANY_TYPES[DEFAULT_COMPANY_TYPE]

    career_level = get_career_level_info(level)
    if career_level is None:
        if strict:
            raise UnknownLevelError(level, CAREER_LEVELS.keys())
        logger.debug("career_level_fallback", extra={"level": level, "fallback": DEFAULT_CAREER_LEVEL})
        career_level = CAREER_LEVELS[DEFAULT_CAREER_LEVEL]

    location_multiplier = get_location_multiplier(location)
    exp_multiplier = get_experience_multiplier(experience_years)
    skill_premium = compute_skill_premium(skills)

    adjusted_base = (
        base_salary
        * industry_info.base_salary_multiplier
        * company_info.base_salary_multiplier
        * career_level.multiplier
        * exp_multiplier
        * location_multiplier
        * (1 + skill_premium)
    )

    equity = 0.0
    if career_level.equity_eligible:
        equity = adjusted_base * (industry_info.equity_percentage / 100) * company_info.equity_multiplier

    bonus = 0.0
    if career_level.bonus_eligible:
        bonus = adjusted_base * (industry_info.bonus_percentage / 100) * company_info.bonus_multiplier

    base_range = CompensationRange(
        min=round_half_up(adjusted_base * BASE_RANGE_MIN_FACTOR),
        max=round_half_up(adjusted_base * BASE_RANGE_MAX_FACTOR),
        median=round_half_up(adjusted_base),
    )
    rounded_equity = round_half_up(equity)
    rounded_bonus = round_half_up(bonus)
    extras = rounded_equity + rounded_bonus

    estimate = CompensationEstimate(
        base=base_range,
        equity=rounded_equity,
        bonus=rounded_bonus,
        total=CompensationRange(
            min=base_range.min + extras,
            max=base_range.max + extras,
            median=base_range.median + extras,
        ),
        multipliers=CompensationMultipliers(
            industry=industry_info.base_salary_multiplier,
            company=company_info.base_salary_multiplier,
            career=career_level.multiplier,
            experience=exp_multiplier,
            location=location_multiplier,
            skills=skill_premium,
        ),
        metadata=CompensationMetadata(
            growth_rate=industry_info.growth_rate,
            benefits_score=company_info.benefits_score,
            management_track=career_level.management_track,
        ),
    )

    logger.debug(
        "compensation_estimated",
        extra={
            "role": role,
            "industry": industry,
            "company_type": company_type,
            "level": level,
            "total_median": estimate.total.median,
        },
    )
    return estimate
