"""City comparison and experience-adjusted salary insights for a role."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel

import app_config
from compensation.rounding import round_half_up
from market_data_service import MarketDataClient, MarketDataError, SalaryRange

logger = logging.getLogger(__name__)

REFERENCE_CITY = "Bangalore"

COMPARISON_CITIES: Tuple[Tuple[str, str], ...] = (
    ("Bangalore", "1"),
    ("Mumbai", "1"),
    ("Delhi NCR", "1"),
    ("Hyderabad", "1"),
    ("Pune", "1"),
    ("Chennai", "1"),
    ("Kolkata", "2"),
    ("Ahmedabad", "2"),
    ("Chandigarh", "2"),
    ("Indore", "2"),
)

# (minimum years, multiplier), highest threshold first
INSIGHT_EXPERIENCE_STEPS: Tuple[Tuple[int, float], ...] = (
    (9, 2.0),
    (6, 1.6),
    (3, 1.3),
)


class CityComparison(BaseModel):
    city: str
    percentage: int  # median relative to the reference city, in percent
    tier: str
    salary_range: SalaryRange


def insight_experience_multiplier(experience_years: float) -> float:
    for min_years, multiplier in INSIGHT_EXPERIENCE_STEPS:
        if experience_years >= min_years:
            return multiplier
    return 1.0


def get_city_comparison(
    role: str,
    client: MarketDataClient,
    *,
    delay_seconds: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> List[CityComparison]:
    """Compare each city's median salary for ``role`` against Bangalore."""
    if delay_seconds is None:
        delay_seconds = app_config.MARKET_DATA_REQUEST_DELAY_SECONDS

    reference = client.fetch_salary_range(role, REFERENCE_CITY)
    if reference.median <= 0:
        logger.error("city_comparison_reference_invalid", extra={"role": role, "median": reference.median})
        raise MarketDataError(f"No usable reference salary for {role!r} in {REFERENCE_CITY}")

    comparisons: List[CityComparison] = []
    for index, (city, tier) in enumerate(COMPARISON_CITIES):
        if index and delay_seconds:
            sleep(delay_seconds)
        salary_range = client.fetch_salary_range(role, city)
        comparisons.append(
            CityComparison(
                city=city,
                percentage=round_half_up(salary_range.median / reference.median * 100),
                tier=tier,
                salary_range=salary_range,
            )
        )

    logger.info("city_comparison_built", extra={"role": role, "cities": len(comparisons)})
    return comparisons


def get_role_salary_insights(
    role: str,
    experience_years: float,
    client: MarketDataClient,
    *,
    delay_seconds: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> List[CityComparison]:
    """City comparison with every range scaled for the candidate's experience."""
    multiplier = insight_experience_multiplier(experience_years)
    comparisons = get_city_comparison(role, client, delay_seconds=delay_seconds, sleep=sleep)
    return [
        comparison.model_copy(
            update={
                "salary_range": SalaryRange(
                    min=round_half_up(comparison.salary_range.min * multiplier),
                    max=round_half_up(comparison.salary_range.max * multiplier),
                    median=round_half_up(comparison.salary_range.median * multiplier),
                )
            }
        )
        for comparison in comparisons
    ]
