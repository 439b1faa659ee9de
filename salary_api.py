"""FastAPI router for compensation estimates, reference data and market insights."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Query

import app_config
from amazon_compensation.amazon_calculator import (
    calculate_amazon_compensation,
    get_amazon_level_info,
    get_skill_premiums,
)
from amazon_compensation.amazon_models import AmazonCompensationEstimate, AmazonCompensationRequest
from compensation.calculator import (
    calculate_compensation,
    get_career_level_info,
    get_company_type_info,
    get_experience_multiplier,
    get_industry_info,
    get_location_multiplier,
)
from compensation.compensation_models import CompensationEstimate, CompensationRequest
from compensation.errors import UnknownLevelError
from market_data_service import MarketDataClient, MarketDataError, SalaryRange
from market_insights import CityComparison, get_city_comparison, get_role_salary_insights

logger = logging.getLogger(__name__)
router = APIRouter()

market_client = MarketDataClient()


@router.post("/compensation/estimate", response_model=CompensationEstimate)
def estimate_compensation(request: CompensationRequest) -> CompensationEstimate:
    base_salary = request.base_salary if request.base_salary is not None else app_config.DEFAULT_BASE_SALARY
    try:
        estimate = calculate_compensation(
            request.role,
            request.industry,
            request.company_type,
            request.level,
            request.location,
            request.experience_years,
            request.skills,
            base_salary,
            strict=app_config.COMPENSATION_STRICT_LEVELS,
        )
    except UnknownLevelError as exc:
        logger.warning("compensation_unknown_level", extra={"level": request.level})
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ValueError as exc:
        logger.warning("compensation_not_computable", extra={"error": str(exc)})
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info(
        "compensation_estimate_served",
        extra={"industry": request.industry, "level": request.level, "total_median": estimate.total.median},
    )
    return estimate


@router.post("/compensation/amazon", response_model=AmazonCompensationEstimate)
def estimate_amazon_compensation(request: AmazonCompensationRequest) -> AmazonCompensationEstimate:
    try:
        return calculate_amazon_compensation(
            request.level,
            request.location,
            request.experience_years,
            request.skills,
        )
    except UnknownLevelError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


# ------------------------------------------------------------------
# Reference data
# ------------------------------------------------------------------
def _found_or_404(record: Any, kind: str, key: str) -> Dict[str, Any]:
    if record is None:
        raise HTTPException(status_code=404, detail=f"Unknown {kind}: {key}")
    return asdict(record)


@router.get("/reference/industries/{industry}")
def industry_info(industry: str) -> Dict[str, Any]:
    return _found_or_404(get_industry_info(industry), "industry", industry)


@router.get("/reference/company-types/{company_type}")
def company_type_info(company_type: str) -> Dict[str, Any]:
    return _found_or_404(get_company_type_info(company_type), "company type", company_type)


@router.get("/reference/career-levels/{level}")
def career_level_info(level: str) -> Dict[str, Any]:
    return _found_or_404(get_career_level_info(level), "career level", level)


@router.get("/reference/locations/{location}/multiplier")
def location_multiplier(location: str) -> Dict[str, Any]:
    return {"location": location, "multiplier": get_location_multiplier(location)}


@router.get("/reference/experience/{years}/multiplier")
def experience_multiplier(years: float) -> Dict[str, Any]:
    return {"years": years, "multiplier": get_experience_multiplier(years)}


@router.get("/reference/amazon/levels/{level}")
def amazon_level_info(level: str) -> Dict[str, Any]:
    return _found_or_404(get_amazon_level_info(level), "Amazon level", level)


@router.get("/reference/amazon/skill-premiums")
def amazon_skill_premiums() -> Dict[str, int]:
    return get_skill_premiums()


# ------------------------------------------------------------------
# Market insights
# ------------------------------------------------------------------
@router.get("/market/salary", response_model=SalaryRange)
def market_salary(role: str = Query(...), location: str = Query(...)) -> SalaryRange:
    return market_client.fetch_salary_range(role, location)


@router.get("/market/cities", response_model=List[CityComparison])
def market_cities(role: str = Query(...)) -> List[CityComparison]:
    try:
        return get_city_comparison(role, market_client)
    except MarketDataError as exc:
        raise HTTPException(status_code=502, detail="Failed to fetch city comparison data") from exc


@router.get("/market/insights", response_model=List[CityComparison])
def market_insights(role: str = Query(...), experience: float = Query(0)) -> List[CityComparison]:
    try:
        return get_role_salary_insights(role, experience, market_client)
    except MarketDataError as exc:
        raise HTTPException(status_code=502, detail="Failed to get role salary insights") from exc
