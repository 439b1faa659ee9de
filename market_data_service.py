"""Market salary lookups backed by the Adzuna job-history API.

Every failure path degrades to a deterministic fallback estimate built from
role base salaries and city multipliers, so callers always receive a range.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

import app_config
from compensation.rounding import round_half_up

market_logger = logging.getLogger("market_data")

ADZUNA_HISTORY_URL = "https://api.adzuna.com/v1/api/jobs/{country}/history"

MARKET_RANGE_MIN_FACTOR = 0.8
MARKET_RANGE_MAX_FACTOR = 1.2

DEFAULT_FALLBACK_SALARY = 1000000

FALLBACK_BASE_SALARIES: Dict[str, int] = {
    "software developer": 1200000,
    "frontend developer": 1000000,
    "backend developer": 1100000,
    "full stack developer": 1300000,
    "data scientist": 1400000,
    "devops engineer": 1500000,
    "embedded developer": 1000000,
    "mobile developer": 1200000,
    "ui developer": 900000,
    "qa engineer": 800000,
}

FALLBACK_CITY_MULTIPLIERS: Dict[str, float] = {
    "bangalore": 1.0,
    "mumbai": 0.95,
    "delhi": 0.95,
    "hyderabad": 0.9,
    "pune": 0.85,
    "chennai": 0.85,
    "kolkata": 0.8,
    "ahmedabad": 0.75,
    "chandigarh": 0.7,
    "indore": 0.65,
}


class MarketDataError(Exception):
    """Raised when market data cannot be turned into a usable comparison."""


class SalaryRange(BaseModel):
    min: int
    max: int
    median: int


def fallback_salary_range(role: str, location: str) -> SalaryRange:
    base_salary = FALLBACK_BASE_SALARIES.get((role or "").lower(), DEFAULT_FALLBACK_SALARY)
    multiplier = FALLBACK_CITY_MULTIPLIERS.get((location or "").lower(), 1)
    median = round_half_up(base_salary * multiplier)
    return SalaryRange(
        min=round_half_up(median * MARKET_RANGE_MIN_FACTOR),
        max=round_half_up(median * MARKET_RANGE_MAX_FACTOR),
        median=median,
    )


def _monthly_averages(payload: Dict[str, Any]) -> List[float]:
    # The history endpoint reports {"month": {"YYYY-MM": average}}; older
    # clients saw a list of {"average": ...} entries.
    month = payload.get("month")
    if isinstance(month, dict):
        values = month.values()
    elif isinstance(month, list):
        values = [entry.get("average") for entry in month if isinstance(entry, dict)]
    else:
        return []
    return [float(value) for value in values if isinstance(value, (int, float))]


class MarketDataClient:
    def __init__(
        self,
        *,
        app_id: Optional[str] = None,
        api_key: Optional[str] = None,
        country: Optional[str] = None,
        enabled: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.app_id = app_id if app_id is not None else app_config.ADZUNA_APP_ID
        self.api_key = api_key if api_key is not None else app_config.ADZUNA_API_KEY
        self.country = country or app_config.ADZUNA_COUNTRY
        self.enabled = app_config.MARKET_DATA_ENABLED if enabled is None else enabled
        self.timeout = timeout or app_config.MARKET_DATA_TIMEOUT_SECONDS

        if self.enabled and not (self.app_id and self.api_key):
            market_logger.error("adzuna_credentials_missing")

    @property
    def live(self) -> bool:
        return bool(self.enabled and self.app_id and self.api_key)

    def fetch_salary_range(self, role: str, location: str) -> SalaryRange:
        if not self.live:
            return self._fallback(role, location, reason="live_lookup_disabled")

        params = {
            "app_id": self.app_id,
            "app_key": self.api_key,
            "what": role,
            "where": (location or "").lower().replace(" ", "-"),
            "months": 1,
        }
        url = ADZUNA_HISTORY_URL.format(country=self.country)

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            market_logger.error(
                "adzuna_http_error",
                extra={"role": role, "location": location, "error": str(exc)},
            )
            return self._fallback(role, location, reason="http_error")

        try:
            payload = response.json()
        except ValueError:
            market_logger.error(
                "adzuna_non_json_response",
                extra={"role": role, "location": location, "status": response.status_code},
            )
            return self._fallback(role, location, reason="non_json_response")

        averages = _monthly_averages(payload if isinstance(payload, dict) else {})
        if not averages:
            return self._fallback(role, location, reason="no_salary_history")

        average = sum(averages) / len(averages)
        return SalaryRange(
            min=round_half_up(average * MARKET_RANGE_MIN_FACTOR),
            max=round_half_up(average * MARKET_RANGE_MAX_FACTOR),
            median=round_half_up(average),
        )

    def _fallback(self, role: str, location: str, *, reason: str) -> SalaryRange:
        salary_range = fallback_salary_range(role, location)
        market_logger.info(
            "market_data_fallback_used",
            extra={"role": role, "location": location, "reason": reason, "median": salary_range.median},
        )
        return salary_range
