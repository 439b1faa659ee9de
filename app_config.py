# app_config.py
"""
Environment configuration for the salary insights service.
"""

import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_BASE_SALARY = float(os.getenv("DEFAULT_BASE_SALARY", "100000"))
COMPENSATION_STRICT_LEVELS = os.getenv("COMPENSATION_STRICT_LEVELS", "false").lower() == "true"

# Market data (Adzuna)
MARKET_DATA_ENABLED = os.getenv("MARKET_DATA_ENABLED", "true").lower() == "true"
ADZUNA_APP_ID = os.getenv("ADZUNA_APP_ID")
ADZUNA_API_KEY = os.getenv("ADZUNA_API_KEY")
ADZUNA_COUNTRY = os.getenv("ADZUNA_COUNTRY", "in")
MARKET_DATA_TIMEOUT_SECONDS = float(os.getenv("MARKET_DATA_TIMEOUT_SECONDS", "10"))
MARKET_DATA_REQUEST_DELAY_SECONDS = float(os.getenv("MARKET_DATA_REQUEST_DELAY_SECONDS", "1"))

# Validation
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
if LOG_LEVEL not in VALID_LOG_LEVELS:
    raise ValueError(f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got {LOG_LEVEL}")
if MARKET_DATA_TIMEOUT_SECONDS <= 0:
    raise ValueError(f"MARKET_DATA_TIMEOUT_SECONDS must be positive, got {MARKET_DATA_TIMEOUT_SECONDS}")
if MARKET_DATA_REQUEST_DELAY_SECONDS < 0:
    raise ValueError(
        f"MARKET_DATA_REQUEST_DELAY_SECONDS must not be negative, got {MARKET_DATA_REQUEST_DELAY_SECONDS}"
    )

