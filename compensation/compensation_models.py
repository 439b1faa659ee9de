# compensation_models.py

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field

MAX_ABS_BASE_SALARY = 1e15  # keeps every derived amount finite


@dataclass(frozen=True)
class IndustryProfile:
    base_salary_multiplier: float
    equity_percentage: float
    bonus_percentage: float
    growth_rate: float


@dataclass(frozen=True)
class CompanyTypeProfile:
    base_salary_multiplier: float
    equity_multiplier: float
    bonus_multiplier: float
    benefits_score: int  # 1-5


@dataclass(frozen=True)
class CareerLevelProfile:
    multiplier: float
    equity_eligible: bool
    bonus_eligible: bool
    management_track: bool


@dataclass(frozen=True)
class ExperienceBracket:
    min_years: int
    multiplier: float


class CompensationRange(BaseModel):
    min: int
    max: int
    median: int


class CompensationMultipliers(BaseModel):
    industry: float
    company: float
    career: float
    experience: float
    location: float
    skills: float


class CompensationMetadata(BaseModel):
    growth_rate: float
    benefits_score: int
    management_track: bool


class CompensationEstimate(BaseModel):
    base: CompensationRange
    equity: int
    bonus: int
    total: CompensationRange
    multipliers: CompensationMultipliers
    metadata: CompensationMetadata


class CompensationRequest(BaseModel):
    role: str = ""
    industry: str = Field(..., description="e.g. technology, finance")
    company_type: str = Field(..., description="e.g. startup, fortune 500")
    level: str = Field(..., description="entry | mid | senior | lead | director | executive")
    location: str = ""
    experience_years: float = 0
    skills: List[str] = Field(default_factory=list)
    base_salary: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        gt=-MAX_ABS_BASE_SALARY,
        lt=MAX_ABS_BASE_SALARY,
        description="Defaults to DEFAULT_BASE_SALARY",
    )
