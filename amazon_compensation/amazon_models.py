# amazon_models.py

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class BandRange:
    min: int
    max: int


@dataclass(frozen=True)
class AmazonLevelBand:
    level: str  # internal level label, e.g. L5
    title: str
    base_salary_range: BandRange
    rsu_range: BandRange
    signing_bonus_range: BandRange


@dataclass(frozen=True)
class AmazonLocation:
    city: str
    multiplier: float
    tier: str


@dataclass(frozen=True)
class ExperienceBucket:
    name: str
    min_years: int
    max_years: int
    multiplier: float

    def contains(self, years: float) -> bool:
        return self.min_years <= years <= self.max_years


class AmountRange(BaseModel):
    min: int
    max: int


class AmazonMultipliers(BaseModel):
    location: float
    experience: float
    skills: float


class AmazonCompensationEstimate(BaseModel):
    base_salary: AmountRange
    rsu: AmountRange
    signing_bonus: AmountRange
    multipliers: AmazonMultipliers


class AmazonCompensationRequest(BaseModel):
    level: str = Field(..., description="sde1 | sde2 | senior | principal")
    location: str = ""
    experience_years: float = 0
    skills: List[str] = Field(default_factory=list)
