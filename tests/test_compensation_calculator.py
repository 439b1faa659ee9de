from types import MappingProxyType

import pytest

from compensation import calculator
from compensation.calculator import (
    calculate_compensation,
    compute_skill_premium,
    get_experience_multiplier,
)
from compensation.compensation_models import CareerLevelProfile
from compensation.errors import UnknownLevelError
from compensation.reference_tables import SKILL_PREMIUM_CAP
from compensation.rounding import round_half_up


def _estimate(**overrides):
    params = {
        "role": "Software Engineer",
        "industry": "technology",
        "company_type": "startup",
        "level": "mid",
        "location": "bangalore",
        "experience_years": 5,
        "skills": ["System Design"],
        "base_salary": 100000,
    }
    params.update(overrides)
    return calculate_compensation(**params)


def test_reference_example_breakdown():
    estimate = _estimate()

    assert estimate.multipliers.industry == 1.2
    assert estimate.multipliers.company == 0.9
    assert estimate.multipliers.career == 1.5
    assert estimate.multipliers.experience == 1.5
    assert estimate.multipliers.location == 1.0
    assert estimate.multipliers.skills == 0.05

    assert estimate.base.median == 255150
    assert estimate.base.min == 229635
    assert estimate.base.max == 306180
    assert estimate.equity == 102060
    assert estimate.bonus == 19136
    assert estimate.total.median == 376346
    assert estimate.total.min == 229635 + 102060 + 19136
    assert estimate.total.max == 306180 + 102060 + 19136


def test_reference_example_metadata():
    estimate = _estimate()
    assert estimate.metadata.growth_rate == 12
    assert estimate.metadata.benefits_score == 3
    assert estimate.metadata.management_track is False


def test_identical_inputs_give_identical_estimates():
    assert _estimate() == _estimate()


@pytest.mark.parametrize(
    "industry, company_type, level, location, years",
    [
        ("finance", "fortune 500", "senior", "new york", 12),
        ("retail", "small business", "entry", "austin", 0),
        ("healthcare", "public sector", "director", "london", 8),
        ("consulting", "multinational", "executive", "tokyo", 20),
    ],
)
def test_ranges_are_ordered_and_totals_add_up(industry, company_type, level, location, years):
    estimate = _estimate(
        industry=industry,
        company_type=company_type,
        level=level,
        location=location,
        experience_years=years,
        skills=["AWS", "Leadership"],
    )

    assert estimate.base.min <= estimate.base.median <= estimate.base.max
    assert estimate.total.median == estimate.base.median + estimate.equity + estimate.bonus
    assert estimate.total.min == estimate.base.min + estimate.equity + estimate.bonus
    assert estimate.total.max == estimate.base.max + estimate.equity + estimate.bonus


@pytest.mark.parametrize("count", range(0, 10))
def test_skill_premium_depends_only_on_skill_count(count):
    skills = [f"skill-{i}" for i in range(count)]
    premium = compute_skill_premium(skills)

    assert premium <= SKILL_PREMIUM_CAP
    assert premium == min(0.25, 0.05 * count)
    assert _estimate(skills=skills).multipliers.skills == premium


def test_skill_identity_does_not_change_estimate():
    assert _estimate(skills=["System Design"]) == _estimate(skills=["Basket Weaving"])


def test_entry_level_is_not_equity_eligible():
    estimate = _estimate(level="entry")
    assert estimate.equity == 0
    assert estimate.bonus > 0


def test_company_without_equity_yields_zero_equity():
    estimate = _estimate(company_type="non-profit", level="senior")
    assert estimate.equity == 0


def test_unknown_categories_fall_back_to_defaults():
    fallback = _estimate(
        industry="space mining",
        company_type="guild",
        level="wizard",
        location="atlantis",
    )
    explicit = _estimate(
        industry="technology",
        company_type="mid-size company",
        level="mid",
        location="somewhere else",
    )

    assert fallback == explicit
    assert fallback.multipliers.location == 1.0


def test_lookups_are_case_insensitive():
    assert _estimate(industry="Technology", company_type="STARTUP", level="Mid", location="Bangalore") == _estimate()


def test_strict_mode_rejects_unknown_level():
    with pytest.raises(UnknownLevelError) as exc_info:
        _estimate(level="wizard", strict=True)

    assert exc_info.value.level == "wizard"
    assert "mid" in exc_info.value.known_levels


def test_strict_mode_accepts_known_level():
    assert _estimate(strict=True) == _estimate()


@pytest.mark.parametrize(
    "years, expected",
    [
        (-3, 1.0),
        (0, 1.0),
        (1, 1.0),
        (2, 1.2),
        (7, 1.5),
        (8, 1.8),
        (10, 2.0),
        (14.9, 2.0),
        (15, 2.5),
        (40, 2.5),
    ],
)
def test_experience_multiplier_uses_highest_satisfied_threshold(years, expected):
    assert get_experience_multiplier(years) == expected


def test_negative_base_salary_propagates_without_error():
    estimate = _estimate(base_salary=-100000)
    assert estimate.base.median == -255150
    assert estimate.total.median < 0


@pytest.mark.parametrize(
    "value, expected",
    [(19136.25, 19136), (2.5, 3), (3.5, 4), (-2.5, -2), (0.49, 0)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_round_half_up_rejects_non_finite_values(value):
    with pytest.raises(ValueError):
        round_half_up(value)


def test_overflowing_base_salary_raises_value_error():
    with pytest.raises(ValueError):
        _estimate(base_salary=1e308)


def test_bonus_ineligible_level_yields_zero_bonus(monkeypatch):
    monkeypatch.setattr(
        calculator,
        "CAREER_LEVELS",
        MappingProxyType({
            "mid": CareerLevelProfile(1.5, equity_eligible=True, bonus_eligible=False, management_track=False),
        }),
    )
    estimate = _estimate()

    assert estimate.bonus == 0
    assert estimate.equity == 102060
    assert estimate.total.median == estimate.base.median + estimate.equity
