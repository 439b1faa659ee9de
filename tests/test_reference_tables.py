import pytest

from compensation import reference_tables
from compensation.calculator import (
    get_career_level_info,
    get_company_type_info,
    get_industry_info,
    get_location_multiplier,
)


def test_default_keys_exist_in_their_tables():
    assert reference_tables.DEFAULT_INDUSTRY in reference_tables.INDUSTRIES
    assert reference_tables.DEFAULT_COMPANY_TYPE in reference_tables.COMPANY_TYPES
    assert reference_tables.DEFAULT_CAREER_LEVEL in reference_tables.CAREER_LEVELS


def test_industry_multipliers_are_positive():
    assert all(profile.base_salary_multiplier > 0 for profile in reference_tables.INDUSTRIES.values())


def test_benefits_scores_are_between_one_and_five():
    assert all(1 <= profile.benefits_score <= 5 for profile in reference_tables.COMPANY_TYPES.values())


def test_experience_brackets_are_ordered():
    thresholds = [bracket.min_years for bracket in reference_tables.EXPERIENCE_BRACKETS]
    assert thresholds == sorted(thresholds)
    assert thresholds == [0, 2, 5, 8, 10, 15]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        reference_tables.INDUSTRIES["crypto"] = reference_tables.INDUSTRIES["technology"]
    with pytest.raises(TypeError):
        reference_tables.LOCATION_MULTIPLIERS["paris"] = 1.5


def test_accessors_return_none_for_unknown_keys():
    assert get_industry_info("space mining") is None
    assert get_company_type_info("guild") is None
    assert get_career_level_info("wizard") is None


def test_accessors_normalise_case():
    assert get_industry_info("Finance").bonus_percentage == 40
    assert get_company_type_info("Fortune 500").equity_multiplier == 1.5
    assert get_career_level_info("LEAD").multiplier == 2.5
    assert get_location_multiplier("San Francisco") == 1.95


def test_unknown_location_multiplier_defaults_to_one():
    assert get_location_multiplier("atlantis") == 1.0
