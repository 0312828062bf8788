"""Tests for request parameter parsing."""

import pytest

from advocate_directory.listing.params import MAX_SQL_INT, parse_query_params


def test_empty_params_use_defaults():
    query = parse_query_params({})

    assert query.search == ""
    assert query.page == 1
    assert query.limit == 50
    assert query.sort_by == "first_name"
    assert query.sort_order == "asc"
    assert query.city is None
    assert query.degree is None
    assert query.min_experience is None
    assert query.max_experience is None
    assert query.offset == 0


def test_full_params_are_coerced():
    query = parse_query_params(
        {
            "search": "  anxiety ",
            "page": "3",
            "limit": "10",
            "sortBy": "yearsOfExperience",
            "sortOrder": "DESC",
            "city": "Austin",
            "degree": "PhD",
            "minExperience": "2",
            "maxExperience": " 12 ",
        }
    )

    assert query.search == "anxiety"
    assert query.page == 3
    assert query.limit == 10
    assert query.offset == 20
    assert query.sort_by == "years_of_experience"
    assert query.sort_order == "desc"
    assert query.city == "Austin"
    assert query.degree == "PhD"
    assert query.min_experience == 2
    assert query.max_experience == 12


@pytest.mark.parametrize("value", ["abc", "1.5", "", "0", "-2", None, "--3", "1e3"])
def test_bad_page_falls_back_to_default(value):
    assert parse_query_params({"page": value}).page == 1


@pytest.mark.parametrize("value", ["ten", "0", "-5", "2.0"])
def test_bad_limit_falls_back_to_default(value):
    assert parse_query_params({"limit": value}).limit == 50


def test_unknown_sort_values_fall_back():
    query = parse_query_params({"sortBy": "phoneNumber", "sortOrder": "sideways"})

    assert query.sort_by == "first_name"
    assert query.sort_order == "asc"


def test_sort_by_is_case_sensitive():
    assert parse_query_params({"sortBy": "lastname"}).sort_by == "first_name"
    assert parse_query_params({"sortBy": "lastName"}).sort_by == "last_name"


def test_unparseable_experience_is_absent():
    query = parse_query_params({"minExperience": "lots", "maxExperience": "5y"})

    assert query.min_experience is None
    assert query.max_experience is None


def test_blank_text_filters_are_absent():
    query = parse_query_params({"search": "   ", "city": "", "degree": " "})

    assert query.search == ""
    assert query.city is None
    assert query.degree is None


def test_list_values_take_first_entry():
    query = parse_query_params({"page": ["2", "7"], "city": ["Dallas", "Austin"]})

    assert query.page == 2
    assert query.city == "Dallas"


def test_native_ints_accepted_but_not_bools():
    query = parse_query_params({"page": 4, "limit": True, "minExperience": 0})

    assert query.page == 4
    assert query.limit == 50
    assert query.min_experience == 0


def test_non_string_text_values_are_absent():
    query = parse_query_params({"search": 42, "city": {"name": "Austin"}})

    assert query.search == ""
    assert query.city is None


def test_overlong_digit_strings_are_absent():
    query = parse_query_params({"page": "1" * 5000, "limit": "9" * 40, "minExperience": "7" * 5000})

    assert query.page == 1
    assert query.limit == 50
    assert query.min_experience is None


@pytest.mark.parametrize("value", ["99999999999999999999", "-99999999999999999999", 2**64, -(2**64)])
def test_values_outside_sql_integer_range_are_absent(value):
    query = parse_query_params({"page": value, "minExperience": value, "maxExperience": value})

    assert query.page == 1
    assert query.min_experience is None
    assert query.max_experience is None


def test_largest_sql_integer_is_accepted():
    query = parse_query_params({"maxExperience": str(MAX_SQL_INT)})

    assert query.max_experience == MAX_SQL_INT


def test_page_is_clamped_so_window_fits_sql_integer():
    query = parse_query_params({"page": str(MAX_SQL_INT), "limit": "50"})

    assert query.page > 1
    assert query.offset + query.limit <= MAX_SQL_INT
