import pytest

from fastpkit.common import (
    FAILED_TYPES,
    FILTER_RESULT_TYPES,
    FilterResult,
    failed_type_name,
)


def test_known_codes_have_names():
    assert failed_type_name(FilterResult.PASS_FILTER) == "passed"
    assert failed_type_name(FilterResult.FAIL_QUALITY) == "failed_quality_filter"
    assert failed_type_name(FilterResult.FAIL_TOO_LONG) == "failed_too_long"
    assert failed_type_name(FilterResult.FAIL_LENGTH) == "failed_too_short"


def test_plain_int_codes_are_accepted():
    assert failed_type_name(24) == "failed_low_complexity"
    assert failed_type_name(12) == "failed_too_many_n_bases"


def test_reserved_slots_are_empty():
    assert failed_type_name(1) == ""
    assert failed_type_name(31) == ""


@pytest.mark.parametrize("code", [-1, 32, 100])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        failed_type_name(code)


def test_every_result_has_a_name_and_ordering_holds():
    for result in FilterResult:
        assert failed_type_name(result) == result.label
        assert result.label
    assert FilterResult.PASS_FILTER < FilterResult.FAIL_POLY_X < FilterResult.FAIL_COMPLEXITY


def test_table_size_matches_slot_count():
    names = [failed_type_name(code) for code in range(FILTER_RESULT_TYPES)]
    assert len(names) == 32
    assert names == list(FAILED_TYPES)
    assert failed_type_name(FilterResult.FAIL_OVERLAP) == "failed_bad_overlap"
    assert FilterResult.FAIL_OVERLAP == 8