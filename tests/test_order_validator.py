import pytest

from table_caption_ocr.order_validator import OrderValidator, find_misordered
from table_caption_ocr.types import TableRecord


def _recs(*ids):
    return [TableRecord(i, "") for i in ids]


def test_repeated_identifier_flags_both():
    assert find_misordered(_recs("1", "1", "2")) == ["1", "1"]


def test_string_comparison_flags_numeric_increase():
    assert find_misordered(_recs("2", "10")) == ["10", "2"]


def test_increasing_sequence_has_no_anomalies():
    assert find_misordered(_recs("1", "2", "3")) == []


def test_empty_input():
    assert find_misordered([]) == []


def test_first_record_compared_against_zero():
    assert find_misordered(_recs("0")) == ["0", "0"]
    assert find_misordered(_recs("0.5")) == []


def test_cursor_moves_to_offending_identifier():
    # 3 -> 2 is flagged, then 2 -> 4 is fine
    assert find_misordered(_recs("1", "3", "2", "4")) == ["2", "3"]


def test_multiple_violations_in_order():
    assert find_misordered(_recs("3", "2", "1")) == ["2", "3", "1", "2"]


def test_dotted_identifiers_string_order():
    assert find_misordered(_recs("1.1", "1.2", "2.1")) == []
    assert find_misordered(_recs("1.9", "1.10")) == ["1.10", "1.9"]


def test_dotted_strategy_compares_segments_numerically():
    v = OrderValidator(strategy="dotted")
    assert v.find_misordered(_recs("2", "10")) == []
    assert v.find_misordered(_recs("1.9", "1.10")) == []
    assert v.find_misordered(_recs("1.10", "1.9")) == ["1.9", "1.10"]
    assert v.find_misordered(_recs("3", "3.0")) == []


def test_dotted_strategy_still_flags_repeats():
    assert find_misordered(_recs("1", "1"), strategy="dotted") == ["1", "1"]


def test_default_strategy_is_string():
    assert OrderValidator().strategy == "string"


def test_unknown_strategy_rejected():
    with pytest.raises(ValueError):
        OrderValidator(strategy="numeric")


def test_validator_does_not_mutate_input():
    recs = _recs("2", "1")
    before = list(recs)
    OrderValidator().find_misordered(recs)
    assert recs == before
