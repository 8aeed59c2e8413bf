"""
Tests for core/services/coercion.py
"""

from core.domain.enums import InitialPositionInStream, MetricsLevel
from core.services.coercion import (
    IGNORED,
    coerce_bool,
    coerce_enum,
    coerce_int,
    coerce_string,
    coerce_string_set,
    split_list,
)


def test_string_is_used_verbatim():
    assert coerce_string("https://kinesis") == "https://kinesis"
    assert coerce_string("") == ""


def test_int_accepts_base10_including_negative():
    assert coerce_int("100") == 100
    assert coerce_int("-12") == -12
    assert coerce_int("+7") == 7
    assert coerce_int("0") == 0


def test_int_rejects_malformed_text():
    for bad in ("100nf", "", "1.5", "1_000", "0x10", "ten", "١٢"):
        assert coerce_int(bad) is IGNORED


def test_bool_is_case_insensitive_literal():
    assert coerce_bool("true") is True
    assert coerce_bool("FALSE") is False
    assert coerce_bool("True") is True


def test_bool_rejects_other_text():
    for bad in ("yes", "1", "", "truee"):
        assert coerce_bool(bad) is IGNORED


def test_enum_matches_symbol_name_case_insensitively():
    assert coerce_enum("TriM_Horizon", InitialPositionInStream) is InitialPositionInStream.TRIM_HORIZON
    assert coerce_enum("summary", MetricsLevel) is MetricsLevel.SUMMARY


def test_enum_rejects_non_exact_symbols():
    assert coerce_enum("TRIM", InitialPositionInStream) is IGNORED
    assert coerce_enum("TRIM HORIZON", InitialPositionInStream) is IGNORED
    assert coerce_enum("VERBOSE", MetricsLevel) is IGNORED


def test_string_set_unions_with_base():
    result = coerce_string_set("ShardId, WorkerIdentifier, ShardId", {"Operation"})

    assert result == {"ShardId", "WorkerIdentifier", "Operation"}


def test_split_list_trims_and_drops_empty_pieces():
    assert split_list(" a , ,b,, c ") == ["a", "b", "c"]


def test_ignored_sentinel_is_falsy():
    assert not IGNORED
    assert repr(IGNORED) == "IGNORED"
