"""Tests for hebras.profiling — parse profiling API."""

from hebras import parse, regex, string
from hebras.profiling import (
    ParseAccumulator,
    get_parse_accumulator,
    profiled_parse,
)


class TestGetParseAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_parse_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_parse():
            pass
        assert get_parse_accumulator() is None


class TestProfiledParse:
    def test_yields_accumulator(self) -> None:
        with profiled_parse() as acc:
            assert isinstance(acc, ParseAccumulator)
            assert get_parse_accumulator() is acc

    def test_records_parse_call(self) -> None:
        with profiled_parse() as acc:
            parse(regex("[0-9]+"), "123abc")
        assert acc.parse_calls == 1
        assert acc.source_length == 6
        assert acc.consumed == 3
        assert acc.failures == 0

    def test_records_failures(self) -> None:
        with profiled_parse() as acc:
            parse(string("x"), "abc")
            parse(string("a"), "abc")
        assert acc.parse_calls == 2
        assert acc.failures == 1
        assert acc.consumed == 1

    def test_direct_parser_calls_are_not_recorded(self) -> None:
        from hebras.view import view

        with profiled_parse() as acc:
            string("a").parse(view("a"))
        assert acc.parse_calls == 0

    def test_total_duration_non_negative(self) -> None:
        with profiled_parse() as acc:
            parse(string("a"), "a")
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ParseAccumulator().summary()
        assert summary["parse_calls"] == 0
        assert summary["failures"] == 0
        assert summary["source_length"] == 0
        assert summary["consumed"] == 0
        assert "total_ms" in summary
