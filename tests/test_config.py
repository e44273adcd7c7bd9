"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior, and how the top-level
parse() honors the active config.
"""

import logging
from threading import Thread

import pytest

from hebras import (
    ParseConfig,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    string,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_parse_config()


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.require_full_match is False
        assert config.trace is False

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.trace = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"require_full_match": True, "colour": "red"})
        assert config.require_full_match is True
        assert config.trace is False


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(trace=True))
        assert get_parse_config().trace is True
        reset_parse_config()
        assert get_parse_config().trace is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(trace=True)):
                raise RuntimeError("boom")
        assert get_parse_config().trace is False

    def test_thread_isolation(self) -> None:
        """Config set in a worker thread does not leak into this one."""
        seen: list[bool] = []

        def worker() -> None:
            set_parse_config(ParseConfig(require_full_match=True))
            seen.append(get_parse_config().require_full_match)

        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [True]
        assert get_parse_config().require_full_match is False


class TestParseWithConfig:
    def test_leftover_input_allowed_by_default(self) -> None:
        result = parse(string("ab"), "abc")
        assert result.is_success()
        assert result.remainder.to_source() == "c"

    def test_require_full_match(self) -> None:
        with parse_config_context(ParseConfig(require_full_match=True)):
            result = parse(string("ab"), "abc")
        assert result.is_failure()
        assert result.reason == "Expected end of input but was 'c'"
        assert result.position == 2

    def test_require_full_match_accepts_complete_parse(self) -> None:
        with parse_config_context(ParseConfig(require_full_match=True)):
            assert parse(string("abc"), "abc").value == "abc"

    def test_trace_logs_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hebras"):
            with parse_config_context(ParseConfig(trace=True)):
                parse(string("a"), "a")
        assert "string('a')" in caplog.text

    def test_no_trace_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hebras"):
            parse(string("a"), "a")
        assert caplog.text == ""
