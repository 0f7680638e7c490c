"""Unit tests for logging configuration and error helpers."""

import logging

import pytest

from debenture.lib.errors import (
    ConfigurationError,
    DatabaseError,
    DebentureError,
    InvalidFrequencyCodeError,
    ValidationError,
    format_error_message,
    get_error_color,
)
from debenture.lib.logging_config import HolderIdFilter, get_logger
from debenture.services.debenture_contract import DebentureContract
from debenture.services.instrument_store import InMemoryInstrumentStore

HOLDER_HEX = "0123456789abcdef" * 4


def _record(msg, args=()):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


@pytest.mark.unit
class TestHolderIdFilter:
    """Test suite for HolderIdFilter."""

    def test_masks_holder_in_message(self):
        record = _record(f"holder={HOLDER_HEX} issued")
        assert HolderIdFilter().filter(record) is True
        assert record.msg == "holder=0123…cdef issued"

    def test_masks_holder_in_args(self):
        record = _record("holder=%s", (HOLDER_HEX,))
        HolderIdFilter().filter(record)
        assert record.getMessage() == "holder=0123…cdef"

    def test_masks_raw_holder_bytes(self):
        record = _record("holder=%s", (bytes.fromhex(HOLDER_HEX),))
        HolderIdFilter().filter(record)
        assert record.getMessage() == "holder=0123…cdef"

    def test_leaves_other_values_alone(self):
        record = _record("rate=%s par=%s hash=%s", (750, 100_000, "abcd" * 4))
        HolderIdFilter().filter(record)
        assert record.getMessage() == f"rate=750 par=100000 hash={'abcd' * 4}"

    def test_get_logger_adds_filter_once(self):
        logger = get_logger("debenture.test")
        get_logger("debenture.test")
        assert sum(isinstance(f, HolderIdFilter) for f in logger.filters) == 1

    def test_issue_log_line(self, caplog):
        caplog.set_level(logging.INFO, logger="debenture.services.debenture_contract")
        contract = DebentureContract(InMemoryInstrumentStore())

        contract.issue(100, 750, 100_000, 0, HOLDER_HEX)

        assert "Issued debenture" in caplog.text
        assert "rate=750bp" in caplog.text


@pytest.mark.unit
class TestErrorHelpers:
    """Test suite for format_error_message and get_error_color."""

    def test_domain_error_message(self):
        assert format_error_message(ValidationError("bad input")) == "bad input"

    def test_generic_error_message(self):
        assert format_error_message(KeyError("x")) == "KeyError: 'x'"

    @pytest.mark.parametrize(
        "error,color",
        [
            (InvalidFrequencyCodeError(99), "yellow"),
            (ValidationError("x"), "red"),
            (ConfigurationError("x"), "orange"),
            (DatabaseError("x"), "magenta"),
            (RuntimeError("x"), "red"),
        ],
    )
    def test_colors(self, error, color):
        assert get_error_color(error) == color

    def test_hierarchy(self):
        assert issubclass(InvalidFrequencyCodeError, ValidationError)
        assert issubclass(DatabaseError, DebentureError)
