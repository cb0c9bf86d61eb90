from __future__ import annotations

import logging

import pytest

from bytesize.core.size_parser import ParsedQuantity, SizeParser
from bytesize.core.units import ByteUnit


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1b", 1),
        ("1KB", 1024),
        ("1MB", 1048576),
        ("1GB", 1073741824),
        ("50mb", 50 * 1024**2),
        ("1.5gb", 1610612736),
        ("100 KB", 102400),
        ("-5mb", -5 * 1024**2),
        ("-5MB", -5242880),
        ("+10gb", 10 * 1024**3),
        ("1Kb", 1024),
        ("0tb", 0),
        ("0.0pb", 0),
        ("6PB", 6 * 1024**5),
        ("0.5B", 1),
        ("-0.5B", -1),
        ("1.0001KB", 1024),
    ],
)
def test_parse_valid(raw: str, expected: int) -> None:
    result = SizeParser.parse(raw)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "invalid",
        "1",
        "KB",
        "1.KB",
        ".5KB",
        "1.5.5KB",
        " 1KB",
        "1KB ",
        "1  KB",
        "1KB\n",
        "1XB",
        "1e3KB",
        "--1KB",
        "+-1KB",
        "1,000KB",
        "١KB",
        "1kbb",
        "- 1KB",
    ],
)
def test_parse_invalid(raw: str) -> None:
    assert SizeParser.parse(raw) is None


def test_parse_non_finite_mantissa_is_none() -> None:
    assert SizeParser.parse("1" * 400 + "KB") is None


def test_parse_overflowing_product_is_none() -> None:
    assert SizeParser.parse("1" + "0" * 305 + "PB") is None


@pytest.mark.parametrize("value", [-5, 0, 1024, 1.5])
def test_parse_passes_numbers_through(value: int | float) -> None:
    assert SizeParser.parse(value) == value


@pytest.mark.parametrize("value", [None, True, b"1KB", ["1KB"]])
def test_parse_rejects_other_types(value: object) -> None:
    assert SizeParser.parse(value) is None  # type: ignore[arg-type]


def test_tokenize_returns_parsed_quantity() -> None:
    assert SizeParser.tokenize("-1.5 kb") == ParsedQuantity(
        sign=-1,
        mantissa=1.5,
        unit=ByteUnit.KB,
    )


def test_parsed_quantity_to_bytes_rounds() -> None:
    quantity = ParsedQuantity(sign=1, mantissa=1.25, unit=ByteUnit.B)
    assert quantity.to_bytes() == 1


def test_is_valid() -> None:
    assert SizeParser.is_valid("10 GB")
    assert not SizeParser.is_valid("10 G")
    assert not SizeParser.is_valid(10)


def test_rejected_input_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="bytesize.core.size_parser"):
        SizeParser.parse("nope")
    assert "Rejected size string" in caplog.text
