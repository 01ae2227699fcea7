"""Unit tests for mersalg.utils.console: price formatting / safe_print."""

import io

import pytest

from mersalg.utils.console import format_price, format_signed_price, safe_print


class TestFormatPrice:
    @pytest.mark.parametrize("price,expected", [
        (12998, "12.998 kr."),
        (999, "999 kr."),
        (1234567.6, "1.234.568 kr."),
        (-500, "-500 kr."),
        (None, "-"),
        ("abc", "-"),
    ])
    def test_format(self, price, expected):
        assert format_price(price) == expected

    def test_signed(self):
        assert format_signed_price(499) == "+499 kr."
        assert format_signed_price(-1500) == "-1.500 kr."
        assert format_signed_price(0) == "0 kr."
        assert format_signed_price(None) == "-"


class TestSafePrint:
    def test_writes_to_stream(self):
        stream = io.StringIO()
        safe_print("Høj", "avance", file=stream)
        assert stream.getvalue() == "Høj avance\n"

    def test_unencodable_characters(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii")
        safe_print("Skærm 15,6″", file=stream)
        stream.flush()
        out = raw.getvalue().decode("ascii")
        assert out.startswith("Sk")
        assert "\\xe6" in out
