"""
tests/test_label_normalizer.py

Pytest unit tests for label and score normalization.
"""

from __future__ import annotations

import pytest

from app.validators.label_normalizer import (
    INVALID,
    Invalid,
    Valid,
    cell_text,
    normalize_binary_label,
    normalize_score,
)


class TestNormalizeBinaryLabel:
    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", " True ", 1, 1.0, "1.0", True])
    def test_positive_encodings(self, raw: object) -> None:
        assert normalize_binary_label(raw) == Valid(1)

    @pytest.mark.parametrize("raw", ["0", "false", "FALSE", 0, 0.0, "0.00", False])
    def test_negative_encodings(self, raw: object) -> None:
        assert normalize_binary_label(raw) == Valid(0)

    @pytest.mark.parametrize("raw", [">50K", " >50K. ", "<=50K", "<50K."])
    def test_income_style_labels(self, raw: str) -> None:
        expected = 1 if ">" in raw else 0
        assert normalize_binary_label(raw) == Valid(expected)

    @pytest.mark.parametrize("raw", ["2", "yes", "", "   ", None, "-1", "0.5", "nan", "inf", "1_0"])
    def test_invalid_encodings(self, raw: object) -> None:
        result = normalize_binary_label(raw)
        assert result == INVALID
        assert isinstance(result, Invalid)

    def test_is_deterministic(self) -> None:
        assert [normalize_binary_label("true") for _ in range(3)] == [Valid(1)] * 3


class TestNormalizeScore:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0.75", 0.75),
            (" 0.2 ", 0.2),
            (1, 1.0),
            ("1.5", 1.5),
            ("-0.3", -0.3),
        ],
    )
    def test_finite_numbers_are_valid(self, raw: object, expected: float) -> None:
        result = normalize_score(raw)
        assert isinstance(result, Valid)
        assert result.value == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "  ", None, "abc", "nan", "inf", "-inf", "0_9", "1_000"])
    def test_non_finite_or_non_numeric_is_invalid(self, raw: object) -> None:
        assert normalize_score(raw) == INVALID


class TestCellText:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (1.0, "1"),
            (-3.0, "-3"),
            (2.5, "2.5"),
            (7, "7"),
            ("  A7 ", "A7"),
            ("1.0", "1.0"),
            (None, ""),
            (True, "True"),
        ],
    )
    def test_renders_cells_as_keys(self, raw: object, expected: str) -> None:
        assert cell_text(raw) == expected
