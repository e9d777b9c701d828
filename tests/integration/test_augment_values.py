"""
Integration tests: values produced by the augmented input versions.

Evaluates the expressions built by lenient_dates.augment with Arrow.
"""

from __future__ import annotations

import pyarrow as pa
import pytest

from lenient_dates.augment import (
    augment_quarter_year,
    augment_year_month,
    augment_year_quarter,
    normalize_separators,
    process_data_for_parsing,
)


@pytest.mark.integration
class TestNormalizeSeparators:
    """Tests for the processed input version."""

    def test_separators_become_dash(self, x, run):
        assert run(normalize_separators(x), ["2022/05/01", "2022.05.01"]) == [
            "2022-05-01", "2022-05-01",
        ]

    def test_runs_collapse(self, x, run):
        assert run(normalize_separators(x), ["2022 / 05 -- 01"]) == ["2022-05-01"]

    def test_datetime_value(self, x, run):
        assert run(normalize_separators(x), ["2022-01-02 10:20:30"]) == ["2022-01-02-10-20-30"]

    def test_letters_kept(self, x, run):
        assert run(normalize_separators(x), ["01 May, 2022"]) == ["01-May-2022"]

    def test_numeric_input_cast_to_string(self, x, run):
        assert run(normalize_separators(x), [20220501]) == ["20220501"]

    def test_null_stays_null(self, x, run):
        assert run(normalize_separators(x), [None, "2022-05-01"]) == [None, "2022-05-01"]


@pytest.mark.integration
class TestAugmentYearMonth:
    """Tests for the augmented_ym version."""

    def test_with_separator(self, x, run):
        assert run(augment_year_month(normalize_separators(x)), ["2022-05"]) == ["2022-05-01"]

    def test_without_separator(self, x, run):
        assert run(augment_year_month(normalize_separators(x)), ["202205"]) == ["20220501"]

    def test_mixed_rows(self, x, run):
        values = ["2022/05", "202205", "05.2022"]
        assert run(augment_year_month(normalize_separators(x)), values) == [
            "2022-05-01", "20220501", "05-2022-01",
        ]

    def test_numeric_input(self, x, run):
        assert run(augment_year_month(normalize_separators(x)), [202205]) == ["20220501"]


@pytest.mark.integration
class TestAugmentQuarters:
    """Tests for the augmented_yq and augmented_qy versions."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2022-1", "2022-1-01"),
            ("2022-2", "2022-4-01"),
            ("2022-3", "2022-7-01"),
            ("2022-4", "2022-10-01"),
            ("2022.4", "2022-10-01"),
        ],
    )
    def test_year_quarter(self, x, run, value, expected):
        assert run(augment_year_quarter(normalize_separators(x)), [value]) == [expected]

    def test_non_numeric_quarter_is_null(self, x, run):
        values = ["bad", "2022-x", "2022-2"]
        assert run(augment_year_quarter(normalize_separators(x)), values) == [
            None, None, "2022-4-01",
        ]

    def test_long_digit_run_year_quarter_is_null(self, x, run):
        """A compact timestamp has no dash, so the whole value is the quarter."""
        values = ["20220501123000", "2022-4"]
        assert run(augment_year_quarter(normalize_separators(x)), values) == [
            None, "2022-10-01",
        ]

    def test_long_digit_run_quarter_year_is_null(self, x, run):
        values = ["99999999999", "4-2022"]
        assert run(augment_quarter_year(normalize_separators(x)), values) == [
            None, "2022-10-01",
        ]

    def test_quarter_year(self, x, run):
        assert run(augment_quarter_year(normalize_separators(x)), ["4-2022"]) == ["2022-10-01"]

    def test_quarter_year_short_year_padded_right(self, x, run):
        """Two-digit years are padded on the right: 22 -> 2200."""
        assert run(augment_quarter_year(normalize_separators(x)), ["4-22"]) == ["2200-10-01"]

    def test_quarter_year_from_float(self, x):
        """4.2020 read as the float 4.202 gets its trailing zero back."""
        from lenient_dates.parse import evaluate

        expr = augment_quarter_year(normalize_separators(x))
        assert evaluate(expr, pa.array([4.202])).to_pylist() == ["2020-10-01"]


@pytest.mark.integration
class TestProcessDataForParsingValues:
    """End-to-end values of process_data_for_parsing()."""

    def test_ym_version(self, x, run):
        processed = process_data_for_parsing(x, ["ym"])
        assert run(processed.augmented_ym, ["2022-05", "202205"]) == ["2022-05-01", "20220501"]

    def test_yq_version(self, x, run):
        processed = process_data_for_parsing(x, ["yq"])
        assert run(processed.augmented_yq, ["2022-4"]) == ["2022-10-01"]

    def test_qy_version(self, x, run):
        processed = process_data_for_parsing(x, ["qy"])
        assert run(processed.augmented_qy, ["4-22"]) == ["2200-10-01"]
