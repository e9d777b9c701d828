"""
Unit tests for the coalescing binding (lenient_dates.parse) that do not
need to evaluate anything.
"""

from __future__ import annotations

import pyarrow.compute as pc
import pytest

from lenient_dates.attempts import attempt_parsing
from lenient_dates.exceptions import UnsupportedOrderError
from lenient_dates.parse import parse_date_time_expr, truncate_orders


class TestTruncateOrders:
    """Tests for truncate_orders()."""

    def test_zero_is_identity(self):
        assert truncate_orders(["ymd_HMS", "dmy"], 0) == ["ymd_HMS", "dmy"]

    def test_single_string(self):
        assert truncate_orders("ymd_HMS", 0) == ["ymd_HMS"]

    def test_truncates_from_the_end(self):
        assert truncate_orders("ymd_HMS", 2) == ["ymd_HMS", "ymd_HM", "ymd_H"]

    def test_every_order_truncated(self):
        assert truncate_orders(["ymdHM", "dmyHM"], 1) == ["ymdHM", "ymdH", "dmyHM", "dmyH"]

    def test_limit_is_length_minus_three(self):
        assert truncate_orders("ymd_HMS", 4)[-1] == "ymd"
        with pytest.raises(UnsupportedOrderError, match="truncated"):
            truncate_orders("ymd_HMS", 5)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            truncate_orders("ymd", -1)


class TestParseDateTimeExpr:
    """Tests for parse_date_time_expr() construction."""

    def test_naive_is_plain_coalesce(self, x):
        expr = parse_date_time_expr(x, ["ymd", "dmy"], tz=None)
        assert expr.equals(pc.coalesce(*attempt_parsing(x, ["ymd", "dmy"])))

    def test_timezone_wraps_coalesce(self, x):
        expr = parse_date_time_expr(x, "ymd", tz="UTC")
        expected = pc.assume_timezone(pc.coalesce(*attempt_parsing(x, "ymd")), timezone="UTC")
        assert expr.equals(expected)

    def test_unsupported_raises_before_building(self, x):
        with pytest.raises(UnsupportedOrderError):
            parse_date_time_expr(x, "zzz")

    def test_exact_with_no_formats(self, x):
        with pytest.raises(UnsupportedOrderError):
            parse_date_time_expr(x, [], exact=True)
