"""
Unit tests for order normalization and letter dispatch
(lenient_dates.orders.tokens).
"""

from __future__ import annotations

import pytest

from lenient_dates.exceptions import UnsupportedOrderError
from lenient_dates.orders.tokens import (
    TokenKind,
    atoms_for,
    normalize_order,
    normalize_orders,
    tokenize_order,
)


class TestNormalizeOrder:
    """Tests for normalize_order()."""

    def test_plain_order_unchanged(self):
        assert normalize_order("ymd") == "ymd"

    def test_separators_stripped(self):
        assert normalize_order("y-m-d") == "ymd"
        assert normalize_order("dmy_HMS") == "dmyHMS"
        assert normalize_order("dmy HMS") == "dmyHMS"

    def test_strptime_like_input(self):
        """Users may pass strptime formats; only the letters survive."""
        assert normalize_order("%Y-%m-%d") == "ymd"

    def test_uppercase_year_lowercased(self):
        assert normalize_order("Ymd") == "ymd"
        assert normalize_order("mY") == "my"

    def test_other_uppercase_letters_kept(self):
        """H, M, S and I are distinct from their lowercase counterparts."""
        assert normalize_order("ymdHMS") == "ymdHMS"
        assert normalize_order("ymdIMS") == "ymdIMS"

    def test_empty_result_is_not_an_error(self):
        assert normalize_order("%-_ ") == ""

    def test_digits_stripped(self):
        assert normalize_order("y2m3d4") == "ymd"

    @pytest.mark.parametrize("raw", ["Y-m-d", "dmy_HMS", "%Y%m%d", "q y", "", "zzz"])
    def test_idempotent(self, raw):
        """Normalizing twice gives the same result as normalizing once."""
        once = normalize_order(raw)
        assert normalize_order(once) == once


class TestNormalizeOrders:
    """Tests for normalize_orders()."""

    def test_keeps_sequence(self):
        assert normalize_orders(["dmy", "Y-m-d"]) == ["dmy", "ymd"]

    def test_single_string(self):
        assert normalize_orders("Y/m/d") == ["ymd"]


class TestTokenizeOrder:
    """Tests for tokenize_order() and the atom table."""

    def test_date_order(self):
        assert tokenize_order("dmy") == [TokenKind.DAY, TokenKind.MONTH, TokenKind.YEAR]

    def test_datetime_order(self):
        assert tokenize_order("ymdIMS") == [
            TokenKind.YEAR, TokenKind.MONTH, TokenKind.DAY,
            TokenKind.HOUR12, TokenKind.MINUTE, TokenKind.SECOND,
        ]

    def test_unknown_letter_rejected(self):
        with pytest.raises(UnsupportedOrderError) as exc_info:
            tokenize_order("ymz")
        assert exc_info.value.invalid_orders == ["ymz"]
        assert "z" in str(exc_info.value)

    def test_year_atoms(self):
        assert atoms_for(TokenKind.YEAR) == ("%y", "%Y")

    def test_month_atoms(self):
        assert atoms_for(TokenKind.MONTH) == ("%m", "%B", "%b")

    @pytest.mark.parametrize(
        "kind, atom",
        [
            (TokenKind.DAY, "%d"),
            (TokenKind.HOUR24, "%H"),
            (TokenKind.MINUTE, "%M"),
            (TokenKind.SECOND, "%S"),
            (TokenKind.HOUR12, "%I"),
        ],
    )
    def test_single_atom_kinds(self, kind, atom):
        assert atoms_for(kind) == (atom,)

    def test_quarter_has_no_atoms(self):
        assert atoms_for(TokenKind.QUARTER) == ()
