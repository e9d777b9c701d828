"""
Order token normalization and letter dispatch for lenient-dates.

An *order* is a compact letter sequence describing the expected component
ordering of a date/time value, e.g. ``"ymd"`` or ``"dmy_HMS"``.  Users may
pass orders with separators (``"y-m-d"``, ``"ymd HMS"``) or even
strptime-like strings (``"%Y-%m-%d"``); normalization keeps the letters
only, so all of these collapse to the same token.

Each letter maps to a closed ``TokenKind``, and each kind to a fixed tuple
of pattern atoms (``_ATOMS``).  Year offers both the 2-digit and 4-digit
atoms and month offers numeric, full-name and abbreviated-name atoms; all
other kinds have a single atom.
"""

from __future__ import annotations

import re
from enum import Enum

from lenient_dates.exceptions import UnsupportedOrderError

_NON_LETTER = re.compile(r"[^A-Za-z]")


class TokenKind(Enum):
    """One component of an order token."""

    YEAR = "y"
    MONTH = "m"
    DAY = "d"
    HOUR24 = "H"
    MINUTE = "M"
    SECOND = "S"
    HOUR12 = "I"
    # Quarters are consumed by input augmentation and never reach
    # format expansion, hence no atoms.
    QUARTER = "q"


_ATOMS: dict[TokenKind, tuple[str, ...]] = {
    TokenKind.YEAR: ("%y", "%Y"),
    TokenKind.MONTH: ("%m", "%B", "%b"),
    TokenKind.DAY: ("%d",),
    TokenKind.HOUR24: ("%H",),
    TokenKind.MINUTE: ("%M",),
    TokenKind.SECOND: ("%S",),
    TokenKind.HOUR12: ("%I",),
    TokenKind.QUARTER: (),
}

_BY_LETTER: dict[str, TokenKind] = {kind.value: kind for kind in TokenKind}


def normalize_order(order: str) -> str:
    """Strip every non-letter character and lowercase the year marker.

    ``Y`` and ``y`` both mean "year"; the atom table already offers both
    ``%y`` and ``%Y`` for a year letter, so the distinction is dropped here.

    The result may be empty (e.g. for ``"%-"``); that degenerate token is
    rejected later by the catalog, not here.

    >>> normalize_order("%Y-%m-%d")
    'ymd'
    >>> normalize_order("dmy_HMS")
    'dmyHMS'
    """
    return _NON_LETTER.sub("", order).replace("Y", "y")


def normalize_orders(orders: str | list[str]) -> list[str]:
    """Normalize every order in *orders*, keeping the request sequence.

    A bare string is treated as a single order.
    """
    if isinstance(orders, str):
        orders = [orders]
    return [normalize_order(o) for o in orders]


def tokenize_order(order: str) -> list[TokenKind]:
    """Map each letter of a normalized order to its ``TokenKind``.

    Raises:
        UnsupportedOrderError: If *order* contains a letter outside
            ``{y, m, d, H, M, S, I, q}``.
    """
    unknown = sorted({ch for ch in order if ch not in _BY_LETTER})
    if unknown:
        raise UnsupportedOrderError(
            [order],
            f"Unsupported `orders`: '{order}' (unknown letters: {', '.join(unknown)})",
        )
    return [_BY_LETTER[ch] for ch in order]


def atoms_for(kind: TokenKind) -> tuple[str, ...]:
    """Return the strptime atoms a token kind may be written as."""
    return _ATOMS[kind]
