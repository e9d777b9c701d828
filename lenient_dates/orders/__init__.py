"""
Orders sub-package for lenient-dates.

Turns user-supplied order tokens (``"ymd"``, ``"dmy_HMS"``, ``"yq"``) into
the ordered list of strptime formats to attempt.

Steps, leaves first:
  - tokens.py: normalize raw tokens; letter -> TokenKind -> pattern atoms.
  - ambiguous.py: rewrite ``ym``/``my``/``yq``/``qy`` into day-complete orders.
  - catalog.py: the fixed catalog of supported orders and its validation.
  - formats.py: cartesian expansion of one order, and of a whole order list.
"""

from lenient_dates.orders.ambiguous import expand_ambiguous_orders
from lenient_dates.orders.catalog import SUPPORTED_ORDERS, check_supported, split_supported
from lenient_dates.orders.formats import FormatSet, build_format_from_order, build_formats
from lenient_dates.orders.tokens import TokenKind, normalize_order, normalize_orders, tokenize_order

__all__ = [
    "FormatSet",
    "SUPPORTED_ORDERS",
    "TokenKind",
    "build_format_from_order",
    "build_formats",
    "check_supported",
    "expand_ambiguous_orders",
    "normalize_order",
    "normalize_orders",
    "split_supported",
    "tokenize_order",
]
