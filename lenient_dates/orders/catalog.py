"""
Catalog of supported orders for lenient-dates.

Only orders that expand to well-defined strptime formats are attempted:

- the six permutations of year, month and day (``ymd``, ``ydm``, ...),
- twelve date-time orders (``ymd_HMS``, ``dmy_HM``, ...), each with a
  24-hour (``H``) and a 12-hour (``I``) variant, and each written with an
  ``_``, a space or no separator between the date and the time parts.

Validation is deliberately permissive: unsupported orders are dropped
with a warning as long as at least one supported order remains; only an
empty remainder is an error.
"""

from __future__ import annotations

import logging

from lenient_dates.exceptions import UnsupportedOrderError

logger = logging.getLogger(__name__)

DATE_ORDERS: tuple[str, ...] = ("ymd", "ydm", "mdy", "myd", "dmy", "dym")

_DATETIME_BASE_ORDERS: tuple[str, ...] = (
    "ymd_HMS", "ymd_HM", "ymd_H",
    "dmy_HMS", "dmy_HM", "dmy_H",
    "mdy_HMS", "mdy_HM", "mdy_H",
    "ydm_HMS", "ydm_HM", "ydm_H",
)


def _with_separators(orders: tuple[str, ...]) -> tuple[str, ...]:
    """Return *orders* written with ``_``, then space, then no separator."""
    return (
        orders
        + tuple(o.replace("_", " ") for o in orders)
        + tuple(o.replace("_", "") for o in orders)
    )


_HOUR12_BASE_ORDERS = tuple(o.replace("H", "I") for o in _DATETIME_BASE_ORDERS)

DATETIME_ORDERS: tuple[str, ...] = (
    _with_separators(_DATETIME_BASE_ORDERS) + _with_separators(_HOUR12_BASE_ORDERS)
)

SUPPORTED_ORDERS: frozenset[str] = frozenset(DATE_ORDERS + DATETIME_ORDERS)


def is_supported(order: str) -> bool:
    return order in SUPPORTED_ORDERS


def partition_orders(orders: list[str]) -> tuple[list[str], list[str]]:
    """Split *orders* into ``(supported, unsupported)``.

    Both lists keep the request sequence and are deduplicated.
    """
    supported: list[str] = []
    unsupported: list[str] = []
    for order in dict.fromkeys(orders):
        (supported if is_supported(order) else unsupported).append(order)
    return supported, unsupported


def split_supported(orders: list[str]) -> tuple[list[str], list[str]]:
    """Partition *orders* once and validate the result.

    Args:
        orders: Normalized orders, after ambiguous-order expansion.

    Returns:
        ``(supported, unsupported)``, both in request sequence.  A WARNING
        is logged when anything is dropped.

    Raises:
        UnsupportedOrderError: If **none** of the orders is supported.  The
            error names every unsupported token.
    """
    supported, unsupported = partition_orders(orders)
    if not supported:
        raise UnsupportedOrderError(unsupported)
    if unsupported:
        logger.warning(
            "Ignoring unsupported orders %s (parsing with %s)",
            unsupported, supported,
        )
    return supported, unsupported


def check_supported(orders: list[str]) -> list[str]:
    """Return the supported subset of *orders* (see ``split_supported``)."""
    return split_supported(orders)[0]
