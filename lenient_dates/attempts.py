"""
Parse attempt construction for lenient-dates.

A *parse attempt* is one ``strptime`` expression: one version of the input
(see ``lenient_dates.augment``) paired with one format (see
``lenient_dates.orders.formats``).  Every attempt is built with
``error_is_null=True`` so that a non-matching row becomes null instead of
failing the whole evaluation.

The list returned by ``attempt_parsing()`` is meant for a row-wise
coalesce: the first non-null result per row wins.  Its order is therefore
part of the contract:

  1. input versions in ``VARIANT_ORDER`` (``augmented_ym``,
     ``augmented_yq``, ``augmented_qy``, ``processed``),
  2. within a version, formats in the order ``build_formats()`` returns
     them (requested order sequence, dash-joined before unseparated).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pyarrow.compute as pc

from lenient_dates.augment import process_data_for_parsing
from lenient_dates.orders.formats import build_formats

logger = logging.getLogger(__name__)

DEFAULT_UNIT = "s"


@dataclass(frozen=True)
class ParseAttempt:
    """One (input version, format) pair and the expression parsing it."""

    variant: str
    format: str
    expression: pc.Expression


def strptime_expr(x: pc.Expression, fmt: str, unit: str = DEFAULT_UNIT) -> pc.Expression:
    """Build a ``strptime`` expression that yields null on a mismatch."""
    return pc.strptime(x, format=fmt, unit=unit, error_is_null=True)


def build_strptime_exprs(
    x: pc.Expression | None,
    formats: list[str] | tuple[str, ...],
    unit: str = DEFAULT_UNIT,
) -> list[pc.Expression]:
    """Build one ``strptime`` expression per format, in format order.

    An absent input version (``None``) yields no expressions.
    """
    if x is None:
        return []
    return [strptime_expr(x, fmt, unit) for fmt in formats]


def build_parse_attempts(
    x: pc.Expression,
    orders: str | list[str],
    unit: str = DEFAULT_UNIT,
) -> list[ParseAttempt]:
    """Build every parse attempt for *x* and *orders*, in priority order.

    Formats are derived from the orders first, so an unsupported-only
    request fails before any input version is built.

    Raises:
        UnsupportedOrderError: If none of *orders* is supported.
    """
    format_set = build_formats(orders)
    # Augmentation looks at the orders as requested: it needs to see
    # ``ym``/``yq``/``qy`` before they are rewritten to full dates.
    processed = process_data_for_parsing(x, orders)

    attempts: list[ParseAttempt] = []
    for variant, variant_expr in processed.present():
        exprs = build_strptime_exprs(variant_expr, format_set.formats, unit)
        attempts.extend(
            ParseAttempt(variant=variant, format=fmt, expression=expr)
            for fmt, expr in zip(format_set.formats, exprs)
        )

    logger.info(
        "Built %d parse attempts (%d input version(s) x %d formats)",
        len(attempts), len(processed.variant_names), len(format_set.formats),
    )
    return attempts


def attempt_parsing(
    x: pc.Expression,
    orders: str | list[str],
    unit: str = DEFAULT_UNIT,
) -> list[pc.Expression]:
    """Return the ordered ``strptime`` expressions for *x* and *orders*.

    This is the list to hand to ``pc.coalesce``.

    Args:
        x: Expression for the column to parse, e.g. ``pc.field("date")``.
        orders: One order or a list of orders, e.g. ``["ymd", "dmy"]``.
        unit: Timestamp unit of the parsed values.

    Raises:
        UnsupportedOrderError: If none of *orders* is supported.
    """
    return [a.expression for a in build_parse_attempts(x, orders, unit)]
