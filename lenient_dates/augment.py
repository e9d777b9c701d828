"""
Input augmentation for lenient-dates.

``process_data_for_parsing()`` takes an Arrow expression for the input
column and the requested orders, and builds up to four versions of it:

  * ``processed`` -- separators normalized: every non-alphanumeric
    character becomes ``"-"`` and runs of ``"-"`` collapse to one.  Absent
    when every order is ``ym``, ``my``, ``yq`` or ``qy``.
  * ``augmented_ym`` -- ``ym``/``my`` values with a first-of-month day
    appended (``"-01"`` after a separator, ``"01"`` otherwise).
  * ``augmented_yq`` -- ``yq`` values rewritten as ``year-month-01``, where
    month is the first month of the quarter.
  * ``augmented_qy`` -- the same for ``qy`` values.  The year is padded on
    the right with zeros to four characters, restoring the trailing zeros
    lost when e.g. ``4.2020`` arrives as the float ``4.202``.

Nothing is evaluated here: each version is a ``pyarrow.compute.Expression``
built from the string, cast, arithmetic and ``if_else`` kernels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import pyarrow as pa
import pyarrow.compute as pc

from lenient_dates.orders.ambiguous import all_ambiguous
from lenient_dates.orders.tokens import normalize_orders

logger = logging.getLogger(__name__)

AUGMENTED_YM = "augmented_ym"
AUGMENTED_YQ = "augmented_yq"
AUGMENTED_QY = "augmented_qy"
PROCESSED = "processed"

# Fallback priority: augmented versions are attempted before the
# separator-normalized input.
VARIANT_ORDER: tuple[str, ...] = (AUGMENTED_YM, AUGMENTED_YQ, AUGMENTED_QY, PROCESSED)

_YM_ORDERS = {"ym", "my"}
_YQ_ORDERS = {"yq"}
_QY_ORDERS = {"qy"}


@dataclass
class ProcessedInput:
    """The input column in every version the requested orders need.

    Each attribute is an Arrow expression, or ``None`` when the version is
    not needed.
    """

    augmented_ym: pc.Expression | None = None
    augmented_yq: pc.Expression | None = None
    augmented_qy: pc.Expression | None = None
    processed: pc.Expression | None = None

    def present(self) -> Iterator[tuple[str, pc.Expression]]:
        """Yield ``(variant_name, expression)`` in fallback priority order."""
        for name in VARIANT_ORDER:
            expr = getattr(self, name)
            if expr is not None:
                yield name, expr

    @property
    def variant_names(self) -> list[str]:
        return [name for name, _ in self.present()]


def normalize_separators(x: pc.Expression) -> pc.Expression:
    """Cast *x* to string and turn every separator run into a single ``"-"``."""
    x = x.cast(pa.string())
    x = pc.replace_substring_regex(x, pattern="[^A-Za-z0-9]", replacement="-")
    return pc.replace_substring_regex(x, pattern="-{2,}", replacement="-")


def _before_first_dash(x: pc.Expression) -> pc.Expression:
    return pc.replace_substring_regex(x, pattern="-.*$", replacement="")


def _after_first_dash(x: pc.Expression) -> pc.Expression:
    return pc.replace_substring_regex(x, pattern="^.*?-", replacement="")


def _quarter_start_month(quarter: pc.Expression) -> pc.Expression:
    """Month that starts quarter *quarter*: ``(q - 1) * 3 + 1``, as text.

    Quarters outside 1..4 are not rejected; they produce a month that
    fails to parse later.  Anything other than one to nine digits becomes
    null before the int32 cast, so a stray value (a word, a compact
    ``20220501123000`` timestamp) nullifies its row instead of failing
    the scan.
    """
    digits_only = pc.match_substring_regex(quarter, pattern="^[0-9]{1,9}$")
    quarter = pc.if_else(digits_only, quarter, pc.scalar(pa.scalar(None, type=pa.string())))
    q = quarter.cast(pa.int32())
    month = pc.add(pc.multiply(pc.subtract(q, pc.scalar(1)), pc.scalar(3)), pc.scalar(1))
    return month.cast(pa.string())


def _first_of_month(year: pc.Expression, month: pc.Expression) -> pc.Expression:
    return pc.binary_join_element_wise(
        year, pc.scalar("-"), month, pc.scalar("-01"), pc.scalar("")
    )


def augment_year_month(processed: pc.Expression) -> pc.Expression:
    """Append a first-of-month day: ``"2022-05"`` -> ``"2022-05-01"``,
    ``"202205"`` -> ``"20220501"``."""
    return pc.if_else(
        pc.match_substring(processed, pattern="-"),
        pc.binary_join_element_wise(processed, pc.scalar("-01"), pc.scalar("")),
        pc.binary_join_element_wise(processed, pc.scalar("01"), pc.scalar("")),
    )


def augment_year_quarter(processed: pc.Expression) -> pc.Expression:
    """``"2022-4"`` -> ``"2022-10-01"``."""
    year = _before_first_dash(processed)
    quarter = _after_first_dash(processed)
    return _first_of_month(year, _quarter_start_month(quarter))


def augment_quarter_year(processed: pc.Expression) -> pc.Expression:
    """``"4-2022"`` -> ``"2022-10-01"``; ``"4-22"`` -> ``"2200-10-01"``."""
    quarter = _before_first_dash(processed)
    year = pc.utf8_rpad(_after_first_dash(processed), width=4, padding="0")
    return _first_of_month(year, _quarter_start_month(quarter))


def process_data_for_parsing(
    x: pc.Expression,
    orders: str | list[str],
) -> ProcessedInput:
    """Prepare every version of *x* the requested *orders* need.

    Args:
        x: Expression for the column to parse (e.g. ``pc.field("date")``).
            Numeric columns are cast to string first.
        orders: The orders as requested by the caller (before ambiguous
            rewriting); ``Y`` and separators are tolerated.

    Returns:
        ``ProcessedInput`` whose unused versions are ``None``.
    """
    normalized = set(normalize_orders(orders))
    processed = normalize_separators(x)

    result = ProcessedInput(processed=processed)
    if normalized & _YM_ORDERS:
        result.augmented_ym = augment_year_month(processed)
    if normalized & _YQ_ORDERS:
        result.augmented_yq = augment_year_quarter(processed)
    if normalized & _QY_ORDERS:
        result.augmented_qy = augment_quarter_year(processed)

    if all_ambiguous(list(normalized)):
        # Direct parsing is never attempted for year+month/quarter input.
        result.processed = None

    logger.debug("Input versions for orders %s: %s", sorted(normalized), result.variant_names)
    return result
