"""
Format expansion for lenient-dates.

``build_format_from_order()`` turns one order into every strptime format
it can stand for; ``build_formats()`` does the same for a whole list of
user-supplied orders, after normalization, ambiguous-order rewriting and
catalog validation.

The expansion is a cartesian product over each letter's atoms in which
the **first** letter varies fastest.  For ``"ymd"`` that gives::

    %y-%m-%d, %Y-%m-%d, %y-%B-%d, %Y-%B-%d, %y-%b-%d, %Y-%b-%d

followed by the same six patterns without separators.  Both families are
kept: the input is normalized to ``-`` separators, and values such as
``"20220501"`` have none at all.  Attempting both is cheaper than
inspecting every value for separators first.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Iterator

from lenient_dates.orders.ambiguous import expand_ambiguous_orders
from lenient_dates.orders.catalog import split_supported
from lenient_dates.orders.tokens import atoms_for, normalize_orders, tokenize_order

logger = logging.getLogger(__name__)

FORMAT_SEPARATOR = "-"


@dataclass(frozen=True)
class FormatSet:
    """The deduplicated formats derived from a list of orders.

    Attributes:
        formats: strptime formats in fallback priority order.
        orders: The supported orders the formats were built from.
        unsupported: Orders that were requested but dropped.
    """

    formats: tuple[str, ...]
    orders: tuple[str, ...]
    unsupported: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.formats)

    def __iter__(self) -> Iterator[str]:
        return iter(self.formats)


def build_format_from_order(order: str) -> list[str]:
    """Build every strptime format a single normalized order stands for.

    Given ``k`` letters with ``d1..dk`` atoms each, the result has
    ``2 * d1 * ... * dk`` entries: the dash-joined family first, then the
    no-separator family, each in grid order (first letter fastest).

    Raises:
        UnsupportedOrderError: If *order* contains an unknown letter.
    """
    atom_lists = [atoms_for(kind) for kind in tokenize_order(order)]
    # itertools.product varies the last iterable fastest; reverse in and
    # out so the first letter varies fastest instead.
    grid = [tuple(reversed(combo)) for combo in itertools.product(*reversed(atom_lists))]

    with_sep = [FORMAT_SEPARATOR.join(combo) for combo in grid]
    without_sep = ["".join(combo) for combo in grid]
    return with_sep + without_sep


def build_formats(orders: str | list[str]) -> FormatSet:
    """Build the deduplicated formats for a list of user-supplied orders.

    Steps:
      1. Normalize each order (letters only, ``Y`` -> ``y``).
      2. Rewrite ambiguous orders (``ym``, ``my``, ``yq``, ``qy``).
      3. Keep only the supported orders; fail if none remain.
      4. Expand each surviving order, in sequence, and drop duplicate
         formats keeping the first occurrence.

    Args:
        orders: One order or a list of orders, e.g. ``["ymd", "dmy_HMS"]``.

    Returns:
        ``FormatSet`` with formats in fallback priority order.

    Raises:
        UnsupportedOrderError: If none of the orders is supported.
    """
    expanded = expand_ambiguous_orders(normalize_orders(orders))
    supported, unsupported = split_supported(expanded)

    formats: list[str] = []
    for order in supported:
        order_formats = build_format_from_order(order)
        logger.debug("Order '%s' -> %d formats", order, len(order_formats))
        formats.extend(order_formats)

    unique_formats = tuple(dict.fromkeys(formats))
    logger.info(
        "Built %d formats from %d order(s) %s",
        len(unique_formats), len(supported), supported,
    )
    return FormatSet(
        formats=unique_formats,
        orders=tuple(supported),
        unsupported=tuple(unsupported),
    )
