"""
Ambiguous order rewriting for lenient-dates.

``ym``/``my`` and ``yq``/``qy`` cannot be parsed directly: strptime will not
produce a date from a value that has no day (``"2022-05"``), and a quarter
is not a calendar field at all.  Input augmentation (see
``lenient_dates.augment``) supplies the missing pieces on the data side;
this module rewrites the orders so that the formats match the augmented
values:

  - ``ym`` -> ``ymd`` and ``my`` -> ``myd`` (a ``"01"`` day is appended),
  - ``yq`` and ``qy`` -> ``ymd`` (the quarter becomes its first month).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

YEAR_MONTH_ORDERS = ("ym", "my")
YEAR_QUARTER_ORDERS = ("yq", "qy")
AMBIGUOUS_ORDERS = YEAR_MONTH_ORDERS + YEAR_QUARTER_ORDERS


def _unique(orders: list[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(orders))


def expand_ambiguous_orders(orders: list[str]) -> list[str]:
    """Rewrite year+month and year+quarter orders into full date orders.

    Expects normalized orders (see ``normalize_order``).  Ordering rules:

    - Rewritten ``ym``/``my`` orders move to the front, followed by the
      remaining orders in request sequence.
    - ``yq``/``qy`` are removed and a single ``ymd`` is appended at the end
      (unless ``ymd`` is already present).

    Duplicates introduced by the rewrite are removed.

    >>> expand_ambiguous_orders(["dmy", "ym"])
    ['ymd', 'dmy']
    >>> expand_ambiguous_orders(["yq", "dmy"])
    ['dmy', 'ymd']
    """
    result = _unique(orders)

    if any(o in YEAR_MONTH_ORDERS for o in result):
        short = [o + "d" for o in result if o in YEAR_MONTH_ORDERS]
        rest = [o for o in result if o not in YEAR_MONTH_ORDERS]
        result = _unique(short + rest)

    for quarter_order in YEAR_QUARTER_ORDERS:
        if quarter_order in result:
            result = _unique([o for o in result if o != quarter_order] + ["ymd"])

    if result != orders:
        logger.debug("Expanded ambiguous orders %s -> %s", orders, result)
    return result


def all_ambiguous(orders: list[str]) -> bool:
    """True when every (normalized) order is ``ym``, ``my``, ``yq`` or ``qy``."""
    return bool(orders) and all(o in AMBIGUOUS_ORDERS for o in orders)
