"""
Coalescing binding for lenient-dates.

Wraps the ordered parse attempts from ``lenient_dates.attempts`` into a
single Arrow expression (``pc.coalesce`` keeps the first non-null attempt
per row) and evaluates it against in-memory data through
``pyarrow.dataset``.

Key functions:
- parse_date_time_expr(x, orders, ...) -> pc.Expression
- parse_date_time(data, orders, ...) -> pa.Array | pd.Series
- evaluate(expr, data) -> pa.Array | pd.Series
- truncate_orders(orders, truncated) -> list[str]
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.dataset as ds

from lenient_dates.attempts import DEFAULT_UNIT, attempt_parsing, build_strptime_exprs
from lenient_dates.exceptions import UnsupportedOrderError

logger = logging.getLogger(__name__)

# Name of the single column data is wrapped into for evaluation.
INPUT_COLUMN = "x"
_RESULT_COLUMN = "parsed"


def truncate_orders(orders: str | list[str], truncated: int) -> list[str]:
    """Add the shortened forms of each order.

    ``truncated=n`` lets the last ``1..n`` characters of every order go
    missing, so ``"ymd_HMS"`` with ``n=2`` becomes
    ``["ymd_HMS", "ymd_HM", "ymd_H"]``.

    Raises:
        ValueError: If *truncated* is negative.
        UnsupportedOrderError: If *truncated* would cut into the date part
            (more than ``len(order) - 3`` characters).
    """
    if isinstance(orders, str):
        orders = [orders]
    if truncated < 0:
        raise ValueError(f"`truncated` must be >= 0, got {truncated}")
    if truncated == 0:
        return list(orders)

    result: list[str] = []
    for order in orders:
        limit = len(order) - 3
        if truncated > limit:
            raise UnsupportedOrderError(
                [order],
                f"Unsupported `truncated` value {truncated} for order '{order}' "
                f"(must be <= {limit})",
            )
        result.extend(order[: len(order) - k] for k in range(truncated + 1))
    return result


def parse_date_time_expr(
    x: pc.Expression,
    orders: str | list[str],
    tz: str | None = "UTC",
    truncated: int = 0,
    exact: bool = False,
    unit: str = DEFAULT_UNIT,
) -> pc.Expression:
    """Build the expression that parses *x* leniently according to *orders*.

    Args:
        x: Expression for the column to parse, e.g. ``pc.field("date")``.
        orders: One order or a list of orders (``"ymd"``, ``["dmy_HMS"]``).
            With ``exact=True`` these are strptime formats used verbatim.
        tz: Time zone the parsed wall-clock times are assumed to be in.
            ``None`` leaves the timestamps time-zone naive.
        truncated: Number of trailing order characters that may be missing.
        exact: Skip order expansion and input processing entirely.
        unit: Timestamp unit of the result.

    Raises:
        UnsupportedOrderError: If none of the orders is supported.
    """
    orders = truncate_orders(orders, truncated)

    if exact:
        attempts = build_strptime_exprs(x.cast(pa.string()), orders, unit)
    else:
        attempts = attempt_parsing(x, orders, unit)

    if not attempts:
        raise UnsupportedOrderError(orders)

    coalesced = pc.coalesce(*attempts)
    if tz is None:
        return coalesced
    return pc.assume_timezone(coalesced, timezone=tz)


def _to_table(data: Any) -> tuple[pa.Table, pd.Series | None]:
    """Wrap *data* as a one-column table; also return the source Series."""
    series: pd.Series | None = None
    if isinstance(data, pd.Series):
        series = data
        column = pa.Array.from_pandas(data)
    elif isinstance(data, (pa.Array, pa.ChunkedArray)):
        column = data
    elif isinstance(data, np.ndarray):
        column = pa.array(data)
    else:
        column = pa.array(list(data))
    return pa.table({INPUT_COLUMN: column}), series


def evaluate(expr: pc.Expression, data: Any) -> pa.Array | pd.Series:
    """Evaluate *expr* (built on ``pc.field(INPUT_COLUMN)``) against *data*.

    Args:
        expr: Expression referring to the input as ``pc.field("x")``.
        data: ``pyarrow.Array``/``ChunkedArray``, ``numpy.ndarray``,
            ``pandas.Series`` or any iterable of values.

    Returns:
        A ``pyarrow.Array``, or a ``pandas.Series`` carrying the input's
        index and name when *data* is a Series.
    """
    table, series = _to_table(data)
    out = ds.dataset(table).to_table(columns={_RESULT_COLUMN: expr})
    result = out.column(_RESULT_COLUMN).combine_chunks()

    if series is None:
        return result
    converted = result.to_pandas()
    converted.index = series.index
    converted.name = series.name
    return converted


def parse_date_time(
    data: Any,
    orders: str | list[str],
    tz: str | None = "UTC",
    truncated: int = 0,
    exact: bool = False,
    unit: str = DEFAULT_UNIT,
) -> pa.Array | pd.Series:
    """Parse *data* leniently, trying every format derived from *orders*.

    Each row gets the result of the first format that matches; rows no
    format matches are null.

    Examples::

        parse_date_time(["2022-05-01", "01/05/2022"], ["ymd", "dmy"])
        parse_date_time(pd.Series(["2022-4"]), "yq", tz=None)

    See ``parse_date_time_expr`` for the arguments.

    Raises:
        UnsupportedOrderError: If none of the orders is supported.
    """
    expr = parse_date_time_expr(
        pc.field(INPUT_COLUMN), orders, tz=tz, truncated=truncated, exact=exact, unit=unit,
    )
    result = evaluate(expr, data)
    logger.debug("Parsed %d values with orders %s", len(result), orders)
    return result
