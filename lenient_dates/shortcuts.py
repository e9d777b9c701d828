"""
Shortcut parsers for lenient-dates, one per common order.

Date parsers (``ymd``, ``dmy``, ``ym``, ``yq``, ...) return dates by
default; pass ``tz`` to get time-zone aware timestamps instead.  Date-time
parsers (``ymd_hms``, ``dmy_hm``, ...) return timestamps in ``tz``
(``"UTC"`` by default) and check the time locale first.
"""

from __future__ import annotations

from typing import Any, Callable

import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from lenient_dates.parse import INPUT_COLUMN, evaluate, parse_date_time_expr
from lenient_dates.time_locale import check_time_locale, current_system, current_time_locale

DATE_PARSER_ORDERS = ("ymd", "ydm", "mdy", "myd", "dmy", "dym", "ym", "my", "yq", "qy")

DATETIME_PARSER_ORDERS = (
    "ymd_h", "ymd_hm", "ymd_hms",
    "dmy_h", "dmy_hm", "dmy_hms",
    "mdy_h", "mdy_hm", "mdy_hms",
    "ydm_h", "ydm_hm", "ydm_hms",
)


def _datetime_order(name: str) -> str:
    """``"ymd_hms"`` -> ``"ymd_HMS"``."""
    date_part, time_part = name.split("_")
    return f"{date_part}_{time_part.upper()}"


def _make_date_parser(order: str) -> Callable[..., pa.Array | pd.Series]:
    def parser(data: Any, tz: str | None = None) -> pa.Array | pd.Series:
        expr = parse_date_time_expr(pc.field(INPUT_COLUMN), order, tz=tz)
        if tz is None:
            expr = expr.cast(pa.date32())
        return evaluate(expr, data)

    parser.__name__ = parser.__qualname__ = order
    parser.__doc__ = (
        f"Parse *data* with the ``{order}`` order.\n\n"
        "Returns dates when *tz* is None, otherwise timestamps in *tz*."
    )
    return parser


def _make_datetime_parser(name: str) -> Callable[..., pa.Array | pd.Series]:
    order = _datetime_order(name)

    def parser(
        data: Any,
        tz: str | None = "UTC",
        locale: str | None = None,
        truncated: int = 0,
    ) -> pa.Array | pd.Series:
        if locale is None:
            locale = current_time_locale()
        check_time_locale(locale, current_system())
        expr = parse_date_time_expr(pc.field(INPUT_COLUMN), order, tz=tz, truncated=truncated)
        return evaluate(expr, data)

    parser.__name__ = parser.__qualname__ = name
    parser.__doc__ = (
        f"Parse *data* with the ``{order}`` order into timestamps in *tz*.\n\n"
        "Raises:\n"
        "    LocaleNotSupportedError: If *locale* cannot be used on this platform."
    )
    return parser


ymd = _make_date_parser("ymd")
ydm = _make_date_parser("ydm")
mdy = _make_date_parser("mdy")
myd = _make_date_parser("myd")
dmy = _make_date_parser("dmy")
dym = _make_date_parser("dym")
ym = _make_date_parser("ym")
my = _make_date_parser("my")
yq = _make_date_parser("yq")
qy = _make_date_parser("qy")

ymd_h = _make_datetime_parser("ymd_h")
ymd_hm = _make_datetime_parser("ymd_hm")
ymd_hms = _make_datetime_parser("ymd_hms")
dmy_h = _make_datetime_parser("dmy_h")
dmy_hm = _make_datetime_parser("dmy_hm")
dmy_hms = _make_datetime_parser("dmy_hms")
mdy_h = _make_datetime_parser("mdy_h")
mdy_hm = _make_datetime_parser("mdy_hm")
mdy_hms = _make_datetime_parser("mdy_hms")
ydm_h = _make_datetime_parser("ydm_h")
ydm_hm = _make_datetime_parser("ydm_hm")
ydm_hms = _make_datetime_parser("ydm_hms")
