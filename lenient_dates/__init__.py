"""
lenient-dates: permissive, multi-format date/time parsing on Apache Arrow.

Public API surface:

- ``parse_date_time(data, orders, ...)`` -- **recommended entry point**.
  Tries every format derived from *orders* (``"ymd"``, ``"dmy_HMS"``,
  ``"yq"``, ...) and keeps the first match per value.

- ``parse_date_time_expr(x, orders, ...)`` -- the same, as a single
  ``pyarrow.compute.Expression`` for use in ``pyarrow.dataset`` scans.

- ``attempt_parsing(x, orders)`` -- the ordered list of ``strptime``
  expressions, for callers that coalesce themselves.

- ``build_formats(orders)`` -- the strptime formats an order list stands for.

- Shortcuts: ``ymd``, ``dmy``, ``ym``, ``yq``, ``ymd_hms``, ... (see
  ``lenient_dates.shortcuts``).

- ``run_job(config)`` / ``load_config(path)`` -- batch parse a CSV/Parquet
  column driven by a YAML job file.

Examples::

    import lenient_dates

    lenient_dates.parse_date_time(["2022-05-01", "01/05/2022"], ["ymd", "dmy"])
    lenient_dates.yq(["2022-4", "2023.1"])
"""

from __future__ import annotations

from lenient_dates.attempts import ParseAttempt, attempt_parsing, build_parse_attempts
from lenient_dates.config import JobConfig, ParseConfig, load_config, save_config
from lenient_dates.exceptions import (
    ConfigValidationError,
    ExportError,
    LenientDatesError,
    LocaleNotSupportedError,
    UnsupportedOrderError,
)
from lenient_dates.job import run_job
from lenient_dates.orders import SUPPORTED_ORDERS, FormatSet, build_formats
from lenient_dates.parse import parse_date_time, parse_date_time_expr
from lenient_dates.shortcuts import (
    dmy,
    dmy_h,
    dmy_hm,
    dmy_hms,
    dym,
    mdy,
    mdy_h,
    mdy_hm,
    mdy_hms,
    my,
    myd,
    qy,
    ydm,
    ydm_h,
    ydm_hm,
    ydm_hms,
    ym,
    ymd,
    ymd_h,
    ymd_hm,
    ymd_hms,
    yq,
)
from lenient_dates.time_locale import check_time_locale

__all__ = [
    "ConfigValidationError",
    "ExportError",
    "FormatSet",
    "JobConfig",
    "LenientDatesError",
    "LocaleNotSupportedError",
    "ParseAttempt",
    "ParseConfig",
    "SUPPORTED_ORDERS",
    "UnsupportedOrderError",
    "attempt_parsing",
    "build_formats",
    "build_parse_attempts",
    "check_time_locale",
    "load_config",
    "parse_date_time",
    "parse_date_time_expr",
    "run_job",
    "save_config",
    "dmy", "dmy_h", "dmy_hm", "dmy_hms", "dym",
    "mdy", "mdy_h", "mdy_hm", "mdy_hms", "my", "myd", "qy",
    "ydm", "ydm_h", "ydm_hm", "ydm_hms", "ym", "ymd",
    "ymd_h", "ymd_hm", "ymd_hms", "yq",
]

