"""
Time-locale check for lenient-dates.

Arrow's ``strptime`` kernel on Windows (MinGW ``std::locale``) only knows
the ``"C"`` and ``"POSIX"`` locales.  ``check_time_locale()`` takes the
locale and operating system explicitly; reading the process settings
happens once, at the public call boundary, via ``current_time_locale()``
and ``platform.system()``.
"""

from __future__ import annotations

import locale as _locale
import logging
import platform

from lenient_dates.exceptions import LocaleNotSupportedError

logger = logging.getLogger(__name__)


def current_time_locale() -> str:
    """Return the process ``LC_TIME`` setting (without changing it)."""
    return _locale.setlocale(_locale.LC_TIME)


def current_system() -> str:
    return platform.system()


def check_time_locale(locale: str, system: str) -> str:
    """Validate that *locale* can be used for parsing on *system*.

    Args:
        locale: Time locale name, e.g. ``"C"`` or ``"en_US.UTF-8"``.
        system: Operating system name as returned by ``platform.system()``.

    Returns:
        *locale*, unchanged.

    Raises:
        LocaleNotSupportedError: On Windows, for any locale other than ``"C"``.
    """
    if system.lower() == "windows" and locale != "C":
        raise LocaleNotSupportedError(
            f"On Windows, time locales other than 'C' are not supported "
            f"(got {locale!r}). Consider setting the LC_TIME locale to 'C'."
        )
    logger.debug("Time locale %r accepted on %s", locale, system)
    return locale
