"""
Unit tests for the time-locale check (lenient_dates.time_locale).
"""

from __future__ import annotations

import pytest

from lenient_dates.exceptions import LocaleNotSupportedError
from lenient_dates.time_locale import check_time_locale, current_time_locale


class TestCheckTimeLocale:
    """Tests for check_time_locale()."""

    def test_c_locale_on_windows(self):
        assert check_time_locale("C", "Windows") == "C"

    def test_other_locale_on_windows_rejected(self):
        with pytest.raises(LocaleNotSupportedError, match="Windows"):
            check_time_locale("en_US.UTF-8", "Windows")

    def test_system_name_case_insensitive(self):
        with pytest.raises(LocaleNotSupportedError):
            check_time_locale("de_DE", "windows")

    @pytest.mark.parametrize("system", ["Linux", "Darwin"])
    def test_any_locale_elsewhere(self, system):
        assert check_time_locale("en_US.UTF-8", system) == "en_US.UTF-8"


class TestCurrentTimeLocale:
    """Tests for current_time_locale()."""

    def test_returns_string(self):
        assert isinstance(current_time_locale(), str)
