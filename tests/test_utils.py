"""Tests for helpers.utils."""

from datetime import date

import pytest

from helpers.errors import InvalidListenAddressError
from helpers.utils import daily_cost_window, parse_listen_address


def test_daily_window_is_yesterday_to_today():
    assert daily_cost_window(date(2026, 10, 19)) == ("2026-10-18", "2026-10-19")


def test_daily_window_crosses_month_and_year():
    assert daily_cost_window(date(2026, 3, 1)) == ("2026-02-28", "2026-03-01")
    assert daily_cost_window(date(2027, 1, 1)) == ("2026-12-31", "2027-01-01")


def test_daily_window_defaults_to_local_today():
    start, end = daily_cost_window()
    assert end == date.today().strftime("%Y-%m-%d")
    assert start < end


class TestParseListenAddress:
    def test_empty_host_binds_all_interfaces(self):
        assert parse_listen_address(":9614") == ("0.0.0.0", 9614)

    def test_explicit_host(self):
        assert parse_listen_address("127.0.0.1:8080") == ("127.0.0.1", 8080)

    def test_ipv6_host(self):
        assert parse_listen_address("[::1]:9614") == ("::1", 9614)

    @pytest.mark.parametrize("address", ["9614", "host:", "host:abc", ":70000", ""])
    def test_invalid_address_raises(self, address):
        with pytest.raises(InvalidListenAddressError):
            parse_listen_address(address)
