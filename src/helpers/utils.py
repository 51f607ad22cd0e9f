"""Utility functions for date and address handling."""

from datetime import date, timedelta

from helpers.errors import InvalidListenAddressError

COST_EXPLORER_DATE_FORMAT = "%Y-%m-%d"


def daily_cost_window(today: date | None = None) -> tuple[str, str]:
    """Return the ``(start, end)`` dates of the one-day window ending today.

    Uses the process-local calendar; Cost Explorer treats ``end`` as exclusive.
    """
    today = today or date.today()
    yesterday = today - timedelta(days=1)
    return (
        yesterday.strftime(COST_EXPLORER_DATE_FORMAT),
        today.strftime(COST_EXPLORER_DATE_FORMAT),
    )


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``[host]:port`` into a host/port pair.

    An empty host (``":9614"``) binds every interface.
    """
    host, sep, port = address.strip().rpartition(":")
    if not sep or not port.isdigit():
        raise InvalidListenAddressError(address)
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise InvalidListenAddressError(address)
    host = host.strip("[]") or "0.0.0.0"
    return host, port_number
