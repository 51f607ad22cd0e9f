"""Exception hierarchy for the exporter."""


class ExporterError(Exception):
    """Base class for every error raised by the exporter."""


class ConfigurationError(ExporterError):
    """Invalid configuration; fatal at startup."""


class InvalidMetricFilterError(ConfigurationError):
    """A token of the metric filter is not an integer field number."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid server metric field number: {token}")
        self.token = token


class InvalidListenAddressError(ConfigurationError):
    """The listen address is not of the form ``[host]:port``."""

    def __init__(self, address: str) -> None:
        super().__init__(f"invalid listen address: {address!r}")
        self.address = address


class BillingFetchError(ExporterError):
    """The Cost Explorer call did not produce a usable report."""


class MalformedCostResponseError(BillingFetchError):
    """The Cost Explorer response does not have the expected structure."""
