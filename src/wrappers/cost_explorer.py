"""Wrapper for the AWS Cost Explorer ``GetCostAndUsage`` API."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any

import boto3

from config.cost_report import CostReport
from helpers.constants import APP_LOGGER, AWS_REGION
from helpers.utils import daily_cost_window

GRANULARITY = "DAILY"


class WrapperCostExplorer:
    """Object to wrap Cost Explorer interactions.

    Every call hits the API: no caching, no retry beyond what botocore
    itself does.  Client errors propagate unchanged to the caller.
    """

    def __init__(self, client: Any = None, region_name: str | None = AWS_REGION) -> None:
        self._client = client
        self.region_name = region_name

    @property
    def client(self) -> Any:
        # Built lazily so that constructing the exporter never needs credentials
        if self._client is None:
            session = boto3.Session(region_name=self.region_name)
            self._client = session.client("ce")
            APP_LOGGER.info(msg="Cost Explorer client initialised.")
        return self._client

    def build_query(
        self, metric_names: Iterable[str], today: date | None = None
    ) -> dict[str, Any]:
        """Build the ``GetCostAndUsage`` request for the one-day window."""
        start, end = daily_cost_window(today)
        return {
            "Metrics": sorted(metric_names),
            "Granularity": GRANULARITY,
            "TimePeriod": {"Start": start, "End": end},
        }

    def fetch(self, metric_names: Iterable[str]) -> CostReport:
        """Query yesterday's costs for the given Cost Explorer metric names.

        Raises:
            ValueError: ``metric_names`` is empty.
            botocore.exceptions.ClientError: the service rejected the call.
            botocore.exceptions.BotoCoreError: transport/credential failure.
            MalformedCostResponseError: the response holds no usable bucket.
        """
        names = {name for name in metric_names if name}
        if not names:
            raise ValueError("At least one Cost Explorer metric name is required")

        query = self.build_query(names)
        APP_LOGGER.debug(msg=f"GetCostAndUsage request: {query}")
        response = self.client.get_cost_and_usage(**query)
        return CostReport.from_response(response)
