"""Cost Explorer ``GetCostAndUsage`` response model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from helpers.errors import MalformedCostResponseError


@dataclass(frozen=True)
class CostLineItem:
    """A single cost dimension returned for the query window."""

    metric_key: str

    # Decimal kept as the string Cost Explorer returns
    amount: str
    unit: str

    @classmethod
    def from_response(cls, metric_key: str, payload: dict[str, Any]) -> CostLineItem:
        return cls(
            metric_key=metric_key,
            amount=str(payload.get("Amount", "")),
            unit=str(payload.get("Unit", "")),
        )


@dataclass(frozen=True)
class CostBucket:
    """Totals for one period of the query window."""

    start: str = ""
    end: str = ""
    estimated: bool = False
    total: dict[str, CostLineItem] = field(default_factory=dict)


@dataclass(frozen=True)
class CostReport:
    """Ordered per-period buckets of a ``GetCostAndUsage`` call."""

    buckets: tuple[CostBucket, ...]

    @property
    def first_bucket(self) -> CostBucket:
        return self.buckets[0]

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> CostReport:
        """Build a report from the raw boto3 response dictionary.

        Raises:
            MalformedCostResponseError: no bucket, or a bucket that is not
                shaped like a Cost Explorer ``ResultByTime``.
        """
        results = response.get("ResultsByTime") if isinstance(response, dict) else None
        if not results:
            raise MalformedCostResponseError(
                "GetCostAndUsage response has no ResultsByTime bucket"
            )

        buckets = []
        try:
            for result in results:
                period = result.get("TimePeriod") or {}
                total = {
                    key: CostLineItem.from_response(key, value)
                    for key, value in (result.get("Total") or {}).items()
                }
                buckets.append(
                    CostBucket(
                        start=period.get("Start", ""),
                        end=period.get("End", ""),
                        estimated=bool(result.get("Estimated", False)),
                        total=total,
                    )
                )
        except (AttributeError, TypeError) as exc:
            raise MalformedCostResponseError(
                f"Unreadable GetCostAndUsage bucket: {exc}"
            ) from exc
        return cls(buckets=tuple(buckets))
