"""Catalog of the Cost Explorer metrics this exporter knows how to expose.

Each entry maps a stable field number (used by the ``AWS_BILLING_METRICS``
filter) to the Cost Explorer metric name and the Prometheus gauge it is
published under.  The catalog is built once at import time and exposed
read-only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType

from helpers.constants import NAMESPACE
from helpers.errors import InvalidMetricFilterError

SERVER_SUBSYSTEM = "server"
SERVER_LABEL_NAMES: tuple[str, ...] = ("type", "unit")

_FIELD_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class MetricDefinition:
    """One Cost Explorer cost dimension and its Prometheus gauge."""

    id: int

    # Snake-case suffix, e.g. "blended_cost"
    name: str

    # Cost Explorer vocabulary, e.g. "BlendedCost"
    aws_name: str

    help_text: str
    label_names: tuple[str, ...] = SERVER_LABEL_NAMES

    @property
    def exposed_name(self) -> str:
        return f"{NAMESPACE}_{SERVER_SUBSYSTEM}_{self.name}"


_DEFINITIONS = (
    MetricDefinition(
        id=1,
        name="amortized_cost",
        aws_name="AmortizedCost",
        help_text=(
            "This cost metric reflects the effective cost of the upfront and "
            "monthly reservation fees spread across the billing period.."
        ),
    ),
    MetricDefinition(
        id=2,
        name="blended_cost",
        aws_name="BlendedCost",
        help_text=(
            "This cost metric reflects the average cost of usage across the "
            "consolidated billing family."
        ),
    ),
    MetricDefinition(
        id=3,
        name="net_amortized_cost",
        aws_name="NetAmortizedCost",
        help_text=(
            "This cost metric amortizes the upfront and monthly reservation "
            "fees while including discounts such as RI volume discounts."
        ),
    ),
    MetricDefinition(
        id=4,
        name="net_unblended_cost",
        aws_name="NetUnblendedCost",
        help_text="This cost metric reflects the cost after discounts.",
    ),
    MetricDefinition(
        id=5,
        name="normalized_usage_amount",
        aws_name="NormalizedUsageAmount",
        help_text="Cost of amount of resource consumption like CPU.",
    ),
    MetricDefinition(
        id=6,
        name="unblended_cost",
        aws_name="UnblendedCost",
        help_text=(
            "Unblended costs separate discounts into their own line items. "
            "This enables you to view the amount of each discount received."
        ),
    ),
    MetricDefinition(
        id=7,
        name="usage_quantity",
        aws_name="UsageQuantity",
        help_text="Usage of quantity like data in GB.",
    ),
)

METRIC_CATALOG: MappingProxyType[int, MetricDefinition] = MappingProxyType(
    {definition.id: definition for definition in _DEFINITIONS}
)


def catalog_field_numbers() -> str:
    """Comma-separated list of every catalog field number, e.g. ``"1,2,...,7"``."""
    return ",".join(str(field) for field in sorted(METRIC_CATALOG))


def parse_metric_filter(metric_filter: str | None) -> frozenset[int]:
    """Turn the comma-separated filter into a set of field numbers.

    An empty filter selects the whole catalog.  Any token that is not an
    integer raises :class:`InvalidMetricFilterError`.  Integers missing from
    the catalog are kept; they resolve to an empty name later on.
    """
    if not metric_filter or not metric_filter.strip():
        return frozenset(METRIC_CATALOG)

    selected: set[int] = set()
    for token in metric_filter.split(","):
        field = token.strip()
        if not _FIELD_NUMBER.fullmatch(field):
            raise InvalidMetricFilterError(token)
        selected.add(int(field))
    return frozenset(selected)


def aws_metric_name(field: int) -> str:
    """Cost Explorer name for a field number, or ``""`` when unknown."""
    definition = METRIC_CATALOG.get(field)
    return definition.aws_name if definition else ""


def selected_definitions(selection: frozenset[int]) -> tuple[MetricDefinition, ...]:
    """Catalog definitions present in ``selection``, ordered by field number."""
    return tuple(
        METRIC_CATALOG[field] for field in sorted(selection) if field in METRIC_CATALOG
    )
