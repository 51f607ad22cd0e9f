"""Prometheus collector publishing AWS Cost Explorer figures.

On every scrape the collector:
  • increments the scrape counter
  • queries Cost Explorer once for yesterday's totals
  • maps each enabled catalog metric to a gauge labelled by type / unit
  • reports ``aws_billing_up`` (1 on success, 0 when the call failed)

The whole scrape runs under one lock so that overlapping scrape requests
are served one after another and never mix their samples.
"""

from __future__ import annotations

import threading
from typing import Any

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from config.cost_report import CostReport
from config.metrics_catalog import (
    MetricDefinition,
    aws_metric_name,
    parse_metric_filter,
    selected_definitions,
)
from helpers.constants import APP_LOGGER, NAMESPACE
from wrappers.cost_explorer import WrapperCostExplorer

UP_METRIC_NAME = f"{NAMESPACE}_up"
UP_METRIC_HELP = "Was the last scrape of aws billing successful."

TOTAL_SCRAPES_METRIC_NAME = f"{NAMESPACE}_exporter_total_scrapes"
TOTAL_SCRAPES_METRIC_HELP = "Current total aws cost and usage API scrapes."


class AwsBillingCollector(Collector):
    """Custom collector turning one Cost Explorer call into metric families."""

    def __init__(
        self,
        metric_filter: str = "",
        cost_explorer: WrapperCostExplorer | None = None,
    ) -> None:
        # Raises InvalidMetricFilterError before anything else is built
        self.selection: frozenset[int] = parse_metric_filter(metric_filter)
        self.enabled_metrics: tuple[MetricDefinition, ...] = selected_definitions(
            self.selection
        )
        self.cost_explorer = cost_explorer or WrapperCostExplorer()

        self._lock = threading.Lock()
        self._total_scrapes = 0
        self._last_scrape_succeeded = False

        unknown = sorted(field for field in self.selection if not aws_metric_name(field))
        if unknown:
            APP_LOGGER.warning(
                msg=f"Unknown metric field numbers will match nothing: {unknown}"
            )
        APP_LOGGER.info(
            msg=(
                "AwsBillingCollector initialised with metrics: "
                f"{[m.aws_name for m in self.enabled_metrics]}"
            )
        )

    # ── state ─────────────────────────────────────────────────────────────

    @property
    def total_scrapes(self) -> int:
        with self._lock:
            return self._total_scrapes

    @property
    def last_scrape_succeeded(self) -> bool:
        with self._lock:
            return self._last_scrape_succeeded

    def aws_metric_names(self) -> set[str]:
        """Cost Explorer names requested on each scrape.

        Unknown field numbers resolve to an empty name and are left out.
        """
        return {name for name in map(aws_metric_name, self.selection) if name}

    # ── prometheus_client collector protocol ─────────────────────────────

    def describe(self) -> list[Metric]:
        """Sample-free families for every metric this collector may export."""
        families: list[Metric] = [
            self._cost_family(definition) for definition in self.enabled_metrics
        ]
        families.append(GaugeMetricFamily(UP_METRIC_NAME, UP_METRIC_HELP))
        families.append(
            CounterMetricFamily(TOTAL_SCRAPES_METRIC_NAME, TOTAL_SCRAPES_METRIC_HELP)
        )
        return families

    def collect(self) -> list[Metric]:
        """Run one scrape and return its metric families."""
        with self._lock:
            self._total_scrapes += 1
            families = self._scrape()
            self._last_scrape_succeeded = families is not None

            result: list[Metric] = families or []
            result.append(
                GaugeMetricFamily(
                    UP_METRIC_NAME,
                    UP_METRIC_HELP,
                    value=1.0 if self._last_scrape_succeeded else 0.0,
                )
            )
            result.append(
                CounterMetricFamily(
                    TOTAL_SCRAPES_METRIC_NAME,
                    TOTAL_SCRAPES_METRIC_HELP,
                    value=self._total_scrapes,
                )
            )
            return result

    # ── internals ─────────────────────────────────────────────────────────

    def _scrape(self) -> list[Metric] | None:
        """Fetch and map cost figures; ``None`` when the API call failed."""
        try:
            report = self.cost_explorer.fetch(self.aws_metric_names())
        except Exception as exc:
            APP_LOGGER.error(msg=f"Can't scrape AWS Billing data: {exc}")
            return None

        families = self._cost_families(report)
        APP_LOGGER.debug(
            msg=f"Scrape #{self._total_scrapes} exported {len(families)} cost metrics"
        )
        return families

    def _cost_families(self, report: CostReport) -> list[Metric]:
        items = report.first_bucket.total
        families: list[Metric] = []
        for definition in self.enabled_metrics:
            family = self._cost_family(definition)
            for key, item in items.items():
                if key != definition.aws_name:
                    continue
                value = _parse_amount(item.amount)
                if value is None:
                    continue
                family.add_metric([key, item.unit], value)
            if family.samples:
                families.append(family)
        return families

    @staticmethod
    def _cost_family(definition: MetricDefinition) -> GaugeMetricFamily:
        return GaugeMetricFamily(
            definition.exposed_name,
            definition.help_text,
            labels=list(definition.label_names),
        )


def _parse_amount(amount: Any) -> float | None:
    try:
        return float(amount)
    except (TypeError, ValueError):
        return None
