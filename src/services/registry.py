"""Prometheus registry served on the metrics endpoint."""

from __future__ import annotations

import platform

from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    Info,
    PlatformCollector,
    ProcessCollector,
)

from helpers.constants import EXPORTER_NAME, EXPORTER_VERSION
from services.billing_collector import AwsBillingCollector


def build_registry(
    collector: AwsBillingCollector, include_runtime: bool = True
) -> CollectorRegistry:
    """Create a registry holding the billing collector and build info.

    ``include_runtime`` adds the process / platform / GC collectors that the
    default prometheus_client registry would carry.
    """
    registry = CollectorRegistry()
    registry.register(collector)

    build_info = Info(
        f"{EXPORTER_NAME}_build",
        "A metric with a constant '1' value labeled by version and python version "
        f"from which {EXPORTER_NAME} was built.",
        registry=registry,
    )
    build_info.info(
        {"version": EXPORTER_VERSION, "pythonversion": platform.python_version()}
    )

    if include_runtime:
        ProcessCollector(registry=registry)
        PlatformCollector(registry=registry)
        GCCollector(registry=registry)
    return registry

