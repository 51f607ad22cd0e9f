"""Shared pytest fixtures used across all test modules."""

import os
from unittest.mock import MagicMock

import pytest

from factories import ALL_COSTS, make_response

# Ensure required env vars are set for test imports
os.environ.setdefault("DEBUG_MODE", "True")
os.environ.setdefault("LISTEN_ADDRESS", ":9614")
os.environ.setdefault("METRICS_PATH", "/metrics")
os.environ.setdefault("AWS_BILLING_METRICS", "")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
# Dummy credentials so botocore never walks the real credential chain
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

@pytest.fixture
def ce_client():
    """A boto3-like Cost Explorer client returning every catalog metric."""
    client = MagicMock()
    client.get_cost_and_usage.return_value = make_response(ALL_COSTS)
    return client
