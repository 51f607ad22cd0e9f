"""Manage all constants / shared resources."""

import os

from helpers.logger import AppLogger

# Generic Global Env Variables
TRUE_VALUES = ("true", "1", "yes")

EXPORTER_NAME = "aws_billing_exporter"
EXPORTER_VERSION = "1.0.0"

# Prometheus namespace shared by every exported metric
NAMESPACE = "aws_billing"

# Debug Mode / Level for the Logger
DEBUG_MODE = os.environ.get("DEBUG_MODE", default="False").lower() in TRUE_VALUES
APP_LOGGER = AppLogger(debug=DEBUG_MODE)

# Web server
LISTEN_ADDRESS = os.environ.get("LISTEN_ADDRESS", default=":9614")
METRICS_PATH = os.environ.get("METRICS_PATH", default="/metrics")

# Comma-separated catalog field numbers, empty means every metric
AWS_BILLING_METRICS = os.environ.get("AWS_BILLING_METRICS", default="")

# Optional region for the Cost Explorer client (boto3 default chain otherwise)
AWS_REGION = os.environ.get("AWS_REGION") or None

APP_CONFIG = {
    "listen_address": LISTEN_ADDRESS,
    "metrics_path": METRICS_PATH,
    "aws_billing_metrics": AWS_BILLING_METRICS or "all",
    "aws_region": AWS_REGION,
    "debug_mode": DEBUG_MODE,
}
