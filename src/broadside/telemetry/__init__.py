"""Public telemetry helpers for Broadside."""

from __future__ import annotations

from .config import TelemetryConfig, init_telemetry, load_telemetry_config
from .logger import configure_logging
from .metrics import get_meter, init_metrics
from .tracer import get_tracer, init_tracing

__all__ = [
    "TelemetryConfig",
    "configure_logging",
    "get_meter",
    "get_tracer",
    "init_metrics",
    "init_telemetry",
    "init_tracing",
    "load_telemetry_config",
]
