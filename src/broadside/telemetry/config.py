"""Telemetry configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict

from opentelemetry.sdk.resources import Resource
from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class TelemetryConfig(BaseModel):
    """Which telemetry signals to export and where."""

    enable_tracing: bool = False
    enable_metrics: bool = False
    export_logs: bool = False
    log_level: str = "WARNING"
    otlp_endpoint: str | None = None
    service_name: str = "broadside"
    resource_attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, **overrides: Any) -> "TelemetryConfig":
        """Build config from `BROADSIDE_*` and the standard `OTEL_*` variables."""

        data: Dict[str, Any] = {}
        flags = {
            "enable_tracing": "BROADSIDE_TRACING",
            "enable_metrics": "BROADSIDE_METRICS",
            "export_logs": "BROADSIDE_OTLP_LOGS",
        }
        for field, env_name in flags.items():
            value = os.getenv(env_name)
            if value is not None:
                data[field] = value.strip().lower() in _TRUTHY

        level = os.getenv("BROADSIDE_LOG_LEVEL")
        if level:
            data["log_level"] = level
        endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        if endpoint:
            data["otlp_endpoint"] = endpoint.rstrip("/")
        service_name = os.getenv("OTEL_SERVICE_NAME")
        if service_name:
            data["service_name"] = service_name

        resource_env = os.getenv("OTEL_RESOURCE_ATTRIBUTES")
        if resource_env:
            attrs: dict[str, str] = {}
            for part in resource_env.split(","):
                if "=" not in part:
                    continue
                key, value = part.split("=", 1)
                attrs[key.strip()] = value.strip()
            data["resource_attributes"] = attrs

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)

    def resource(self) -> Resource:
        attributes = {"service.name": self.service_name}
        attributes.update(self.resource_attributes)
        return Resource.create(attributes)


@lru_cache(maxsize=1)
def load_telemetry_config() -> TelemetryConfig:
    """Load and cache telemetry config from the environment."""

    return TelemetryConfig.from_env()


def init_telemetry(config: TelemetryConfig | None = None) -> TelemetryConfig:
    """Configure logging always; tracing and metrics only when enabled."""

    from .logger import configure_logging
    from .metrics import init_metrics
    from .tracer import init_tracing

    resolved = config or load_telemetry_config()

    configure_logging(resolved)
    if resolved.enable_tracing:
        init_tracing(resolved)
    if resolved.enable_metrics:
        init_metrics(resolved)
    return resolved
