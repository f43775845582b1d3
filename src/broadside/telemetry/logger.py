"""Logging setup with optional OpenTelemetry export."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from .config import TelemetryConfig

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s "
    "| trace_id=%(otelTraceID)s span_id=%(otelSpanID)s"
)

_CONSOLE_HANDLER: logging.Handler | None = None
_OTLP_HANDLER: logging.Handler | None = None


class _OtelContextFilter(logging.Filter):
    """Stamps the current trace/span ids onto each record, or "-" outside a span."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = trace.get_current_span().get_span_context()
        if context.is_valid:
            record.otelTraceID = format(context.trace_id, "032x")
            record.otelSpanID = format(context.span_id, "016x")
        else:
            record.otelTraceID = "-"
            record.otelSpanID = "-"
        return True


def configure_logging(config: TelemetryConfig) -> logging.Logger:
    """Attach a console handler to the package logger and set its level."""
    global _CONSOLE_HANDLER

    logger = logging.getLogger("broadside")
    logger.setLevel(config.log_level)

    if _CONSOLE_HANDLER is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(_OtelContextFilter())
        logger.addHandler(handler)
        _CONSOLE_HANDLER = handler

    if config.export_logs:
        _install_otlp_handler(logger, config)
    return logger


def _install_otlp_handler(logger: logging.Logger, config: TelemetryConfig) -> None:
    """Forward package log records to an OTLP collector once."""
    global _OTLP_HANDLER
    if _OTLP_HANDLER is not None:
        return

    from opentelemetry._logs import set_logger_provider
    from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
    from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
    from opentelemetry.sdk._logs.export import BatchLogRecordProcessor

    provider = LoggerProvider(resource=config.resource())
    endpoint = config.otlp_endpoint
    if endpoint:
        provider.add_log_record_processor(
            BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint, insecure=True))
        )
    set_logger_provider(provider)

    handler = LoggingHandler(level=logging.DEBUG, logger_provider=provider)
    logger.addHandler(handler)
    _OTLP_HANDLER = handler
