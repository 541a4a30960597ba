"""Telemetry package - OpenTelemetry metrics for sanitization."""

from .metrics import (
    presets_merge_total,
    record_merge,
    record_sanitize,
    sanitize_fallback_total,
    sanitize_removed_chars_total,
    sanitize_total,
)
from .runtime import METER_NAME, meter

__all__ = [
    "METER_NAME",
    "meter",
    "presets_merge_total",
    "record_merge",
    "record_sanitize",
    "sanitize_fallback_total",
    "sanitize_removed_chars_total",
    "sanitize_total",
]
