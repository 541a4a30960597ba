# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for formscrub."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .runtime import meter

logger = logging.getLogger(__name__)

sanitize_total = meter.create_counter(
    name="formscrub.sanitize.total",
    description="Counts sanitize calls, partitioned by the source of the applied rule.",
    unit="1",
)

sanitize_removed_chars_total = meter.create_counter(
    name="formscrub.sanitize.removed_chars.total",
    description="Counts characters stripped from input values.",
    unit="1",
)

sanitize_fallback_total = meter.create_counter(
    name="formscrub.sanitize.fallback.total",
    description="Counts sanitize calls that fell back from the requested rule, partitioned by reason.",
    unit="1",
)

presets_merge_total = meter.create_counter(
    name="formscrub.presets.merge.total",
    description="Counts preset merge attempts, partitioned by outcome.",
    unit="1",
)


def _safe_add(counter, amount: int, attributes: Optional[Mapping[str, str]] = None) -> None:
    try:
        counter.add(amount, attributes or {})
    except Exception:  # noqa: BLE001
        # Telemetry must never interfere with input handling
        logger.debug("Failed to record metric", exc_info=True)


def record_sanitize(source: str, removed_count: int, fallback_reason: Optional[str] = None) -> None:
    """Record one sanitize call.

    Args:
        source: Where the applied rule came from ("custom", "preset", "default", "identity")
        removed_count: Number of characters removed
        fallback_reason: Why the requested rule was not used, if it was not
    """
    _safe_add(sanitize_total, 1, {"source": source})
    if removed_count:
        _safe_add(sanitize_removed_chars_total, removed_count, {"source": source})
    if fallback_reason:
        _safe_add(sanitize_fallback_total, 1, {"reason": fallback_reason})


def record_merge(status: str) -> None:
    _safe_add(presets_merge_total, 1, {"status": status})


__all__ = [
    "sanitize_total",
    "sanitize_removed_chars_total",
    "sanitize_fallback_total",
    "presets_merge_total",
    "record_sanitize",
    "record_merge",
]
