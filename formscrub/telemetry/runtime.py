# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter shared by every formscrub instrument.

Only the API package is required. Without a configured MeterProvider the
instruments are no-ops; applications opt in by installing the SDK and
calling ``opentelemetry.metrics.set_meter_provider`` at startup.
"""

from __future__ import annotations

from opentelemetry import metrics

METER_NAME = "formscrub"

meter = metrics.get_meter(METER_NAME)

__all__ = ["METER_NAME", "meter"]
