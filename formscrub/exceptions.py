# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for formscrub.

Only configuration-time code raises these. The per-keystroke entry points
(``sanitize``, ``set_presets``) convert them into warnings instead.
"""

from __future__ import annotations

from typing import Optional


class FormScrubError(Exception):
    """Base class for all formscrub errors."""


class ConfigurationError(FormScrubError, ValueError):
    """Raised when a rule, character set or preset file is malformed."""

    def __init__(self, message: str, *, preset: Optional[str] = None):
        self.preset = preset
        if preset is not None:
            message = f"Preset '{preset}': {message}"
        super().__init__(message)
        self.message = message


__all__ = ["FormScrubError", "ConfigurationError"]
