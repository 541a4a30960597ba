# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""formscrub - keystroke-safe input sanitization with configurable presets.

.. code-block:: python

    import formscrub

    # Optional, once at startup
    formscrub.set_presets({"number": {"allow": "0-9.,"}})

    result = formscrub.sanitize("12,345.67abc", "number")
    result.safe_value     # '12,345.67'
    result.removed_count  # 3, use it to move the caret back
"""

from .exceptions import ConfigurationError, FormScrubError
from .presets import (
    BUILTIN_PRESETS,
    DEFAULT_PRESET,
    PRESETS_FILE_ENV,
    MergeResult,
    PresetRegistry,
    configure_presets,
    get_preset_registry,
    load_presets_file,
    reset_preset_registry,
    set_presets,
)
from .rules import CharSet, Rule, RuleKind
from .sanitization import (
    DEFAULT,
    ByCustomWhitelist,
    ByPresetName,
    Default,
    LengthUnit,
    SanitizeResult,
    Sanitizer,
    normalize_config,
    sanitize,
)

__version__ = "1.0.0"

__all__ = [
    "BUILTIN_PRESETS",
    "ByCustomWhitelist",
    "ByPresetName",
    "CharSet",
    "ConfigurationError",
    "DEFAULT",
    "DEFAULT_PRESET",
    "Default",
    "FormScrubError",
    "LengthUnit",
    "MergeResult",
    "PRESETS_FILE_ENV",
    "PresetRegistry",
    "Rule",
    "RuleKind",
    "SanitizeResult",
    "Sanitizer",
    "configure_presets",
    "get_preset_registry",
    "load_presets_file",
    "normalize_config",
    "reset_preset_registry",
    "sanitize",
    "set_presets",
]
