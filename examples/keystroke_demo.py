# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Keystroke Demo: Sanitizing a Form Field and Keeping the Caret in Place.

This demo simulates a user typing into a controlled input. After every
keystroke the value is sanitized and the caret is moved back by the number
of removed characters, so it does not jump to the end of the field.

Run with:
    python examples/keystroke_demo.py
"""

import logging
import os
import tempfile

from formscrub import configure_presets, sanitize, set_presets


def simulate_typing(keystrokes, config, label):
    """Type *keystrokes* one at a time at the caret and print each step."""
    print("\n" + "=" * 70)
    print(f"FIELD: {label}  (config={config!r})")
    print("=" * 70)

    value = ""
    caret = 0
    for key in keystrokes:
        raw = value[:caret] + key + value[caret:]
        caret += len(key)

        result = sanitize(raw, config)
        value = result.safe_value
        caret = max(0, caret - result.removed_count)

        marker = value[:caret] + "|" + value[caret:]
        note = f"  removed {result.removed_count}" if result.removed_count else ""
        print(f"  typed {key!r:6} -> {marker!r}{note}")
        for warning in result.warnings:
            print(f"  warning: {warning}")


def demo_presets():
    simulate_typing(list("Hi <there> & 'you'"), None, "comment (default 'text')")
    simulate_typing(list("+1 (555) 010"), "number", "phone digits")
    simulate_typing(list("ab-123.4"), {"allow": "0-9./"}, "custom allow")


def demo_override():
    print("\nOverriding the 'number' preset to allow '.' and ','")
    set_presets({"number": {"allow": "0-9.,"}})
    simulate_typing(list("12,345.67abc"), "number", "amount")


def demo_preset_file():
    preset_yaml = """
presets:
  sku: {allow: "A-Z0-9\\\\-"}
"""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(preset_yaml)
        temp_path = f.name

    try:
        configure_presets(temp_path)
        simulate_typing(list("ab-12 CD"), "sku", "sku from preset file")
    finally:
        os.unlink(temp_path)


def demo_invalid_allow():
    print("\nAn invalid allow fragment never raises: it falls back to 'text'")
    simulate_typing(list("<a-z>"), {"allow": "a-z]"}, "broken allow")


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    demo_presets()
    demo_override()
    demo_preset_file()
    demo_invalid_allow()
    print("\nDemo Complete!")


if __name__ == "__main__":
    main()
