# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for configuration normalization and rule resolution."""

from __future__ import annotations

import pytest

from formscrub import (
    DEFAULT,
    ByCustomWhitelist,
    ByPresetName,
    CharSet,
    Default,
    PresetRegistry,
    Sanitizer,
    normalize_config,
)


@pytest.mark.parametrize(
    ("config", "expected"),
    [
        (None, DEFAULT),
        ("number", ByPresetName("number")),
        ("", ByPresetName("")),
        ({"type": "email"}, ByPresetName("email")),
        ({"allow": "0-9"}, ByCustomWhitelist("0-9")),
        ({"allow": "0-9", "type": "email"}, ByCustomWhitelist("0-9")),
        ({"allow": "", "type": "email"}, ByPresetName("email")),
        ({"allow": None, "type": None}, DEFAULT),
        ({}, DEFAULT),
        ({"other": "x"}, DEFAULT),
        (42, DEFAULT),
        (["number"], DEFAULT),
    ],
)
def test_normalize_config(config, expected):
    assert normalize_config(config) == expected


@pytest.mark.parametrize(
    "config",
    [ByPresetName("url"), ByCustomWhitelist(CharSet(chars="a")), Default()],
)
def test_variants_pass_through_unchanged(config):
    assert normalize_config(config) is config


def test_default_singleton_equals_new_instances():
    assert DEFAULT == Default()


class TestResolution:
    """Resolution order: custom whitelist, preset, default, identity."""

    def setup_method(self):
        self.registry = PresetRegistry()
        self.sanitizer = Sanitizer(self.registry)

    def test_custom_whitelist_source(self):
        resolution = self.sanitizer.resolve(ByCustomWhitelist("a-z"))

        assert resolution.source == "custom"
        assert resolution.fallback_reason is None
        assert resolution.rule.apply("aB1") == "a"

    def test_preset_source(self):
        resolution = self.sanitizer.resolve("number")

        assert resolution.source == "preset"
        assert resolution.rule is self.registry.lookup("number")

    def test_default_source(self):
        resolution = self.sanitizer.resolve(None)

        assert resolution.source == "default"
        assert resolution.fallback_reason is None
        assert resolution.rule is self.registry.lookup("text")

    def test_unknown_preset_reason(self):
        resolution = self.sanitizer.resolve(ByPresetName("nope"))

        assert resolution.source == "default"
        assert resolution.fallback_reason == "unknown_preset"
        assert resolution.warnings == ()

    def test_invalid_allow_reason(self):
        resolution = self.sanitizer.resolve({"allow": "z-a"})

        assert resolution.source == "default"
        assert resolution.fallback_reason == "invalid_allow"
        assert len(resolution.warnings) == 1

    def test_empty_custom_whitelist_uses_default(self):
        resolution = self.sanitizer.resolve(ByCustomWhitelist(""))

        assert resolution.source == "default"
        assert resolution.warnings == ()

    def test_empty_typed_whitelist_allows_nothing(self):
        resolution = self.sanitizer.resolve(ByCustomWhitelist(CharSet()))

        assert resolution.source == "custom"
        assert resolution.rule.apply("abc") == ""

    def test_identity_when_default_missing(self):
        registry = PresetRegistry({"only": "a"}, include_builtins=False)

        resolution = Sanitizer(registry).resolve("missing")

        assert resolution.source == "identity"
        assert resolution.fallback_reason == "missing_default"
        assert resolution.rule.apply("<>") == "<>"

    def test_overridden_default_is_used(self):
        self.registry.merge({"text": {"block": "#"}})

        assert self.sanitizer.sanitize("#<a>").safe_value == "<a>"


def test_process_wide_sanitizer_uses_process_wide_registry():
    from formscrub import get_preset_registry
    from formscrub.sanitization import get_sanitizer

    assert get_sanitizer().registry is get_preset_registry()
    assert get_sanitizer() is get_sanitizer()
