# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for loading presets from YAML files.

Bad preset files must be rejected at startup with a message naming the
preset, NOT silently ignored until the first keystroke.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from formscrub import (
    PRESETS_FILE_ENV,
    ConfigurationError,
    PresetRegistry,
    RuleKind,
    configure_presets,
    get_preset_registry,
    load_presets_file,
    sanitize,
)


def _write(tmp_path: Path, data, name: str = "presets.yaml") -> Path:
    path = tmp_path / name
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    else:
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_load_presets_file_with_presets_key(tmp_path):
    path = _write(
        tmp_path,
        {
            "presets": {
                "price": {"allow": "0-9.,"},
                "handle": {"allow": "a-z0-9_"},
                "plain": {"block": "<>"},
            }
        },
    )

    presets = load_presets_file(path)

    assert set(presets) == {"price", "handle", "plain"}
    assert presets["price"].kind is RuleKind.WHITELIST
    assert presets["plain"].kind is RuleKind.BLACKLIST
    assert presets["price"].apply("$1,299.00") == "1,299.00"


def test_load_presets_file_top_level_mapping(tmp_path):
    path = _write(tmp_path, "zip: '0-9'\ncode: {allow: 'A-Z0-9\\-'}\n")

    presets = load_presets_file(str(path))

    assert presets["zip"].apply("12a34") == "1234"
    assert presets["code"].apply("ab-CD-12") == "-CD-12"


@pytest.mark.parametrize("content", ["", "presets:\n", "# only a comment\n"])
def test_empty_documents_load_nothing(tmp_path, content):
    assert load_presets_file(_write(tmp_path, content)) == {}


@pytest.mark.parametrize(
    ("content", "needle"),
    [
        ("presets: [1, 2]\n", "must be a mapping"),
        ("- a\n- b\n", "must contain a mapping"),
        ("presets: {bad: {allow: 'z-a'}}\n", "Preset 'bad'"),
        ("presets: {bad: {allow: '[x'}}\n", "Preset 'bad'"),
        ("presets: {bad: 12}\n", "Preset 'bad'"),
        ("presets: {bad: {allow: [[a]]}}\n", "Preset 'bad'"),
        ("presets: {bad: {allow: 'a', block: 'b'}}\n", "Preset 'bad'"),
        ("presets: {1: 'a-z'}\n", "non-empty strings"),
        ("presets: {x: [unclosed\n", "Invalid YAML"),
    ],
)
def test_invalid_files_raise_configuration_error(tmp_path, content, needle):
    path = _write(tmp_path, content)

    with pytest.raises(ConfigurationError) as exc_info:
        load_presets_file(path)

    assert needle in str(exc_info.value)


def test_missing_file_raises_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read preset file"):
        load_presets_file(tmp_path / "missing.yaml")


def test_configure_presets_from_explicit_path(tmp_path, presets_env):
    path = _write(tmp_path, {"presets": {"number": {"allow": "0-9.,"}}})

    result = configure_presets(path)

    assert result.applied is True
    assert result.names == ("number",)
    assert sanitize("12,345.67abc", "number").safe_value == "12,345.67"


def test_configure_presets_from_environment(tmp_path, presets_env, caplog):
    path = _write(tmp_path, {"presets": {"sku": "A-Z0-9"}})
    presets_env.setenv(PRESETS_FILE_ENV, str(path))

    with caplog.at_level(logging.INFO, logger="formscrub.presets"):
        result = configure_presets()

    assert result.applied is True
    assert "sku" in get_preset_registry()
    assert any("Loaded 1 preset(s)" in message for message in caplog.messages)


def test_configure_presets_without_file_is_a_no_op(presets_env):
    assert configure_presets() is None
    assert "sku" not in get_preset_registry()


def test_configure_presets_into_explicit_registry(tmp_path, presets_env):
    registry = PresetRegistry()
    path = _write(tmp_path, {"presets": {"sku": "A-Z0-9"}})

    configure_presets(path, registry=registry)

    assert "sku" in registry
    assert "sku" not in get_preset_registry()


def test_configure_presets_bad_file_leaves_registry_unchanged(tmp_path, presets_env):
    before = dict(get_preset_registry().snapshot())
    path = _write(tmp_path, "presets: {good: 'a-z', bad: 'z-a'}\n")

    with pytest.raises(ConfigurationError):
        configure_presets(path)

    assert dict(get_preset_registry().snapshot()) == before
