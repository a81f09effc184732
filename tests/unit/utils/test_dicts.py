from __future__ import annotations

from collections.abc import Mapping

from keepsake.utils.dicts import deep_merge


def test_deep_merge_merges_nested_mappings() -> None:
    base: Mapping[str, object] = {
        "backend": "file",
        "logging": {"level": "INFO", "format": "text"},
    }
    override: Mapping[str, object] = {
        "logging": {"level": "DEBUG"},
        "auto_save_interval": 30,
    }

    merged = deep_merge(base, override)

    assert merged == {
        "backend": "file",
        "logging": {"level": "DEBUG", "format": "text"},
        "auto_save_interval": 30,
    }
    # Ensure originals are untouched
    assert base["logging"] == {"level": "INFO", "format": "text"}
    assert override["logging"] == {"level": "DEBUG"}


def test_deep_merge_replaces_lists() -> None:
    merged = deep_merge({"items": [1, 2]}, {"items": [3, 4]})
    assert merged["items"] == [3, 4]


def test_deep_merge_skips_none_values() -> None:
    merged = deep_merge({"logging": {"enabled": True}}, {"logging": None, "backend": None})
    assert merged == {"logging": {"enabled": True}}


def test_deep_merge_replaces_scalar_with_mapping() -> None:
    merged = deep_merge({"backend": "file"}, {"backend": {"kind": "registry"}})
    assert merged == {"backend": {"kind": "registry"}}
