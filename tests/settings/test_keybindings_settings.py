"""Tests for user keybinding overrides."""

from pathlib import Path

import pytest

from flightsim.settings.keybindings_settings import (
    BindingOverride,
    KeybindingsSettings,
    detect_conflicts,
)

DEFAULTS = {"yaw_left": ["q"], "yaw_right": ["e"], "brake": ["SPACE"]}


def write_overrides(directory: Path, text: str) -> KeybindingsSettings:
    """Write an override file and return settings pointing at it."""
    (directory / "keybindings.yaml").write_text(text, encoding="utf-8")
    return KeybindingsSettings(directory)


class TestLoad:
    """Test loading the override file."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file loads nothing."""
        settings = KeybindingsSettings(tmp_path)
        assert settings.load() is False
        assert not settings.has_overrides()

    def test_load_overrides(self, tmp_path: Path) -> None:
        """Test overrides are parsed in file order."""
        settings = write_overrides(
            tmp_path,
            "bindings:\n"
            "  - action: yaw_left\n"
            "    keys: [z, LEFT]\n"
            "  - action: brake\n"
            "    unbound: true\n",
        )
        assert settings.load() is True
        assert settings.has_overrides()
        assert settings.overrides == [
            BindingOverride("yaw_left", ["z", "LEFT"]),
            BindingOverride("brake", unbound=True),
        ]

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields no overrides."""
        settings = write_overrides(tmp_path, "")
        assert settings.load() is True
        assert not settings.has_overrides()

    @pytest.mark.parametrize(
        "text, message",
        [
            ("- a\n- b\n", "must contain a mapping"),
            ("bindings: {yaw_left: [z]}\n", "must be a list"),
            ("bindings:\n  - keys: [z]\n", "without action"),
            ("bindings:\n  - action: brake\n    keys: SPACE\n", "must be a list"),
        ],
    )
    def test_malformed_file(self, tmp_path: Path, text: str, message: str) -> None:
        """Test malformed override files raise ValueError."""
        settings = write_overrides(tmp_path, text)
        with pytest.raises(ValueError, match=message):
            settings.load()


class TestApply:
    """Test merging overrides over defaults."""

    def test_apply_replaces_and_unbinds(self) -> None:
        """Test overrides replace keys or clear them."""
        settings = KeybindingsSettings(Path("."))
        settings.overrides = [
            BindingOverride("yaw_left", ["z"]),
            BindingOverride("brake", unbound=True),
        ]
        merged = settings.apply_to(DEFAULTS)
        assert merged == {"yaw_left": ["z"], "yaw_right": ["e"], "brake": []}
        # Defaults are left untouched
        assert DEFAULTS["yaw_left"] == ["q"]


class TestConflicts:
    """Test conflict detection."""

    def test_no_conflicts(self) -> None:
        """Test distinct keys report nothing."""
        assert detect_conflicts(DEFAULTS) == []

    def test_conflict_is_case_insensitive(self) -> None:
        """Test the same key in different case conflicts."""
        conflicts = detect_conflicts({"yaw_left": ["q"], "reset": ["Q"]})
        assert conflicts == [{"key": "Q", "actions": ["yaw_left", "reset"]}]
