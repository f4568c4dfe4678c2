"""Tests for settings models and YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from volmcp.config import ConfigValidationError, ServerSettings, SettingsLoader, load_settings


class TestServerSettings:
    def test_defaults(self) -> None:
        settings = ServerSettings()
        assert settings.name == "computer-volume-control-mcp"
        assert settings.version == "1.0.0"
        assert settings.volume_step == 10
        assert settings.backend.kind == "auto"
        assert settings.telemetry.enabled is False


class TestSettingsLoader:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "volmcp.yaml"
        path.write_text(
            "volume_step: 5\n"
            "log_level: DEBUG\n"
            "backend:\n"
            "  kind: amixer\n"
            "  amixer_control: PCM\n"
        )
        settings = SettingsLoader(path).load()
        assert settings.volume_step == 5
        assert settings.log_level == "DEBUG"
        assert settings.backend.kind == "amixer"
        assert settings.backend.amixer_control == "PCM"

    def test_env_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLMCP_DEVICE", "hw:1")
        path = tmp_path / "volmcp.yaml"
        path.write_text("backend:\n  amixer_device: ${VOLMCP_DEVICE}\n")
        assert SettingsLoader(path).load().backend.amixer_device == "hw:1"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert SettingsLoader(path).load() == ServerSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError, match="Cannot read"):
            SettingsLoader(tmp_path / "nope.yaml").load()

    def test_bad_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("backend: [unclosed\n")
        with pytest.raises(ConfigValidationError, match="YAML parse error"):
            SettingsLoader(path).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigValidationError, match="mapping"):
            SettingsLoader(path).load()

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "step.yaml"
        path.write_text("volume_step: 0\n")
        with pytest.raises(ConfigValidationError, match="volume_step"):
            SettingsLoader(path).load()


class TestLoadSettings:
    def test_no_file_no_overrides(self) -> None:
        assert load_settings() == ServerSettings()

    def test_overrides_win_over_file(self, tmp_path: Path) -> None:
        path = tmp_path / "volmcp.yaml"
        path.write_text("volume_step: 5\nbackend:\n  kind: amixer\n  timeout: 2\n")
        settings = load_settings(path, backend="memory", step=20, log_level="debug", telemetry=True)
        assert settings.volume_step == 20
        assert settings.backend.kind == "memory"
        assert settings.backend.timeout == 2
        assert settings.log_level == "DEBUG"
        assert settings.telemetry.enabled is True

    def test_invalid_override(self) -> None:
        with pytest.raises(ConfigValidationError):
            load_settings(step=500)
