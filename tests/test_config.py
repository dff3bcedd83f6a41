"""Unit tests for Config (apiscaffold.config).

Tests cover:
- Defaults and derived project_root
- save/load round trip
- from_env
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from apiscaffold.config import Config


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.project_name == ""
        assert config.quiet is False

    @pytest.mark.unit
    def test_output_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert Config().output_dir == tmp_path

    @pytest.mark.unit
    def test_project_root(self, tmp_path: Path):
        config = Config(project_name="mytiffin", output_dir=tmp_path)
        assert config.project_root == tmp_path / "mytiffin"

    @pytest.mark.unit
    def test_output_dir_coerced_to_path(self):
        config = Config(output_dir="some/dir")
        assert isinstance(config.output_dir, Path)

    @pytest.mark.unit
    def test_quiet_must_be_boolean_like(self):
        with pytest.raises(ValidationError):
            Config(quiet="sometimes")


class TestConfigSerialisation:
    @pytest.mark.unit
    def test_save_creates_parent(self, tmp_path: Path):
        target = tmp_path / "nested" / "config.json"
        written = Config(project_name="demo", output_dir=tmp_path).save(target)
        assert written == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["project_name"] == "demo"

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path):
        original = Config(project_name="demo", output_dir=tmp_path / "out", quiet=True)
        path = original.save(tmp_path / "config.json")
        loaded = Config.load(path)
        assert loaded == original


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_no_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict("os.environ", {}, clear=True):
            config = Config.from_env()
        assert config.output_dir == tmp_path
        assert config.quiet is False

    @pytest.mark.unit
    def test_output_dir_from_env(self, tmp_path: Path):
        with patch.dict("os.environ", {"APISCAFFOLD_OUTPUT_DIR": str(tmp_path)}, clear=True):
            config = Config.from_env()
        assert config.output_dir == tmp_path

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("Yes", True), ("0", False), ("no", False)])
    def test_quiet_from_env(self, value: str, expected: bool):
        with patch.dict("os.environ", {"APISCAFFOLD_QUIET": value}, clear=True):
            config = Config.from_env()
        assert config.quiet is expected
