"""Unit tests for runtime settings."""

from pathlib import Path

import pytest

from design_smells.config.defaults import (
    API_KEY_ENV,
    COMPONENTS_DIR_ENV,
    PREDICTION_URL_ENV,
    RESULTS_DIR_ENV,
    get_language_from_extension,
)
from design_smells.config.settings import Settings
from design_smells.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (PREDICTION_URL_ENV, API_KEY_ENV, RESULTS_DIR_ENV, COMPONENTS_DIR_ENV):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test settings resolution."""

    def test_project_defaults(self, tmp_path: Path):
        settings = Settings.for_project(tmp_path)
        assert settings.components_dir == tmp_path / ".design-smells" / "components"
        assert settings.results_dir == tmp_path / ".design-smells" / "results"
        assert settings.thresholds_path == tmp_path / ".design-smells" / "thresholds.yaml"
        assert settings.prediction_url is None

    def test_environment_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(PREDICTION_URL_ENV, "http://predict.local")
        monkeypatch.setenv(API_KEY_ENV, "secret")
        monkeypatch.setenv(RESULTS_DIR_ENV, str(tmp_path / "out"))

        settings = Settings.for_project(tmp_path)
        assert settings.prediction_url == "http://predict.local"
        assert settings.api_key == "secret"
        assert settings.results_dir == tmp_path / "out"

    def test_load_yaml_relative_paths(self, tmp_path: Path):
        """Test relative paths resolve against the project root."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "components_dir: extracted\nprediction_url: http://x\ntimeout: 5\n"
        )

        settings = Settings.load(path, project_root=tmp_path)
        assert settings.components_dir == tmp_path / "extracted"
        assert settings.prediction_url == "http://x"
        assert settings.timeout == 5.0

    def test_missing_file(self, tmp_path: Path):
        settings = Settings.load(tmp_path / "absent.yaml", project_root=tmp_path)
        assert settings == Settings.for_project(tmp_path)

    def test_unknown_keys(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_dict({"colour": "red"}, tmp_path)
        assert exc_info.value.context["unknown"] == ["colour"]

    def test_null_timeout(self, tmp_path: Path):
        """Test an empty timeout value is a configuration error."""
        with pytest.raises(ConfigError, match="Invalid timeout"):
            Settings.from_dict({"timeout": None}, tmp_path)

    def test_text_timeout(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_dict({"timeout": "soon"}, tmp_path)
        assert exc_info.value.context["timeout"] == "soon"

    def test_numeric_text_timeout(self, tmp_path: Path):
        assert Settings.from_dict({"timeout": "2.5"}, tmp_path).timeout == 2.5

    def test_unreadable_file(self, tmp_path: Path):
        """Test a settings path that cannot be opened raises ConfigError."""
        path = tmp_path / "settings.yaml"
        path.mkdir()
        with pytest.raises(ConfigError, match="Cannot read settings file"):
            Settings.load(path, project_root=tmp_path)

    def test_load_thresholds(self, tmp_path: Path):
        settings = Settings.for_project(tmp_path)
        settings.thresholds_path.parent.mkdir(parents=True)
        settings.thresholds_path.write_text("highlight:\n  god_class_wmc: 25\n")
        assert settings.load_thresholds().highlight.god_class_wmc == 25


class TestLanguageMapping:
    def test_known_extensions(self):
        assert get_language_from_extension(".java") == "java"
        assert get_language_from_extension(".PY") == "python"

    def test_unknown_defaults_to_java(self):
        assert get_language_from_extension(".kt") == "java"
