"""Unit tests for settings loading."""

import yaml

from jsontree.config import LEVEL_HEIGHT, LEVEL_WIDTH, Settings, load_settings


class TestLoadSettings:
    def test_defaults_when_missing(self, tmp_path):
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings == Settings()
        assert settings.layout.spacing == LEVEL_WIDTH
        assert settings.layout.row_height == LEVEL_HEIGHT
        assert settings.theme == "light"

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"layout": {"spacing": 200, "row_height": 80}, "theme": "dark"}))

        settings = load_settings(path)

        assert settings.layout.spacing == 200
        assert settings.layout.row_height == 80
        assert settings.theme == "dark"

    def test_partial_layout(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"layout": {"spacing": 50}}))
        settings = load_settings(path)
        assert settings.layout.spacing == 50
        assert settings.layout.row_height == LEVEL_HEIGHT

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"layout": {"spacing": 200}, "theme": "light"}))
        monkeypatch.setenv("JSONTREE_LEVEL_WIDTH", "250")
        monkeypatch.setenv("JSONTREE_THEME", "dark")

        settings = load_settings(path)

        assert settings.layout.spacing == 250
        assert settings.theme == "dark"

    def test_invalid_values_fall_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"layout": {"spacing": -5}, "theme": "neon"}))
        assert load_settings(path) == Settings()

    def test_malformed_yaml_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("layout: [unclosed")
        assert load_settings(path) == Settings()

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        assert load_settings(path) == Settings()

    def test_default_location(self, tmp_path, monkeypatch):
        (tmp_path / ".jsontree").mkdir()
        (tmp_path / ".jsontree" / "config.yaml").write_text(yaml.dump({"theme": "dark"}))
        monkeypatch.chdir(tmp_path)
        assert load_settings().theme == "dark"
