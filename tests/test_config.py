"""Unit tests for configuration loading."""

import pytest
from pydantic import ValidationError

import gistup.config as config_module
from gistup.config import DEFAULT_API_URL, ApiConfig, RunConfig, load_api_config
from gistup.errors import ConfigError


class TestLoadApiConfig:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
        api = load_api_config()
        assert api.url == DEFAULT_API_URL
        assert api.timeout == 30.0

    def test_reads_default_location(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("timeout: 5\n", encoding="utf-8")
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", path)
        assert load_api_config().timeout == 5.0

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "gist.yaml"
        path.write_text("url: https://ghe.example/api/v3/gists\ntimeout: 12.5\n", encoding="utf-8")
        api = load_api_config(path)
        assert api == ApiConfig(url="https://ghe.example/api/v3/gists", timeout=12.5)

    def test_expands_env_vars_in_url(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GHE_HOST", "ghe.example")
        path = tmp_path / "gist.yaml"
        path.write_text("url: https://$GHE_HOST/api/v3/gists\n", encoding="utf-8")
        assert load_api_config(path).url == "https://ghe.example/api/v3/gists"

    def test_empty_file_means_defaults(self, tmp_path):
        path = tmp_path / "gist.yaml"
        path.write_text("", encoding="utf-8")
        assert load_api_config(path) == ApiConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_api_config(tmp_path / "nope.yaml")

    @pytest.mark.parametrize(
        "text",
        ["timeout: [unclosed\n", "- just\n- a list\n", "timeout: -1\n", "retries: 3\n"],
    )
    def test_invalid_file(self, tmp_path, text):
        path = tmp_path / "gist.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_api_config(path)


class TestRunConfig:
    def test_is_immutable(self):
        config = RunConfig(public=True, token="tok")
        with pytest.raises(ValidationError):
            config.token = "other"

    def test_none_values_become_empty(self):
        config = RunConfig(public=False, token=None, names=None, description=None)
        assert (config.token, config.names, config.description) == ("", "", "")

    def test_files_are_a_tuple(self):
        config = RunConfig(public=True, files=["a.txt", "b.txt"])
        assert config.files == ("a.txt", "b.txt")
