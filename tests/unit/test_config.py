"""Unit tests for config.py"""

import pytest

from sitecontent.config import Settings, load_config
from sitecontent.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory with no SITECONTENT_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"SITECONTENT_{name.upper()}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no sitecontent.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.content_dir == "src/content"
    assert settings.blog_pattern == "blog/*.{mdx,md}"
    assert settings.dev_mode is False
    assert settings.site_url is None


def test_load_config_reads_yaml(tmp_path):
    """Values in sitecontent.yaml are applied."""
    (tmp_path / "sitecontent.yaml").write_text("site_url: https://yaml.example\ncontent_dir: content\n")
    settings = load_config()
    assert settings.site_url == "https://yaml.example"
    assert settings.content_dir == "content"


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """SITECONTENT_SITE_URL takes precedence over sitecontent.yaml."""
    (tmp_path / "sitecontent.yaml").write_text("site_url: https://yaml.example\n")
    monkeypatch.setenv("SITECONTENT_SITE_URL", "https://env.example")
    assert load_config().site_url == "https://env.example"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None override beats the environment variable."""
    monkeypatch.setenv("SITECONTENT_SITE_URL", "https://env.example")
    settings = load_config(overrides={"site_url": "https://cli.example"})
    assert settings.site_url == "https://cli.example"


def test_load_config_none_override_ignored(monkeypatch):
    """None overrides leave lower-precedence values in place."""
    monkeypatch.setenv("SITECONTENT_CONTENT_DIR", "from-env")
    assert load_config(overrides={"content_dir": None}).content_dir == "from-env"


@pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("false", False), ("0", False)])
def test_load_config_env_dev_mode_coerced(monkeypatch, raw, expected):
    """SITECONTENT_DEV_MODE is coerced to bool."""
    monkeypatch.setenv("SITECONTENT_DEV_MODE", raw)
    assert load_config().dev_mode is expected


def test_load_config_invalid_yaml(tmp_path):
    """Invalid YAML in sitecontent.yaml raises ConfigError (a ValueError)."""
    (tmp_path / "sitecontent.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid sitecontent.yaml"):
        load_config()


def test_load_config_invalid_on_error_policy(monkeypatch):
    """on_error accepts only 'raise' or 'skip'."""
    monkeypatch.setenv("SITECONTENT_ON_ERROR", "ignore")
    with pytest.raises(ConfigError):
        load_config()


def test_require_site_url_strips_trailing_slash():
    assert Settings(site_url="https://example.com/").require_site_url() == "https://example.com"


def test_require_site_url_missing():
    """A missing site_url is a ConfigError, never an implicit global."""
    with pytest.raises(ConfigError, match="site_url"):
        Settings().require_site_url()
