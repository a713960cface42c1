"""Tests for configuration system."""

import pytest
import yaml

from envfixture.config import Config, validate_const_name, validate_indent
from envfixture.selector import DEFAULT_KEYS


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run with an empty home and working directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home, work


def test_default_config(isolated):
    """Test that default configuration is loaded correctly."""
    config = Config()

    resolved = config.resolve()
    assert resolved["const_name"] == "FIXTURE"
    assert resolved["indent"] == 4
    assert resolved["default_keys"] == list(DEFAULT_KEYS)


def test_config_layering(isolated, tmp_path):
    """Test configuration layering with user, project and explicit configs."""
    home, work = isolated

    user_config = {
        "fixture": {"const_name": "USER", "indent": 2},
        "default_keys": ["A", "B"],
    }
    with open(home / ".envfixture.yaml", "w") as f:
        yaml.dump(user_config, f)

    project_config = {"fixture": {"const_name": "PROJECT"}}
    with open(work / "envfixture.yaml", "w") as f:
        yaml.dump(project_config, f)

    config = Config()
    resolved = config.resolve()

    assert resolved["const_name"] == "PROJECT"  # from project config
    assert resolved["indent"] == 2  # from user config
    assert resolved["default_keys"] == ["A", "B"]  # from user config

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("default_keys: [C]\n", encoding="utf-8")

    resolved = Config(explicit).resolve()
    assert resolved["const_name"] == "PROJECT"
    assert resolved["default_keys"] == ["C"]


def test_resolve_with_overrides(isolated):
    """Test configuration resolution with overrides."""
    config = Config()

    resolved = config.resolve(const_name="EDGE_CASES", indent=None)

    assert resolved["const_name"] == "EDGE_CASES"
    assert resolved["indent"] == 4  # None keeps the configured value


def test_resolve_rejects_bad_overrides(isolated):
    config = Config()

    with pytest.raises(ValueError, match="Invalid constant name"):
        config.resolve(const_name="not valid")
    with pytest.raises(ValueError, match="Invalid indent"):
        config.resolve(indent=-1)


def test_missing_explicit_config(isolated, tmp_path):
    with pytest.raises(ValueError, match="Config file not found"):
        Config(tmp_path / "nope.yaml")


def test_malformed_config(isolated):
    _, work = isolated
    (work / "envfixture.yaml").write_text("fixture: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed config file"):
        Config()


@pytest.mark.parametrize(
    "content,message",
    [
        ("- just\n- a list\n", "must contain a mapping"),
        ("fixture: nope\n", "'fixture' must be a mapping"),
        ("default_keys: VAR1\n", "'default_keys' must be a list"),
        ("default_keys: [1, 2]\n", "'default_keys' must be a list"),
        ("fixture:\n  const_name: 1ABC\n", "Invalid constant name"),
        ("fixture:\n  indent: yes\n", "Invalid indent"),
    ],
)
def test_invalid_config_values(isolated, content, message):
    _, work = isolated
    (work / "envfixture.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        Config()


def test_validators():
    assert validate_const_name("FIXTURE") == "FIXTURE"
    assert validate_const_name("_edge_2") == "_edge_2"
    assert validate_indent(0) == 0

    with pytest.raises(ValueError):
        validate_const_name("")
    with pytest.raises(ValueError):
        validate_indent(True)
