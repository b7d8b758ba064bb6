"""Tests for TOML configuration loading."""

import pytest

from shared.config import CipherConfig, GlobalConfig, PontifexConfig


def test_defaults():
    config = PontifexConfig()
    assert config.cipher.non_alpha_policy == "reject"
    assert config.cipher.group_size == 5
    assert config.cipher.default_deck is None
    assert config.global_settings.log_level == "WARNING"


def test_load_from_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        "log_level = \"DEBUG\"\n"
        "unknown_key = 1\n"
        "\n"
        "[cipher]\n"
        "non_alpha_policy = \"drop\"\n"
        "default_deck = \"deck.json\"\n"
    )
    config = PontifexConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.cipher.non_alpha_policy == "drop"
    assert config.cipher.default_deck == "deck.json"
    assert config.cipher.group_size == 5


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        PontifexConfig.load(tmp_path / "missing.toml")


def test_invalid_policy():
    with pytest.raises(ValueError, match="non_alpha_policy"):
        CipherConfig(non_alpha_policy="ignore")


def test_negative_group_size():
    with pytest.raises(ValueError):
        CipherConfig(group_size=-1)


def test_to_dict():
    data = PontifexConfig(global_settings=GlobalConfig(debug=True)).to_dict()
    assert data["global_settings"]["debug"] is True
    assert data["cipher"]["non_alpha_policy"] == "reject"

