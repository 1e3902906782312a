from pathlib import Path

import pytest

from wordls.config import ConfigError, ServerConfig, find_config


def write(tmp_path: Path, content: str, name: str = ".wordls.yml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    config = ServerConfig()

    assert config.extra_keywords == []
    assert config.keyword_weight == 11
    assert config.evict_on_close is False
    assert config.trigger_characters == [".", ":"]


def test_load(tmp_path):
    path = write(
        tmp_path,
        "extra_keywords: [self, cls]\n"
        "keyword_weight: 5\n"
        "evict_on_close: true\n",
    )

    config = ServerConfig.load(path)

    assert config.extra_keywords == ["self", "cls"]
    assert config.keyword_weight == 5
    assert config.evict_on_close is True
    assert config.trigger_characters == [".", ":"]


def test_empty_file_gives_defaults(tmp_path):
    assert ServerConfig.load(write(tmp_path, "")) == ServerConfig()


def test_unknown_key(tmp_path):
    with pytest.raises(ConfigError, match="colour"):
        ServerConfig.load(write(tmp_path, "colour: blue\n"))


@pytest.mark.parametrize(
    "content, key",
    [
        ("extra_keywords: self\n", "extra_keywords"),
        ("trigger_characters: [1, 2]\n", "trigger_characters"),
        ("keyword_weight: heavy\n", "keyword_weight"),
        ("keyword_weight: true\n", "keyword_weight"),
        ("evict_on_close: sometimes\n", "evict_on_close"),
    ],
)
def test_wrong_types(tmp_path, content, key):
    with pytest.raises(ConfigError, match=key):
        ServerConfig.load(write(tmp_path, content))


def test_not_a_mapping(tmp_path):
    with pytest.raises(ConfigError, match="mapping"):
        ServerConfig.load(write(tmp_path, "- a\n- b\n"))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigError, match="Invalid YAML"):
        ServerConfig.load(write(tmp_path, "extra_keywords: [unclosed\n"))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        ServerConfig.load(tmp_path / "nope.yml")


def test_find_config_explicit_path(tmp_path):
    path = write(tmp_path, "keyword_weight: 3\n", name="custom.yml")

    assert find_config(path).keyword_weight == 3


def test_find_config_in_search_dir(tmp_path):
    write(tmp_path, "keyword_weight: 4\n")

    assert find_config(search_dir=tmp_path).keyword_weight == 4


def test_find_config_without_file(tmp_path):
    assert find_config(search_dir=tmp_path) == ServerConfig()
