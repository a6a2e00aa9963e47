import json

import pytest

from loganizer.config import ConfigError, LogConfig, load_config


def _write(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_valid_config(tmp_path):
    entries = [
        {"id": "web", "path": "/var/log/web.log", "type": "nginx"},
        {"id": "db", "path": "/var/log/db.log", "type": "mysql"},
    ]
    configs = load_config(_write(tmp_path, json.dumps(entries)))
    assert configs == [
        LogConfig(id="web", path="/var/log/web.log", type="nginx"),
        LogConfig(id="db", path="/var/log/db.log", type="mysql"),
    ]


def test_missing_fields_are_empty(tmp_path):
    configs = load_config(_write(tmp_path, '[{"id": "only"}]'))
    assert configs == [LogConfig(id="only", path="", type="")]


def test_unknown_keys_ignored_and_case_insensitive(tmp_path):
    configs = load_config(
        _write(tmp_path, '[{"ID": "x", "Path": "p", "extra": 1}]')
    )
    assert configs == [LogConfig(id="x", path="p", type="")]


def test_null_document_is_empty(tmp_path):
    assert load_config(_write(tmp_path, "null")) == []


def test_trailing_content_after_first_value_is_ignored(tmp_path):
    configs = load_config(_write(tmp_path, '  [{"id": "a"}] trailing'))
    assert [c.id for c in configs] == ["a"]


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as info:
        load_config(str(tmp_path / "absent.json"))
    assert str(info.value).startswith("failed to open config file")
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_invalid_json(tmp_path):
    with pytest.raises(ConfigError, match="^failed to parse config file"):
        load_config(_write(tmp_path, "[{"))


def test_empty_file(tmp_path):
    with pytest.raises(ConfigError, match="^failed to parse config file"):
        load_config(_write(tmp_path, ""))


def test_object_instead_of_array(tmp_path):
    with pytest.raises(ConfigError, match="^failed to parse config file"):
        load_config(_write(tmp_path, '{"id": "a"}'))


def test_non_string_field(tmp_path):
    with pytest.raises(ConfigError, match="^failed to parse config file"):
        load_config(_write(tmp_path, '[{"id": 5}]'))


def test_from_dict_null_and_invalid():
    assert LogConfig.from_dict(None) == LogConfig()
    with pytest.raises(ConfigError):
        LogConfig.from_dict(["not", "a", "dict"])