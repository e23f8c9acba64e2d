import json

import pytest

from fnv1a.core.config import AppConfig, load_config, parse_int
from fnv1a.core.errors import InvalidConfiguration


def _write(tmp_path, payload):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults(tmp_path):
    config = load_config(_write(tmp_path, {}))
    assert config == AppConfig()
    assert config.hash_params().offset_basis == 0x811C9DC5


def test_hex_strings_and_overrides(tmp_path):
    config = load_config(
        _write(
            tmp_path,
            {"width": 64, "output_format": "HEX", "prime": "0x100000001b3", "offset_basis": "12345"},
        )
    )
    assert config.width == 64
    assert config.output_format == "hex"
    assert config.prime == 0x100000001B3
    assert config.offset_basis == 12345


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "payload",
    [
        {"offset_basis": 0},
        {"offset_basis": "0x0"},
        {"width": 12},
        {"output_format": "oct"},
        {"chunk_size": 0},
        {"prime": "seven"},
        {"prime": True},
        [1, 2, 3],
    ],
)
def test_invalid_values(tmp_path, payload):
    with pytest.raises(InvalidConfiguration):
        load_config(_write(tmp_path, payload))


def test_invalid_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_config(path)


def test_parse_int():
    assert parse_int(None, "x") is None
    assert parse_int(10, "x") == 10
    assert parse_int("0x10", "x") == 16
    assert parse_int(" 42 ", "x") == 42
