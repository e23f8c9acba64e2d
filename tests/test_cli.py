import json

from fnv1a.__main__ import main


def test_hash_text(capsys):
    assert main(["hash", "hello"]) == 0
    assert capsys.readouterr().out.strip() == "1335831723"


def test_hash_hex_64(capsys):
    assert main(["hash", "hello", "--width", "64", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "0xa430d84680aabd0b"


def test_hash_lower(capsys):
    assert main(["hash", "HELLO", "--lower", "--hex"]) == 0
    assert capsys.readouterr().out.strip() == "0x4f9f2cab"


def test_hash_file(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_bytes(b"hi")
    assert main(["hash", "--file", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "1748694682"


def test_hash_custom_offset(capsys):
    assert main(["hash", "", "--offset-basis", "0x2a"]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_zero_offset_basis_is_an_error(capsys):
    assert main(["hash", "hi", "--offset-basis", "0"]) == 2
    assert "non-zero" in capsys.readouterr().err


def test_vectors_sync_and_async(capsys):
    assert main(["vectors"]) == 0
    sync_out = capsys.readouterr().out
    assert main(["vectors", "--async"]) == 0
    assert capsys.readouterr().out == sync_out
    assert sync_out.splitlines() == ["1748694682", "1748694682", "1335831723", "1335831723"]


def test_vectors_with_config(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"output_format": "hex"}), encoding="utf-8")
    assert main(["--config", str(config), "vectors"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "0x683af69a"


def test_bad_config_is_an_error(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"offset_basis": 0}), encoding="utf-8")
    assert main(["--config", str(config), "vectors"]) == 2
    assert "error:" in capsys.readouterr().err


def test_check(capsys):
    assert main(["check"]) == 0
    assert "OK fnv1a_1024" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out
