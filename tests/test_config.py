import json
import os

from genpass.config import DEFAULTS, MAX_LENGTH, config_path, load_config, save_config


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert load_config() == DEFAULTS
    assert config_path() == os.path.join(str(tmp_path), "genpass", "config.json")


def test_save_and_load(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    path = save_config({"length": 40, "copy": True, "allowed": ["äö"], "disallowed": ["0O"], "junk": 1})
    with open(path, encoding="utf-8") as f:
        assert "junk" not in json.load(f)
    cfg = load_config()
    assert cfg["length"] == 40
    assert cfg["copy"] is True
    assert cfg["allowed"] == ["äö"]
    assert cfg["disallowed"] == ["0O"]
    assert cfg["no_latin"] is False


def test_invalid_values_are_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    os.makedirs(tmp_path / "genpass")
    (tmp_path / "genpass" / "config.json").write_text(
        json.dumps({"length": 0, "copy": "yes", "allowed": [""], "disallowed": ["x"]}),
        encoding="utf-8",
    )
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["copy"] is False
    assert cfg["allowed"] == []
    assert cfg["disallowed"] == ["x"]


def test_broken_json_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    os.makedirs(tmp_path / "genpass")
    (tmp_path / "genpass" / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_defaults_are_not_shared(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    cfg = load_config()
    cfg["allowed"].append("x")
    assert DEFAULTS["allowed"] == []


def test_length_and_category_flags(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    save_config({"length": MAX_LENGTH + 1, "no_digits": True, "no_special": "yes"})
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["no_digits"] is True
    assert cfg["no_special"] is False

    save_config({"length": MAX_LENGTH})
    assert load_config()["length"] == MAX_LENGTH
