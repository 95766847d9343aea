import logging
from pathlib import Path

from graphedit.config import EditorConfig


def test_defaults():
    cfg = EditorConfig.loads(None, "")
    cfg.validate()
    assert cfg["names_file"] is None
    assert cfg["min_weight"] == 1
    assert cfg["max_weight"] == 10
    assert cfg.get("missing") is None


def test_values_override_defaults():
    content = "min_weight: 4\nnames_file: n.txt\n"
    cfg = EditorConfig.loads(Path("graphedit.yml"), content)
    cfg.validate()
    assert cfg["min_weight"] == 4
    assert cfg["max_weight"] == 10
    assert cfg["names_file"] == "n.txt"


def test_invalid_yaml_uses_defaults(caplog):
    with caplog.at_level(logging.ERROR):
        cfg = EditorConfig.loads(Path("graphedit.yml"), "min_weight: [1\n")
    cfg.validate()
    assert cfg["min_weight"] == 1
    assert "cannot parse" in caplog.text


def test_non_mapping_yaml(caplog):
    with caplog.at_level(logging.ERROR):
        cfg = EditorConfig.loads(Path("graphedit.yml"), "- a\n- b\n")
    assert cfg.data == {}
    assert "invalid YAML" in caplog.text


def test_unknown_key_warns(caplog):
    cfg = EditorConfig.loads(Path("graphedit.yml"), "colour: true\n")
    with caplog.at_level(logging.WARNING):
        cfg.validate()
    assert "unknown key 'colour'" in caplog.text


def test_find(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert EditorConfig.find()["max_weight"] == 10
    (tmp_path / "graphedit.yml").write_text("max_weight: 50\n")
    assert EditorConfig.find()["max_weight"] == 50
    other = tmp_path / "other.yml"
    other.write_text("max_weight: 7\n")
    assert EditorConfig.find(other)["max_weight"] == 7
