from pathlib import Path

import pytest
import yaml

from eventadmin.rules.loader import DEFAULT_RULES_PATH, load_rules


def test_packaged_rules_load():
    rules = load_rules()
    assert rules.menu.title == "Super Admin Menu"
    assert rules.auth.password_hashing.algorithm == "argon2id"
    assert rules.auth.password_hashing.default_work_factor == 10


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("menu: [unclosed", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_rules(path)


def test_schema_violation(tmp_path):
    data = yaml.safe_load(DEFAULT_RULES_PATH.read_text(encoding="utf-8"))
    data["auth"]["password_hashing"]["algorithm"] = "md5"
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")

    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(Path(path))
