from pathlib import Path

import yaml
from pydantic import ValidationError

from eventadmin.rules.models import Rules

DEFAULT_RULES_PATH = Path(__file__).parent / "rules.yaml"


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file (the packaged one by default).
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    path = Path(path) if path is not None else DEFAULT_RULES_PATH
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
