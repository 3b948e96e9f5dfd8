"""Loading the knowledge base from YAML.

Hidden design decisions:
- Using PyYAML for the data file format
- Where the built-in data file lives inside the package
- How parse and schema errors are reported
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import CampusData

BUILTIN_DATA_FILE = "campus.yaml"


class CampusDataError(Exception):
    """Raised when a knowledge base file cannot be loaded or is invalid."""


def parse_campus_data(raw: Any, source: str = "<data>") -> CampusData:
    """Validate an already-parsed YAML document.

    Args:
        raw: Object produced by ``yaml.safe_load``
        source: Name used in error messages

    Returns:
        Validated CampusData

    Raises:
        CampusDataError: If the document does not match the schema
    """
    if not isinstance(raw, dict):
        raise CampusDataError(f"{source}: expected a mapping at the top level")
    try:
        return CampusData.model_validate(raw)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'data'}: {err['msg']}"
            for err in e.errors()
        )
        raise CampusDataError(f"{source}: {details}") from e


def load_campus_data(path: str | Path) -> CampusData:
    """Load and validate a knowledge base file.

    Args:
        path: Path to a YAML file

    Returns:
        Validated CampusData

    Raises:
        CampusDataError: If the file is missing, unreadable, or invalid
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise CampusDataError(f"Data file not found: {file_path}")

    try:
        raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise CampusDataError(f"{file_path}: invalid YAML: {e}") from e
    except OSError as e:
        raise CampusDataError(f"{file_path}: {e}") from e

    return parse_campus_data(raw, source=str(file_path))


@lru_cache(maxsize=1)
def load_builtin_campus_data() -> CampusData:
    """Load the knowledge base shipped with the package (cached)."""
    data_file = resources.files(__package__) / "data" / BUILTIN_DATA_FILE
    text = data_file.read_text(encoding="utf-8")
    return parse_campus_data(yaml.safe_load(text), source=BUILTIN_DATA_FILE)
