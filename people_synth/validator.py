from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from jsonschema import Draft202012Validator

logger = logging.getLogger("people_synth.validator")

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "people.schema.json"


def _load_schema(schema_path: Path) -> Dict[str, object]:
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _format_error(error) -> str:
    where = "/".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{where}: {error.message}"


def validate_people(payload, schema_path: Path = SCHEMA_PATH) -> List[str]:
    errors: List[str] = []
    schema = _load_schema(schema_path)

    validator = Draft202012Validator(schema)
    for err in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path)):
        errors.append(_format_error(err))

    if not isinstance(payload, list):
        return errors

    # ordering across fields is not expressible in the schema
    for i, person in enumerate(payload):
        if not isinstance(person, dict):
            continue
        birth, death = person.get("birthYear"), person.get("deathYear")
        if isinstance(birth, int) and isinstance(death, int) and death < birth:
            errors.append(f"{i}: {person.get('name')!r} has deathYear {death} before birthYear {birth}")

    return errors


def load_dataset(path: Path):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def validate_dataset(path: Path, schema_path: Path = SCHEMA_PATH) -> List[str]:
    path = Path(path).resolve()
    try:
        payload = load_dataset(path)
    except OSError as exc:
        return [f"Cannot read {path}: {exc}"]
    except ValueError as exc:
        return [f"Invalid JSON in {path}: {exc}"]

    errors = validate_people(payload, schema_path)
    logger.info("Validated %s: %d problem(s)", path, len(errors))
    return errors
