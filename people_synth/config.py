from __future__ import annotations
from dataclasses import dataclass
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from people_synth.errors import InvalidParameter

MIN_PEOPLE = 1
MAX_PEOPLE = 9001

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")

@dataclass(frozen=True)
class GeneratorConfig:
    count: int
    output_path: Path
    seed_mode: str = "random"  # random | fixed
    seed: Optional[int] = None
    log_level: str = "WARNING"

def _count_error(raw) -> InvalidParameter:
    return InvalidParameter(
        f"Specified number of people ({raw}) is out of valid range [{MIN_PEOPLE} - {MAX_PEOPLE}]",
        value=raw,
        bounds=(MIN_PEOPLE, MAX_PEOPLE),
    )

def parse_count(raw) -> int:
    """
    Accept whole numbers only. Fractional input ("2.5", 3.0) is rejected
    rather than truncated.
    """
    if raw is None or isinstance(raw, bool):
        raise _count_error(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        s = raw.strip()
        # ASCII digits only: no "1_000", no full-width digits
        if not WHOLE_NUMBER.fullmatch(s):
            raise _count_error(raw)
        value = int(s)
    else:
        raise _count_error(raw)

    if value < MIN_PEOPLE or value > MAX_PEOPLE:
        raise _count_error(raw)
    return value

def parse_output_path(raw) -> Path:
    if raw is None or not str(raw).strip():
        raise InvalidParameter(f"Output path must be a non-empty path (got {raw!r})", value=raw)
    return Path(str(raw)).expanduser()

def load_config(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise InvalidParameter(f"Could not read config file {path}: {exc}", value=path) from exc
    if not isinstance(raw, dict):
        raise InvalidParameter(f"Config file {path} must contain a mapping", value=raw)

    return {
        "count": raw.get("count"),
        "output": raw.get("output"),
        "seed_mode": raw.get("seed_mode"),
        "seed": raw.get("seed"),
        "log_level": raw.get("log_level"),
    }

def build_config(
    count=None,
    output=None,
    seed: Optional[int] = None,
    log_level: Optional[str] = None,
    config_path: Optional[str] = None,
) -> GeneratorConfig:
    file_values: Dict[str, Any] = load_config(config_path) if config_path else {}

    def pick(cli_value, key):
        return cli_value if cli_value is not None else file_values.get(key)

    # count first: nothing else runs on a bad count
    n = parse_count(pick(count, "count"))
    out = parse_output_path(pick(output, "output"))

    seed_value = pick(seed, "seed")
    if seed_value is not None:
        try:
            seed_value = int(seed_value)
        except (TypeError, ValueError):
            raise InvalidParameter(f"Seed must be an integer (got {seed_value!r})", value=seed_value) from None

    # an explicit seed implies fixed mode unless the file says otherwise
    if seed is not None:
        seed_mode = "fixed"
    elif file_values.get("seed_mode"):
        seed_mode = file_values["seed_mode"]
    else:
        seed_mode = "fixed" if seed_value is not None else "random"
    if seed_mode not in ("random", "fixed"):
        raise InvalidParameter(f"seed_mode must be random or fixed (got {seed_mode!r})", value=seed_mode)
    if seed_mode == "fixed" and seed_value is None:
        raise InvalidParameter("seed_mode=fixed requires seed", value=seed_mode)

    level = str(pick(log_level, "log_level") or "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise InvalidParameter(f"Unknown log level: {level}", value=level)

    return GeneratorConfig(
        count=n,
        output_path=out,
        seed_mode=seed_mode,
        seed=seed_value,
        log_level=level,
    )
