from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from people_synth.config import build_config
from people_synth.errors import InvalidParameter, IOFailure
from people_synth.generator import run_generator
from people_synth.liveliest import liveliest_years, load_people_frame, render_report
from people_synth.logging_setup import setup_logging
from people_synth.validator import load_dataset, validate_people

logger = logging.getLogger("people_synth.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

EXIT_IO = 1
EXIT_INVALID = 2


def _report_unreadable(path: Path, exc: Exception) -> int:
    if isinstance(exc, OSError):
        print(f"Input file {path} does not exist, or cannot be accessed at this time.", file=sys.stderr)
    else:
        # json.JSONDecodeError is a ValueError too
        print(f"Error parsing JSON input file {path}: {exc}", file=sys.stderr)
    return EXIT_IO


def _cmd_doctor(_: argparse.Namespace) -> int:
    try:
        import faker  # noqa: F401
        import jsonschema  # noqa: F401
        import numpy  # noqa: F401
        import pandas  # noqa: F401
        import yaml  # noqa: F401
    except Exception as e:
        print("Python dependency problem:", repr(e))
        return 3

    print("OK: key dependencies import clean")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        cfg = build_config(
            count=args.count,
            output=args.output,
            seed=args.seed,
            log_level=args.log_level,
            config_path=args.config,
        )
    except InvalidParameter as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID

    setup_logging(cfg.log_level)
    logger.debug("Resolved config: %s", cfg)
    try:
        out = run_generator(cfg)
    except IOFailure as exc:
        print(str(exc), file=sys.stderr)
        cause = exc.cause
        print("".join(traceback.format_exception(type(cause), cause, cause.__traceback__)), end="", file=sys.stderr)
        return EXIT_IO

    print(f"Successfully wrote list of random people to: {out}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser().resolve()
    try:
        payload = load_dataset(path)
    except (OSError, ValueError) as exc:
        return _report_unreadable(path, exc)

    errors = validate_people(payload)
    if errors:
        print(f"INVALID: {path}")
        for e in errors:
            print(f"  - {e}")
        return EXIT_INVALID

    print(f"OK: {path} ({len(payload)} people)")
    return 0


def _cmd_liveliest(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser().resolve()
    try:
        df = load_people_frame(path)
    except (OSError, ValueError) as exc:
        return _report_unreadable(path, exc)

    try:
        report = liveliest_years(df)
    except InvalidParameter as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID

    sys.stdout.write(render_report(report))
    return 0


def _add_generate_args(p: argparse.ArgumentParser) -> None:
    # count stays a string here so build_config can report the raw value
    p.add_argument("-n", dest="count", default=None, help="Number of people to generate [1 - 9001]")
    p.add_argument("-o", dest="output", default=None, help="Output JSON path")
    p.add_argument("--seed", type=int, default=None, help="Fixed seed for reproducible output")
    p.add_argument("--config", default=None, help="Optional YAML run config (count, output, seed_mode, seed, log_level)")
    p.add_argument("--log-level", dest="log_level", default=None, type=str.upper, choices=LOG_LEVELS, help="Diagnostic log level (default WARNING)")
    p.set_defaults(func=_cmd_generate)


def _add_liveliest_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", help="People dataset JSON")
    p.add_argument("--log-level", dest="log_level", default="WARNING", type=str.upper, choices=LOG_LEVELS, help="Diagnostic log level")
    p.set_defaults(func=_cmd_liveliest)


def _run(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> int:
    args = parser.parse_args(argv)
    if args.func is not _cmd_generate:
        setup_logging(getattr(args, "log_level", None) or "WARNING")
    return args.func(args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="people-synth", description="Synthetic people dataset CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_doc = sub.add_parser("doctor", help="Validate Python deps")
    p_doc.set_defaults(func=_cmd_doctor)

    p_gen = sub.add_parser("generate", help="Generate a people dataset")
    _add_generate_args(p_gen)

    p_val = sub.add_parser("validate", help="Validate a people dataset file")
    p_val.add_argument("path", help="People dataset JSON")
    p_val.add_argument("--log-level", dest="log_level", default="WARNING", type=str.upper, choices=LOG_LEVELS, help="Diagnostic log level")
    p_val.set_defaults(func=_cmd_validate)

    p_live = sub.add_parser("liveliest", help="Report the year(s) with the most people alive")
    _add_liveliest_args(p_live)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(_run(build_parser(), argv))


def generate_main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="generate-people",
        description="Write a JSON list of random people with birth/death years in 1900-2000",
    )
    _add_generate_args(parser)
    raise SystemExit(_run(parser, argv))


def liveliest_main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="find-liveliest-year",
        description="Print the year(s) with the most people alive in a people dataset",
    )
    _add_liveliest_args(parser)
    raise SystemExit(_run(parser, argv))
