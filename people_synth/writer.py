from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List

from people_synth.errors import IOFailure
from people_synth.people import Person

logger = logging.getLogger("people_synth.writer")

INDENT = "\t"


def dumps_people(people: Iterable[Person]) -> str:
    records = [asdict(p) for p in people]
    return json.dumps(records, indent=INDENT, ensure_ascii=False)


def _new_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_in_place(payload: str, out_path: Path) -> None:
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(payload)


def _write_replace(payload: str, out_path: Path) -> None:
    try:
        tmp = tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=out_path.parent,
            prefix=f".{out_path.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as exc:
        # e.g. a writable file inside a read-only directory
        logger.debug("No temp file beside %s (%s); writing in place", out_path, exc)
        _write_in_place(payload, out_path)
        return

    try:
        with tmp as f:
            f.write(payload)
        if out_path.exists():
            shutil.copymode(out_path, tmp.name)
        else:
            os.chmod(tmp.name, _new_file_mode())
        os.replace(tmp.name, out_path)
    except OSError:
        if os.path.exists(tmp.name):
            os.unlink(tmp.name)
        raise


def write_people(people: List[Person], out_path: Path) -> Path:
    """
    Write the dataset to out_path and return its absolute path.

    A regular (or not yet existing) file is written to a temp file beside it
    and moved into place with os.replace, so it either keeps its old content
    and mode or holds the complete new document. Device nodes and other
    special files, and files whose directory refuses a temp file, are
    overwritten in place. Any OSError surfaces as IOFailure.
    """
    out_path = Path(out_path).resolve()
    payload = dumps_people(people)

    try:
        if out_path.exists() and not out_path.is_file():
            _write_in_place(payload, out_path)
        else:
            _write_replace(payload, out_path)
    except OSError as exc:
        raise IOFailure(out_path, exc) from exc

    logger.info("Wrote %d people (%d bytes) to %s", len(people), len(payload.encode("utf-8")), out_path)
    return out_path
