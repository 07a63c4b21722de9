from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import numpy as np
import pandas as pd

from people_synth.errors import InvalidParameter
from people_synth.people import YEARS, YearRange
from people_synth.validator import load_dataset

logger = logging.getLogger("people_synth.liveliest")

COLUMNS = ["name", "birthYear", "deathYear"]


@dataclass
class LiveliestReport:
    most_alive: int
    years: List[int]
    names_by_year: Dict[int, List[str]] = field(default_factory=dict)


def load_people_frame(path: Path) -> pd.DataFrame:
    """
    Read a dataset file into a frame with one row per person.

    Raises OSError when the file cannot be read and ValueError when it is not
    a JSON array of person objects.
    """
    raw = load_dataset(path)
    if not isinstance(raw, list):
        raise ValueError("Dataset must be a JSON array of people")
    if not raw:
        raise ValueError("The input JSON was empty")
    if not all(isinstance(p, dict) for p in raw):
        raise ValueError("Every entry in the dataset must be an object")

    df = pd.DataFrame.from_records(raw)
    for c in COLUMNS:
        if c not in df.columns:
            df[c] = None
    return df[COLUMNS]


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, (float, np.floating)) and np.isnan(value))


def _is_whole(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    return isinstance(value, (float, np.floating)) and float(value).is_integer()


def check_people(df: pd.DataFrame, years: YearRange = YEARS) -> pd.DataFrame:
    """
    Validate every row and return the frame with integer year columns.
    The first bad row raises InvalidParameter naming the person.
    """
    for row in df.itertuples(index=False):
        name, birth, death = row.name, row.birthYear, row.deathYear
        if _is_missing(name):
            raise InvalidParameter("Person missing name.", value=None)
        name = str(name)
        if not name:
            raise InvalidParameter("Person with empty name.", value=name)
        if _is_missing(birth) or _is_missing(death):
            raise InvalidParameter(f"Person ({name}) is missing birth or death year.", value=name)
        for label, year in (("birth", birth), ("death", death)):
            if not _is_whole(year) or int(year) not in years:
                raise InvalidParameter(
                    f"Person ({name}) has {label} year ({year}) out of valid range [{years.min} - {years.max}].",
                    value=year,
                    bounds=(years.min, years.max),
                )
        if death < birth:
            raise InvalidParameter(f"Person ({name}) died before they were born {int(birth)} - {int(death)}.", value=name)

    out = df.copy()
    out["name"] = out["name"].astype(str)
    out["birthYear"] = out["birthYear"].astype("int64")
    out["deathYear"] = out["deathYear"].astype("int64")
    return out


def alive_counts(df: pd.DataFrame, years: YearRange = YEARS) -> pd.Series:
    # difference array: +1 at birth, -1 the year after death
    span = years.max - years.min + 1
    deltas = np.zeros(span + 1, dtype=np.int64)
    np.add.at(deltas, df["birthYear"].to_numpy() - years.min, 1)
    np.add.at(deltas, df["deathYear"].to_numpy() - years.min + 1, -1)
    counts = np.cumsum(deltas[:span])
    return pd.Series(counts, index=range(years.min, years.max + 1), name="alive")


def people_alive_per_year(df: pd.DataFrame) -> Dict[int, List[str]]:
    by_year: Dict[int, List[str]] = {}
    for row in df.itertuples(index=False):
        for year in range(row.birthYear, row.deathYear + 1):
            by_year.setdefault(year, []).append(row.name)
    return dict(sorted(by_year.items()))


def liveliest_years(df: pd.DataFrame, years: YearRange = YEARS) -> LiveliestReport:
    df = check_people(df, years)
    counts = alive_counts(df, years)

    most = int(counts.max())
    top = [int(y) for y in counts.index[counts == most]]

    alive = people_alive_per_year(df)
    names_by_year = {y: alive.get(y, []) for y in top}

    logger.info("Liveliest year(s) %s with %d alive across %d people", top, most, len(df))
    return LiveliestReport(most_alive=most, years=top, names_by_year=names_by_year)


def render_report(report: LiveliestReport) -> str:
    lines = [
        f"Most number of people alive: {report.most_alive}",
        "Year(s) with most people alive:",
    ]
    for year in report.years:
        lines.append(f"\t{year} - " + ", ".join(report.names_by_year.get(year, [])))
    return "\n".join(lines) + "\n"
