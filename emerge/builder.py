"""Reads a country list and prepares candidates for name chains."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = Path("resources/countries.csv")

_COLUMNS = {
    "Country code": "country_code",
    "Name": "name",
    "Official name": "official_name",
    "Citizen names": "citizens_name",
}


@dataclass(frozen=True)
class Country:
    """One row of the country list."""

    country_code: str
    name: str
    official_name: str
    citizens_name: str


@dataclass(frozen=True)
class CountryData:
    """A country name with its first and last letters."""

    name: str
    first_letter: str
    last_letter: str


def load_countries(path: str | Path = DEFAULT_PATH) -> list[Country]:
    """Read the countries from a CSV file with a header row.

    Raise ValueError when a column is missing or a row has the wrong
    number of fields.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        missing = [column for column in _COLUMNS if column not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path}: missing columns {', '.join(missing)}")
        countries = []
        for row in reader:
            if None in row or None in row.values():
                raise ValueError(f"{path}, line {reader.line_num}: wrong number of fields")
            countries.append(
                Country(**{field: row[column] for column, field in _COLUMNS.items()})
            )
        return countries


def country_chain_finder(path: str | Path = DEFAULT_PATH) -> list[CountryData]:
    """Print and return every country as a starting candidate for a chain."""
    print("Running country name chain finder", end="")
    candidates = []
    for country in load_countries(path):
        if not country.name:
            raise ValueError(f"country {country.country_code!r} has an empty name")
        candidates.append(
            CountryData(
                name=country.name,
                first_letter=country.name[0],
                last_letter=country.name[-1],
            )
        )
    for candidate in candidates:
        print(f'Starting candidate "{candidate.name}"')
        print(candidate)
    return candidates


def main(argv: list[str] | None = None) -> int:
    """List the chain candidates of a country file."""
    parser = argparse.ArgumentParser(description="List country name chain candidates.")
    parser.add_argument("path", nargs="?", default=str(DEFAULT_PATH), help="CSV file of countries")
    args = parser.parse_args(argv)
    country_chain_finder(args.path)
    return 0