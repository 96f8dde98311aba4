"""Countries grouped by region, with their flag emoji."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike

_REGIONAL_INDICATOR_A = 0x1F1E6


@dataclass
class Country:
    id: str
    name: str
    flag: str = ""


@dataclass
class Countries:
    """Countries keyed by ID and grouped by region."""

    by_id: dict[str, Country] = field(default_factory=dict)
    tree: dict[str, list[Country]] = field(default_factory=dict)


def flag_emoji(country_id: str) -> str:
    """Return the regional-indicator flag for a two-letter country code."""
    return "".join(chr(_REGIONAL_INDICATOR_A - ord("A") + ord(c)) for c in country_id)


def _string(table: dict, name: str) -> str:
    for key, value in table.items():
        if key.lower() == name:
            if not isinstance(value, str):
                raise ValueError(f"{key!r} must be a string, got {value!r}")
            return value
    return ""


def load_countries(path: str | PathLike = "countries.toml") -> Countries:
    """Load countries from a TOML file mapping regions to lists of countries."""
    with open(path, "rb") as file:
        data = tomllib.load(file)

    countries = Countries()
    for region, entries in data.items():
        if not isinstance(entries, list):
            raise ValueError(f"region {region!r} must hold a list of countries")
        members = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"region {region!r} holds a non-table entry")
            country_id = _string(entry, "id")
            country = Country(
                id=country_id,
                name=_string(entry, "name"),
                flag=_string(entry, "flag") + flag_emoji(country_id),
            )
            members.append(country)
            countries.by_id[country_id] = country
        countries.tree[region] = members
    return countries