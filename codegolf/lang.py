"""Programming languages available on the course."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike


@dataclass
class Lang:
    name: str
    id: str
    example: str = ""
    size: str = ""
    version: str = ""
    website: str = ""


@dataclass
class Langs:
    """Languages keyed by ID and in case-insensitive name order."""

    by_id: dict[str, Lang] = field(default_factory=dict)
    ordered: list[Lang] = field(default_factory=list)


def lang_id(name: str) -> str:
    """Derive a URL-safe language ID from its display name."""
    return name.lower().replace("#", "-sharp").lower().replace("><>", "fish")


def _string(table: dict, name: str) -> str:
    for key, value in table.items():
        if key.lower() == name:
            if not isinstance(value, str):
                raise ValueError(f"{key!r} must be a string, got {value!r}")
            return value
    return ""


def load_langs(path: str | PathLike = "langs.toml") -> Langs:
    """Load languages from a TOML file with one table per language name."""
    with open(path, "rb") as file:
        data = tomllib.load(file)

    langs = Langs()
    for name, table in data.items():
        if not isinstance(table, dict):
            raise ValueError(f"language {name!r} must be a table")
        lang = Lang(
            name=name,
            id=lang_id(name),
            example=_string(table, "example"),
            size=_string(table, "size"),
            version=_string(table, "version"),
            website=_string(table, "website"),
        )
        langs.by_id[lang.id] = lang
        langs.ordered.append(lang)

    langs.ordered.sort(key=lambda lang: lang.name.lower())
    return langs