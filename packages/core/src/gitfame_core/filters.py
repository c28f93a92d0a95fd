"""File selection before attribution.

Filters compose as: restrict-to (keep if any glob matches) → exclude (drop
if any glob matches) → extensions (keep if the path ends in any extension).
Languages are only a shorthand for extensions. An empty filter is skipped.
"""

from __future__ import annotations

import fnmatch
import json
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

LANGUAGE_TABLE_PATH = Path(__file__).parent / "data" / "language_extensions.json"


def load_language_table(path: Path = LANGUAGE_TABLE_PATH) -> list[dict]:
    """Return the language → extensions table ({name, type, extensions} entries)."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def resolve_languages(languages: Iterable[str], table: list[dict] | None = None) -> list[str]:
    """Map language names (case-insensitive) to their extensions.

    Unknown names are ignored with a warning rather than failing the run.
    """
    if table is None:
        table = load_language_table()
    by_name = {entry["name"].lower(): entry.get("extensions", []) for entry in table}

    extensions: list[str] = []
    for language in languages:
        found = by_name.get(language.strip().lower())
        if found is None:
            logger.warning("Unknown language %r ignored.", language)
            continue
        extensions.extend(found)
    return extensions


def _matches_any(path: str, patterns: Iterable[str]) -> bool:
    return any(fnmatch.fnmatch(path, pattern) for pattern in patterns)


def select_files(
    paths: Iterable[str],
    extensions: Iterable[str] | None = None,
    languages: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
    restrict_to: Iterable[str] | None = None,
    language_table: list[dict] | None = None,
) -> list[str]:
    """Return the paths that pass every configured filter, in input order."""
    restrict_to = list(restrict_to or [])
    exclude = list(exclude or [])
    wanted_extensions = list(extensions or [])
    if languages:
        wanted_extensions.extend(resolve_languages(languages, language_table))

    selected: list[str] = []
    for path in paths:
        if restrict_to and not _matches_any(path, restrict_to):
            continue
        if exclude and _matches_any(path, exclude):
            logger.debug("Excluded: %s", path)
            continue
        if wanted_extensions and not any(path.endswith(ext) for ext in wanted_extensions):
            continue
        selected.append(path)
    return selected
