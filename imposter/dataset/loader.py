"""Read the word list from a CSV file."""

import csv
from pathlib import Path
from typing import Union

from ..engine.errors import ConfigurationError
from .adapter import CategoryMap, build_category_map

REQUIRED_COLUMNS = ("category", "word")


def _is_blank(row: dict) -> bool:
    # Rows made only of delimiters, e.g. ",,"
    return all(not value.strip() for value in row.values() if isinstance(value, str))


def read_word_rows(path: Union[str, Path], delimiter: str = ",") -> list[dict[str, str]]:
    """Read raw records from a CSV file with a header row.

    Blank lines are skipped. Column names are matched after trimming, so a
    header like "category, word" works.

    Raises:
        ConfigurationError: If the file is missing or lacks a required column.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Word list not found: {path}")

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        fieldnames = [name.strip() for name in reader.fieldnames or []]
        missing = [col for col in REQUIRED_COLUMNS if col not in fieldnames]
        if missing:
            raise ConfigurationError(
                f"Word list {path} is missing column(s): {', '.join(missing)}"
            )
        reader.fieldnames = fieldnames
        return [row for row in reader if not _is_blank(row)]


def load_category_map(path: Union[str, Path], delimiter: str = ",") -> CategoryMap:
    """Load the word list and group it by category."""
    return build_category_map(read_word_rows(path, delimiter))
