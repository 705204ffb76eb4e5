"""Turn raw (category, word) records into a category map."""

from typing import Iterable, Mapping, Optional

CategoryMap = dict[str, list[str]]


def _clean(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def build_category_map(rows: Iterable[Mapping[str, object]]) -> CategoryMap:
    """Group words by category.

    Category and word are trimmed; rows missing either are skipped. Words
    keep the order they were first seen in and are not deduplicated.

    Args:
        rows: Records with "category" and "word" fields.

    Returns:
        Mapping of category name to its words. Empty if no row was usable.
    """
    grouped: CategoryMap = {}
    for row in rows:
        category = _clean(row.get("category"))
        word = _clean(row.get("word"))
        if not category or not word:
            continue
        grouped.setdefault(category, []).append(word)
    return grouped


def default_category(category_map: Mapping[str, object]) -> Optional[str]:
    """First category in the map, or None when there are none."""
    return next(iter(category_map), None)
