"""Word dataset - loading categories and candidate words."""

from .adapter import CategoryMap, build_category_map, default_category
from .loader import load_category_map, read_word_rows

__all__ = [
    "CategoryMap",
    "build_category_map",
    "default_category",
    "load_category_map",
    "read_word_rows",
]
