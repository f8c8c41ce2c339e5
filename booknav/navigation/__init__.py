"""Reading order, pager, and table-of-contents computation for a book tree."""

from .flattener import ChapterOutline, flatten, iter_chapters
from .models import (
    ChapterUnit,
    FlattenedEntry,
    NavigableUnit,
    NavigationResult,
    PageUnit,
    TocNode,
    UnknownCurrentUnitError,
)
from .navigator import locate
from .toc import build_toc

__all__ = [
    "ChapterOutline",
    "ChapterUnit",
    "FlattenedEntry",
    "NavigableUnit",
    "NavigationResult",
    "PageUnit",
    "TocNode",
    "UnknownCurrentUnitError",
    "build_toc",
    "flatten",
    "iter_chapters",
    "locate",
]
