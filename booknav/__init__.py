"""Navigation index engine for multi-chapter books and documentation sites.

Given a tree of chapters and pages and the identity of the page being
rendered, the engine flattens the book into a numbered reading order, locates
the current unit for previous/next paging, and builds the sidebar table of
contents with the active path marked.

Exports
-------
- ``flatten``, ``locate``, ``build_toc``: the pure navigation functions.
- ``Section``, ``Page``, ``Heading``: the input tree model.
- ``MalformedTreeError``, ``UnknownCurrentUnitError``: engine failures.
- ``app``, ``main``: the Cyclopts CLI.

Examples
--------
>>> from booknav import Page, Section, flatten, locate
>>> chapter = Section(
...     "basics",
...     "Basics",
...     weight=1,
...     pages=(Page("basics/a", "A", weight=1), Page("basics/b", "B", weight=2)),
... )
>>> root = Section("", "Book", chapters=(chapter,))
>>> locate(flatten(root), "basics/b", root=root).previous
'basics/a'
"""

from __future__ import annotations

from .cli import app, main
from .navigation import (
    FlattenedEntry,
    NavigationResult,
    TocNode,
    UnknownCurrentUnitError,
    build_toc,
    flatten,
    locate,
)
from .tree import Heading, MalformedTreeError, Page, Section

__all__ = [
    "FlattenedEntry",
    "Heading",
    "MalformedTreeError",
    "NavigationResult",
    "Page",
    "Section",
    "TocNode",
    "UnknownCurrentUnitError",
    "app",
    "build_toc",
    "flatten",
    "locate",
    "main",
]
