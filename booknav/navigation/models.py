"""Dataclasses produced by the flattener, navigator, and TOC builder."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from booknav.tree.models import Heading, Identity, Page, Section


class UnknownCurrentUnitError(LookupError):
    """Raised when the current identity is absent from the supplied tree."""

    def __init__(self, identity: Identity) -> None:
        self.identity = identity
        super().__init__(f"Current unit '{identity}' is not part of the tree.")


@dc.dataclass(frozen=True, slots=True)
class ChapterUnit:
    """A chapter acting as its own landing page via its front-matter page."""

    chapter: Section
    front_page: Page

    @property
    def identity(self) -> Identity:
        return self.chapter.identity

    @property
    def title(self) -> str:
        return self.chapter.title

    @property
    def href(self) -> str:
        return self.chapter.href

    def matches(self, identity: Identity) -> bool:
        """Return whether ``identity`` names this chapter or its front page."""
        return identity in (self.chapter.identity, self.front_page.identity)


@dc.dataclass(frozen=True, slots=True)
class PageUnit:
    """A regular page inside a chapter."""

    page: Page
    chapter: Section

    @property
    def identity(self) -> Identity:
        return self.page.identity

    @property
    def title(self) -> str:
        return self.page.title

    @property
    def href(self) -> str:
        return self.page.href

    def matches(self, identity: Identity) -> bool:
        """Return whether ``identity`` names this page."""
        return identity == self.page.identity


NavigableUnit = ChapterUnit | PageUnit


@dc.dataclass(frozen=True, slots=True)
class FlattenedEntry:
    """One stop in the flattened reading order.

    Attributes
    ----------
    unit : NavigableUnit
        Chapter landing or regular page.
    sequence_number : int
        Global 1-based position.
    chapter_index : int
        1-based position of the owning chapter among all chapters.
    page_index_in_chapter : int or None
        1-based position among the chapter's regular pages; ``None`` for
        chapter units.
    """

    unit: NavigableUnit
    sequence_number: int
    chapter_index: int
    page_index_in_chapter: int | None

    @property
    def identity(self) -> Identity:
        return self.unit.identity

    @property
    def label(self) -> str:
        """Return the display number shared with the TOC."""
        if self.page_index_in_chapter is None:
            return str(self.chapter_index)
        return f"{self.chapter_index}.{self.page_index_in_chapter}"

    def as_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly mapping."""
        return {
            "identity": self.identity,
            "title": self.unit.title,
            "kind": "chapter" if isinstance(self.unit, ChapterUnit) else "page",
            "sequence_number": self.sequence_number,
            "chapter_index": self.chapter_index,
            "page_index_in_chapter": self.page_index_in_chapter,
            "label": self.label,
        }


@dc.dataclass(frozen=True, slots=True)
class NavigationResult:
    """Pager data for the unit being rendered.

    ``current`` is ``0`` when the root overview page is rendered.
    """

    previous: Identity | None
    next: Identity | None
    current: int
    total: int
    previous_unit: NavigableUnit | None = None
    next_unit: NavigableUnit | None = None

    @property
    def position_label(self) -> str:
        return f"{self.current} / {self.total}"

    def as_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly mapping."""
        return {
            "previous": self.previous,
            "next": self.next,
            "current": self.current,
            "total": self.total,
        }


@dc.dataclass(frozen=True, slots=True)
class TocNode:
    """Sidebar node with active-path markers.

    Attributes
    ----------
    title : str
        Display title.
    link : str
        Target URL.
    label : str
        Display number (``""`` for the root, ``"2"`` for a chapter, ``"2.1"``
        for a page).
    is_active_chapter : bool
        Whether a root or chapter node lies on the path to the current unit;
        always ``False`` for page nodes, which use ``is_active_page``.
    is_active_page : bool
        Whether the node is the current unit.
    headings : tuple[Heading, ...]
        In-page headings exposed for the current unit.
    children : tuple[TocNode, ...]
        Nested chapter or page nodes.
    """

    title: str
    link: str
    label: str = ""
    is_active_chapter: bool = False
    is_active_page: bool = False
    headings: tuple[Heading, ...] = ()
    children: tuple[TocNode, ...] = ()

    def as_dict(self) -> dict[str, typ.Any]:
        """Return a JSON-friendly mapping."""
        return {
            "title": self.title,
            "link": self.link,
            "label": self.label,
            "is_active_chapter": self.is_active_chapter,
            "is_active_page": self.is_active_page,
            "headings": [heading.as_dict() for heading in self.headings],
            "children": [child.as_dict() for child in self.children],
        }


__all__ = [
    "ChapterUnit",
    "FlattenedEntry",
    "NavigableUnit",
    "NavigationResult",
    "PageUnit",
    "TocNode",
    "UnknownCurrentUnitError",
]
