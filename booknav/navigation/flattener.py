"""Flatten a book tree into its 1-based reading order.

Both the flattener and the TOC builder walk chapters through
:func:`iter_chapters`, so the chapter/page numbering they expose cannot drift
apart. The walk validates the whole tree before yielding anything, which keeps
a malformed tree from producing a partially numbered result.

Example
-------
>>> from booknav.tree import Page, Section
>>> chapter = Section("a", "A", weight=1, pages=(Page("a/p", "P", weight=1),))
>>> [entry.label for entry in flatten(Section("", "Book", chapters=(chapter,)))]
['1.1']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from booknav.navigation.models import ChapterUnit, FlattenedEntry, PageUnit
from booknav.tree.models import MalformedTreeError, Page, Section

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from booknav.navigation.models import NavigableUnit


@dc.dataclass(frozen=True, slots=True)
class ChapterOutline:
    """A validated chapter with its front page split from its regular pages.

    Attributes
    ----------
    index : int
        1-based position among all chapters.
    chapter : Section
        The chapter section.
    front_page : Page or None
        The single front-matter page, when the chapter is its own stop.
    pages : tuple[tuple[int, Page], ...]
        Regular pages paired with their 1-based index in the chapter.
    """

    index: int
    chapter: Section
    front_page: Page | None
    pages: tuple[tuple[int, Page], ...]


def iter_chapters(root: Section) -> cabc.Iterator[ChapterOutline]:
    """Yield validated chapter outlines in display order.

    Raises
    ------
    MalformedTreeError
        If any chapter or page lacks a weight, siblings are out of weight
        order, a chapter has several front-matter pages, or two nodes share an
        identity.
    """
    outlines = [
        _outline(index, chapter)
        for index, chapter in enumerate(root.chapters, start=1)
    ]
    _check_order(root.chapters)
    _check_unique_identities(root)
    yield from outlines


def flatten(root: Section) -> list[FlattenedEntry]:
    """Return every navigable unit of ``root`` with its global sequence number.

    Parameters
    ----------
    root : Section
        Root section whose chapters and pages are already in display order.

    Returns
    -------
    list[FlattenedEntry]
        Entries numbered ``1..len(entries)`` in traversal order. A chapter
        with a front page contributes one chapter entry before its regular
        pages; front-matter pages never get an entry of their own.

    Raises
    ------
    MalformedTreeError
        If the tree is missing or contradicts its ordering metadata.
    """
    stops: list[tuple[NavigableUnit, int, int | None]] = []
    for outline in iter_chapters(root):
        if outline.front_page is not None:
            landing = ChapterUnit(outline.chapter, outline.front_page)
            stops.append((landing, outline.index, None))
        stops.extend(
            (PageUnit(page, outline.chapter), outline.index, page_index)
            for page_index, page in outline.pages
        )
    return [
        FlattenedEntry(
            unit=unit,
            sequence_number=sequence_number,
            chapter_index=chapter_index,
            page_index_in_chapter=page_index,
        )
        for sequence_number, (unit, chapter_index, page_index) in enumerate(
            stops, start=1
        )
    ]


def _outline(index: int, chapter: Section) -> ChapterOutline:
    """Split a chapter into its front page and enumerated regular pages."""
    if chapter.weight is None:
        raise MalformedTreeError(chapter.identity, "chapter has no ordering weight")
    for page in chapter.pages:
        if page.weight is None:
            raise MalformedTreeError(page.identity, "page has no ordering weight")
    _check_order(chapter.pages)

    front_pages = [page for page in chapter.pages if page.is_front_matter]
    if len(front_pages) > 1:
        names = ", ".join(page.identity for page in front_pages)
        msg = f"chapter has more than one front-matter page ({names})"
        raise MalformedTreeError(chapter.identity, msg)
    regular = [page for page in chapter.pages if not page.is_front_matter]
    return ChapterOutline(
        index=index,
        chapter=chapter,
        front_page=front_pages[0] if front_pages else None,
        pages=tuple(enumerate(regular, start=1)),
    )


def _check_order(siblings: cabc.Sequence[Section] | cabc.Sequence[Page]) -> None:
    """Reject siblings whose weights decrease in the supplied order."""
    for before, after in zip(siblings, siblings[1:]):
        # Missing weights are reported by _outline before this runs.
        if typ.cast("int", after.weight) < typ.cast("int", before.weight):
            msg = (
                f"weight {after.weight} follows weight {before.weight} "
                f"of '{before.identity}'"
            )
            raise MalformedTreeError(after.identity, msg)


def _check_unique_identities(root: Section) -> None:
    """Reject trees where two nodes share an identity."""
    seen: set[str] = {root.identity}
    for chapter in root.chapters:
        for node in (chapter, *chapter.pages):
            if node.identity in seen:
                raise MalformedTreeError(node.identity, "identity is not unique")
            seen.add(node.identity)


__all__ = ["ChapterOutline", "flatten", "iter_chapters"]
