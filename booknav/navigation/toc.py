"""Build the sidebar table of contents for one render.

The TOC shares :func:`~booknav.navigation.flattener.iter_chapters` with the
flattener, so a page labelled ``"2.3"`` here is the entry recorded with
``chapter_index=2`` and ``page_index_in_chapter=3`` in the reading order.
"""

from __future__ import annotations

import typing as typ

from booknav.navigation.flattener import iter_chapters
from booknav.navigation.models import TocNode, UnknownCurrentUnitError

if typ.TYPE_CHECKING:
    from booknav.navigation.flattener import ChapterOutline
    from booknav.tree.models import Heading, Identity, Page, Section


def build_toc(root: Section, current: Identity) -> TocNode:
    """Return the nested TOC for ``root`` with the path to ``current`` marked.

    Parameters
    ----------
    root : Section
        Root section whose chapters and pages are in display order.
    current : Identity
        Identity of the root, a chapter, a front page, or a page.

    Returns
    -------
    TocNode
        Root node whose children are every chapter (header-only chapters
        included), each holding its regular pages.

    Raises
    ------
    MalformedTreeError
        If the tree is missing or contradicts its ordering metadata.
    UnknownCurrentUnitError
        If ``current`` names no node of the tree.
    """
    chapters = [_chapter_node(outline, current) for outline in iter_chapters(root)]
    root_is_current = current == root.identity
    if not root_is_current and not any(node.is_active_chapter for node in chapters):
        raise UnknownCurrentUnitError(current)
    return TocNode(
        title=root.title,
        link=root.href,
        is_active_chapter=True,
        is_active_page=root_is_current,
        headings=_landing_headings(root.headings) if root_is_current else (),
        children=tuple(chapters),
    )


def _chapter_node(outline: ChapterOutline, current: Identity) -> TocNode:
    chapter = outline.chapter
    front = outline.front_page
    is_landing = current == chapter.identity or (
        front is not None and current == front.identity
    )
    pages = tuple(
        _page_node(page, f"{outline.index}.{page_index}", current)
        for page_index, page in outline.pages
    )
    own_headings = front.headings if front is not None else chapter.headings
    return TocNode(
        title=chapter.title,
        link=chapter.href,
        label=str(outline.index),
        is_active_chapter=is_landing or any(node.is_active_page for node in pages),
        is_active_page=is_landing,
        headings=_landing_headings(own_headings) if is_landing else (),
        children=pages,
    )


def _page_node(page: Page, label: str, current: Identity) -> TocNode:
    active = page.identity == current
    return TocNode(
        title=page.title,
        link=page.href,
        label=label,
        is_active_page=active,
        headings=page.headings if active else (),
    )


def _landing_headings(headings: tuple[Heading, ...]) -> tuple[Heading, ...]:
    """Suppress a lone heading, which would only repeat the landing title."""
    return headings if len(headings) > 1 else ()


__all__ = ["build_toc"]
