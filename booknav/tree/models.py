"""Typed dataclasses describing the document tree handed to the engine."""

from __future__ import annotations

import dataclasses as dc

Identity = str
"""Opaque node path, compared by equality only."""


class MalformedTreeError(ValueError):
    """Raised when the tree lacks or contradicts its ordering metadata.

    Attributes
    ----------
    path : str
        Identity of the offending node.
    reason : str
        Human readable description of the defect.
    """

    def __init__(self, path: Identity, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed tree at '{path or '/'}': {reason}")


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """In-page heading with its HTML anchor."""

    title: str
    anchor: str

    def as_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping."""
        return {"title": self.title, "anchor": self.anchor}


@dc.dataclass(frozen=True, slots=True)
class Page:
    """Leaf document belonging to exactly one chapter.

    Attributes
    ----------
    identity : Identity
        Stable path used for equality comparisons.
    title : str
        Display title.
    weight : int or None
        Ordering key relative to sibling pages; ``None`` when missing.
    is_front_matter : bool
        Whether the page is folded into its chapter's landing content.
    headings : tuple[Heading, ...]
        Ordered in-page outline.
    link : str or None
        Rendered URL; derived from ``identity`` when ``None``.
    """

    identity: Identity
    title: str
    weight: int | None = None
    is_front_matter: bool = False
    headings: tuple[Heading, ...] = ()
    link: str | None = None

    @property
    def href(self) -> str:
        """Return the explicit link or one derived from the identity."""
        return self.link if self.link is not None else _default_link(self.identity)


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Grouping node: the root (holding chapters) or a chapter (holding pages).

    Attributes
    ----------
    identity : Identity
        Stable path used for equality comparisons; ``""`` for the root.
    title : str
        Display title.
    weight : int or None
        Ordering key among sibling chapters; unused on the root.
    pages : tuple[Page, ...]
        Ordered pages owned by a chapter.
    chapters : tuple[Section, ...]
        Ordered chapters owned by the root.
    headings : tuple[Heading, ...]
        Outline of the section's own landing content, if any.
    link : str or None
        Rendered URL; derived from ``identity`` when ``None``.
    """

    identity: Identity
    title: str
    weight: int | None = None
    pages: tuple[Page, ...] = ()
    chapters: tuple[Section, ...] = ()
    headings: tuple[Heading, ...] = ()
    link: str | None = None

    @property
    def href(self) -> str:
        """Return the explicit link or one derived from the identity."""
        return self.link if self.link is not None else _default_link(self.identity)


def _default_link(identity: Identity) -> str:
    stripped = identity.strip("/")
    return f"/{stripped}/" if stripped else "/"


__all__ = ["Heading", "Identity", "MalformedTreeError", "Page", "Section"]
