"""Load a Hugo-style content directory into a :class:`Section` tree.

Layout
------
``content/_index.md`` describes the book itself, each subdirectory is a
chapter (described by its own ``_index.md``), and every other ``*.md`` file in
a chapter is a page. A chapter subdirectory holding an ``index.md`` is treated
as a page bundle. Ordering comes from the ``weight`` front matter key, and a
page whose ``front_matter_key`` flag is true becomes its chapter's landing
content.

Missing weights are kept as ``None`` so the navigation engine reports them
with the offending path instead of guessing an order.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from booknav._constants import DEFAULT_FRONT_MATTER_KEY, DEFAULT_HEADING_LEVEL
from booknav.markdown_parser import FrontMatterError, parse_headings, split_front_matter
from booknav.tree.models import Heading, MalformedTreeError, Page, Section

SECTION_INDEX = "_index.md"
BUNDLE_INDEX = "index.md"


def load_content_tree(
    content_dir: Path,
    *,
    front_matter_key: str = DEFAULT_FRONT_MATTER_KEY,
    heading_level: int = DEFAULT_HEADING_LEVEL,
    base_url: str = "/",
    title: str | None = None,
) -> Section:
    """Read ``content_dir`` and return the root section of the book.

    Parameters
    ----------
    content_dir : Path
        Directory holding ``_index.md`` and one subdirectory per chapter.
    front_matter_key : str, optional
        Front matter key whose true value marks a chapter's front page.
    heading_level : int, optional
        Heading depth collected into each outline.
    base_url : str, optional
        Prefix joined with node identities to form links.
    title : str, optional
        Root title override; defaults to the root front matter title.

    Returns
    -------
    Section
        Root section with chapters and pages sorted by weight, then title.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    MalformedTreeError
        If a file carries unreadable front matter, a non-integer weight, a
        non-boolean front-matter flag, a page sits outside any chapter, or a
        chapter holds a nested section.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)

    reader = _ContentReader(
        content_dir=content_dir,
        front_matter_key=front_matter_key,
        heading_level=heading_level,
        base_url=base_url,
    )
    meta, headings = reader.read(content_dir / SECTION_INDEX, identity="")
    for stray in sorted(content_dir.glob("*.md")):
        if stray.name != SECTION_INDEX:
            msg = "pages must live inside a chapter directory"
            raise MalformedTreeError(stray.stem, msg)

    chapters = [
        reader.chapter(path)
        for path in sorted(content_dir.iterdir())
        if path.is_dir() and not path.name.startswith((".", "_"))
    ]
    return Section(
        identity="",
        title=title or str(meta.get("title") or "Contents"),
        weight=reader.weight(meta, ""),
        chapters=tuple(sorted(chapters, key=_sort_key)),
        headings=headings,
        link=reader.link(""),
    )


class _ContentReader:
    """Convert files under one content directory into tree nodes."""

    def __init__(
        self,
        *,
        content_dir: Path,
        front_matter_key: str,
        heading_level: int,
        base_url: str,
    ) -> None:
        self.content_dir = content_dir
        self.front_matter_key = front_matter_key
        self.heading_level = heading_level
        self.base_url = base_url.rstrip("/") + "/"

    def chapter(self, directory: Path) -> Section:
        identity = self.identity(directory)
        meta, headings = self.read(directory / SECTION_INDEX, identity=identity)
        pages: list[Page] = []
        for path in sorted(directory.iterdir()):
            if path.is_file() and path.suffix == ".md" and path.name != SECTION_INDEX:
                pages.append(self.page(path, self.identity(path.with_suffix(""))))
            elif path.is_dir() and (path / BUNDLE_INDEX).is_file():
                pages.append(self.page(path / BUNDLE_INDEX, self.identity(path)))
            elif path.is_dir() and any(path.rglob("*.md")):
                raise MalformedTreeError(
                    self.identity(path), "nested sections are not supported"
                )
        return Section(
            identity=identity,
            title=str(meta.get("title") or _humanize(directory.name)),
            weight=self.weight(meta, identity),
            pages=tuple(sorted(pages, key=_sort_key)),
            headings=headings,
            link=self.link(identity),
        )

    def page(self, path: Path, identity: str) -> Page:
        meta, headings = self.read(path, identity=identity)
        flag = meta.get(self.front_matter_key, False)
        if not isinstance(flag, bool):
            msg = f"'{self.front_matter_key}' must be true or false, got {flag!r}"
            raise MalformedTreeError(identity, msg)
        fallback = path.parent.name if path.name == BUNDLE_INDEX else path.stem
        return Page(
            identity=identity,
            title=str(meta.get("title") or _humanize(fallback)),
            weight=self.weight(meta, identity),
            is_front_matter=flag,
            headings=headings,
            link=self.link(identity),
        )

    def read(
        self, path: Path, *, identity: str
    ) -> tuple[dict[str, typ.Any], tuple[Heading, ...]]:
        """Return front matter and heading outline for ``path`` (empty if absent)."""
        if not path.is_file():
            return {}, ()
        text = path.read_text(encoding="utf-8")
        try:
            meta, body = split_front_matter(text)
        except FrontMatterError as exc:
            raise MalformedTreeError(identity, str(exc)) from exc
        return meta, parse_headings(body, level=self.heading_level)

    @staticmethod
    def weight(meta: typ.Mapping[str, typ.Any], identity: str) -> int | None:
        value = meta.get("weight")
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"weight must be an integer, got {value!r}"
            raise MalformedTreeError(identity, msg)
        return value

    def identity(self, path: Path) -> str:
        return path.relative_to(self.content_dir).as_posix()

    def link(self, identity: str) -> str:
        return f"{self.base_url}{identity}/" if identity else self.base_url


def _sort_key(node: Section | Page) -> tuple[bool, int, str, str]:
    """Order by weight, then title and identity; missing weights sort last."""
    weight = node.weight
    return (weight is None, weight or 0, node.title, node.identity)


def _humanize(name: str) -> str:
    return name.replace("-", " ").replace("_", " ").title()


__all__ = ["BUNDLE_INDEX", "SECTION_INDEX", "load_content_tree"]
