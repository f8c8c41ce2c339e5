r"""Read front matter and heading outlines from Markdown content files.

The navigation engine never renders page bodies; it only needs each file's
YAML front matter (title, weight, front-matter flag) and the anchors of its
headings. Anchors come from Python-Markdown's ``toc`` extension so they match
the ids the site renderer emits for the same source.

Example
-------
>>> from booknav.markdown_parser import parse_headings, split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Intro\n---\n## Setup\n## Usage\n")
>>> meta["title"]
'Intro'
>>> [heading.anchor for heading in parse_headings(body)]
['setup', 'usage']
"""

from __future__ import annotations

import re
import typing as typ
from html import unescape

from markdown import Markdown
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from booknav.tree.models import Heading

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE
)
OUTLINE_EXTENSIONS = ["fenced_code", "tables", "sane_lists", "toc"]


class FrontMatterError(ValueError):
    """Raised when a file's front matter block is not a YAML mapping."""


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining Markdown body.

    Parameters
    ----------
    text : str
        Full file contents, optionally starting with a ``---`` fenced YAML
        block.

    Returns
    -------
    tuple[dict[str, Any], str]
        Front matter (empty when absent) and the body that follows it.

    Raises
    ------
    FrontMatterError
        If the block cannot be parsed or is not a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1))
    except YAMLError as exc:
        msg = f"Invalid YAML front matter: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a YAML mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


def parse_headings(markdown_text: str, *, level: int = 2) -> tuple[Heading, ...]:
    """Return the document's headings at ``level`` in source order.

    Parameters
    ----------
    markdown_text : str
        Markdown body without front matter.
    level : int, optional
        Heading depth to collect; ``2`` selects ``##`` headings.

    Returns
    -------
    tuple[Heading, ...]
        Headings with titles unescaped and anchors unique within the page.
    """
    md = Markdown(extensions=OUTLINE_EXTENSIONS)
    md.convert(markdown_text)
    return tuple(
        Heading(title=_clean_heading(token["name"]), anchor=token["id"])
        for token in _walk_tokens(md.toc_tokens)  # type: ignore[attr-defined]
        if token["level"] == level
    )


def _walk_tokens(
    tokens: list[dict[str, typ.Any]],
) -> typ.Iterator[dict[str, typ.Any]]:
    """Yield toc tokens depth-first, preserving document order."""
    for token in tokens:
        yield token
        yield from _walk_tokens(token.get("children", []))


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing escapes and whitespace."""
    return unescape(text).replace("\\", "").strip()


__all__ = ["FrontMatterError", "parse_headings", "split_front_matter"]
