"""Typed dataclasses describing booknav configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from booknav._constants import DEFAULT_FRONT_MATTER_KEY, DEFAULT_HEADING_LEVEL


class BookConfigError(ValueError):
    """Raised when the book configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class LabelsConfig:
    """Text shown by the pager and sidebar fragments."""

    previous: str = "Previous"
    next: str = "Next"
    contents: str = "Contents"


@dc.dataclass(frozen=True, slots=True)
class BookConfig:
    """A fully resolved book definition sourced from YAML config.

    Attributes
    ----------
    content_dir : Path
        Hugo-style content directory holding the chapters.
    output_dir : Path
        Destination for rendered navigation fragments.
    base_url : str
        Prefix used when building node links.
    front_matter_key : str
        Front matter key marking a chapter's front page.
    heading_level : int
        Heading depth surfaced in the table of contents.
    title : str or None
        Override for the book title taken from ``_index.md``.
    labels : LabelsConfig
        Pager and sidebar wording.
    """

    content_dir: Path
    output_dir: Path = Path("public/nav")
    base_url: str = "/"
    front_matter_key: str = DEFAULT_FRONT_MATTER_KEY
    heading_level: int = DEFAULT_HEADING_LEVEL
    title: str | None = None
    labels: LabelsConfig = dc.field(default_factory=LabelsConfig)


__all__ = ["BookConfig", "BookConfigError", "LabelsConfig"]
