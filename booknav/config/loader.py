"""Load book configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import BookConfig, BookConfigError, LabelsConfig

HEADING_LEVELS = range(1, 7)


def load_book_config(path: Path) -> BookConfig:
    """Load the YAML configuration describing where the book lives.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/book.yaml``).

    Returns
    -------
    BookConfig
        Parsed configuration with relative directories resolved against the
        directory containing ``path``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    BookConfigError
        If ``content_dir`` is missing or a value has the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from booknav.config import load_book_config
    >>> config = load_book_config(Path("book.yaml"))  # doctest: +SKIP
    >>> config.front_matter_key  # doctest: +SKIP
    'chapter'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    content_dir = raw.get("content_dir")
    if not content_dir:
        msg = "Book configuration is missing 'content_dir'."
        raise BookConfigError(msg)

    base = path.parent
    defaults = BookConfig(content_dir=Path(content_dir))
    heading_level = raw.get("heading_level", defaults.heading_level)
    match heading_level:
        case bool():
            valid = False
        case int():
            valid = heading_level in HEADING_LEVELS
        case _:
            valid = False
    if not valid:
        msg = f"'heading_level' must be 1 to 6, got {heading_level!r}"
        raise BookConfigError(msg)

    return BookConfig(
        content_dir=_resolve(base, content_dir),
        output_dir=_resolve(base, raw.get("output_dir", defaults.output_dir)),
        base_url=str(raw.get("base_url", defaults.base_url)),
        front_matter_key=str(raw.get("front_matter_key", defaults.front_matter_key)),
        heading_level=heading_level,
        title=_optional_str(raw.get("title")),
        labels=_build_labels(raw.get("labels")),
    )


def _resolve(base: Path, value: str | Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base``."""
    candidate = Path(value)
    return candidate if candidate.is_absolute() else base / candidate


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_labels(payload: typ.Mapping[str, typ.Any] | None) -> LabelsConfig:
    """Build a LabelsConfig from the optional ``labels`` mapping."""
    base = LabelsConfig()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "'labels' must be a mapping."
        raise BookConfigError(msg)
    return LabelsConfig(
        previous=payload.get("previous", base.previous),
        next=payload.get("next", base.next),
        contents=payload.get("contents", base.contents),
    )


__all__ = ["load_book_config"]
