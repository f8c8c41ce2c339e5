"""Shared fixtures for booknav tests.

``sample_book`` is the two-chapter book used across the navigation tests:
chapter ``a`` has a front page plus two regular pages, chapter ``b`` has a
single page and no front page. ``content_dir`` writes an equivalent Hugo-style
content directory for loader, renderer, and CLI tests.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from booknav.tree import Heading, Page, Section

if typ.TYPE_CHECKING:
    from pathlib import Path

SAMPLE_CONTENT: dict[str, str] = {
    "_index.md": """
        ---
        title: Field Guide
        ---
        """,
    "a/_index.md": """
        ---
        title: Chapter A
        weight: 1
        ---
        """,
    "a/intro.md": """
        ---
        title: Welcome to A
        weight: 1
        chapter: true
        ---
        ## Goals
        Why this chapter exists.

        ## Layout
        How it is organised.
        """,
    "a/one.md": """
        ---
        title: First Steps
        weight: 2
        ---
        ## Install
        Steps.

        ## Configure
        More steps.
        """,
    "a/two.md": """
        ---
        title: Next Steps
        weight: 3
        ---
        Body without headings.
        """,
    "b/_index.md": """
        ---
        title: Chapter B
        weight: 2
        ---
        """,
    "b/one.md": """
        ---
        title: Reference
        weight: 1
        ---
        ## Options
        Table of options.
        """,
}


def make_book(*, intro_headings: tuple[Heading, ...] | None = None) -> Section:
    """Return the sample book tree, optionally replacing the front page outline."""
    if intro_headings is None:
        intro_headings = (Heading("Goals", "goals"), Heading("Layout", "layout"))
    chapter_a = Section(
        identity="a",
        title="Chapter A",
        weight=1,
        pages=(
            Page("a/intro", "Welcome to A", 1, True, intro_headings),
            Page(
                "a/one",
                "First Steps",
                2,
                headings=(
                    Heading("Install", "install"),
                    Heading("Configure", "configure"),
                ),
            ),
            Page("a/two", "Next Steps", 3),
        ),
    )
    chapter_b = Section(
        identity="b",
        title="Chapter B",
        weight=2,
        pages=(
            Page("b/one", "Reference", 1, headings=(Heading("Options", "options"),)),
        ),
    )
    return Section(identity="", title="Field Guide", chapters=(chapter_a, chapter_b))


@pytest.fixture
def sample_book() -> Section:
    """Return the two-chapter sample book."""
    return make_book()


@pytest.fixture
def book_factory() -> typ.Callable[..., Section]:
    """Return the sample book builder for tests that vary the front page."""
    return make_book


def write_content(root: Path, files: typ.Mapping[str, str]) -> Path:
    """Write ``files`` (relative path to dedented text) under ``root``."""
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip(), encoding="utf-8")
    return root


@pytest.fixture
def content_writer() -> typ.Callable[[Path, typ.Mapping[str, str]], Path]:
    """Return the helper that writes content files under a directory."""
    return write_content


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Write the sample book as a content directory and return its path."""
    return write_content(tmp_path / "content", SAMPLE_CONTENT)


@pytest.fixture
def config_path(tmp_path: Path, content_dir: Path) -> Path:
    """Write a ``book.yaml`` pointing at ``content_dir`` and return its path."""
    path = tmp_path / "book.yaml"
    path.write_text(
        f"""
content_dir: {content_dir}
output_dir: {tmp_path / "nav"}
base_url: /guide/
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return path
