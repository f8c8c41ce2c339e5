"""Tests for reading a Hugo-style content directory into a book tree.

Each test writes a small content tree under ``tmp_path`` and checks the
resulting :class:`~booknav.tree.Section` structure or the loader's rejection
of malformed input.
"""

from __future__ import annotations

import typing as typ

import pytest

from booknav.navigation import flatten
from booknav.tree import Heading, MalformedTreeError, load_content_tree

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

Writer = typ.Callable[["Path", "cabc.Mapping[str, str]"], "Path"]


def test_sample_content_tree_shape(content_dir: Path) -> None:
    root = load_content_tree(content_dir)
    assert root.title == "Field Guide"
    assert [chapter.identity for chapter in root.chapters] == ["a", "b"]
    chapter_a = root.chapters[0]
    assert [page.identity for page in chapter_a.pages] == ["a/intro", "a/one", "a/two"]
    intro = chapter_a.pages[0]
    assert intro.is_front_matter
    assert intro.headings == (Heading("Goals", "goals"), Heading("Layout", "layout"))
    assert chapter_a.pages[2].headings == ()


def test_loaded_tree_matches_sample_reading_order(content_dir: Path) -> None:
    entries = flatten(load_content_tree(content_dir))
    assert [entry.identity for entry in entries] == ["a", "a/one", "a/two", "b/one"]


def test_links_use_base_url(content_dir: Path) -> None:
    root = load_content_tree(content_dir, base_url="https://example.test/guide")
    assert root.href == "https://example.test/guide/"
    assert root.chapters[1].pages[0].href == "https://example.test/guide/b/one/"


def test_sorting_uses_weight_then_title(tmp_path: Path, content_writer: Writer) -> None:
    content = content_writer(
        tmp_path / "content",
        {
            "z-last/_index.md": "---\nweight: 2\n---\n",
            "a-first/_index.md": "---\nweight: 1\n---\n",
            "a-first/beta.md": "---\nweight: 1\n---\n",
            "a-first/alpha.md": "---\nweight: 1\n---\n",
            "a-first/heavy.md": "---\nweight: 0\n---\n",
        },
    )
    root = load_content_tree(content)
    assert [chapter.title for chapter in root.chapters] == ["A First", "Z Last"]
    assert [page.title for page in root.chapters[0].pages] == [
        "Heavy",
        "Alpha",
        "Beta",
    ]
    assert root.title == "Contents", "missing root index falls back to a default"


def test_page_bundle_directory(tmp_path: Path, content_writer: Writer) -> None:
    content = content_writer(
        tmp_path / "content",
        {
            "guide/_index.md": "---\nweight: 1\n---\n",
            "guide/setup/index.md": "---\nweight: 1\n---\n## Steps\n",
            "guide/setup/diagram.png": "not markdown",
        },
    )
    (page,) = load_content_tree(content).chapters[0].pages
    assert page.identity == "guide/setup"
    assert page.title == "Setup"


def test_custom_flag_and_heading_level(tmp_path: Path, content_writer: Writer) -> None:
    content = content_writer(
        tmp_path / "content",
        {
            "c/_index.md": "---\nweight: 1\n---\n",
            "c/cover.md": "---\nweight: 1\nlanding: true\n---\n### Deep\n",
        },
    )
    root = load_content_tree(content, front_matter_key="landing", heading_level=3)
    page = root.chapters[0].pages[0]
    assert page.is_front_matter
    assert page.headings == (Heading("Deep", "deep"),)


def test_title_override(content_dir: Path) -> None:
    assert load_content_tree(content_dir, title="Handbook").title == "Handbook"


def test_missing_weight_surfaces_in_engine(
    tmp_path: Path, content_writer: Writer
) -> None:
    """The loader keeps a missing weight so flattening names the file."""
    content = content_writer(
        tmp_path / "content",
        {"c/_index.md": "---\nweight: 1\n---\n", "c/p.md": "---\ntitle: P\n---\n"},
    )
    root = load_content_tree(content)
    assert root.chapters[0].pages[0].weight is None
    with pytest.raises(MalformedTreeError) as excinfo:
        flatten(root)
    assert excinfo.value.path == "c/p"


@pytest.mark.parametrize(
    ("files", "bad_path"),
    [
        pytest.param(
            {"c/_index.md": "---\nweight: first\n---\n"}, "c", id="non-integer-weight"
        ),
        pytest.param(
            {
                "c/_index.md": "---\nweight: 1\n---\n",
                "c/p.md": "---\nweight: 1\nchapter: 'yes'\n---\n",
            },
            "c/p",
            id="non-boolean-flag",
        ),
        pytest.param(
            {"c/_index.md": "---\n- weight\n---\n"}, "c", id="non-mapping-front-matter"
        ),
        pytest.param({"stray.md": "# Stray\n"}, "stray", id="page-outside-chapter"),
        pytest.param(
            {
                "c/_index.md": "---\nweight: 1\n---\n",
                "c/p.md": "---\nweight: 1\n---\n",
                "c/sub/_index.md": "---\nweight: 1\n---\n",
                "c/sub/q.md": "---\nweight: 1\n---\n",
            },
            "c/sub",
            id="nested-section",
        ),
    ],
)
def test_malformed_content_is_rejected(
    tmp_path: Path,
    content_writer: Writer,
    files: dict[str, str],
    bad_path: str,
) -> None:
    content = content_writer(tmp_path / "content", files)
    with pytest.raises(MalformedTreeError) as excinfo:
        load_content_tree(content)
    assert excinfo.value.path == bad_path


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_content_tree(tmp_path / "absent")
