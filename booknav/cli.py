"""Cyclopts CLI entrypoint for inspecting and rendering book navigation.

The ``booknav`` console script loads ``config/book.yaml``, reads the content
tree it points at, and either reports the computed navigation (reading order,
pager for one unit, table of contents for one unit) or writes the pager and
sidebar fragments for every page. Typical usage is ``booknav sequence`` to
check a book's ordering in CI and ``booknav render`` before the site build.

Examples
--------
Print the reading order of the default book:

>>> from booknav.cli import main
>>> main()  # doctest: +SKIP

Show the pager for a single page as JSON:

>>> from booknav.cli import app
>>> app(["nav", "--current", "basics/install", "--json"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_book_config
from .navigation import build_toc, flatten, locate
from .renderer import NavFragmentRenderer
from .tree import load_content_tree

if typ.TYPE_CHECKING:
    from .config import BookConfig
    from .navigation import TocNode
    from .tree import Section

DEFAULT_CONFIG = Path("config/book.yaml")

app = App(name="booknav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to book config", env_var="INPUT_CONFIG")
]
CurrentOption = typ.Annotated[
    str,
    Parameter(
        help="Identity of the unit being rendered ('' for the overview page)",
        env_var="INPUT_CURRENT",
    ),
]
JsonOption = typ.Annotated[
    bool, Parameter(name="--json", help="Emit JSON instead of text")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_tree(book: BookConfig) -> Section:
    return load_content_tree(
        book.content_dir,
        front_matter_key=book.front_matter_key,
        heading_level=book.heading_level,
        base_url=book.base_url,
        title=book.title,
    )


@app.command(help="Print the flattened reading order of the book.")
def sequence(
    *, config: ConfigOption = DEFAULT_CONFIG, json_output: JsonOption = False
) -> None:
    """Print one line per navigable unit in reading order.

    Parameters
    ----------
    config : Path, optional
        Path to the ``book.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    json_output : bool, optional
        Print the entries as a JSON array instead of tab-separated text.

    Raises
    ------
    MalformedTreeError
        If the content tree lacks or contradicts its ordering metadata.
    """
    entries = flatten(_load_tree(load_book_config(config)))
    if json_output:
        print(json.dumps([entry.as_dict() for entry in entries], indent=2))
        return
    for entry in entries:
        fields = (entry.sequence_number, entry.label, entry.identity, entry.unit.title)
        print("\t".join(str(field) for field in fields))


@app.command(help="Print previous/next links and position for one unit.")
def nav(
    *,
    current: CurrentOption,
    config: ConfigOption = DEFAULT_CONFIG,
    json_output: JsonOption = False,
) -> None:
    """Report the pager data for ``current``.

    Parameters
    ----------
    current : str
        Identity of the unit being rendered; ``""`` selects the overview page.
    config : Path, optional
        Path to the ``book.yaml`` configuration file.
    json_output : bool, optional
        Print the navigation result as a JSON object.

    Raises
    ------
    UnknownCurrentUnitError
        If ``current`` is neither the root nor a navigable unit.
    """
    root = _load_tree(load_book_config(config))
    result = locate(flatten(root), current, root=root)
    if json_output:
        print(json.dumps(result.as_dict(), indent=2))
        return
    print(f"previous: {result.previous if result.previous is not None else '-'}")
    print(f"next: {result.next if result.next is not None else '-'}")
    print(f"position: {result.position_label}")


@app.command(help="Print the table of contents with the active path marked.")
def toc(
    *,
    current: CurrentOption = "",
    config: ConfigOption = DEFAULT_CONFIG,
    json_output: JsonOption = False,
) -> None:
    """Print the nested table of contents for ``current``.

    Active chapters are prefixed with ``>`` and the current unit with ``*``;
    exposed headings are listed beneath their node with a ``#`` prefix.
    """
    root = _load_tree(load_book_config(config))
    node = build_toc(root, current)
    if json_output:
        print(json.dumps(node.as_dict(), indent=2))
        return
    for line in _toc_lines(node, depth=0):
        print(line)


@app.command(help="Write pager and sidebar fragments for every page.")
def render(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render navigation fragments for the overview page and every unit.

    Parameters
    ----------
    config : Path, optional
        Path to the ``book.yaml`` configuration file.
    output_dir : Path or None, optional
        Override for the configured fragment output directory.
    """
    book = load_book_config(config)
    renderer = NavFragmentRenderer(_load_tree(book), labels=book.labels)
    for path in renderer.run(output_dir or book.output_dir):
        print(f"wrote {_format_path(path)}")


def _toc_lines(node: TocNode, *, depth: int) -> typ.Iterator[str]:
    """Yield indented text lines for ``node`` and its descendants."""
    marker = "*" if node.is_active_page else ">" if node.is_active_chapter else " "
    indent = "  " * depth
    label = f"{node.label} " if node.label else ""
    yield f"{indent}{marker} {label}{node.title}"
    for heading in node.headings:
        yield f"{indent}    # {heading.title}"
    for child in node.children:
        yield from _toc_lines(child, depth=depth + 1)


def main() -> None:
    """Invoke the Cyclopts application that powers the `booknav` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
