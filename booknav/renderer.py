"""Render pager and sidebar HTML fragments for each page of a book.

The site renderer includes two fragments per page: the pager (previous link,
``N / total`` position, next link) and the sidebar table of contents. This
module runs one flatten, locate, and TOC pass per rendered unit and feeds the
results to Jinja templates stored under ``booknav/templates``.

Typical usage pairs the config and content loaders:

>>> from pathlib import Path
>>> from booknav.config import load_book_config
>>> from booknav.renderer import NavFragmentRenderer
>>> from booknav.tree import load_content_tree
>>> book = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
>>> root = load_content_tree(book.content_dir)  # doctest: +SKIP
>>> renderer = NavFragmentRenderer(root, labels=book.labels)  # doctest: +SKIP
>>> written = renderer.run(book.output_dir)  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from booknav.config import LabelsConfig
from booknav.navigation import build_toc, flatten, locate

if typ.TYPE_CHECKING:
    from booknav.tree import Identity, Section

PAGER_FILENAME = "pager.html"
SIDEBAR_FILENAME = "sidebar.html"


@dc.dataclass(frozen=True, slots=True)
class NavFragments:
    """Rendered HTML for one page's pager and sidebar."""

    pager_html: str
    sidebar_html: str


class NavFragmentRenderer:
    """Render navigation fragments for the root and every navigable unit."""

    def __init__(
        self,
        root: Section,
        *,
        labels: LabelsConfig | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        root : Section
            Book tree, treated as read-only.
        labels : LabelsConfig, optional
            Pager and sidebar wording; defaults to English labels.
        templates_dir : Path, optional
            Directory containing ``pager.jinja`` and ``sidebar.jinja``;
            defaults to the package templates.
        """
        self.root = root
        self.labels = labels or LabelsConfig()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.pager_template = self.env.get_template("pager.jinja")
        self.sidebar_template = self.env.get_template("sidebar.jinja")

    def render_for(self, current: Identity) -> NavFragments:
        """Render both fragments for the unit identified by ``current``.

        Raises
        ------
        MalformedTreeError
            If the tree is missing or contradicts its ordering metadata.
        UnknownCurrentUnitError
            If ``current`` is not part of the tree.
        """
        entries = flatten(self.root)
        navigation = locate(entries, current, root=self.root)
        toc = build_toc(self.root, current)
        pager_html = self.pager_template.render(nav=navigation, labels=self.labels)
        sidebar_html = self.sidebar_template.render(toc=toc, labels=self.labels)
        return NavFragments(
            pager_html=_with_newline(pager_html),
            sidebar_html=_with_newline(sidebar_html),
        )

    def run(self, output_dir: Path) -> list[Path]:
        """Write fragments for the overview page and every navigable unit.

        Returns
        -------
        list[Path]
            Written files in reading order, pager before sidebar per unit.

        Notes
        -----
        Root fragments land directly in ``output_dir`` and unit fragments in
        ``<output_dir>/<identity>/``, so no identity can overwrite the root;
        parent directories are created as needed.
        """
        identities = [self.root.identity]
        identities.extend(entry.identity for entry in flatten(self.root))
        written: list[Path] = []
        for identity in identities:
            fragments = self.render_for(identity)
            target = output_dir / identity if identity else output_dir
            target.mkdir(parents=True, exist_ok=True)
            for filename, html in (
                (PAGER_FILENAME, fragments.pager_html),
                (SIDEBAR_FILENAME, fragments.sidebar_html),
            ):
                path = target / filename
                path.write_text(html, encoding="utf-8")
                written.append(path)
        return written


def _with_newline(html: str) -> str:
    return html if html.endswith("\n") else html + "\n"


__all__ = ["NavFragmentRenderer", "NavFragments"]
