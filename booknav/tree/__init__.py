"""Document tree model and the content-directory loader that builds it.

The engine only needs a :class:`Section` tree; :func:`load_content_tree` is the
collaborator that reads one from a Hugo-style ``content/`` directory.

Examples
--------
>>> from pathlib import Path
>>> from booknav.tree import load_content_tree
>>> root = load_content_tree(Path("content"))  # doctest: +SKIP
>>> [chapter.title for chapter in root.chapters]  # doctest: +SKIP
['Getting Started', 'Reference']
"""

from .loader import load_content_tree
from .models import Heading, Identity, MalformedTreeError, Page, Section

__all__ = [
    "Heading",
    "Identity",
    "MalformedTreeError",
    "Page",
    "Section",
    "load_content_tree",
]
