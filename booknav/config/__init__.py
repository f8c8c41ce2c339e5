"""Load and validate the booknav YAML configuration.

This subpackage parses ``config/book.yaml``, applies defaults, resolves the
content and output directories relative to the file, and returns a
:class:`BookConfig` ready for the content loader and fragment renderer.

Examples
--------
>>> from pathlib import Path
>>> from booknav.config import load_book_config
>>> book = load_book_config(Path("config/book.yaml"))  # doctest: +SKIP
>>> book.content_dir.name  # doctest: +SKIP
'content'
"""

from .loader import load_book_config
from .models import BookConfig, BookConfigError, LabelsConfig

__all__ = ["BookConfig", "BookConfigError", "LabelsConfig", "load_book_config"]
