"""Common literal values used across booknav.

These defaults are shared by the configuration model and the content loader
so a book without explicit settings is read the same way from the CLI and
from library code.

Examples
--------
>>> from booknav import _constants
>>> _constants.DEFAULT_FRONT_MATTER_KEY
'chapter'
>>> _constants.DEFAULT_HEADING_LEVEL
2
"""

DEFAULT_FRONT_MATTER_KEY = "chapter"
DEFAULT_HEADING_LEVEL = 2
