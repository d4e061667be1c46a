"""Common literal values used across docs_page.

These constants keep default option values and file-name markers centralized
so the option resolver, the section classifier, and tests import the same
values without drifting. Intended for internal use within the docs_page
package.

Examples
--------
>>> from docs_page import _constants
>>> "md" in _constants.MARKUP_EXTENSIONS
True
>>> _constants.DEFAULT_OUTLINE_DEPTH
3
"""

DEFAULT_ROOT = "./build/docs"
DEFAULT_DEST = "./"
DEFAULT_OUTLINE_DEPTH = 3
DEFAULT_PYGMENTS_STYLE = "monokai"
DEFAULT_WORKERS = 1

TEMPLATE_EXTENSIONS = frozenset({"jinja", "j2", "hbs"})
MARKUP_EXTENSIONS = frozenset({"md", "markdown"})
