"""Package for html_grader source code.

Expose subpackages for easier imports, e.g. `from html_grader import parser, core`.
"""

from . import core, parser, web  # re-export packages

__all__ = ["core", "parser", "web"]
