"""Package for markup acquisition and parsing."""

from .acquisition import DEFAULT_TIMEOUT, FetchError, fetch_url, read_file
from .document import HtmlDocument

__all__ = ["DEFAULT_TIMEOUT", "FetchError", "fetch_url", "read_file", "HtmlDocument"]
