"""mdview: a small markdown viewer core.

The package renders markdown files into self-contained, themed HTML documents
and exports markdown or plain text to paginated PDF files.  User preferences
and a most-recently-used file list are kept in an injected key-value store.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
