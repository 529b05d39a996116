"""sizeof - mechanical component catalog with fuzzy search and parameterized drawings."""

__version__ = "0.1.0"
