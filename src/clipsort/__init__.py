"""ClipSort: clipboard history organized by date and category."""

__version__ = "0.1.0"
