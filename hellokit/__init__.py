"""Small utilities: directory tailing, file watching, scraping helpers, wire encodings and data structures."""

__version__ = "0.1.0"