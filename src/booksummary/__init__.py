"""book-summary: generate SUMMARY.md tables of contents for mdBook and GitBook."""

__version__ = "0.1.0"
