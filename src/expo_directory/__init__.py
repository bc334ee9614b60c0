"""
Expo directory - exhibitor, team and partner lookups over spreadsheet rows.

- expo_directory.domain: records, normalization, grouping, sorting
- expo_directory.sources: row sources (CSV workbook, in-memory)
- expo_directory.ops: the request dispatcher and reply envelopes
- expo_directory.api: FastAPI app factory
- expo_directory.cli: Typer CLI
"""

__version__ = "0.1.0"
