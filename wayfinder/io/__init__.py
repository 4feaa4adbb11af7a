"""Input abstractions for the wayfinder.

This subpackage turns the raw text of the hand-maintained data files into
tables that the ingestion pipeline can validate and load.
"""

from .table import Table, parse_integer, parse_table

__all__ = ["Table", "parse_integer", "parse_table"]
