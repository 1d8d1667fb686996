"""Tabular file I/O for the comment normalizer."""

from .tabular import errors_to_dataframe, read_comments, write_table

__all__ = ["errors_to_dataframe", "read_comments", "write_table"]
