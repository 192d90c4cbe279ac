"""Registry ingestion pipeline.

This module streams registry CSV files through the row parsers.
It reports progress and row errors while feeding the holder database.
"""
