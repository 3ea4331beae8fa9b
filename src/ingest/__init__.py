"""Input ingestion and import.

This module reads interchange files, detects their format, converts
them between formats, and imports them into the frecency store.
"""
