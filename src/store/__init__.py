"""Storage layer.

This module wraps the zoxide database with a typed store contract,
snapshot-based backup and restore, and export helpers.
"""
