"""Shared helpers for error handling and statistics."""
