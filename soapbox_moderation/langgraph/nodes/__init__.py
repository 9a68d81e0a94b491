"""Workflow nodes for the classification graph."""
