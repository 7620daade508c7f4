"""Shared constants, errors and logging helpers for subsorter."""
