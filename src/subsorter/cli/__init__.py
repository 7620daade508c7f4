"""Command-line interface for subsorter."""
