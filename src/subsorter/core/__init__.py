"""Core subtitle placement logic for subsorter."""
