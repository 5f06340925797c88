"""Data layer: use-case implementations and the capabilities they consume."""
