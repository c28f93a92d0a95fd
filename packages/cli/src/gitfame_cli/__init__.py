"""Command-line interface for gitfame."""
