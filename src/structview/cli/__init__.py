"""Command line interface for structview."""
