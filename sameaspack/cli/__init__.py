"""Command line interface for SameAsKit."""
