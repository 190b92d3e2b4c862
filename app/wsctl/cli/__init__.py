"""Command line interface for wsctl."""
