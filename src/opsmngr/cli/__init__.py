"""Command line diagnostics."""
