"""Command-line interface for dairyledger."""
