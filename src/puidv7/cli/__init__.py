"""Command-line interface for puidv7."""
