"""Command-line entry points for Voltflow."""
