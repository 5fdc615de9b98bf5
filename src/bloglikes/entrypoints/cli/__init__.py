"""Command-line interface for bloglikes."""
