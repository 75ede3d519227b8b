"""Command-line interface for dashcompat."""
