"""Command-line interface for NerdBook."""
