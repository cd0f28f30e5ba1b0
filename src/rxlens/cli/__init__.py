"""Command line interface for rxlens."""
