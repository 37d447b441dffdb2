"""Command-line interface for venue-trust."""
