"""Command-line interface for Silicon Soul."""
