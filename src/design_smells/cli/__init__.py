"""Command-line interface for design-smells."""
