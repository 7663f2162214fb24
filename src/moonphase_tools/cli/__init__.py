"""Command-line interface for moonphase-tools."""
