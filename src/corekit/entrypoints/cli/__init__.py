"""Command-line interface for COREKIT."""
