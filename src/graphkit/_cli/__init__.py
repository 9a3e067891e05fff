"""Command line interface for graphkit."""
