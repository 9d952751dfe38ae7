"""Command line interface for akshelper."""
