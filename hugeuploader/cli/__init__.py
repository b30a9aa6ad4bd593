"""CLI modules for hugeuploader."""
