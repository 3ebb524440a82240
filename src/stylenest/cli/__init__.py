"""Command-line interface for stylenest."""
