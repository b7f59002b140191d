"""pyshim CLI commands."""
