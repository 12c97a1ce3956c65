"""Command line tools for recorded sessions."""
