"""Command-line entry points for the documentation generator and the archiver."""
