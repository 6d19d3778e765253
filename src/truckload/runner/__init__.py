"""Manifest loading, trial data and the command-line entry point."""
