"""Subcommands for the scriptisto-harness CLI."""
