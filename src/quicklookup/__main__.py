"""Main entry point for quick-lookup."""

from quicklookup.cli import cli

if __name__ == "__main__":
    cli()
