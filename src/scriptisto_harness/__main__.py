"""Allow running the CLI as ``python -m scriptisto_harness``."""

from scriptisto_harness.cli import app

if __name__ == "__main__":
    app()
