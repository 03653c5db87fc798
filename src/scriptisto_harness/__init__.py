"""scriptisto-harness - generate and batch-test scriptisto example scripts."""

from importlib.metadata import version

try:
    __version__ = version("scriptisto-harness")
except Exception:
    __version__ = "0.0.0-dev"
