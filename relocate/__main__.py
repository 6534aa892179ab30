"""Entry point for ``python -m relocate``."""

from .cli import run

run()
