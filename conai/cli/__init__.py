"""Command Line Interface Package"""

from conai.cli.main import main, run

__all__ = ["main", "run"]
