"""jobmock command-line interface."""

from jobmock.cli.app import app, run

__all__ = ["app", "run"]
