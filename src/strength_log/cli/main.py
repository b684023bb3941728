"""
CLI entry point using Typer.

Provides commands for the training log:
- list: Show (filtered) entries with total volume
- add / edit / delete / clear: Change the log
- export / import: CSV interchange
- progress: Current week against best entry per exercise
- catalog / plan: Static exercise catalog and training plan
"""

from .app import app
from .commands import analysis, entries, transfer  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
