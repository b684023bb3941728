"""Shared Typer app object, shared option types, and engine utility."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from ..core.config import DAYS, WEEKS
from ..core.config_loader import load_settings
from ..core.sync import SyncEngine
from ..io.cache_store import EntryCache
from ..io.remote import HttpRemote, NullRemote
from . import views

# Shared options used across all commands
CacheDirOption = Annotated[
    Optional[Path],
    typer.Option("--cache-dir", "-c", help="Local cache directory (default: ~/.strength-log/cache)"),
]
RemoteUrlOption = Annotated[
    Optional[str],
    typer.Option("--remote-url", "-r", help="Base URL of the entries API (default: from config)"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="strength-log",
    help="Strength & plyometrics log for a 4-week A/B training plan.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show sync and cache diagnostics"),
    ] = False,
) -> None:
    """
    Log training entries, sync them to a remote store, and track volume.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=views.console, show_path=False)],
        force=True,
    )


def get_engine(cache_dir: Path | None, remote_url: str | None) -> SyncEngine:
    """
    Build and initialize a sync engine for one command.

    Explicit options win over ~/.strength-log/config.yaml and the
    STRENGTH_LOG_* environment variables.  Without any remote URL the
    engine works offline against the local cache.
    """
    settings = load_settings()
    url = remote_url or settings.remote_url
    remote = HttpRemote(url, timeout=settings.timeout) if url else NullRemote()
    engine = SyncEngine(remote, EntryCache(cache_dir or settings.cache_dir))
    engine.initialize()
    return engine


def report_mode(engine: SyncEngine) -> None:
    """Print the offline notice after a write, if the remote was unreachable."""
    views.print_mode(engine.mode, engine.last_error)


def check_week(week: str) -> str:
    """Validate a --week value or exit."""
    if week not in WEEKS:
        views.print_error(f"Week must be one of {', '.join(WEEKS)}, got {week!r}")
        raise typer.Exit(1)
    return week


def check_day(day: str) -> str:
    """Validate a --day value (case-insensitive) or exit."""
    value = day.upper()
    if value not in DAYS:
        views.print_error(f"Day must be one of {', '.join(DAYS)}, got {day!r}")
        raise typer.Exit(1)
    return value
