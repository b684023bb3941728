"""Transfer commands: export and import CSV files."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ...io.csv_codec import export_csv, export_filename, import_csv
from .. import views
from ..app import CacheDirOption, RemoteUrlOption, app, get_engine, report_mode


@app.command("export")
def export_entries(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Output CSV file (default: strength_log_<today>.csv)"),
    ] = None,
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Export every entry to a CSV file.
    """
    engine = get_engine(cache_dir, remote_url)
    entries = engine.entries
    target = path or Path(export_filename())

    try:
        target.write_text(export_csv(entries) + "\n", encoding="utf-8")
    except OSError as e:
        views.print_error(f"Cannot write {target}: {e}")
        raise typer.Exit(1)

    views.print_success(f"Exported {len(entries)} entries to {target}")


@app.command("import")
def import_entries(
    path: Annotated[Path, typer.Argument(help="CSV file to import")],
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
) -> None:
    """
    Import entries from a CSV file.

    Every row becomes a new entry; rows that cannot be parsed are skipped.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        views.print_error(f"Cannot read {path}: {e}")
        raise typer.Exit(1)

    result = import_csv(text)
    for skipped in result.skipped:
        views.print_warning(f"Line {skipped.line_number} skipped: {skipped.reason}")

    if not result.entries:
        views.print_info("No entries to import.")
        return

    engine = get_engine(cache_dir, remote_url)
    engine.import_entries(result.entries)
    views.print_success(f"Imported {len(result.entries)} entries ({len(result.skipped)} skipped)")
    report_mode(engine)
