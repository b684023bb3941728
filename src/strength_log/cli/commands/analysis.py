"""Analysis commands: progress, catalog, plan."""

import json
from typing import Annotated

import typer

from ...core.exercises.registry import TRAINING_PLAN, list_grouped_by_category, template_sets
from ...core.metrics import per_exercise_progress, progress_ratio
from .. import views
from ..app import CacheDirOption, JsonOption, RemoteUrlOption, app, check_week, get_engine


@app.command()
def progress(
    week: Annotated[
        str,
        typer.Option("--week", "-w", help="Week to compare against each exercise's best entry"),
    ],
    cache_dir: CacheDirOption = None,
    remote_url: RemoteUrlOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show this week's volume per exercise against its best single entry.
    """
    week = check_week(week)
    engine = get_engine(cache_dir, remote_url)
    rows = per_exercise_progress(engine.entries, week)

    if json_out:
        print(json.dumps([
            {
                "exercise": p.exercise,
                "label": p.label,
                "current_week_volume": p.current_week_volume,
                "best_week_volume": p.best_week_volume,
                "ratio": round(progress_ratio(p), 2),
            }
            for p in rows
        ], indent=2, ensure_ascii=False))
        return

    if not rows:
        views.print_info("No entries yet.")
        return

    views.console.print(views.format_progress_table(rows, week))


@app.command()
def catalog(json_out: JsonOption = False) -> None:
    """
    List known exercises grouped by category.
    """
    grouped = list_grouped_by_category()

    if json_out:
        print(json.dumps({
            category: [
                {
                    "identifier": item.identifier,
                    "label": item.label,
                    "unit": item.unit,
                    "template": template_sets(item.identifier),
                }
                for item in items
            ]
            for category, items in grouped.items()
        }, indent=2, ensure_ascii=False))
        return

    views.print_catalog(grouped)


@app.command()
def plan() -> None:
    """
    Show the 4-week Day A / Day B training plan.
    """
    views.print_plan(TRAINING_PLAN)
