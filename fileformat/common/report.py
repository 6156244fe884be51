"""Console rendering and report files for file identification.

Everything shown on the terminal goes through one ``rich`` console; machine
readable output is a JSON document or a CSV sheet with one row per file.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.filesize import decimal
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console(highlight=False)


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------


def print_header(title: str, detail: str = "") -> None:
    """Print a horizontal rule carrying *title* and an optional *detail*."""
    label = f"[bold]{title}[/bold]"
    if detail:
        label += f" [dim]{detail}[/dim]"
    console.rule(label, align="left")


def print_rows(
    columns: Sequence[str],
    rows: Iterable[Sequence[object]],
    title: str | None = None,
) -> None:
    """Print *rows* under *columns*.

    Cells are rendered as plain text, so file names containing ``[`` are
    never taken for console markup.  Long cells fold instead of being cut.
    """
    table = Table(title=title, header_style="bold cyan", title_justify="left")
    for name in columns:
        table.add_column(name, overflow="fold")
    for row in rows:
        table.add_row(*(Text("" if cell is None else str(cell)) for cell in row))
    console.print(table)


def print_warning(message: str) -> None:
    console.print(Text(f"warning: {message}", style="yellow"))


def print_counts(title: str, counts: Mapping[str, int]) -> None:
    """Print *counts* as a right-aligned two-column panel."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column(justify="right")
    for label, count in counts.items():
        grid.add_row(label, str(count))
    console.print(Panel(grid, title=title, border_style="green", expand=False))


def human_size(n: int) -> str:
    """Return *n* bytes in SI units, e.g. ``"36.9 kB"``."""
    return decimal(n)


def utc_now() -> str:
    """Return the current UTC time, ISO 8601, to the second."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


# ---------------------------------------------------------------------------
# Report files
# ---------------------------------------------------------------------------


def write_json(path: str | Path, document: Mapping[str, Any]) -> Path:
    """Write *document* as indented UTF-8 JSON and return the path written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(document, fh, indent=2, ensure_ascii=False)
        fh.write("\n")
    return path


def write_csv(
    path: str | Path,
    records: Iterable[Mapping[str, Any]],
    fields: Sequence[str],
) -> Path:
    """Write *records* as CSV with a header row of *fields*.

    Keys outside *fields* are dropped; ``None`` becomes an empty cell.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=list(fields), extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path
