from __future__ import annotations

import re
from io import StringIO

import pytest
from rich.console import Console
from rich.progress import BarColumn, FileSizeColumn, Progress, TotalFileSizeColumn

from lib_log_trace.adapters.progress import CountColumn, EtaColumn, build_progress_columns, create_progress


def test_count_style_maps_every_placeholder() -> None:
    columns = build_progress_columns("count")
    kinds = {type(column) for column in columns}

    assert BarColumn in kinds
    assert CountColumn in kinds
    assert EtaColumn in kinds


def test_bytes_style_uses_file_size_columns() -> None:
    kinds = {type(column) for column in build_progress_columns("bytes")}

    assert {FileSizeColumn, TotalFileSizeColumn} <= kinds


def test_unknown_style_raises() -> None:
    with pytest.raises(ValueError):
        build_progress_columns("nope")


def test_progress_renders_counts_and_eta() -> None:
    console = Console(file=StringIO(), record=True, width=160)
    progress = create_progress("count", console=console)
    task = progress.add_task("copying", total=4)
    progress.update(task, completed=2)

    console.print(progress.make_tasks_table(progress.tasks))
    output = console.export_text()

    assert re.search(r"2\s*/\s*4", output)
    assert "copying" in output


def test_open_ended_total_renders_placeholders() -> None:
    progress = create_progress("count", console=Console(file=StringIO(), width=160))
    task_id = progress.add_task("waiting", total=None)
    task = progress.tasks[task_id]

    assert str(CountColumn(total=True).render(task)) == "?"
    assert str(EtaColumn().render(task)) == "-:--:--"


def test_create_progress_returns_rich_progress() -> None:
    assert isinstance(create_progress("plain", transient=True), Progress)
