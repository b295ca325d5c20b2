import os
import logging
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from .types import Config, DecisionRecord, RunSummary, Status
from .registry import load_canonical_names
from .matcher import Matcher
from .validator import Validator, summarize
from .jsonoutput import JSONOutput
from .spreadsheet import write_workbook

STATUS_STYLES = {
    Status.CORRECT: "green",
    Status.RENAMED: "yellow",
    Status.NOT_MATCHED: "red",
}


def run_tui(config: Config) -> int:
    console = Console()
    console.print("[bold green]Name Validator[/bold green]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console
    ) as progress:

        # 1. Load names
        task_load = progress.add_task("[cyan]Loading names...", total=None)
        names = load_canonical_names(config.names_path)
        progress.update(task_load, completed=100, total=100)
        console.print(f"Loaded {len(names)} canonical names")

        # 2. Validate
        validator = Validator(config.folder_path, Matcher(names), do_rename=config.rename)
        entries = validator.list_entries()
        label = "[red]Validating and renaming..." if config.rename else "[magenta]Validating..."
        task_check = progress.add_task(label, total=len(entries))
        records = []
        for filename in entries:
            records.append(validator.process_entry(filename))
            progress.advance(task_check)
        logging.info(f"Checked {len(records)} entries in {config.folder_path}")

        # 3. Reports
        task_report = progress.add_task("[blue]Writing reports...", total=2)
        os.makedirs(config.report_dir, exist_ok=True)
        json_path = JSONOutput.write(records, config.report_dir)
        progress.advance(task_report)
        xlsx_path = write_workbook(records, config.report_dir)
        progress.advance(task_report)

    summary = summarize(records, do_rename=config.rename)
    console.print(build_table(records))
    print_summary(console, summary, config.rename)
    console.print(f"Report saved to {json_path}")
    console.print(f"Excel file saved to {xlsx_path}")
    console.print("[bold green]Done![/bold green]")

    return 0


def build_table(records: List[DecisionRecord]) -> Table:
    """Render the records as a rich table."""
    table = Table(title="Validation Summary")
    table.add_column("Status")
    table.add_column("Original Filename")
    table.add_column("Matched Name")
    table.add_column("Distance", justify="right")
    table.add_column("Corrected Filename")

    for record in records:
        style = STATUS_STYLES[record.status]
        table.add_row(
            f"[{style}]{record.status.label}[/{style}]",
            escape(record.original),
            escape(record.matched_name),
            str(record.distance),
            escape(record.corrected_filename),
        )
    return table


def print_summary(console: Console, summary: RunSummary, do_rename: bool) -> None:
    console.print(
        f"Total: {summary.total} | [green]Correct: {summary.correct}[/green] | "
        f"[yellow]Renamed: {summary.renamed}[/yellow] | "
        f"[red]Not matched: {summary.not_matched}[/red]"
    )
    if do_rename:
        console.print(f"Renames performed: {summary.renames_performed} | "
                      f"Failed: {summary.rename_failures}")
    else:
        console.print("[bold yellow]Dry run: no files were renamed[/bold yellow]")

    for target, originals in summary.collisions.items():
        console.print(f"[bold red]Collision:[/bold red] {escape(target)} <- {escape(', '.join(originals))}")
