#!/usr/bin/env python3
"""
harview/scripts/view_har.py

Terminal viewer for HAR files.

Usage:
    harview ./network.har
    harview ./network.har --method POST --domain api.
    harview ./network.har --entry 3
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from harview.config import Config
from harview.data_models.har import BodyRecord, HeaderPair, SummaryRow
from harview.formatters import format_body
from harview.har.har_data_store import HarDataStore
from harview.utils.exceptions import EntryIndexOutOfRangeError, MalformedDocumentError
from harview.utils.logger import get_logger


logger = get_logger(name=__name__)
console = Console()


def _truncate(value: str, width: int) -> str:
    if width <= 0 or len(value) <= width:
        return value
    return value[:max(width - 3, 0)] + "..."


def print_summary_table(rows: list[SummaryRow], title: str) -> None:
    """Print the entry table."""
    table = Table(title=title, box=box.SIMPLE_HEAD, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Protocol", style="cyan")
    table.add_column("Method", style="bold")
    table.add_column("Domain", style="white")
    table.add_column("Path", style="white")
    table.add_column("Status", justify="right")
    table.add_column("Type", style="magenta")
    table.add_column("Size", justify="right")
    table.add_column("Time", justify="right", style="yellow")

    for row in rows:
        status_style = "green" if row.status.startswith(("2", "3")) else "red"
        table.add_row(
            str(row.id),
            escape(row.protocol),
            escape(row.method),
            escape(row.domain),
            escape(_truncate(row.path, Config.MAX_CELL_WIDTH)),
            f"[{status_style}]{escape(row.status)}[/{status_style}]",
            escape(row.content_type),
            row.size,
            row.time_display,
        )

    console.print(table)


def print_headers(headers: HeaderPair) -> None:
    """Print request and response header panels."""
    console.print(Panel(
        Text("\n".join(headers.request_lines)),
        title="[bold]Request Headers[/bold]",
        border_style="cyan",
        box=box.ROUNDED,
    ))
    console.print(Panel(
        Text("\n".join(headers.response_lines)),
        title="[bold]Response Headers[/bold]",
        border_style="cyan",
        box=box.ROUNDED,
    ))


def print_body(title: str, record: BodyRecord, pretty: bool) -> None:
    """Print a body panel, labelled with its mime type or sentinel."""
    label = f" ({escape(record.label)})" if record.label else ""
    console.print(Panel(
        Text(format_body(record, pretty=pretty)),
        title=f"[bold]{title}[/bold]{label}",
        border_style="magenta",
        box=box.ROUNDED,
    ))


def print_entry_detail(store: HarDataStore, entry_id: int, pretty: bool) -> None:
    """Print headers and bodies of a single entry."""
    headers = store.get_headers(entry_id)
    request_body = store.get_request_body(entry_id)
    response_body = store.get_response_body(entry_id)
    row = store.rows[entry_id - 1]

    console.print(
        f"[bold]Entry {row.id}[/bold]  {escape(row.method)} "
        f"{escape(row.protocol)}://{escape(row.domain)}{escape(row.path)}  "
        f"[dim]{escape(row.status)} | {row.time_display}[/dim]"
    )
    print_headers(headers)
    print_body("Request Body", request_body, pretty)
    print_body("Response Body", response_body, pretty)


def print_error(error: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]⚠ Error:[/bold red] [red]{escape(error)}[/red]")


def main(argv: list[str] | None = None) -> None:
    """View a HAR file in the terminal."""
    parser = argparse.ArgumentParser(
        description="harview - HAR file viewer"
    )
    parser.add_argument("har_path", type=str, help="Path to the HAR file")
    parser.add_argument("--entry", type=int, default=None, help="Show headers and bodies of this entry id")
    parser.add_argument("--method", type=str, default=None, help="Only list entries with this HTTP method")
    parser.add_argument("--domain", type=str, default=None, help="Only list entries whose domain contains this text")
    parser.add_argument("--path", type=str, default=None, help="Only list entries whose path contains this text")
    parser.add_argument("--status", type=str, default=None, help="Only list entries with this status code")
    parser.add_argument("--content-type", type=str, default=None, help="Only list entries whose content type contains this text")
    parser.add_argument(
        "--raw",
        action="store_true",
        default=not Config.PRETTY_BODIES,
        help="Show bodies exactly as recorded, without pretty-printing",
    )
    args = parser.parse_args(argv)

    har_path = Path(args.har_path)
    if not har_path.exists():
        print_error(f"HAR file not found: {har_path}")
        sys.exit(1)

    try:
        store = HarDataStore.from_file(har_path)
    except MalformedDocumentError as e:
        print_error(f"Could not parse HAR file: {e}")
        sys.exit(1)

    logger.info("Viewing %s (%d entries)", har_path, len(store))

    if args.entry is not None:
        try:
            print_entry_detail(store, args.entry, pretty=not args.raw)
        except EntryIndexOutOfRangeError as e:
            print_error(str(e))
            sys.exit(1)
        return

    rows = store.search_rows(
        method=args.method,
        domain_contains=args.domain,
        path_contains=args.path,
        status=args.status,
        content_type_contains=args.content_type,
    )
    print_summary_table(rows, title=f"{escape(har_path.name)}: {len(rows)} of {len(store)} entries")


if __name__ == "__main__":
    main()
