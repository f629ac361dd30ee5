"""Utility functions for ec2ssh."""

import logging
import sys
from collections.abc import Sequence
from typing import Any

from ec2ssh.core.instance import InstanceRecord

COLUMN_PADDING = 4

INSTANCE_COLUMNS = ["Name", "Instance ID", "Private IP", "Public IP"]


def log_and_print_error(message: str, *args: Any) -> None:
    """Log error message and print to stderr.

    Parameters
    ----------
    message : str
        Error message with optional format placeholders
    *args : Any
        Format arguments for message
    """
    logging.debug(message, *args)
    formatted_msg = message % args if args else message
    print(f"Error: {formatted_msg}", file=sys.stderr)


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render rows as left-aligned columns with a dashed rule under the header.

    Parameters
    ----------
    headers : Sequence[str]
        Column titles
    rows : Sequence[Sequence[str]]
        Cell values, one sequence per row

    Returns
    -------
    str
        Table text ending with a newline
    """
    rules = ["-" * len(header) for header in headers]
    all_rows = [list(headers), rules, *[list(row) for row in rows]]

    widths = [
        max(len(row[i]) for row in all_rows) + COLUMN_PADDING
        for i in range(len(headers))
    ]

    lines = []
    for row in all_rows:
        cells = [cell.ljust(width) for cell, width in zip(row[:-1], widths)]
        cells.append(row[-1])
        lines.append("".join(cells).rstrip())

    return "\n".join(lines) + "\n"


def instance_row(record: InstanceRecord) -> list[str]:
    return [
        record.display_name,
        record.id,
        record.private_address,
        record.display_public_address,
    ]


def format_instance_list(records: Sequence[InstanceRecord]) -> str:
    """Format instances as a Name / ID / Private IP / Public IP table."""
    return format_table(INSTANCE_COLUMNS, [instance_row(r) for r in records])


def format_numbered_instance_list(records: Sequence[InstanceRecord]) -> str:
    """Format instances as a table whose first column is a 1-based index."""
    rows = [[str(i), *instance_row(r)] for i, r in enumerate(records, start=1)]
    return format_table(["n", *INSTANCE_COLUMNS], rows)
