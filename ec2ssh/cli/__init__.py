"""CLI argument parsing and handling."""

from __future__ import annotations

from ec2ssh.cli.parsing import normalize_text_argument, parse_verbose

__all__ = [
    "normalize_text_argument",
    "parse_verbose",
]
