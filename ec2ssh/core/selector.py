"""Interactive choice between several matching instances."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ec2ssh.constants import DEFAULT_SELECTION
from ec2ssh.core.exceptions import InvalidSelectionError, SelectionCancelled
from ec2ssh.core.instance import InstanceRecord
from ec2ssh.utils import format_numbered_instance_list

logger = logging.getLogger(__name__)

PROMPT = ">>> "

SELECTION_PATTERN = re.compile(r"[+-]?[0-9]+")
"""Accepted answer shape: optional sign and ASCII digits only."""


class InstanceSelector:
    """Ask the user which of several candidate instances to connect to.

    Parameters
    ----------
    input_func : Callable[[str], str] | None
        Reads one line after writing a prompt; raises EOFError at end of
        input. Defaults to the builtin ``input``
    output : TextIO | None
        Stream the candidate table is written to. Defaults to sys.stdout
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.input_func = input_func or input
        self.output = output

    @property
    def stream(self) -> TextIO:
        return self.output or sys.stdout

    def choose(self, lookup: str, candidates: Sequence[InstanceRecord]) -> InstanceRecord:
        """Present the numbered candidates and return the one picked.

        Parameters
        ----------
        lookup : str
            Lookup string the candidates matched
        candidates : Sequence[InstanceRecord]
            Candidates in display order

        Returns
        -------
        InstanceRecord
            The chosen candidate

        Raises
        ------
        SelectionCancelled
            If input ends before an answer is given
        InvalidSelectionError
            If the answer is not an integer or is out of range
        """
        self.stream.write(
            f"Found more than one instance for '{lookup}'.\n\n"
            "Available instances:\n\n"
            f"{format_numbered_instance_list(candidates)}\n"
            f"Which would you like to connect to? [{DEFAULT_SELECTION}]\n"
        )
        self.stream.flush()

        try:
            answer = self.input_func(PROMPT)
        except EOFError:
            raise SelectionCancelled() from None

        index = parse_selection(answer)

        if index < 1 or index > len(candidates):
            raise InvalidSelectionError(f"Invalid index {index}")

        chosen = candidates[index - 1]
        logger.debug("selected instance %s (%s)", chosen.id, chosen.display_name)
        return chosen


def parse_selection(answer: str) -> int:
    """Parse a prompt answer into a 1-based index.

    Parameters
    ----------
    answer : str
        Line read from the prompt

    Returns
    -------
    int
        Requested index; DEFAULT_SELECTION for a blank answer

    Raises
    ------
    InvalidSelectionError
        If the answer is not a base-10 integer
    """
    answer = answer.strip()
    if not answer:
        return DEFAULT_SELECTION

    if not SELECTION_PATTERN.fullmatch(answer):
        raise InvalidSelectionError(f"Invalid index '{answer}'")

    return int(answer)
