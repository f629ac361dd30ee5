"""Logging formatters."""

import logging


class ProgramFormatter(logging.Formatter):
    """Logging formatter that prefixes every line with the program name.

    Parameters
    ----------
    program : str
        Program name shown before each message
    fmt : str | None
        Message format passed to logging.Formatter
    """

    def __init__(self, program: str, fmt: str | None = "%(message)s") -> None:
        super().__init__(fmt)
        self.program = program

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with the program prefix.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format

        Returns
        -------
        str
            Formatted log message prefixed with ``program: ``
        """
        msg = super().format(record)
        return f"{self.program}: {msg}"
