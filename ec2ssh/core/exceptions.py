"""Exceptions raised while resolving an instance and launching a session."""

from __future__ import annotations


class Ec2SshError(Exception):
    """Base class for ec2ssh errors."""


class InstanceNotFoundError(Ec2SshError):
    """No active instance matched the lookup string."""

    def __init__(self, lookup: str | None = None) -> None:
        if lookup is None:
            message = "No instances found"
        else:
            message = f"Found no instance '{lookup}'"
        super().__init__(message)
        self.lookup = lookup


class InvalidSelectionError(Ec2SshError):
    """The answer to the disambiguation prompt is not a usable index."""


class SelectionCancelled(Ec2SshError):
    """The disambiguation prompt reached end of input."""


class SSHClientNotFoundError(Ec2SshError):
    """The ssh executable could not be located on PATH."""


class SessionError(Ec2SshError):
    """The ssh session could not be started or exited with an error.

    Parameters
    ----------
    message : str
        Error description
    returncode : int | None
        Exit status of the ssh process, if it ran
    """

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
