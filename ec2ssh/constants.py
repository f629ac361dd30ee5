"""Global constants for ec2ssh.

This module contains application-wide constants used by the resolver,
the selector and the session launcher.
"""

from enum import Enum

DEFAULT_SSH_USERNAME = "ec2-user"
"""Remote login user for the provider's default image family.

Amazon Linux images create ``ec2-user`` as the only login account.
"""

DEFAULT_SSH_BINARY = "ssh"
"""Name of the shell client executable looked up on PATH."""

KEY_FILE_EXTENSION = ".pem"
"""Extension appended to a key-pair name to form the private key file name."""

DEFAULT_KEY_SUBDIR = ".ssh"
"""Subdirectory of the user's home directory holding private keys."""

KEY_PATH_ENV_VAR = "AWS_KEY_PATH"
"""Environment variable overriding the private key directory."""

CONFIG_ENV_VAR = "EC2SSH_CONFIG"
"""Environment variable pointing at an alternative YAML configuration file."""

DEFAULT_CONFIG_FILENAME = ".ec2ssh.yaml"
"""Configuration file name looked up in the user's home directory."""

DEBUG_ENV_VAR = "EC2SSH_DEBUG"
"""When set to ``1``, fatal errors are re-raised with their traceback."""

MIN_REMOTE_COMMAND_LENGTH = 2
"""Shortest remote command passed on to ssh.

Shorter commands are dropped. The threshold is kept for compatibility with
earlier releases, which never forwarded single-character commands.
"""

NO_NAME_DISPLAY = "[None]"
"""Shown in place of an instance without a Name tag."""

NO_ADDRESS_DISPLAY = "None"
"""Shown in place of a missing public address."""

DEFAULT_SELECTION = 1
"""Candidate index chosen when the prompt is answered with an empty line."""

EXIT_SUCCESS = 0
"""Exit code indicating successful completion or a cancelled prompt."""

EXIT_ERROR = 1
"""Exit code for every fatal condition."""


class InstanceState(str, Enum):
    """Instance states eligible for a connection."""

    PENDING = "pending"
    RUNNING = "running"
