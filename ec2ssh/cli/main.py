"""CLI entry point for ec2ssh."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import fire

from ec2ssh.cli.parsing import normalize_text_argument, parse_verbose, prepare_fire_args
from ec2ssh.constants import DEBUG_ENV_VAR, EXIT_ERROR, EXIT_SUCCESS
from ec2ssh.core.config import ConfigLoader
from ec2ssh.core.exceptions import Ec2SshError, SelectionCancelled
from ec2ssh.logging import ProgramFormatter
from ec2ssh.providers import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderCredentialsError,
)
from ec2ssh.providers.aws.utils import get_aws_credentials_error_message
from ec2ssh.utils import log_and_print_error

PROGRAM_NAME = "ec2ssh"

USAGE = f"""Usage: {PROGRAM_NAME} [options] {{instance id|private IP address|name}}
       {PROGRAM_NAME} [options] --list_all

Options:
  -v, --verbose       Print diagnostic logging and run ssh with -v
  -k, --key_dir       Directory holding SSH private keys (default: $HOME/.ssh)
  -l, --list_all      List running and pending instances (alias --list)
  -c, --command       Command to run on the remote server
  -r, --region        AWS region to query
"""


def get_app_class() -> type:
    """Get Ec2Ssh class on-demand to avoid circular imports.

    Returns
    -------
    type
        Ec2Ssh application class
    """
    from ec2ssh.__main__ import Ec2Ssh

    return Ec2Ssh


def print_usage() -> None:
    print(USAGE, end="", file=sys.stderr)


def configure_logging() -> None:
    """Send log records to stderr prefixed with the program name."""
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(ProgramFormatter(PROGRAM_NAME))

    logging.basicConfig(level=logging.WARNING, handlers=[stderr_handler], force=True)


def set_verbose_logging(verbose: bool) -> None:
    """Lower the root log level to DEBUG when verbose mode is on."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def connect_command(
    target: Any = None,
    key_dir: str | None = None,
    verbose: bool = False,
    list_all: bool = False,
    command: Any = None,
    region: str | None = None,
) -> None:
    """SSH to an EC2 instance.

    TARGET may be an EC2 instance ID (i-12abcdef), a private IP address
    (10.0.0.12) or the value of the instance's Name tag. When several
    running instances match, a numbered list is shown to choose from.

    Args:
        target: Instance ID, private IP address or Name tag value
        key_dir: Directory holding SSH private keys (default: $HOME/.ssh,
            or $AWS_KEY_PATH when set)
        verbose: Print diagnostic logging and run ssh with -v
        list_all: List running and pending instances instead of connecting
        command: Command to run on the remote server
        region: AWS region to query
    """
    verbose = parse_verbose(verbose)
    set_verbose_logging(verbose)

    lookup = normalize_text_argument(target)
    remote_command = normalize_text_argument(command)

    settings = ConfigLoader().build_settings(
        key_dir=normalize_text_argument(key_dir),
        region=normalize_text_argument(region),
        verbose=verbose,
        remote_command=remote_command,
    )

    app = get_app_class()()

    if lookup is None:
        if list_all:
            app.list(settings)
            return
        print_usage()
        sys.exit(EXIT_ERROR)

    app.connect(lookup, settings)


def handle_credentials_error(debug_mode: bool) -> None:
    """Handle provider credentials error.

    Parameters
    ----------
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderCredentialsError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(get_aws_credentials_error_message(), file=sys.stderr)
    sys.exit(EXIT_ERROR)


def handle_api_error(error: ProviderAPIError, debug_mode: bool) -> None:
    """Report a provider API error with its error code.

    Parameters
    ----------
    error : ProviderAPIError
        The API error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderAPIError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    if error.error_code:
        log_and_print_error("%s %s", error.error_code, error.message)
    else:
        log_and_print_error("%s", error.message)

    sys.exit(EXIT_ERROR)


def handle_error(error: Exception, debug_mode: bool) -> None:
    """Report any other fatal error.

    Parameters
    ----------
    error : Exception
        The error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    Exception
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    log_and_print_error("%s", error)
    sys.exit(EXIT_ERROR)


def main() -> None:
    """Entry point for the Fire CLI with a single fatal-error path.

    Every fatal condition exits with status 1 after printing ``Error:``
    and the message. A cancelled instance prompt exits with status 0.
    Set EC2SSH_DEBUG=1 to get tracebacks instead.
    """
    configure_logging()

    debug_mode = os.environ.get(DEBUG_ENV_VAR) == "1"

    try:
        fire.Fire(
            connect_command,
            command=prepare_fire_args(sys.argv[1:]),
            name=PROGRAM_NAME,
        )
    except SelectionCancelled:
        # Finish the prompt line left open by end of input.
        print("")
        sys.exit(EXIT_SUCCESS)
    except ProviderCredentialsError:
        handle_credentials_error(debug_mode)
    except ProviderAPIError as e:
        handle_api_error(e, debug_mode)
    except (ProviderConnectionError, Ec2SshError, ValueError, RuntimeError, OSError) as e:
        handle_error(e, debug_mode)
