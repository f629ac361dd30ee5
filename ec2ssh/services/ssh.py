"""Launching an interactive ssh session to a resolved instance."""

import logging
import shutil
import subprocess
from pathlib import Path

from ec2ssh.constants import MIN_REMOTE_COMMAND_LENGTH
from ec2ssh.core.config import Settings
from ec2ssh.core.exceptions import SessionError, SSHClientNotFoundError
from ec2ssh.core.instance import InstanceRecord

logger = logging.getLogger(__name__)


class SSHLauncher:
    """Run the ssh client against an instance.

    The client inherits this process's standard input, output and error, so
    the session is fully interactive.

    Parameters
    ----------
    settings : Settings
        Key directory, login user, ssh binary, verbosity and remote command

    Attributes
    ----------
    settings : Settings
        Settings used to derive the ssh arguments
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def key_path(self, credential_name: str) -> Path:
        """Return the private key file for a key pair.

        Parameters
        ----------
        credential_name : str
            Key pair name the instance was launched with

        Returns
        -------
        Path
            ``key_dir / (credential_name + key_extension)``
        """
        path = self.settings.key_dir / f"{credential_name}{self.settings.key_extension}"
        logger.debug("key path is: %s", path)
        return path

    def build_args(self, instance: InstanceRecord) -> list[str]:
        """Build ssh arguments for an instance, without the executable.

        Parameters
        ----------
        instance : InstanceRecord
            Resolved instance

        Returns
        -------
        list[str]
            ``-i KEY -l USER ADDRESS [-v] [COMMAND]``

        Raises
        ------
        SessionError
            If the instance has no key pair or no public address
        """
        if not instance.credential_name:
            raise SessionError(f"Instance {instance.id} has no key pair")

        if not instance.public_address:
            raise SessionError(f"Instance {instance.id} has no public IP address")

        args = [
            "-i",
            str(self.key_path(instance.credential_name)),
            "-l",
            self.settings.ssh_username,
            instance.public_address,
        ]

        if self.settings.verbose:
            args.append("-v")

        command = self.settings.remote_command
        if command:
            if len(command) >= MIN_REMOTE_COMMAND_LENGTH:
                args.append(command)
            else:
                logger.warning(
                    "Ignoring remote command %r: commands shorter than %d characters "
                    "are not sent",
                    command,
                    MIN_REMOTE_COMMAND_LENGTH,
                )

        return args

    def find_binary(self) -> str:
        """Locate the ssh executable.

        Raises
        ------
        SSHClientNotFoundError
            If the executable is not on PATH
        """
        binary = shutil.which(self.settings.ssh_binary)
        if binary is None:
            raise SSHClientNotFoundError(
                f"{self.settings.ssh_binary}: executable file not found in $PATH"
            )
        return binary

    def launch(self, instance: InstanceRecord) -> None:
        """Start ssh and wait for it to exit.

        Parameters
        ----------
        instance : InstanceRecord
            Resolved instance

        Raises
        ------
        SSHClientNotFoundError
            If ssh is not on PATH
        SessionError
            If ssh cannot be started or exits with a non-zero status
        """
        binary = self.find_binary()
        command = [binary, *self.build_args(instance)]

        logger.debug("running command %s", command)

        try:
            subprocess.run(command, check=True)
        except subprocess.CalledProcessError as e:
            raise SessionError(
                f"{Path(binary).name} exited with status {e.returncode}",
                returncode=e.returncode,
            ) from e
        except OSError as e:
            raise SessionError(f"Failed to run {binary}: {e}") from e
