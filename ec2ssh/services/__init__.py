"""Services acting on a resolved instance."""

from ec2ssh.services.ssh import SSHLauncher

__all__ = ["SSHLauncher"]
