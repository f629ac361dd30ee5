"""AWS provider implementation."""

from ec2ssh.providers.aws.compute import EC2Manager

__all__ = ["EC2Manager"]
