"""Logging utilities for ec2ssh."""

from ec2ssh.logging.formatters import ProgramFormatter

__all__ = ["ProgramFormatter"]
