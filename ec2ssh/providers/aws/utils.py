"""AWS-specific utility functions for ec2ssh."""

from __future__ import annotations

from typing import Any

from ec2ssh.providers.aws.constants import NAME_TAG_KEY


def get_name_tag(instance: dict[str, Any]) -> str | None:
    """Return the value of an instance's Name tag.

    Parameters
    ----------
    instance : dict[str, Any]
        Instance dictionary from a describe_instances response

    Returns
    -------
    str | None
        Name tag value, or None if the instance has no Name tag
    """
    name = None
    for tag in instance.get("Tags", []):
        if tag.get("Key") == NAME_TAG_KEY:
            name = tag.get("Value")
    return name


def get_aws_credentials_error_message() -> str:
    """Get standard AWS credentials error message.

    Returns
    -------
    str
        Formatted AWS credentials error message
    """
    return (
        "Cloud credentials not found\n\n"
        "Configure your credentials:\n"
        "  aws configure\n\n"
        "Or set environment variables:\n"
        "  export AWS_ACCESS_KEY_ID=...\n"
        "  export AWS_SECRET_ACCESS_KEY=..."
    )
