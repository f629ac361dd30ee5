"""AWS-specific constants for EC2 instance queries."""

from ec2ssh.constants import InstanceState

ACTIVE_INSTANCE_STATES = [
    InstanceState.RUNNING.value,
    InstanceState.PENDING.value,
]
"""EC2 instance states eligible for a connection.

Stopped, stopping, shutting-down and terminated instances are never
candidates.
"""

STATE_FILTER_NAME = "instance-state-name"
"""DescribeInstances filter on the lifecycle state."""

PRIVATE_ADDRESS_FILTER_NAME = "private-ip-address"
"""DescribeInstances filter on the primary private IP address."""

NAME_TAG_KEY = "Name"
"""Tag holding an instance's display name."""

NAME_TAG_FILTER_NAME = f"tag:{NAME_TAG_KEY}"
"""DescribeInstances filter on the Name tag value."""
