"""Canonical view of an EC2 instance used by the resolver and launcher."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote_plus

from ec2ssh.constants import NO_ADDRESS_DISPLAY, NO_NAME_DISPLAY
from ec2ssh.providers.aws.utils import get_name_tag


@dataclass(frozen=True)
class InstanceRecord:
    """Summary of one instance from a DescribeInstances response.

    Attributes
    ----------
    id : str
        EC2 instance ID
    private_address : str
        Primary private IP address
    name : str | None
        Name tag value, None when the instance has no Name tag
    public_address : str | None
        Public IP address, None when the instance has none
    credential_name : str | None
        Key pair the instance was launched with
    raw : dict[str, Any]
        Full instance dictionary the record was built from
    """

    id: str
    private_address: str
    name: str | None = None
    public_address: str | None = None
    credential_name: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_aws(cls, instance: dict[str, Any]) -> InstanceRecord:
        """Build a record from an instance dictionary returned by boto3."""
        return cls(
            id=instance["InstanceId"],
            private_address=instance["PrivateIpAddress"],
            name=get_name_tag(instance),
            public_address=instance.get("PublicIpAddress"),
            credential_name=instance.get("KeyName"),
            raw=instance,
        )

    @property
    def display_name(self) -> str:
        """Name escaped for terminal display, or the no-name placeholder."""
        if self.name is None:
            return NO_NAME_DISPLAY
        return quote_plus(self.name)

    @property
    def display_public_address(self) -> str:
        return self.public_address or NO_ADDRESS_DISPLAY


def sort_by_name(records: Iterable[InstanceRecord]) -> list[InstanceRecord]:
    """Sort records ascending by display name.

    The sort is stable: records sharing a name keep their input order.
    """
    return sorted(records, key=lambda record: record.display_name)


def flatten_reservations(reservations: Iterable[dict[str, Any]]) -> list[InstanceRecord]:
    """Flatten a grouped DescribeInstances response into sorted records.

    Parameters
    ----------
    reservations : Iterable[dict[str, Any]]
        Reservations, each holding an ``Instances`` list

    Returns
    -------
    list[InstanceRecord]
        One record per distinct instance ID, sorted by name
    """
    seen: set[str] = set()
    records: list[InstanceRecord] = []

    for reservation in reservations:
        for instance in reservation.get("Instances", []):
            record = InstanceRecord.from_aws(instance)
            if record.id in seen:
                continue
            seen.add(record.id)
            records.append(record)

    return sort_by_name(records)
