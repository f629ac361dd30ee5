"""Classification of a lookup string into a query dimension."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from enum import Enum

INSTANCE_ID_PATTERN = re.compile(r"i-[0-9a-fA-F]{8,17}$")
"""EC2 instance ID shape: ``i-`` and 8 (legacy) to 17 hex characters."""


class LookupKind(str, Enum):
    """Query dimension a lookup string is matched against."""

    ADDRESS = "address"
    INSTANCE_ID = "instance_id"
    NAME = "name"


@dataclass(frozen=True)
class LookupQuery:
    """A lookup string together with the dimension to search on."""

    kind: LookupKind
    value: str


def is_ip_address(value: str) -> bool:
    """Return True if value is an IPv4 or IPv6 address literal."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_instance_id(value: str) -> bool:
    """Return True if value ends with an instance ID."""
    return INSTANCE_ID_PATTERN.search(value) is not None


def classify_lookup(lookup: str) -> LookupQuery:
    """Decide how a lookup string should be searched for.

    Addresses are tried first, then instance IDs; anything else is taken
    as an exact Name tag value.

    Parameters
    ----------
    lookup : str
        User-supplied lookup string

    Returns
    -------
    LookupQuery
        The lookup string tagged with its query dimension
    """
    if is_ip_address(lookup):
        return LookupQuery(LookupKind.ADDRESS, lookup)

    if is_instance_id(lookup):
        return LookupQuery(LookupKind.INSTANCE_ID, lookup)

    return LookupQuery(LookupKind.NAME, lookup)
