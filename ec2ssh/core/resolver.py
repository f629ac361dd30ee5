"""Resolution of a lookup string to exactly one running instance."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from ec2ssh.core.exceptions import InstanceNotFoundError
from ec2ssh.core.instance import InstanceRecord, flatten_reservations
from ec2ssh.core.lookup import LookupKind, LookupQuery, classify_lookup
from ec2ssh.core.selector import InstanceSelector
from ec2ssh.providers.aws.compute import (
    active_state_filter,
    instance_id_filter,
    name_tag_filter,
    private_address_filter,
)

logger = logging.getLogger(__name__)


class InstanceQueryProvider(Protocol):
    """Query capability the resolver needs from a compute provider."""

    def describe_instances(self, filters: list[dict[str, Any]]) -> list[dict[str, Any]]:
        ...


def build_filters(query: LookupQuery) -> list[dict[str, Any]]:
    """Build DescribeInstances filters for a classified lookup.

    Parameters
    ----------
    query : LookupQuery
        Classified lookup

    Returns
    -------
    list[dict[str, Any]]
        The dimension filter followed by the active-state filter
    """
    if query.kind is LookupKind.ADDRESS:
        dimension = private_address_filter(query.value)
    elif query.kind is LookupKind.INSTANCE_ID:
        dimension = instance_id_filter(query.value)
    else:
        dimension = name_tag_filter(query.value)

    return [dimension, active_state_filter()]


class InstanceResolver:
    """Turn a lookup string into a single instance.

    Parameters
    ----------
    compute_provider : InstanceQueryProvider
        Provider used to run instance queries
    selector : InstanceSelector | None
        Prompt used when several instances match. Defaults to an
        InstanceSelector reading from standard input
    """

    def __init__(
        self,
        compute_provider: InstanceQueryProvider,
        selector: InstanceSelector | None = None,
    ) -> None:
        self.compute_provider = compute_provider
        self.selector = selector or InstanceSelector()

    def find_candidates(self, query: LookupQuery) -> list[InstanceRecord]:
        """Return active instances matching a query, sorted by name."""
        logger.debug("describing instance(s) by %s", query.kind.value)
        reservations = self.compute_provider.describe_instances(build_filters(query))
        return flatten_reservations(reservations)

    def resolve(self, lookup: str) -> InstanceRecord:
        """Resolve a lookup string to one instance.

        Parameters
        ----------
        lookup : str
            Instance ID, private IP address or Name tag value

        Returns
        -------
        InstanceRecord
            The only match, or the match chosen at the prompt

        Raises
        ------
        InstanceNotFoundError
            If no active instance matches
        SelectionCancelled
            If the prompt reaches end of input
        InvalidSelectionError
            If the prompt answer is unusable
        ProviderError
            If the instance query fails
        """
        query = classify_lookup(lookup)
        candidates = self.find_candidates(query)

        if not candidates:
            raise InstanceNotFoundError(lookup)

        if len(candidates) == 1:
            return candidates[0]

        return self.selector.choose(lookup, candidates)

    def list_all(self) -> list[InstanceRecord]:
        """Return every active instance sorted by name.

        Raises
        ------
        InstanceNotFoundError
            If there are no active instances
        """
        reservations = self.compute_provider.describe_instances([active_state_filter()])
        records = flatten_reservations(reservations)

        if not records:
            raise InstanceNotFoundError()

        return records
