"""EC2 instance queries for ec2ssh."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import boto3

from ec2ssh.providers.aws.constants import (
    ACTIVE_INSTANCE_STATES,
    NAME_TAG_FILTER_NAME,
    PRIVATE_ADDRESS_FILTER_NAME,
    STATE_FILTER_NAME,
)
from ec2ssh.providers.aws.errors import handle_aws_errors

logger = logging.getLogger(__name__)

INSTANCE_ID_FILTER_NAME = "instance-id"


def active_state_filter() -> dict[str, Any]:
    """Build the lifecycle filter restricting results to active instances.

    Returns
    -------
    dict[str, Any]
        DescribeInstances filter on running and pending states
    """
    return {"Name": STATE_FILTER_NAME, "Values": list(ACTIVE_INSTANCE_STATES)}


def private_address_filter(address: str) -> dict[str, Any]:
    """Filter on the instance's private IP address."""
    return {"Name": PRIVATE_ADDRESS_FILTER_NAME, "Values": [address]}


def instance_id_filter(instance_id: str) -> dict[str, Any]:
    """Filter on the instance ID."""
    return {"Name": INSTANCE_ID_FILTER_NAME, "Values": [instance_id]}


def name_tag_filter(name: str) -> dict[str, Any]:
    """Filter on the exact value of the Name tag."""
    return {"Name": NAME_TAG_FILTER_NAME, "Values": [name]}


class EC2Manager:
    """Query EC2 instances in a single region.

    Parameters
    ----------
    region : str | None
        AWS region to query. None defers to the boto3 default chain
        (``AWS_DEFAULT_REGION``, shared config file)
    boto3_client_factory : Callable[..., Any] | None
        Optional factory for creating boto3 clients. If None, uses boto3.client
    """

    def __init__(
        self,
        region: str | None = None,
        boto3_client_factory: Callable[..., Any] | None = None,
    ) -> None:
        self.region = region
        self.boto3_client_factory = boto3_client_factory or boto3.client

        with handle_aws_errors():
            self.ec2_client = self.boto3_client_factory("ec2", region_name=region)

    def describe_instances(self, filters: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Run DescribeInstances and collect reservations from every page.

        Parameters
        ----------
        filters : list[dict[str, Any]]
            DescribeInstances filters, combined with a logical AND

        Returns
        -------
        list[dict[str, Any]]
            Reservations as returned by the API, each holding an
            ``Instances`` list

        Raises
        ------
        ProviderCredentialsError
            If AWS credentials are not configured
        ProviderConnectionError
            If the EC2 endpoint cannot be reached
        ProviderAPIError
            If the API call fails
        """
        logger.debug("aws api: describing instances with filters %s", filters)

        reservations: list[dict[str, Any]] = []

        with handle_aws_errors():
            paginator = self.ec2_client.get_paginator("describe_instances")
            for page in paginator.paginate(Filters=filters):
                reservations.extend(page.get("Reservations", []))

        logger.debug("aws api: got %d reservation(s)", len(reservations))
        return reservations
