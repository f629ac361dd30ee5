#!/usr/bin/env python3
"""ec2ssh - ssh to an EC2 instance by ID, private IP or Name tag."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

for _boto_module in ["botocore", "boto3", "urllib3"]:
    logging.getLogger(_boto_module).setLevel(logging.WARNING)

from ec2ssh.cli.main import main  # noqa: E402
from ec2ssh.core.config import Settings  # noqa: E402
from ec2ssh.core.instance import InstanceRecord  # noqa: E402
from ec2ssh.core.resolver import InstanceResolver  # noqa: E402
from ec2ssh.core.selector import InstanceSelector  # noqa: E402
from ec2ssh.providers.aws.compute import EC2Manager  # noqa: E402
from ec2ssh.services.ssh import SSHLauncher  # noqa: E402
from ec2ssh.utils import format_instance_list  # noqa: E402

logger = logging.getLogger(__name__)


class Ec2Ssh:
    """Resolve instances and open ssh sessions to them.

    Parameters
    ----------
    compute_provider_factory : Callable[[str | None], Any] | None
        Factory taking a region and returning a compute provider. Defaults
        to EC2Manager
    selector : InstanceSelector | None
        Prompt used when a lookup matches several instances
    launcher_factory : Callable[[Settings], SSHLauncher] | None
        Factory building the session launcher from settings
    """

    def __init__(
        self,
        compute_provider_factory: Callable[[str | None], Any] | None = None,
        selector: InstanceSelector | None = None,
        launcher_factory: Callable[[Settings], SSHLauncher] | None = None,
    ) -> None:
        self._compute_provider_factory = compute_provider_factory or self._create_compute_provider
        self._selector = selector or InstanceSelector()
        self._launcher_factory = launcher_factory or SSHLauncher

    def _create_compute_provider(self, region: str | None) -> EC2Manager:
        return EC2Manager(region=region)

    def resolver(self, settings: Settings) -> InstanceResolver:
        """Create a resolver querying the configured region."""
        compute_provider = self._compute_provider_factory(settings.region)
        return InstanceResolver(compute_provider, selector=self._selector)

    def connect(self, lookup: str, settings: Settings) -> InstanceRecord:
        """Resolve a lookup string and run ssh against the result.

        Parameters
        ----------
        lookup : str
            Instance ID, private IP address or Name tag value
        settings : Settings
            Settings for this invocation

        Returns
        -------
        InstanceRecord
            The instance the session was opened to
        """
        instance = self.resolver(settings).resolve(lookup)
        logger.debug(
            "resolved '%s' to %s (%s)", lookup, instance.id, instance.display_name
        )

        self._launcher_factory(settings).launch(instance)
        return instance

    def list(self, settings: Settings) -> None:
        """Print every running or pending instance."""
        records = self.resolver(settings).list_all()
        print(format_instance_list(records), end="")


if __name__ == "__main__":
    main()
