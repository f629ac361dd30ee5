"""Pytest configuration and fixtures for ec2ssh tests."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

from ec2ssh.core.config import Settings
from ec2ssh.core.instance import InstanceRecord


@pytest.fixture
def aws_credentials() -> Generator[None, None, None]:
    """Fixture to set AWS credentials for testing with proper cleanup.

    Sets mock AWS credentials in environment variables for the duration of the test,
    then restores the original environment state.

    Yields
    ------
    None
        Control back to test after setting credentials
    """
    names = ["AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_DEFAULT_REGION"]
    original = {name: os.environ.get(name) for name in names}

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"

    yield

    for name, value in original.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """Point EC2SSH_CONFIG at a temporary file path and clean up environment.

    The file is not created, so tests run against built-in defaults unless
    they write one.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory path

    Yields
    ------
    Path
        Path to temporary config file
    """
    config_path = tmp_path / "ec2ssh.yaml"

    original_env = os.environ.get("EC2SSH_CONFIG")
    original_key_path = os.environ.pop("AWS_KEY_PATH", None)
    os.environ["EC2SSH_CONFIG"] = str(config_path)

    yield config_path

    if original_env is not None:
        os.environ["EC2SSH_CONFIG"] = original_env
    else:
        os.environ.pop("EC2SSH_CONFIG", None)

    if original_key_path is not None:
        os.environ["AWS_KEY_PATH"] = original_key_path
    else:
        os.environ.pop("AWS_KEY_PATH", None)


@pytest.fixture
def write_config(config_file: Path) -> Callable[[dict[str, Any]], None]:
    """Helper fixture to write config data to file.

    Parameters
    ----------
    config_file : Path
        Path to config file from config_file fixture

    Returns
    -------
    callable
        Function that takes config_data dict and writes to file
    """

    def _write(config_data: dict[str, Any]) -> None:
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

    return _write


def make_aws_instance(
    instance_id: str,
    name: str | None = None,
    private_ip: str = "10.0.0.1",
    public_ip: str | None = "54.0.0.1",
    key_name: str | None = "mykey",
) -> dict[str, Any]:
    """Build an instance dictionary shaped like a describe_instances entry."""
    instance: dict[str, Any] = {
        "InstanceId": instance_id,
        "PrivateIpAddress": private_ip,
        "State": {"Name": "running"},
    }
    if name is not None:
        instance["Tags"] = [{"Key": "Name", "Value": name}]
    if public_ip is not None:
        instance["PublicIpAddress"] = public_ip
    if key_name is not None:
        instance["KeyName"] = key_name
    return instance


@pytest.fixture
def aws_instance() -> Callable[..., dict[str, Any]]:
    """Factory for describe_instances instance dictionaries."""
    return make_aws_instance


@pytest.fixture
def record() -> Callable[..., InstanceRecord]:
    """Factory for InstanceRecord built from a fake instance dictionary."""

    def _record(instance_id: str, name: str | None = None, **kwargs: Any) -> InstanceRecord:
        return InstanceRecord.from_aws(make_aws_instance(instance_id, name, **kwargs))

    return _record


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with a temporary key directory."""
    return Settings(key_dir=tmp_path / "keys")
