import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from ec2ssh.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_KEY_SUBDIR,
    DEFAULT_SSH_BINARY,
    DEFAULT_SSH_USERNAME,
    KEY_FILE_EXTENSION,
    KEY_PATH_ENV_VAR,
)

logger = logging.getLogger(__name__)

STRING_KEYS = ("key_dir", "key_extension", "ssh_username", "ssh_binary", "region")


@dataclass(frozen=True)
class Settings:
    """Settings for one ec2ssh invocation.

    Built once at start-up and handed to the resolver and the launcher.

    Attributes
    ----------
    key_dir : Path
        Directory holding private key files
    key_extension : str
        Extension appended to a key-pair name to form the key file name
    ssh_username : str
        Remote login user
    ssh_binary : str
        Name or path of the ssh executable
    region : str | None
        AWS region to query, None for the boto3 default
    verbose : bool
        Emit diagnostic logging and pass ``-v`` to ssh
    remote_command : str | None
        Command to run on the instance instead of an interactive shell
    """

    key_dir: Path
    key_extension: str = KEY_FILE_EXTENSION
    ssh_username: str = DEFAULT_SSH_USERNAME
    ssh_binary: str = DEFAULT_SSH_BINARY
    region: str | None = None
    verbose: bool = False
    remote_command: str | None = None


class ConfigLoader:
    """Load the optional YAML configuration and merge it with defaults."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS = {
            "key_dir": str(Path.home() / DEFAULT_KEY_SUBDIR),
            "key_extension": KEY_FILE_EXTENSION,
            "ssh_username": DEFAULT_SSH_USERNAME,
            "ssh_binary": DEFAULT_SSH_BINARY,
            "region": None,
        }

    def default_config_path(self) -> Path:
        """Return the configuration file path.

        Returns
        -------
        Path
            ``$EC2SSH_CONFIG`` if set, otherwise ``~/.ec2ssh.yaml``
        """
        config_path = os.environ.get(CONFIG_ENV_VAR)
        if config_path:
            return Path(config_path).expanduser()
        return Path.home() / DEFAULT_CONFIG_FILENAME

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Parameters
        ----------
        config_path : str | None
            Path to YAML config file. If None, uses default_config_path()

        Returns
        -------
        dict[str, Any]
            Parsed configuration with interpolations resolved; ``{"defaults":
            {}}`` when the file does not exist or is empty

        Raises
        ------
        ValueError
            If the file is not valid YAML or interpolation fails
        RuntimeError
            If the file exists but cannot be read
        """
        config_file = Path(config_path) if config_path else self.default_config_path()

        if not config_file.exists():
            logger.debug("No config file at %s, using defaults", config_file)
            return {"defaults": {}}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            logger.error("Failed to parse YAML config file %s: %s", config_file, e)
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            logger.error("Failed to read config file %s: %s", config_file, e)
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if cfg is None:
            return {"defaults": {}}

        try:
            config = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except OmegaConfBaseException as e:
            logger.error("Failed to resolve configuration variables: %s", e)
            raise ValueError(f"Configuration variable resolution error: {e}") from e

        if not isinstance(config, dict):
            raise ValueError(f"Configuration in {config_file} must be a mapping")

        config.setdefault("defaults", {})
        return config

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate merged configuration values.

        Parameters
        ----------
        config : dict[str, Any]
            Merged configuration

        Raises
        ------
        ValueError
            If a key is unknown or a value has the wrong type
        """
        unknown = sorted(set(config) - set(self.BUILT_IN_DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in STRING_KEYS:
            value = config.get(key)
            if key == "region" and value is None:
                continue
            if not isinstance(value, str) or not value:
                raise ValueError(f"{key} must be a non-empty string, got: {value!r}")

    def merge(self, config: dict[str, Any]) -> dict[str, Any]:
        """Merge built-in defaults, YAML defaults and the key path variable.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration from load_config()

        Returns
        -------
        dict[str, Any]
            Merged configuration
        """
        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)

        yaml_defaults = config.get("defaults") or {}
        if not isinstance(yaml_defaults, dict):
            raise ValueError("'defaults' must be a mapping")

        for key, value in yaml_defaults.items():
            merged[key] = value

        env_key_dir = os.environ.get(KEY_PATH_ENV_VAR)
        if env_key_dir:
            merged["key_dir"] = env_key_dir

        return merged

    def build_settings(
        self,
        key_dir: str | None = None,
        region: str | None = None,
        verbose: bool = False,
        remote_command: str | None = None,
        config_path: str | None = None,
    ) -> Settings:
        """Build Settings from defaults, the YAML file, environment and CLI.

        Parameters
        ----------
        key_dir : str | None
            Key directory from the command line, overriding everything else
        region : str | None
            Region from the command line
        verbose : bool
            Verbose flag from the command line
        remote_command : str | None
            Remote command from the command line
        config_path : str | None
            Explicit configuration file path

        Returns
        -------
        Settings
            Immutable settings for this invocation
        """
        merged = self.merge(self.load_config(config_path))

        if key_dir is not None:
            merged["key_dir"] = key_dir

        if region is not None:
            merged["region"] = region

        self.validate_config(merged)

        return Settings(
            key_dir=Path(merged["key_dir"]).expanduser(),
            key_extension=merged["key_extension"],
            ssh_username=merged["ssh_username"],
            ssh_binary=merged["ssh_binary"],
            region=merged["region"],
            verbose=verbose,
            remote_command=remote_command,
        )
