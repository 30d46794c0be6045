import os
import logging
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..errors import ConfigError
from .github import DEFAULT_HOST

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/ghext.yml")

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Configuration for ghext: who you are on GitHub and how to talk about it"""

    # GitHub identity
    user: str = ""
    host: str = DEFAULT_HOST

    # Print the rewritten command instead of handing it on
    noop: bool = False

    # Where this config came from, if a file
    source: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self):
        """Load from environment and validate settings"""
        self._load_from_env()
        self._validate_settings()

    def _load_from_env(self):
        """Load settings from environment variables"""
        if not self.user:
            self.user = os.getenv('GITHUB_USER', '')

        if self.host == DEFAULT_HOST and os.getenv('GITHUB_HOST'):
            self.host = os.getenv('GITHUB_HOST')

        if not self.noop and os.getenv('GHEXT_NOOP'):
            self.noop = os.getenv('GHEXT_NOOP').strip().lower() in TRUTHY

    def _validate_settings(self):
        """Normalize values that came from files or the environment"""
        self.user = (self.user or "").strip()
        self.host = (self.host or DEFAULT_HOST).strip().rstrip("/") or DEFAULT_HOST

        # Hosts are written without a scheme
        for scheme in ("https://", "http://"):
            if self.host.startswith(scheme):
                self.host = self.host[len(scheme):]

        if not isinstance(self.noop, bool):
            self.noop = str(self.noop).strip().lower() in TRUTHY

    @classmethod
    def default_path(cls) -> Path:
        """Config file location, GHEXT_CONFIG wins over the default"""
        return Path(os.getenv('GHEXT_CONFIG') or DEFAULT_CONFIG_PATH).expanduser()

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from YAML file

        Environment variables still fill anything the file leaves empty.
        """
        config_path = Path(config_path).expanduser() if config_path else cls.default_path()

        if not config_path.exists():
            logger.debug(f"No config file at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f) or {}

            if not isinstance(data, dict):
                raise ValueError("expected a mapping at the top level")

        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Couldn't load config file {config_path}: {e}")
            return cls()

        # Only keep keys we know about
        known = {key: value for key, value in data.items()
                 if key in ('user', 'host', 'noop')}
        ignored = sorted(set(data) - set(known))
        if ignored:
            logger.debug(f"Ignoring unknown config keys: {', '.join(map(str, ignored))}")

        config = cls(**known)
        config.source = config_path
        return config

    def current_login(self) -> str:
        """The login of the active GitHub account"""
        if not self.user:
            raise ConfigError(
                "GitHub login unknown - set GITHUB_USER or add 'user:' to "
                f"{self.source or self.default_path()}"
            )
        return self.user
