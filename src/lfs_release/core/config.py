"""Configuration for lfs-release."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
import os

import yaml


DEFAULT_REPO = "git-lfs/git-lfs"
DEFAULT_API_BASE = "https://api.github.com"


class ConfigError(Exception):
    """Invalid configuration file."""

    pass


@dataclass(frozen=True)
class ReleaseConfig:
    """Settings shared by every stage of a release run."""

    repo: str
    api_base: str
    api_host: str
    upload_host: str
    releases_dir: Path
    netrc_path: Path

    @classmethod
    def default(cls) -> "ReleaseConfig":
        """Create config with default values and environment overrides."""
        netrc = os.environ.get("NETRC", Path.home() / ".netrc")
        return cls(
            repo=os.environ.get("LFS_RELEASE_REPO", DEFAULT_REPO),
            api_base=DEFAULT_API_BASE,
            api_host="api.github.com",
            upload_host="uploads.github.com",
            releases_dir=Path(os.environ.get("LFS_RELEASE_DIR", "bin/releases")),
            netrc_path=Path(netrc),
        )

    def load(self, path: Path) -> "ReleaseConfig":
        """Return a copy with the keys from a YAML file applied.

        Path-valued keys (releases_dir, netrc_path) are expanded, so "~"
        may be used in the file.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        known = {f.name for f in fields(self)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        for key in ("releases_dir", "netrc_path"):
            if key in data:
                data[key] = Path(data[key]).expanduser()

        return replace(self, **data)

    @property
    def releases_endpoint(self) -> str:
        return f"/repos/{self.repo}/releases"


# Global config instance
_config: ReleaseConfig | None = None


def get_config() -> ReleaseConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ReleaseConfig.default()
    return _config


def set_config(config: ReleaseConfig | None) -> None:
    """Set a custom configuration (useful for testing)."""
    global _config
    _config = config
