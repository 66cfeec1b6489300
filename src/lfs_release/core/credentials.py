"""Netrc credential precondition."""

from lfs_release.core.config import ReleaseConfig


class CredentialsError(Exception):
    """Required credential entries are missing."""

    pass


def missing_hosts(config: ReleaseConfig) -> list[str]:
    """Hosts with no mention in the netrc file.

    Only a text search: the file is parsed by the HTTP client when requests
    are made.
    """
    hosts = [config.api_host, config.upload_host]
    try:
        content = config.netrc_path.read_text()
    except OSError:
        return hosts
    return [host for host in hosts if host not in content]


def check_credentials(config: ReleaseConfig) -> None:
    """Raise CredentialsError unless both GitHub hosts have netrc entries."""
    missing = missing_hosts(config)
    if missing:
        raise CredentialsError(
            f"No credentials for {', '.join(missing)} in {config.netrc_path}"
        )
