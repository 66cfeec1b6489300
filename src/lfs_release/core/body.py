"""Release body composition."""

from pathlib import Path

from lfs_release.core.checksum import render_checksum_table


VERSION_TOKEN = "VERSION"
BODY_FILENAME = "body.md"

PACKAGE_LINKS_TEMPLATE = """\
## Packages

Up to date packages are available on [PackageCloud](https://packagecloud.io/github/git-lfs) and [Homebrew](http://brew.sh/).

[RPM RHEL 7/CentOS 7](https://packagecloud.io/github/git-lfs/packages/el/7/git-lfs-VERSION-1.el7.x86_64.rpm/download)
[RPM RHEL 8/Rocky Linux 8](https://packagecloud.io/github/git-lfs/packages/el/8/git-lfs-VERSION-1.el8.x86_64.rpm/download)
[Debian 10](https://packagecloud.io/github/git-lfs/packages/debian/buster/git-lfs_VERSION_amd64.deb/download)
[Debian 11](https://packagecloud.io/github/git-lfs/packages/debian/bullseye/git-lfs_VERSION_amd64.deb/download)
[Ubuntu 20.04](https://packagecloud.io/github/git-lfs/packages/ubuntu/focal/git-lfs_VERSION_amd64.deb/download)
[Ubuntu 22.04](https://packagecloud.io/github/git-lfs/packages/ubuntu/jammy/git-lfs_VERSION_amd64.deb/download)

## SHA-256 hashes:
"""


def display_version(version: str) -> str:
    """Version without its leading "v"."""
    return version[1:] if version.startswith("v") else version


def render_package_links(version: str) -> str:
    return PACKAGE_LINKS_TEMPLATE.replace(VERSION_TOKEN, display_version(version))


def compose_body(
    version: str, changelog_path: Path, artifact_paths: list[Path], work_dir: Path
) -> Path:
    """Write the release body for a version and return its path.

    The body is the changelog, the package links with VERSION substituted,
    and a SHA-256 block for every artifact.
    """
    changelog = changelog_path.read_text()
    sections = [
        changelog.rstrip("\n"),
        render_package_links(version).rstrip("\n"),
        render_checksum_table(artifact_paths),
    ]

    body_path = work_dir / BODY_FILENAME
    body_path.write_text("\n\n".join(sections) + "\n")
    return body_path
