"""Locating release artifacts and deriving their upload metadata."""

from fnmatch import fnmatch
from pathlib import Path

from lfs_release.models.artifact import Artifact


CHECKSUM_FILE = "sha256sums.asc"

# Base-name patterns of files that get published
ARTIFACT_PATTERNS = [
    "*.tar.gz",
    "*386*.zip",
    "*amd64*.zip",
    "*.exe",
    CHECKSUM_FILE,
]

# Checked in order, so ".tar.gz" must not be shadowed by a shorter suffix
CONTENT_TYPES = [
    (".zip", "application/zip"),
    (".tar.gz", "application/gzip"),
    (".exe", "application/octet-stream"),
    (".asc", "text/plain"),
]

OS_DISPLAY_NAMES = {
    "freebsd": "FreeBSD",
}


class ArtifactError(Exception):
    """Release artifacts are missing or inconsistent."""

    pass


def _is_candidate(path: Path) -> bool:
    return path.is_file() and any(fnmatch(path.name, p) for p in ARTIFACT_PATTERNS)


def locate_artifacts(version: str, releases_dir: Path) -> list[Path]:
    """Find the files to publish for a version.

    A file is kept when its path (relative to releases_dir) contains the
    version, or when it is the checksum file, and is dropped when the path
    contains "assets". Returns paths sorted by their string form; an empty
    list when nothing matches.
    """
    if not releases_dir.is_dir():
        return []

    found = []
    for path in releases_dir.rglob("*"):
        if not _is_candidate(path):
            continue
        relative = path.relative_to(releases_dir).as_posix()
        if "assets" in relative:
            continue
        if version in relative or path.name == CHECKSUM_FILE:
            found.append(path)

    return sorted(found, key=str)


def categorize(name: str) -> str:
    """Human-readable label for an artifact base name.

    >>> categorize("git-lfs-freebsd-amd64-v1.0.0.tar.gz")
    'FreeBSD AMD64'
    """
    if fnmatch(name, "git-lfs-v*.tar.gz"):
        return "Source"
    if fnmatch(name, "git-lfs-windows-*.exe"):
        return "Windows Installer"
    if name == CHECKSUM_FILE:
        return "Signed SHA-256 Hashes"

    parts = name.split("-")
    if len(parts) < 4 or parts[0] != "git" or parts[1] != "lfs":
        raise ValueError(f"Cannot categorize artifact: {name}")

    os_token, arch_token = parts[2], parts[3]
    os_name = OS_DISPLAY_NAMES.get(os_token, os_token.capitalize())
    return f"{os_name} {arch_token.upper()}"


def content_type(name: str) -> str | None:
    """MIME type for an artifact base name, or None if unknown."""
    for suffix, mime in CONTENT_TYPES:
        if name.endswith(suffix):
            return mime
    return None


def build_artifacts(paths: list[Path]) -> list[Artifact]:
    """Attach label and content type to located paths.

    Raises ArtifactError if two paths share a base name, since both would
    upload under the same asset name.
    """
    seen: dict[str, Path] = {}
    artifacts = []
    for path in sorted(paths, key=str):
        if previous := seen.get(path.name):
            raise ArtifactError(
                f"Asset name collision: {path.name} would upload both "
                f"{previous} and {path}"
            )
        seen[path.name] = path
        try:
            label = categorize(path.name)
        except ValueError as e:
            raise ArtifactError(str(e)) from e
        artifacts.append(
            Artifact(path=path, label=label, content_type=content_type(path.name))
        )
    return artifacts
