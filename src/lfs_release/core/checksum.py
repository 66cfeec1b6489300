"""SHA-256 digests for release artifacts."""

import hashlib
from pathlib import Path


def calculate_sha256(file_path: Path) -> str:
    """Calculate SHA256 hash of a file."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def render_checksum_table(paths: list[Path]) -> str:
    """Render one "**name**" / digest block per file, blank-line separated.

    Files are listed in sorted order; the result carries no trailing blank
    lines.
    """
    blocks = [
        f"**{path.name}**\n{calculate_sha256(path)}"
        for path in sorted(paths, key=str)
    ]
    return "\n\n".join(blocks).rstrip("\n")
