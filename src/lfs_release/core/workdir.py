"""Scratch directory owned by a single release run."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
import shutil
import tempfile


def create_work_dir() -> Path:
    """Create a fresh scratch directory."""
    return Path(tempfile.mkdtemp(prefix="lfs_release_"))


def cleanup_work_dir(work_dir: Path) -> None:
    """Remove a scratch directory."""
    if work_dir.exists():
        shutil.rmtree(work_dir, ignore_errors=True)


@contextmanager
def work_dir() -> Iterator[Path]:
    """Scratch directory removed on exit, including on error."""
    path = create_work_dir()
    try:
        yield path
    finally:
        cleanup_work_dir(path)
