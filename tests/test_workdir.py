"""Tests for the scratch directory guard."""

import pytest

from lfs_release.core.workdir import work_dir


def test_work_dir_removed_after_use():
    with work_dir() as path:
        (path / "body.md").write_text("body")
        assert path.is_dir()

    assert not path.exists()


def test_work_dir_removed_on_error():
    with pytest.raises(RuntimeError):
        with work_dir() as path:
            raise RuntimeError("boom")

    assert not path.exists()
