"""Data models for lfs-release."""

from lfs_release.models.artifact import Artifact
from lfs_release.models.release import Release, Asset

__all__ = ["Artifact", "Release", "Asset"]
