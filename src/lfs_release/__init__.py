"""lfs-release - publish Git LFS release artifacts to GitHub."""

__version__ = "0.1.0"
