"""Local release artifact model."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Artifact:
    """A locally built file waiting to be attached to a release."""

    path: Path
    label: str
    content_type: str | None

    @property
    def name(self) -> str:
        """Base file name, which is also the remote asset name."""
        return self.path.name
