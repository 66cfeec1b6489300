"""GitHub release data models."""

import re
from dataclasses import dataclass, field


# Matches the RFC 6570 template suffix GitHub appends to upload URLs,
# e.g. "{?name,label}".
UPLOAD_TEMPLATE_PATTERN = re.compile(r"\{[^}]*\}")


@dataclass
class Asset:
    """Represents an asset already attached to a GitHub release."""

    name: str

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(name=data["name"])


@dataclass
class Release:
    """Represents a GitHub release."""

    tag_name: str
    name: str
    draft: bool
    upload_url: str
    body: str = ""
    assets: list[Asset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = [Asset.from_api_response(a) for a in data.get("assets") or []]
        return cls(
            tag_name=data.get("tag_name", ""),
            name=data.get("name") or "",
            draft=data.get("draft", False),
            upload_url=data["upload_url"],
            body=data.get("body") or "",
            assets=assets,
        )

    @property
    def upload_endpoint(self) -> str:
        """Upload URL with the path-template placeholder removed."""
        return UPLOAD_TEMPLATE_PATTERN.sub("", self.upload_url)

    @property
    def asset_names(self) -> list[str]:
        return [asset.name for asset in self.assets]
