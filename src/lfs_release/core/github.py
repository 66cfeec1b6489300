"""GitHub API client for managing releases."""

import netrc
from typing import BinaryIO
from urllib.parse import quote

import httpx

from lfs_release.core.config import ReleaseConfig
from lfs_release.core.credentials import CredentialsError
from lfs_release.models.release import Release


class GitHubError(Exception):
    """Error from GitHub API."""

    pass


def _check(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    if response.status_code == 401:
        raise GitHubError(f"{action}: authentication failed (check your netrc)")
    if response.status_code == 404:
        raise GitHubError(f"{action}: {response.request.url} not found")
    raise GitHubError(
        f"{action}: HTTP {response.status_code} {response.text.strip()}"
    )


def upload_url(endpoint: str, name: str, label: str) -> str:
    """Upload endpoint with percent-encoded name and label query parameters."""
    return f"{endpoint}?name={quote(name, safe='')}&label={quote(label, safe='')}"


class GitHubClient:
    """Client for the release endpoints of one repository."""

    def __init__(
        self,
        config: ReleaseConfig,
        transport: httpx.BaseTransport | None = None,
        auth: httpx.Auth | None = None,
    ):
        self.config = config
        if auth is None:
            try:
                auth = httpx.NetRCAuth(file=str(config.netrc_path))
            except (netrc.NetrcParseError, OSError) as e:
                raise CredentialsError(f"Cannot read {config.netrc_path}: {e}") from e
        self.client = httpx.Client(
            base_url=config.api_base,
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            auth=auth,
            transport=transport,
            timeout=30.0,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def list_releases(self) -> list[Release]:
        """Get all releases of the repository, drafts included.

        Follows the "next" links of GitHub's paginated listing.
        """
        releases = []
        response = self.client.get(
            self.config.releases_endpoint, params={"per_page": 100}
        )
        while True:
            _check(response, f"Listing releases of {self.config.repo}")
            releases.extend(Release.from_api_response(d) for d in response.json())

            next_link = response.links.get("next")
            if not next_link:
                return releases
            response = self.client.get(next_link["url"])

    def find_release(self, name: str) -> Release | None:
        """Get the release whose name is exactly `name`."""
        for release in self.list_releases():
            if release.name == name:
                return release
        return None

    def create_release(self, tag_name: str, name: str, body: str, draft: bool = True) -> Release:
        """Create a new release."""
        response = self.client.post(
            self.config.releases_endpoint,
            json={
                "tag_name": tag_name,
                "name": name,
                "draft": draft,
                "body": body,
            },
        )
        _check(response, f"Creating release {name}")
        return Release.from_api_response(response.json())

    def upload_asset(
        self,
        endpoint: str,
        name: str,
        label: str,
        content_type: str | None,
        data: bytes | BinaryIO,
    ) -> dict:
        """Attach a file to the release behind an upload endpoint.

        An open file is streamed rather than read into memory.
        """
        headers = {}
        if content_type is not None:
            headers["Content-Type"] = content_type
        response = self.client.post(
            upload_url(endpoint, name, label), content=data, headers=headers
        )
        _check(response, f"Uploading {name}")
        return response.json()
