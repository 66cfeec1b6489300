"""Shared fixtures for lfs-release tests."""

import json
from pathlib import Path

import httpx
import pytest

from lfs_release.core.config import ReleaseConfig, set_config


UPLOAD_BASE = "https://uploads.github.com/repos/git-lfs/git-lfs/releases"


def create_file(path: Path, content: bytes = b"data") -> Path:
    """Create a file, ensuring parent directories exist."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


class FakeGitHub:
    """In-memory stand-in for the GitHub release endpoints."""

    def __init__(self, page_size: int = 100):
        self.releases: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.page_size = page_size

    def add_release(self, name: str, asset_names: list[str] | None = None) -> dict:
        release_id = len(self.releases) + 1
        release = {
            "id": release_id,
            "tag_name": name,
            "name": name,
            "draft": True,
            "body": "",
            "upload_url": f"{UPLOAD_BASE}/{release_id}/assets{{?name,label}}",
            "assets": [{"name": n} for n in asset_names or []],
        }
        self.releases.append(release)
        return release

    def _release_for_upload(self, path: str) -> dict:
        release_id = int(path.split("/")[-2])
        return self.releases[release_id - 1]

    def _list_page(self, request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        start = (page - 1) * self.page_size
        releases = self.releases[start : start + self.page_size]

        headers = {}
        if start + self.page_size < len(self.releases):
            next_url = request.url.copy_set_param("page", str(page + 1))
            headers["Link"] = f'<{next_url}>; rel="next"'
        return httpx.Response(200, json=releases, headers=headers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.url.host == "api.github.com" and path.endswith("/releases"):
            if request.method == "GET":
                return self._list_page(request)
            payload = json.loads(request.content)
            release = self.add_release(payload["name"])
            release.update(
                tag_name=payload["tag_name"],
                draft=payload["draft"],
                body=payload["body"],
            )
            return httpx.Response(201, json=release)

        if request.url.host == "uploads.github.com" and request.method == "POST":
            release = self._release_for_upload(path)
            name = request.url.params["name"]
            release["assets"].append({"name": name})
            return httpx.Response(201, json={"name": name})

        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def uploads(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "uploads.github.com"]


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def netrc_file(tmp_path: Path) -> Path:
    path = tmp_path / "netrc"
    path.write_text(
        "machine api.github.com\n  login octocat\n  password secret\n"
        "machine uploads.github.com\n  login octocat\n  password secret\n"
    )
    return path


@pytest.fixture
def releases_dir(tmp_path: Path) -> Path:
    """Release directory holding the files of v2.0.0."""
    root = tmp_path / "bin" / "releases"
    create_file(root / "git-lfs-v2.0.0.tar.gz", b"source")
    create_file(root / "linux-amd64" / "git-lfs-linux-amd64-v2.0.0.tar.gz", b"linux")
    create_file(root / "sha256sums.asc", b"signed hashes")
    return root


@pytest.fixture
def config(releases_dir: Path, netrc_file: Path) -> ReleaseConfig:
    return ReleaseConfig(
        repo="git-lfs/git-lfs",
        api_base="https://api.github.com",
        api_host="api.github.com",
        upload_host="uploads.github.com",
        releases_dir=releases_dir,
        netrc_path=netrc_file,
    )


@pytest.fixture
def changelog(tmp_path: Path) -> Path:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("Fixes.\n")
    return path


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)
