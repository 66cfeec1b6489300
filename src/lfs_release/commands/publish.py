"""Release publishing pipeline."""

from pathlib import Path

import httpx
from rich.console import Console
from rich.table import Table

from lfs_release.core.artifacts import (
    CHECKSUM_FILE,
    ArtifactError,
    build_artifacts,
    locate_artifacts,
)
from lfs_release.core.body import compose_body
from lfs_release.core.config import ReleaseConfig
from lfs_release.core.credentials import check_credentials
from lfs_release.core.github import GitHubClient
from lfs_release.core.workdir import work_dir
from lfs_release.models.artifact import Artifact

console = Console()


def resolve_release(client: GitHubClient, version: str, body_path: Path) -> str:
    """Return the upload endpoint of the release named `version`.

    An existing release is reused as is, body included. Otherwise a draft
    release is created with the composed body.
    """
    release = client.find_release(version)
    if release is not None:
        console.print(f"  Release [bold]{version}[/bold] already exists, reusing it")
        return release.upload_endpoint

    console.print(f"[blue]Creating[/blue] draft release [bold]{version}[/bold]...")
    release = client.create_release(
        tag_name=version,
        name=version,
        body=body_path.read_text(),
        draft=True,
    )
    return release.upload_endpoint


def select_missing(artifacts: list[Artifact], existing_names: list[str]) -> list[Artifact]:
    """Artifacts whose base name is not among the existing asset names."""
    if not existing_names:
        return sorted(artifacts, key=lambda a: str(a.path))

    existing = set(existing_names)
    return sorted(
        (a for a in artifacts if a.name not in existing),
        key=lambda a: str(a.path),
    )


def upload_missing_assets(
    client: GitHubClient,
    version: str,
    endpoint: str,
    artifacts: list[Artifact],
) -> list[Artifact]:
    """Upload the artifacts not yet attached to the release. Returns them."""
    release = client.find_release(version)
    existing_names = release.asset_names if release is not None else []

    missing = select_missing(artifacts, existing_names)
    if not missing:
        console.print("  All assets already uploaded")
        return []

    for artifact in missing:
        console.print(f"  Uploading [cyan]{artifact.name}[/cyan] ({artifact.label})...")
        with open(artifact.path, "rb") as f:
            client.upload_asset(
                endpoint,
                name=artifact.name,
                label=artifact.label,
                content_type=artifact.content_type,
                data=f,
            )
        console.print(f"  [green]✓[/green] Uploaded {artifact.name}")

    return missing


def show_plan(version: str, artifacts: list[Artifact], body_path: Path) -> None:
    """Print the composed body and the artifacts that would be uploaded."""
    console.print(f"[bold]Release body for {version}:[/bold]\n")
    console.print(body_path.read_text(), markup=False, highlight=False)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Asset")
    table.add_column("Label")
    table.add_column("Content-Type")
    table.add_column("Size", justify="right")

    for artifact in artifacts:
        table.add_row(
            artifact.name,
            artifact.label,
            artifact.content_type or "-",
            str(artifact.path.stat().st_size),
        )

    console.print(table)


def publish(
    config: ReleaseConfig,
    version: str,
    changelog_path: Path,
    dry_run: bool = False,
    transport: httpx.BaseTransport | None = None,
) -> list[Artifact]:
    """Run the whole pipeline for one version.

    Preconditions (artifacts present, credentials configured) are checked
    before any network call. Returns the uploaded artifacts.
    """
    paths = locate_artifacts(version, config.releases_dir)
    # The checksum file is located for any version, so it alone does not count
    if not any(path.name != CHECKSUM_FILE for path in paths):
        raise ArtifactError(
            f"No release files found for {version} in {config.releases_dir}"
        )
    artifacts = build_artifacts(paths)

    if not dry_run:
        check_credentials(config)

    with work_dir() as scratch:
        body_path = compose_body(version, changelog_path, paths, scratch)

        if dry_run:
            show_plan(version, artifacts, body_path)
            return []

        with GitHubClient(config, transport=transport) as client:
            endpoint = resolve_release(client, version, body_path)
            return upload_missing_assets(client, version, endpoint, artifacts)
