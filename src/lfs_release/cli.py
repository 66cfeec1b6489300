"""CLI entry point for lfs-release."""

from dataclasses import replace
from pathlib import Path

import click
import httpx
from rich.console import Console

from lfs_release import __version__
from lfs_release.commands.publish import publish
from lfs_release.core.artifacts import ArtifactError
from lfs_release.core.config import ConfigError, get_config
from lfs_release.core.credentials import CredentialsError
from lfs_release.core.github import GitHubError

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__, prog_name="lfs-release")
@click.argument("tag", metavar="VERSION", required=False)
@click.argument(
    "changelog_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file overriding the default settings.",
)
@click.option("--repo", help="Repository to publish to, as owner/name.")
@click.option(
    "--releases-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the built release files.",
)
@click.option("--dry-run", is_flag=True, help="Show the body and planned uploads only.")
@click.pass_context
def main(ctx, tag, changelog_file, config_path, repo, releases_dir, dry_run):
    """Publish a Git LFS release to GitHub.

    Creates a draft release named VERSION (unless one already exists) whose
    body is CHANGELOG_FILE followed by package links and SHA-256 hashes, then
    uploads every release file that is not attached to it yet.

    Credentials for api.github.com and uploads.github.com are read from
    ~/.netrc.

    Examples:

        lfs-release v3.4.0 CHANGELOG-3.4.0.md

        lfs-release --dry-run v3.4.0 CHANGELOG-3.4.0.md
    """
    if tag is None or changelog_file is None:
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)

    config = get_config()
    try:
        if config_path is not None:
            config = config.load(config_path)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(2)

    overrides = {}
    if repo:
        overrides["repo"] = repo
    if releases_dir:
        overrides["releases_dir"] = releases_dir
    if overrides:
        config = replace(config, **overrides)

    console.print(f"[blue]Publishing[/blue] {tag} to [bold]{config.repo}[/bold]")

    try:
        uploaded = publish(config, tag, changelog_file, dry_run=dry_run)
    except (ArtifactError, CredentialsError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(2)
    except (GitHubError, httpx.HTTPError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not dry_run:
        console.print(
            f"\n[green]✓[/green] Release [bold]{tag}[/bold] is up to date "
            f"({len(uploaded)} asset(s) uploaded)"
        )


if __name__ == "__main__":
    main()
