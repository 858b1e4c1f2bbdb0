"""Command-line interface for git-bluff."""

import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click

from ._version import __version__
from .config import ConfigLoader
from .core.locator import find_git_repositories
from .errors import GitBluffError
from .pipeline import collect_commits
from .reports.text_report import generate_report, generate_report_with_config
from .utils.cli_utils import setup_logging, split_patterns
from .utils.date_utils import DateOptionError, resolve_date_window

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: Optional[datetime]) -> Optional[date]:
    return value.date() if value is not None else None


@click.command(name="git-bluff")
@click.version_option(version=__version__, prog_name="git-bluff")
@click.help_option("-h", "--help")
@click.option(
    "--directory",
    "-d",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to scan for Git repositories",
)
@click.option(
    "--depth",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Directory levels to descend below --directory (0 checks only the directory itself)",
)
@click.option("--date", "on_date", type=DATE_TYPE, default=None, help="Report a single day (YYYY-MM-DD)")
@click.option("--from", "from_date", type=DATE_TYPE, default=None, help="Start of the date range (YYYY-MM-DD)")
@click.option("--to", "to_date", type=DATE_TYPE, default=None, help="End of the date range, requires --from")
@click.option(
    "--author",
    "authors",
    multiple=True,
    help="Only include authors whose name contains this text (repeatable, comma-separated)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show progress and repository paths")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to YAML project-mapping file",
)
@click.option(
    "--keep-going",
    is_flag=True,
    help="Skip repositories that fail to read instead of aborting the run",
)
@click.option(
    "--log",
    type=click.Choice(["none", "INFO", "DEBUG"], case_sensitive=False),
    default="none",
    help="Enable logging with specified level (default: none)",
)
def cli(
    directory: Path,
    depth: int,
    on_date: Optional[datetime],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    authors: tuple[str, ...],
    verbose: bool,
    config_path: Optional[Path],
    keep_going: bool,
    log: str,
) -> None:
    """Generate daily reports from Git commits.

    Scans DIRECTORY for repositories, collects the commits of the requested
    day (today by default) and prints their cleaned messages, grouped by
    repository or, with --config, by project.
    """
    logger = setup_logging(log, __name__)

    try:
        window = resolve_date_window(
            date.today(), _as_date(on_date), _as_date(from_date), _as_date(to_date)
        )
    except DateOptionError as e:
        raise click.UsageError(str(e)) from e

    author_patterns = split_patterns(authors)

    if verbose:
        click.echo(f"📂 Scanning directory: {directory}")
        if depth > 0:
            click.echo(f"🔄 Max depth: {depth}")
        if window.start == window.end:
            click.echo(f"📅 Date filter: {window.start}")
        else:
            click.echo(f"📅 Date range: {window.start} to {window.end}")
        if author_patterns:
            click.echo(f"👤 Authors: {', '.join(author_patterns)}")
        if config_path:
            click.echo(f"📄 Config file: {config_path}")
        click.echo()

    def show_progress(repo_path: Path, commit_count: int) -> None:
        click.echo(f"📦 Processing: {repo_path}")
        if commit_count:
            click.echo(f"   └── Found {commit_count} commit(s)")

    try:
        mapping = ConfigLoader.load(config_path) if config_path else None

        repos = find_git_repositories(directory, depth)
        if verbose:
            click.echo(f"✅ Found {len(repos)} git repository(ies)\n")

        result = collect_commits(
            repos,
            window,
            author_patterns,
            keep_going=keep_going,
            progress_callback=show_progress if verbose else None,
        )
    except GitBluffError as e:
        logger.debug("Run aborted", exc_info=True)
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if mapping is not None:
        report = generate_report_with_config(result.commits, mapping, verbose)
    else:
        report = generate_report(result.commits)

    click.echo(report.summary)

    if verbose:
        click.echo(f"🧮 Processed {report.total_commits} commit(s) in {report.total_groups} group(s)")

    if result.failures:
        click.echo(f"\n⚠️  Failed to process {result.repos_failed} repository(ies):", err=True)
        for failure in result.failures:
            click.echo(f"   • {failure}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
