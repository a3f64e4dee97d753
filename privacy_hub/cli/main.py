"""CLI entry point for the notice version manager."""

import logging
import sys
from pathlib import Path

import click

from privacy_hub.catalog.resolver import DocumentResolver
from privacy_hub.contracts.archive import ArchiveReport
from privacy_hub.settings import get_settings
from privacy_hub.site.builder import SiteBuildError, SiteBuilder
from privacy_hub.versioning.archiver import VersionArchiver

USAGE_HINT = "Use --help for usage information"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send package diagnostics to stderr, leaving stdout for results."""
    logger = logging.getLogger("privacy_hub")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def print_report(report: ArchiveReport) -> None:
    """Summarize an archive run."""
    for item in report.archived:
        click.echo(f"📦 Archived version {item.version} for {item.label}")
    for item in report.already_archived:
        click.echo(f"ℹ️  Version {item.version} already exists for {item.label}")
    for item in report.skipped:
        click.echo(f"⚠️  Skipped {item.label}: {item.message}", err=True)
    for item in report.errors:
        click.echo(f"❌ {item.label}: {item.message}", err=True)

    click.echo(
        f"\nArchived: {len(report.archived)}, "
        f"already archived: {len(report.already_archived)}, "
        f"skipped: {len(report.skipped)}, errors: {len(report.errors)}"
    )


def process_all(notices_dir: Path) -> None:
    """Archive every notice and build the site; exits 1 if the build fails."""
    settings = get_settings()
    click.echo("🔄 Processing all notices for versioning...")

    archiver = VersionArchiver(
        notices_dir,
        builder=SiteBuilder(settings.site_build_command),
    )
    try:
        report = archiver.process_all()
    except SiteBuildError as e:
        click.echo(f"\n❌ Error building static site: {e}", err=True)
        sys.exit(1)

    print_report(report)
    click.echo("✅ Static site built successfully")


def check_status(notices_dir: Path) -> None:
    """Print whether each translation is behind its notice's canonical language."""
    settings = get_settings()
    click.echo("🔍 Checking translation statuses...")

    resolver = DocumentResolver(notices_dir, default_language=settings.main_language)
    for notice_id, language, status in resolver.all_translation_statuses():
        if status.is_outdated:
            click.echo(
                f"⚠️  {notice_id}/{language}: Outdated "
                f"(v{status.translation_version} < v{status.canonical_version})"
            )
        else:
            click.echo(f"✅ {notice_id}/{language}: Up to date (v{status.translation_version})")


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    epilog="Examples:\n\n  privacy-hub --process-all\n\n  privacy-hub --check-status",
)
@click.option(
    "--process-all",
    "process_all_flag",
    is_flag=True,
    help="Process all notices and archive versions",
)
@click.option(
    "--check-status",
    "check_status_flag",
    is_flag=True,
    help="Check translation status for all notices",
)
@click.option(
    "--notices-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Notices directory (default: NOTICES_DIR or notices/)",
)
def app(process_all_flag: bool, check_status_flag: bool, notices_dir: Path | None):
    """Version Manager for Privacy Notices."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if notices_dir is None:
        notices_dir = Path(settings.notices_dir)

    if process_all_flag:
        process_all(notices_dir)
    elif check_status_flag:
        check_status(notices_dir)
    else:
        click.echo(USAGE_HINT)


__all__ = ["app"]
