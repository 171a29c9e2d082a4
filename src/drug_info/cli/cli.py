"""Command-line interface for drug-info."""

import logging
import sys
from pathlib import Path

import click

from drug_info.config import get_settings
from drug_info.db.session import init_db
from drug_info.runners.seed_runner import LabelFileError, run_seed


@click.group()
@click.version_option(package_name="drug-info")
def main():
    """drug-info: normalize FDA drug labels and seed the drug store."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("init-db")
@click.option("--database-url", help="SQLAlchemy database URL (defaults to DATABASE_URL)")
def init_db_command(database_url: str | None):
    """Create the drug tables if they do not exist."""
    init_db(database_url)
    click.echo("Database tables ready.")


@main.command()
@click.option(
    "-l",
    "--labels",
    "labels_path",
    type=click.Path(path_type=Path),
    help="JSON array of raw label documents (defaults to LABELS_PATH)",
)
@click.option("--database-url", help="SQLAlchemy database URL (defaults to DATABASE_URL)")
def seed(labels_path: Path | None, database_url: str | None):
    """Replace all drugs and FAQs with the contents of a labels file."""
    settings = get_settings()
    labels_path = labels_path or settings.labels_path

    click.echo(f"Seeding FDA data from: {labels_path}")
    try:
        summary = run_seed(
            labels_path,
            database_url,
            faq_answer_max_chars=settings.faq_answer_max_chars,
        )
    except LabelFileError as e:
        click.echo(f"Seeding failed: {e}", err=True)
        sys.exit(1)

    click.echo("Database summary:")
    click.echo(f"  Documents: {summary.documents_total}")
    click.echo(f"  Drugs: {summary.drugs_stored}")
    click.echo(f"  FAQs: {summary.faqs_stored}")
    if summary.failures:
        click.echo(f"  Failed: {summary.failed}")
        for failure in summary.failures:
            click.echo(f"    #{failure.index} {failure.drug_name or '<unnamed>'}: {failure.error}")


if __name__ == "__main__":
    main()
