"""CLI entry point for the report normalizer."""

import logging
import sys
from pathlib import Path

import typer

from boostsec.report_normalizer.loader import load_suite_tree
from boostsec.report_normalizer.models.config import ReporterConfig
from boostsec.report_normalizer.report import build_report

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "boostsec.report_normalizer"

app = typer.Typer()


def configure_logging(config: ReporterConfig) -> None:
    """Silence the package loggers in quiet mode."""
    level = logging.CRITICAL + 1 if config.quiet else logging.NOTSET
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


@app.command()
def main(
    results: Path = typer.Option(..., help="Path to the runner's JSON/YAML results"),  # noqa: B008
    inline_diffs: bool = typer.Option(
        False, help="Emit word-level diffs instead of unified diffs"
    ),
    quiet: bool = typer.Option(False, help="Suppress log output"),
) -> None:
    """Normalize a test run's suite tree and print the report as JSON."""
    config = ReporterConfig(quiet=quiet, use_inline_diffs=inline_diffs)
    configure_logging(config)

    logger.info(f"Results file: {results}")
    try:
        root = load_suite_tree(results)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load results: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    report = build_report(root, config)
    typer.echo(report.model_dump_json(by_alias=True, indent=2))

    if report.stats.failures:
        logger.error(
            f"Tests failed: {report.stats.failures}/{report.stats.tests_registered}"
        )
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
