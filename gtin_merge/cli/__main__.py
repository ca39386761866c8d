from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from gtin_merge.config.loader import DEFAULT_CONFIG_PATH, ConfigError, resolve_config
from gtin_merge.csvio.writer import serialize, write_output
from gtin_merge.logging.init import log_summary, setup_logging
from gtin_merge.services.orchestrator import ProcessingError, process_all
from gtin_merge.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load ``.env`` then the YAML config (built-in defaults when absent)
- Check the source directory; a missing directory ends the run without error status
- Extract GTIN records from every CSV file, one file at a time
- Write the consolidated CSV and print the SUMMARY line

Input directory and output path come from configuration only.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path) -> None:
    """Load .env using python-dotenv (existing variables are kept)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Merge CSV catalog exports into one file of products with a GTIN/EAN"
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    # NOTE: only None reads sys.argv; an empty list must stay empty under pytest
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")
    logger.info("Starting GTIN extraction...")

    _load_env_file(Path(".env"))
    try:
        cfg = resolve_config(DEFAULT_CONFIG_PATH)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    # nothing processed, nothing written; not an error status
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_SUCCESS
    if not directory.is_dir():
        logger.error(f"Path is not a directory: {directory}")
        return EXIT_SUCCESS

    logger.info(f"Processing files from: {directory}")
    try:
        report = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    output_path = Path(cfg.output_file)
    try:
        write_output(output_path, serialize(report.aggregate))
    except OSError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL
    logger.info(f"Output written: {output_path}")

    summary_line = render_summary_line(report)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line.removeprefix("SUMMARY "))

    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
