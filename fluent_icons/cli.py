"""CLI entrypoint used as the icon generation build hook."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .errors import FluentIconsError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fluent-icons",
        description="Generate a Python module embedding Fluent UI System Icons.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only report warnings and errors on the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .fluent-icons.yml or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "--version-tag",
        default=None,
        help="Icon release tag to generate from (defaults to $FLUENT_ICONS_VERSION, "
        "then the configured version, then the package version).",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for the generated module (defaults to $OUT_DIR).",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Use an existing icon repository checkout instead of fetching one.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for icon generation."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    try:
        config = load_config(args.config)
        result = Orchestrator(config).run(
            version=args.version_tag,
            out_dir=args.out_dir,
            source_dir=args.source,
        )
    except FluentIconsError as exc:
        parser.exit(1, f"fluent-icons failed: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"fluent-icons failed: {exc}\nRun with --verbose for more details.\n")

    total = sum(result.counts.values())
    print(f"Generated {total} icon constants at {_relativize(result.output_path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
