"""Command-line entry point: validate template files and print diagnostics."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from templatelint import __version__
from templatelint.models.options import ValidationOptions
from templatelint.models.result import Fatal, ValidationOutcome
from templatelint.settings import Settings
from templatelint.validator.engine import validate_template

logger = logging.getLogger("templatelint.cli")

EXIT_CLEAN = 0
EXIT_DIAGNOSTICS = 1
EXIT_FAILURE = 2


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatelint",
        description="Check component templates for tag balance, naming and unused ids/classes.",
    )
    parser.add_argument("templates", nargs="+", type=Path, help="Template files to check")
    parser.add_argument(
        "--controller",
        type=Path,
        help=(
            "Controller source for every template "
            f"(default: sibling file ending in '{settings.controller_suffix}')"
        ),
    )
    parser.add_argument(
        "--ambient",
        type=Path,
        action="append",
        default=[],
        help="Ambient/global source; may be given more than once",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=settings.output_format,
        help="Output format",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _controller_for(template: Path, explicit: Path | None, suffix: str) -> Path | None:
    if explicit is not None:
        return explicit
    candidate = template.with_name(template.stem + suffix)
    return candidate if candidate.is_file() else None


def _read(path: Path | None) -> str:
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")


def _as_json(template: Path, outcome: ValidationOutcome) -> dict[str, Any]:
    if isinstance(outcome, Fatal):
        return {"file": str(template), "ok": False, "error": outcome.message}
    return {
        "file": str(template),
        "ok": True,
        "diagnostics": [d.model_dump(mode="json", by_alias=True) for d in outcome.diagnostics],
    }


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    args = _build_parser(settings).parse_args(argv)

    ambient_parts: list[str] = []
    for path in args.ambient:
        try:
            ambient_parts.append(_read(path))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{path}: error: cannot read ambient source: {exc}", file=sys.stderr)
            return EXIT_FAILURE
    ambient_source = "\n".join(ambient_parts)

    exit_code = EXIT_CLEAN
    reports: list[dict[str, Any]] = []
    for template in args.templates:
        controller = _controller_for(template, args.controller, settings.controller_suffix)
        try:
            content = _read(template)
            controller_source = _read(controller)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{template}: error: {exc}", file=sys.stderr)
            exit_code = EXIT_FAILURE
            continue

        logger.debug("Checking %s (controller=%s)", template, controller)
        options = ValidationOptions(
            controller_source=controller_source,
            ambient_source=ambient_source,
        )
        outcome = validate_template(content, str(template), options)

        if isinstance(outcome, Fatal):
            exit_code = EXIT_FAILURE
        elif outcome.diagnostics and exit_code == EXIT_CLEAN:
            exit_code = EXIT_DIAGNOSTICS

        if args.format == "json":
            reports.append(_as_json(template, outcome))
        elif isinstance(outcome, Fatal):
            print(f"{template}: error: {outcome.message}", file=sys.stderr)
        else:
            for diagnostic in outcome.diagnostics:
                print(diagnostic.format())

    if args.format == "json":
        print(json.dumps(reports, indent=2))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
