"""
CLI: generate Swift accessors from a String Catalog.

Examples:
    xcstrings-codegen
    xcstrings-codegen --input Resources/Localizable.xcstrings --separator .
    xcstrings-codegen --config StringsCatalogPluginConfig.json --stdout
    xcstrings-codegen --print-config
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from xcstrings_codegen.core.catalog_loader import CatalogError, load_catalog
from xcstrings_codegen.core.config import (
    ACCESS_LEVELS,
    DEFAULT_CONFIG_FILE,
    Settings,
    load_settings,
)
from xcstrings_codegen.generator import generate
from xcstrings_codegen.logging import configure_logging, logger
from xcstrings_codegen.utils.yaml_io import to_yaml


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="xcstrings-codegen",
        description="Generate typed Swift accessors from an .xcstrings String Catalog",
    )
    p.add_argument(
        "--config",
        type=Path,
        help=f"JSON or YAML config file (default: ./{DEFAULT_CONFIG_FILE} when present)",
    )
    p.add_argument("--input", type=Path, help="Path to the .xcstrings catalog")
    p.add_argument("--output-dir", type=Path, help="Directory for the generated file")
    p.add_argument("--output", help="Generated file name (default: L10n.swift)")
    p.add_argument("--table", help="Strings table name used for runtime lookup")
    p.add_argument("--type-name", help="Name of the root generated enum")
    p.add_argument("--access", choices=ACCESS_LEVELS, help="Access modifier for generated API")
    p.add_argument("--locale", help="Locale whose values become accessor comments")
    p.add_argument("--separator", help="Key segment separator (one character)")
    p.add_argument("--stdout", action="store_true", help="Print the result instead of writing it")
    p.add_argument(
        "--print-config", action="store_true", help="Print effective settings as YAML and exit"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return load_settings(
        args.config,
        INPUT=args.input,
        OUTPUT_DIR=args.output_dir,
        OUTPUT=args.output,
        TABLE=args.table,
        TYPE_NAME=args.type_name,
        ACCESS=args.access,
        LOCALE=args.locale,
        SEPARATOR=args.separator,
    )


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        logger.error("settings_invalid", error=str(e))
        print(f"[error] invalid settings: {e}", file=sys.stderr)
        return 1

    if args.print_config:
        print(to_yaml(settings.as_dict()), end="")
        return 0

    try:
        catalog = load_catalog(settings.INPUT, settings.LOCALE)
    except CatalogError as e:
        logger.error("catalog_failed", input=str(settings.INPUT), error=str(e))
        print(f"[error] {e}", file=sys.stderr)
        return 1

    content = generate(
        catalog.keys,
        comments=catalog.comments,
        plural_keys=catalog.plural_keys,
        config=settings.generator_config(),
    )

    if args.stdout:
        sys.stdout.write(content)
        return 0

    output = settings.output_path
    try:
        write_output(output, content)
    except OSError as e:
        logger.error("output_failed", output=str(output), error=str(e))
        print(f"[error] cannot write {output}: {e}", file=sys.stderr)
        return 1

    logger.info("output_written", output=str(output), keys=len(catalog.keys))
    print(f"[ok] {settings.INPUT} -> {output} ({len(catalog.keys)} keys)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
