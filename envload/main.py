from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from envload.config import Settings
from envload.errors import ParseError
from envload.loader import Loader
from envload.observability.logging import setup_logging
from envload.parser.document import scan_document
from envload.sources.remote import RemoteEnvSource

logger = logging.getLogger("envload")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _read_source(args: argparse.Namespace, settings: Settings) -> str:
    url = args.url or ("" if args.file else settings.env_url)
    if url:
        return RemoteEnvSource(url, timeout=settings.http_timeout).read()
    return Path(args.file or settings.env_file).read_text(encoding="utf-8")


def run_check(text: str) -> int:
    invalid = 0
    for result in scan_document(text):
        if result.ok:
            continue
        invalid += 1
        print(f"line {result.lineno}: {result.error}: {result.error.rule}")

    if invalid:
        print(f"{invalid} invalid line(s)")
        return EXIT_INVALID

    print("ok")
    return EXIT_OK


def run_load(text: str, loader: Loader, override_keys: bool, show_values: bool) -> int:
    try:
        values = loader.load_string(text, override_keys=override_keys)
    except ParseError as exc:
        logger.error("%s: %s", exc, exc.rule)
        return EXIT_INVALID

    for key, value in values.items():
        print(f"{key}={value}" if show_values else key)
    return EXIT_OK


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load and validate .env files")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help="path of the .env file (default: ENVLOAD_FILE or .env)")
    source.add_argument("--url", help="fetch the .env document over HTTP instead of reading a file")
    parser.add_argument(
        "--check",
        action="store_true",
        help="report every invalid line instead of loading the document",
    )
    parser.add_argument(
        "--override",
        action="store_true",
        help="replace variables that are already set in the environment",
    )
    parser.add_argument("--show-values", action="store_true", help="print KEY=value instead of KEY")
    parser.add_argument("--json-logs", action="store_true", help="emit logs as JSON lines")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()

    setup_logging(
        level=settings.log_level,
        json_logs=args.json_logs or settings.json_logs,
    )

    try:
        text = _read_source(args, settings)
    except FileNotFoundError as exc:
        logger.error("env file not found | path=%s", exc.filename)
        return EXIT_UNREADABLE
    except (OSError, UnicodeDecodeError) as exc:
        # RemoteSourceError is an OSError too
        logger.error("env source unreadable | %s", exc)
        return EXIT_UNREADABLE

    if args.check:
        return run_check(text)

    return run_load(
        text,
        Loader(),
        override_keys=args.override or settings.override_keys,
        show_values=args.show_values,
    )


if __name__ == "__main__":
    sys.exit(main())
