from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from ytrss.batch import partition_outcomes, resolve_batch
from ytrss.config import Settings, load_settings
from ytrss.errors import FeedError
from ytrss.logger import setup_logger
from ytrss.pipeline import find_feed_url


def _package_version() -> str:
    try:
        return version("ytrss")
    except PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytrss",
        description="Quickly get RSS feed URLs from YouTube channel URLs",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("url", nargs="?", help="YouTube channel URL")
    source.add_argument(
        "-i",
        "--input",
        type=Path,
        help="File with one channel URL per line",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write resolved feed URLs here instead of stdout (batch mode)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Maximum number of channel pages fetched at once",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def read_input_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def write_output_lines(lines: list[str], path: Path | None) -> None:
    if path is None:
        for line in lines:
            print(line)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def _cmd_single(url: str, settings: Settings) -> int:
    try:
        feed_url = find_feed_url(url, settings)
    except FeedError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("RSS feed URL:")
    print(f"• {feed_url}")
    return 0


def _cmd_batch(input_path: Path, output_path: Path | None, settings: Settings) -> int:
    try:
        lines = read_input_lines(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"could not read input list {input_path}: {exc}", file=sys.stderr)
        return 1

    outcomes = resolve_batch(lines, settings)
    report = partition_outcomes(outcomes)

    write_output_lines(report.feed_urls, output_path)
    for raw, error in report.failures:
        print(f"{raw}: {error}", file=sys.stderr)

    print(
        "batch summary:",
        f"total={len(outcomes)}",
        f"resolved={report.success_count}",
        f"failed={report.failure_count}",
        file=sys.stderr,
    )

    if report.failure_count > 0 and report.success_count == 0:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.concurrency is not None:
            settings = Settings(**{**settings.model_dump(), "max_concurrency": args.concurrency})
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    setup_logger("DEBUG" if args.verbose else settings.log_level)

    if args.input is not None:
        return _cmd_batch(args.input, args.output, settings)
    return _cmd_single(args.url, settings)


if __name__ == "__main__":
    raise SystemExit(main())
