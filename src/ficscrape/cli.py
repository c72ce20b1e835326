from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Callable

from tqdm import tqdm

from .errors import FicScrapeError
from .extraction import extract_fic_metadata, gettags
from .manifest import RecordWriter
from .models import tags_to_dict
from .urls import ARCHIVE_BASE_URL, absolute_work_url


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("paths", nargs="+", type=Path, help="Saved HTML files")
    p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Append records to this JSON Lines file instead of stdout",
    )
    p.add_argument("--progress", action="store_true")


def _metadata_record(path: Path, html: str, args: argparse.Namespace) -> dict[str, Any]:
    record = extract_fic_metadata(html).to_dict()
    if args.absolute_urls:
        record["url"] = absolute_work_url(record["url"], base_url=args.base_url)
    record["path"] = str(path)
    return record


def _tags_record(path: Path, html: str, args: argparse.Namespace) -> dict[str, Any]:
    return {"path": str(path), "tags": tags_to_dict(gettags(html))}


def _run(
    args: argparse.Namespace,
    build: Callable[[Path, str, argparse.Namespace], dict[str, Any]],
) -> int:
    writer = RecordWriter(out_path=args.out)
    failed = 0
    for path in tqdm(
        args.paths, desc=args.cmd, unit="file", disable=not bool(args.progress)
    ):
        try:
            html = path.read_text(encoding="utf-8")
            record = build(path, html, args)
        except (OSError, UnicodeDecodeError, FicScrapeError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            failed += 1
            continue
        writer.write(record)

    if failed:
        print(
            f"{args.cmd}: records={writer.written} failed={failed}", file=sys.stderr
        )
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ficscrape")
    sub = parser.add_subparsers(dest="cmd", required=True)

    meta_p = sub.add_parser(
        "metadata",
        help="Extract work id, title, url and dates from saved listing pages",
    )
    _add_common_args(meta_p)
    meta_p.add_argument(
        "--absolute-urls",
        action="store_true",
        help="Resolve the extracted link target against --base-url",
    )
    meta_p.add_argument("--base-url", default=ARCHIVE_BASE_URL)

    tags_p = sub.add_parser(
        "tags", help="Group the tags of saved pages by tag category"
    )
    _add_common_args(tags_p)

    args = parser.parse_args(argv)

    if args.cmd == "metadata":
        return _run(args, _metadata_record)

    if args.cmd == "tags":
        return _run(args, _tags_record)

    return 2
