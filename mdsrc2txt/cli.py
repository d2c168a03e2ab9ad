#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI entrypoint for mdsrc2txt.

    mdsrc2txt <directory-or-zip>

Writes YYYYMMDD-HHMMSS-<input>-COMBINED.TXT into the output
directory (default: $MDSRC2TXT_OUTPUT_DIR, else the current directory).
"""

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path

from mdsrc2txt import __version__
from mdsrc2txt.collector import CollectorError, open_source, process
from mdsrc2txt.display import ProgressReporter, blue, format_size, yellow


OUTPUT_DIR_ENV = "MDSRC2TXT_OUTPUT_DIR"


# ============================================================
# Configuration
# ============================================================

def default_output_dir() -> Path:
    return Path(os.environ.get(OUTPUT_DIR_ENV, "."))


def output_file_name(input_path: Path, now: datetime) -> str:
    base = input_path.stem
    if base in ("", ".", ".."):
        base = "input"
    return f"{now.strftime('%Y%m%d-%H%M%S')}-{base}-COMBINED.TXT"


def build_parser():
    p = argparse.ArgumentParser(
        prog="mdsrc2txt",
        description=(
            "Combines programming source code files from a directory "
            "or ZIP file into a single text file"
        ),
        add_help=False,
    )
    p.add_argument("input", help="Input directory or ZIP file to process")
    p.add_argument("-h", "-?", "--help", action="help",
                   help="show this help message and exit")
    p.add_argument("--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-o", "--output-dir", default=None,
                   help=f"where to write the combined file "
                        f"(default: ${OUTPUT_DIR_ENV} or current directory)")
    p.add_argument("--no-progress", action="store_true",
                   help="do not show the live progress line")
    return p


# ============================================================
# Main
# ============================================================

def run(input_path: Path, output_dir: Path, show_progress=True) -> Path:
    # reject bad input before anything is created on disk
    source = open_source(input_path)

    out_path = output_dir / output_file_name(input_path, datetime.now())
    print(f"{blue('Creating output file:')} {out_path.name}")

    with open(out_path, "w", encoding="utf-8", newline="") as sink, \
            ProgressReporter(enabled=show_progress) as progress:
        entry_count, total_size = process(source, sink, progress)

    print(f"[info] {entry_count} files, {format_size(total_size)} written")
    print(
        f"{blue('Processing completed.')} "
        f"{yellow(f'Combined file created: {out_path.name}')}"
    )
    return out_path


def main(argv=None):
    args = build_parser().parse_args(argv)

    output_dir = (Path(args.output_dir) if args.output_dir
                  else default_output_dir())
    show_progress = not args.no_progress and sys.stdout.isatty()

    try:
        run(Path(args.input), output_dir, show_progress)
    except (CollectorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


# Allow running: python -m mdsrc2txt.cli
if __name__ == "__main__":
    main()
