# mdsrc2txt/display.py
"""
Console presentation: colors, size/filename formatting and the
live "Adding file" progress line.
"""

import sys

from tqdm import tqdm

LIGHT_BLUE = "\x1b[94m"
LIGHT_YELLOW = "\x1b[93m"
RESET = "\x1b[0m"

FILENAME_WIDTH = 30


def blue(text):
    return f"{LIGHT_BLUE}{text}{RESET}"


def yellow(text):
    return f"{LIGHT_YELLOW}{text}{RESET}"


def format_size(n_bytes: int) -> str:
    if n_bytes < 1024:
        return f"{n_bytes} B"
    if n_bytes < 1024 ** 2:
        return f"{n_bytes / 1024:.2f} KB"
    if n_bytes < 1024 ** 3:
        return f"{n_bytes / 1024 ** 2:.2f} MB"
    return f"{n_bytes / 1024 ** 3:.2f} GB"


def format_filename(name: str, width: int = FILENAME_WIDTH) -> str:
    """
    Fit `name` into `width` columns.

    Long names keep their tail and get a "..." prefix; short names
    are right-aligned.
    """
    if len(name) > width:
        indicator = "..."
        return indicator + name[len(name) - (width - len(indicator)):]
    return f"{name:>{width}}"


class ProgressReporter:
    """Single status line updated once per written file."""

    def __init__(self, enabled=True, stream=None):
        stream = stream if stream is not None else sys.stdout
        self.bar = tqdm(
            file=stream,
            bar_format="{desc}",
            disable=not enabled,
            leave=True,
        )

    def __call__(self, identifier, entry_count, total_size):
        self.bar.set_description_str(
            f"{blue('Adding file:')} {format_filename(identifier)}"
            f" | Total files: {entry_count}"
            f" | Total size: {format_size(total_size)}"
        )
        self.bar.update(1)

    def close(self):
        self.bar.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
