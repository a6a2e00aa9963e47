"""Analysis results: terminal output and JSON export."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional, TextIO

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


class Status(str, Enum):
    """Outcome of analysing one log."""

    OK = "OK"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


class ExportError(Exception):
    """Results could not be written to disk."""


@dataclass
class LogResult:
    """Analysis outcome for a single log file."""

    log_id: str
    file_path: str
    status: Status
    message: str
    error_details: str = ""

    def __post_init__(self) -> None:
        self.status = Status(self.status)

    def to_dict(self) -> dict:
        """Return the JSON representation of this result."""
        return {
            "log_id": self.log_id,
            "file_path": self.file_path,
            "status": self.status.value,
            "message": self.message,
            "error_details": self.error_details,
        }


def export_results(results: Iterable[LogResult], output_path: str) -> None:
    """Write results as indented JSON, creating parent directories.

    An empty result set is written as ``null``.
    """
    directory = os.path.dirname(output_path) or "."
    try:
        os.makedirs(directory, mode=0o755, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"failed to create output directory: {exc}") from exc

    payload = [result.to_dict() for result in results] or None
    text = json.dumps(payload, indent=2, ensure_ascii=False).translate(
        _JSON_ESCAPES
    )
    try:
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    except OSError as exc:
        raise ExportError(f"failed to create output file: {exc}") from exc


def print_results(
    results: Iterable[LogResult], out: Optional[TextIO] = None
) -> None:
    """Print each result in a readable block."""
    out = sys.stdout if out is None else out
    print("\n=== Log Analysis Results ===", file=out)
    for result in results:
        print(f"ID: {result.log_id}", file=out)
        print(f"Path: {result.file_path}", file=out)
        print(f"Status: {result.status.value}", file=out)
        print(f"Message: {result.message}", file=out)
        if result.error_details:
            print(f"Error: {result.error_details}", file=out)
        print("---", file=out)


def generate_timestamped_filename(
    base_path: str, now: Optional[datetime] = None
) -> str:
    """Prefix the file name of ``base_path`` with a YYMMDD date stamp."""
    now = datetime.now() if now is None else now
    stamp = now.strftime("%y%m%d")
    directory = os.path.dirname(base_path) or "."
    name = os.path.basename(base_path)
    dot = name.rfind(".")
    stem, ext = (name[:dot], name[dot:]) if dot >= 0 else (name, "")
    return os.path.normpath(os.path.join(directory, f"{stamp}_{stem}{ext}"))