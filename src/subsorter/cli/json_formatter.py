"""JSON documents printed by ``subsorter --json``.

A scan prints its report; a fatal error prints an error document. Both carry
``success`` so a caller can branch on one field.
"""

from __future__ import annotations

import sys
from typing import Any

import orjson

from subsorter.core.models import ScanReport

_DUMP_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS


def format_scan_report(report: ScanReport) -> bytes:
    """Serialize a scan report.

    ``success`` is false as soon as one title folder failed, even though the
    process still exits 0 in that case.
    """
    document: dict[str, Any] = {
        "success": not report.failures,
        **report.to_dict(),
        "summary": {
            "copied": len(report.copied),
            "failures": len(report.failures),
            "failed_folders": [str(folder) for folder in report.failed_folders],
        },
    }
    return orjson.dumps(document, option=_DUMP_OPTIONS)


def format_error(
    message: str,
    error_code: str,
    exit_code: int,
    context: dict[str, Any] | None = None,
) -> bytes:
    """Serialize a fatal CLI error.

    Values orjson cannot encode are written with ``str()``.
    """
    document = {
        "success": False,
        "error": {
            "code": error_code,
            "message": message,
            "exit_code": exit_code,
            "context": context or {},
        },
    }
    return orjson.dumps(document, default=str, option=_DUMP_OPTIONS)


def write_json(payload: bytes) -> None:
    """Write a JSON document and a newline to stdout."""
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()
