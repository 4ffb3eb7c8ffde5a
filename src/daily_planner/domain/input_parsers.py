"""Strict parsers for raw console input values."""

from __future__ import annotations

import re
from datetime import datetime

_TASK_ID_PATTERN = re.compile(r"[+-]?\d+")
# Task ids are signed 64-bit integers in the store.
_TASK_ID_MIN = -(2**63)
_TASK_ID_MAX = 2**63 - 1


class InputParseError(ValueError):
    """Deterministic parse failure with machine-readable reason."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def parse_due_date(raw: str) -> datetime:
    """Parse a `YYYY-MM-DD` date (or naive ISO date-time) typed at the console."""

    value = raw.strip()
    if not value:
        raise InputParseError("empty_due_date")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise InputParseError("invalid_due_date") from exc
    if parsed.tzinfo is not None:
        raise InputParseError("timezone_not_supported")
    return parsed


def parse_task_id(raw: str) -> int:
    """Parse a decimal task id typed at the console."""

    value = raw.strip()
    if _TASK_ID_PATTERN.fullmatch(value) is None:
        raise InputParseError("invalid_task_id")
    task_id = int(value)
    if not _TASK_ID_MIN <= task_id <= _TASK_ID_MAX:
        raise InputParseError("invalid_task_id")
    return task_id
