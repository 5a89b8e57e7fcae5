"""Loading of customer records from the churn CSV export."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_MIN_FIELDS = 21
_COL_ID = 0
_COL_TENURE = 5
_COL_MONTHLY = 18
_COL_TOTAL = 19
_COL_CHURN = 20


@dataclass
class Solicitud:
    """One customer request: identifier, tenure, charges and churn flag."""

    customer_id: str
    tenure: int
    monthly_charges: float
    total_charges: float
    churn: str


@dataclass
class ParseResult:
    """Records read from a CSV file and how many had no usable TotalCharges."""

    records: list[Solicitud] = field(default_factory=list)
    total_nulls: int = 0

    @property
    def total_loaded(self) -> int:
        return len(self.records)


def _leading_int(text: str) -> int:
    """Parse the integer prefix of ``text``; raise ValueError if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _leading_float(text: str) -> float:
    """Parse the floating-point prefix of ``text``; raise ValueError if there is none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _split_fields(line: str) -> list[str]:
    """Split on commas; an empty line has no fields and one trailing empty field is dropped."""
    if not line:
        return []
    fields = line.split(",")
    if fields[-1] == "":
        fields.pop()
    return fields


def _parse_row(fields: list[str]) -> tuple[Solicitud, bool]:
    """Build a record from a row, reporting whether its TotalCharges was null."""
    try:
        tenure = _leading_int(fields[_COL_TENURE])
    except ValueError:
        tenure = 0
    try:
        monthly = _leading_float(fields[_COL_MONTHLY])
    except ValueError:
        monthly = 0.0

    total_text = fields[_COL_TOTAL]
    is_null = False
    if total_text.strip(" ") == "":
        total = 0.0
        is_null = True
    else:
        try:
            total = _leading_float(total_text)
        except ValueError:
            total = 0.0
            is_null = True

    record = Solicitud(
        customer_id=fields[_COL_ID],
        tenure=tenure,
        monthly_charges=monthly,
        total_charges=total,
        churn=fields[_COL_CHURN],
    )
    return record, is_null


def parse_csv(path: str | Path) -> ParseResult:
    """Read the churn CSV at ``path``, skipping the header and rows with too few columns.

    Raises OSError if the file cannot be opened and ValueError if it is empty.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        text = handle.read()
    if not text:
        raise ValueError(f"{path}: file has no header line")

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    result = ParseResult()
    for line in lines[1:]:
        if line.endswith("\r"):
            line = line[:-1]
        fields = _split_fields(line)
        if len(fields) < _MIN_FIELDS:
            continue
        record, is_null = _parse_row(fields)
        result.records.append(record)
        if is_null:
            result.total_nulls += 1
    return result