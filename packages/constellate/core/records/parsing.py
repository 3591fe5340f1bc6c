"""CSV parsing for ranked record tables.

Header names are normalised to camelCase and a few common aliases are
accepted for each required field, so exports from different spreadsheets
load without a column mapping. Fetching the CSV is the caller's concern;
these helpers take text or a local path.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
import re

from constellate.core.records.models import RankedRecord

logger = logging.getLogger(__name__)

_NAME_KEYS = ("name", "fullName")
_NET_WORTH_KEYS = ("netWorth", "networth", "wealth")
_RANK_KEYS = ("rank", "position")
_COMPANY_KEYS = ("company", "organization")
_COUNTRY_KEYS = ("country", "nation")

_SEPARATOR_RE = re.compile(r"[^a-zA-Z0-9]+(.)")
_NON_NUMERIC_RE = re.compile(r"[^\d.\-]")


class RecordParseError(ValueError):
    """Raised when a CSV document cannot be read as a record table."""


def to_camel_case(header: str) -> str:
    """Normalise a column header to camelCase.

    Example:
        >>> to_camel_case("Net Worth")
        'netWorth'
        >>> to_camel_case("full_name")
        'fullName'
    """
    lowered = header.strip().lower()
    camel = _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), lowered)
    return camel[:1].lower() + camel[1:]


def parse_numeric(value: str | None) -> float:
    """Parse a loosely formatted number such as "$1,250,000".

    Currency symbols, separators and other non-numeric characters are
    dropped. Empty or unparseable values yield 0.0.
    """
    if not value:
        return 0.0
    cleaned = _NON_NUMERIC_RE.sub("", value)
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def _first(row: dict[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = row.get(key)
        if value:
            return value
    return None


def record_from_row(row: dict[str, str], index: int) -> RankedRecord:
    """Build a record from one CSV row with camelCase keys.

    Args:
        row: Column values keyed by camelCase header.
        index: 0-based row index, used for default name and rank.

    Returns:
        RankedRecord with defaults filled in for missing fields.
    """
    known = set(_NAME_KEYS + _NET_WORTH_KEYS + _RANK_KEYS + _COMPANY_KEYS + _COUNTRY_KEYS)
    rank_text = _first(row, _RANK_KEYS)
    return RankedRecord(
        name=_first(row, _NAME_KEYS) or f"Person {index + 1}",
        net_worth=parse_numeric(_first(row, _NET_WORTH_KEYS)),
        rank=max(0, int(parse_numeric(rank_text))) if rank_text else index + 1,
        company=_first(row, _COMPANY_KEYS) or "—",
        country=_first(row, _COUNTRY_KEYS) or "—",
        extra={key: value for key, value in row.items() if key not in known},
    )


def parse_records(text: str) -> list[RankedRecord]:
    """Parse CSV text with a header row into records.

    Blank lines are skipped and cell values are stripped.

    Raises:
        RecordParseError: If the document has no header row.
    """
    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        raise RecordParseError("CSV document has no header row")

    headers = {field: to_camel_case(field) for field in reader.fieldnames}
    records: list[RankedRecord] = []
    for row in reader:
        values = {
            headers[field]: (value or "").strip()
            for field, value in row.items()
            if field is not None and field in headers
        }
        if not any(values.values()):
            continue
        records.append(record_from_row(values, len(records)))

    logger.debug(f"Parsed {len(records)} records from {len(headers)} columns")
    return records


def load_records(path: str | Path) -> list[RankedRecord]:
    """Read and parse a local CSV file.

    Raises:
        FileNotFoundError: If the file does not exist.
        RecordParseError: If the document has no header row.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file does not exist: {path}")
    return parse_records(path.read_text(encoding="utf-8-sig"))
