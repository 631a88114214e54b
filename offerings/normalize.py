"""
Feed decoding, CSV reading and header/record normalization.

Responsibilities:
- encoding detection of the raw feed bytes
- CSV tokenization into raw rows (first line = headers)
- header normalization into canonical lookup keys
- record normalization (every row re-keyed, no rows dropped)
"""

from __future__ import annotations

import csv
import io
import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from charset_normalizer import from_bytes
from loguru import logger

from .rules import FIELD_LABELS

RawRow = Mapping[Optional[str], Optional[str]]
NormalizedRow = Dict[str, Optional[str]]

_WHITESPACE_RUN = re.compile(r"\s+")
# Spacing (non-combining) accents typed on their own, e.g. "Nu´mero".
_SPACING_DIACRITICS = frozenset("^`\u00a8\u00af\u00b4\u00b8\u02d8\u02d9\u02da\u02db\u02dc\u02dd")


def normalize_header(label: Optional[str]) -> str:
    """
    Canonicalize a column label into a lookup key.

    "  Número   de FICHA " and "numero de ficha" both become "numero de ficha".
    """
    s = str(label if label is not None else "").strip().lower()
    s = unicodedata.normalize("NFD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch) and ch not in _SPACING_DIACRITICS)
    return _WHITESPACE_RUN.sub(" ", s)


def normalize_row(row: RawRow) -> NormalizedRow:
    # Colliding labels: the later one wins.
    return {normalize_header(label): value for label, value in row.items()}


def normalize_rows(rows: Iterable[RawRow]) -> List[NormalizedRow]:
    return [normalize_row(row) for row in rows]


@dataclass(frozen=True)
class FieldKeys:
    """Canonical keys the pipeline looks up in every normalized row."""

    program: str
    start: str
    end: str
    ficha: str
    closing: str
    offer_type: str
    start_time: str
    end_time: str
    environment: str
    schedule: str

    @classmethod
    def from_labels(cls, labels: Mapping[str, str]) -> "FieldKeys":
        return cls(**{name: normalize_header(label) for name, label in labels.items()})


FIELD_KEYS = FieldKeys.from_labels(FIELD_LABELS)


def decode_feed(raw: bytes) -> str:
    """
    Decode feed bytes into text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped rather than surfacing in the first header.
    - If the detected codec fails, try UTF-8, then decode with replacement
      characters so a single bad byte never blocks the valid rows.
    """
    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else "utf-8"

    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        logger.warning(f"Feed did not decode as {decode_used}, retrying as utf-8")

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Feed is not valid utf-8, decoding with replacement characters")
        return raw.decode("utf-8-sig", errors="replace")


def read_csv_rows(text: str) -> List[Dict[Optional[str], Optional[str]]]:
    """
    Tokenize CSV text into raw rows keyed by the header line.

    Blank lines are skipped. Cells missing from a short line come back as None.
    """
    reader = csv.DictReader(io.StringIO(text, newline=""))
    rows = list(reader)
    logger.debug(f"Read {len(rows)} rows with {len(reader.fieldnames or [])} columns")
    return rows
