"""JSON share documents: loading points and writing the result.

A document is one object. The "keys" entry carries the threshold k (and
optionally the total n); every other entry is a point whose key is the
x-coordinate in base 10:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Points keep document order, which is what "first k" refers to.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from polyrecon.errors import MalformedInput, MissingField, describe_int
from polyrecon.radix import decode, encode
from polyrecon.reconstruct import check_threshold

log = logging.getLogger(__name__)

METADATA_KEY = 'keys'
THRESHOLD_FIELD = 'k'
TOTAL_FIELD = 'n'
BASE_FIELD = 'base'
VALUE_FIELD = 'value'

_INT_LITERAL = re.compile(r'-?[0-9]+')


@dataclass(frozen=True)
class ShareRecord:
    x: int
    base: int
    value: str

    def __iter__(self):
        return iter((self.x, self.base, self.value))


@dataclass
class ShareSet:
    k: int
    records: list = field(default_factory=list)
    n: Optional[int] = None


def _parse_int(text, what: str) -> int:
    if isinstance(text, int) and not isinstance(text, bool):
        return text
    if not isinstance(text, str) or not _INT_LITERAL.fullmatch(text):
        shown = _short(text) if isinstance(text, str) else repr(text)
        raise MalformedInput(f"{what} must be a base-10 integer, got {shown}")
    # decode() has no digit-count limit, unlike int(text, 10)
    if text.startswith('-'):
        return -decode(text[1:], 10)
    return decode(text, 10)


def _short(text: str, limit: int = 40) -> str:
    if len(text) <= limit:
        return repr(text)
    return f"{text[:limit]!r}... ({len(text)} chars)"


def _parse_record(key: str, entry) -> ShareRecord:
    where = f"point {_short(key)}"
    if not isinstance(entry, dict):
        raise MalformedInput(f"{where} must be an object, got {type(entry).__name__}")
    for name in (BASE_FIELD, VALUE_FIELD):
        if name not in entry:
            raise MissingField(name, where)
    value = entry[VALUE_FIELD]
    if not isinstance(value, str):
        raise MalformedInput(f"{where}: value must be a string, got {value!r}")
    return ShareRecord(
        x=_parse_int(key, f"{where}: key"),
        base=_parse_int(entry[BASE_FIELD], f"{where}: base"),
        value=value,
    )


def parse_document(doc) -> ShareSet:
    """Build a ShareSet from a decoded JSON document.

    Validates structure of every point; digit strings are left encoded
    so that only the points actually used get decoded.
    """
    if not isinstance(doc, dict):
        raise MalformedInput(f"Document must be an object, got {type(doc).__name__}")
    if METADATA_KEY not in doc:
        raise MissingField(METADATA_KEY)
    meta = doc[METADATA_KEY]
    if not isinstance(meta, dict):
        raise MalformedInput(f"{METADATA_KEY!r} must be an object")
    if THRESHOLD_FIELD not in meta:
        raise MissingField(THRESHOLD_FIELD, repr(METADATA_KEY))

    k = check_threshold(meta[THRESHOLD_FIELD])
    n = meta.get(TOTAL_FIELD)
    if n is not None and (isinstance(n, bool) or not isinstance(n, int)):
        raise MalformedInput(f"Total n must be an integer, got {n!r}")

    records = [_parse_record(key, entry)
               for key, entry in doc.items() if key != METADATA_KEY]

    if n is not None and n != len(records):
        log.warning("Document declares n=%s but holds %d points",
                    describe_int(n), len(records))
    log.debug("Loaded %d points, threshold k=%s", len(records), describe_int(k))
    return ShareSet(k=k, records=records, n=n)


def loads(text: str) -> ShareSet:
    """Parse a JSON string into a ShareSet."""
    try:
        doc = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the str/int digit limit
        raise MalformedInput(f"Invalid JSON: {e}") from e
    return parse_document(doc)


def load(path) -> ShareSet:
    """Read and parse a JSON file."""
    try:
        text = Path(path).read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise MalformedInput(f"{path}: not UTF-8 text: {e}") from e
    return loads(text)


def dumps_result(constant: int) -> str:
    """Result document with the constant as a decimal string."""
    return json.dumps({'constant': encode(constant, 10)}, indent=2)


def dumps_value(x: int, value: int) -> str:
    """Result document for an evaluation at an arbitrary x."""
    return json.dumps({'x': encode(x, 10), 'value': encode(value, 10)}, indent=2)
