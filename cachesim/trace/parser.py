from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum


class Op(Enum):
    LOAD = "L"
    STORE = "S"
    MODIFY = "M"


class TraceParseError(ValueError):
    """A data record (space-prefixed line) that does not match `<op> <hex>,<dec>`."""

    def __init__(self, line: str, lineno: int | None = None):
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}malformed trace record {line.rstrip()!r}")


@dataclass(frozen=True)
class TraceRecord:
    op: Op
    address: int
    size: int

    def __str__(self):
        return f"{self.op.value} {self.address:x},{self.size}"


_RECORD_RE = re.compile(r"^\s+([A-Za-z])\s+([0-9a-fA-F]+)\s*,\s*(\d+)\s*$")


def parse_record(line: str, lineno: int | None = None) -> TraceRecord | None:
    """
    Parses one trace line.

    Returns None for lines that carry no data access: instruction fetches
    (anything not starting with a space) and blank lines.
    Raises TraceParseError for a data line that cannot be understood.
    """
    if not line.startswith(" ") or not line.strip():
        return None

    m = _RECORD_RE.match(line)
    if not m:
        raise TraceParseError(line, lineno)
    op_char, hex_addr, dec_size = m.groups()
    try:
        op = Op(op_char)
    except ValueError:
        raise TraceParseError(line, lineno) from None
    return TraceRecord(op=op, address=int(hex_addr, 16), size=int(dec_size, 10))
