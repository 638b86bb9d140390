import pytest
from cachesim.trace.parser import parse_record, TraceRecord, TraceParseError, Op


@pytest.mark.parametrize("line, expected", [
    (" L 10,1\n", TraceRecord(Op.LOAD, 0x10, 1)),
    (" S 7ff000398,8", TraceRecord(Op.STORE, 0x7ff000398, 8)),
    (" M 0421c7f0,4\n", TraceRecord(Op.MODIFY, 0x0421c7f0, 4)),
    ("  L   ABCDEF , 2 \n", TraceRecord(Op.LOAD, 0xabcdef, 2)),
    (" L ffffffffffffffff,1", TraceRecord(Op.LOAD, 2**64 - 1, 1)),
])
def test_parse_data_records(line, expected):
    assert parse_record(line) == expected


@pytest.mark.parametrize("line", [
    "I 0400d7d4,8\n",
    "I  04ead900,3",
    "==12345== Memcheck, a memory error detector\n",
    "",
    "\n",
    "   \n",
])
def test_non_data_lines_are_skipped(line):
    assert parse_record(line) is None


@pytest.mark.parametrize("line", [
    " X 10,1",
    " L 10",
    " L zz,1",
    " L 10,-1",
    " L 0x10,1",
])
def test_malformed_data_records_raise(line):
    with pytest.raises(TraceParseError):
        parse_record(line)


def test_parse_error_reports_line_number():
    with pytest.raises(TraceParseError, match="line 7"):
        parse_record(" Q 10,1\n", lineno=7)


def test_record_str_matches_trace_syntax():
    assert str(TraceRecord(Op.MODIFY, 0x20, 1)) == "M 20,1"
