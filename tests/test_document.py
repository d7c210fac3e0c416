import io

import pytest

from envload.errors import ParseError, UnquotedWhitespaceError
from envload.parser.document import parse, parse_document, scan_document


def test_parse_from_string() -> None:
    assert parse("VAR=Hello") == {"VAR": "Hello"}


def test_parse_from_stream() -> None:
    assert parse(io.StringIO("VAR=Hello")) == {"VAR": "Hello"}


def test_parse_from_bytes_stream() -> None:
    assert parse(io.BytesIO("VAR=héllo".encode("utf-8"))) == {"VAR": "héllo"}


def test_multiple_pairs_keep_order() -> None:
    result = parse("VAR2=test\nVAR3=other")

    assert result == {"VAR2": "test", "VAR3": "other"}
    assert list(result) == ["VAR2", "VAR3"]


def test_comments_and_blank_lines_are_ignored() -> None:
    text = "# This is a comment\n\nVAR=Dude\n\n   # indented comment\n"
    assert parse_document(text) == {"VAR": "Dude"}


def test_lines_without_separator_are_skipped() -> None:
    assert parse_document("VAR1=Hello\nHELLO:asd") == {"VAR1": "Hello"}


def test_last_assignment_wins() -> None:
    assert parse_document("VAR=one\nOTHER=x\nVAR=two") == {"VAR": "two", "OTHER": "x"}


def test_any_line_terminator() -> None:
    assert parse_document("A=1\r\nB=2\rC=3\n") == {"A": "1", "B": "2", "C": "3"}


@pytest.mark.parametrize("char", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028", "\u2029"])
def test_other_unicode_breaks_stay_inside_quoted_values(char: str) -> None:
    assert parse_document(f"VAR='a{char}b'\nNEXT=1") == {"VAR": f"a{char}b", "NEXT": "1"}


def test_line_numbers_follow_cr_lf_only() -> None:
    results = list(scan_document("A='x\x0cy'\r\nB=v al"))

    assert [r.lineno for r in results] == [1, 2]
    assert results[1].ok is False


def test_surrounding_whitespace_is_stripped() -> None:
    assert parse_document("  VAR=Hello \t\r ") == {"VAR": "Hello"}


def test_first_invalid_line_aborts_the_document() -> None:
    with pytest.raises(ParseError) as info:
        parse_document("GOOD=1\nBAD=v al\nLATER=2")

    assert info.value.line == "BAD=v al"
    assert isinstance(info.value.__cause__, UnquotedWhitespaceError)


def test_error_keeps_original_untrimmed_line() -> None:
    with pytest.raises(ParseError) as info:
        parse_document("   V#AR=val  ")

    assert info.value.line == "   V#AR=val  "


def test_scan_reports_every_invalid_line() -> None:
    text = "A=1\nB=v al\n# note\nC= x\nnoise\nD=4"

    results = list(scan_document(text))

    assert [r.lineno for r in results] == [1, 2, 4, 6]
    assert [r.ok for r in results] == [True, False, False, True]
    assert results[0].pair.key == "A"
    assert results[2].error.line == "C= x"
